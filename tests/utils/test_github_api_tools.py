#!/usr/bin/env python3
# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Unit tests for github_api_tools module.

Tests the GitHub REST client used by the action, focusing on:
- Request construction (URL, headers, pagination params, timeout)
- Every failure surfacing as UpstreamError, without retries
- Response shape validation

Run with: python run_tests.py tests/utils/
"""

from unittest.mock import Mock, patch

import pytest
import requests

from changed_files.exceptions import UpstreamError
from changed_files.utils.github_api_tools import GitHubClient, get_api_url, make_headers


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def client():
    return GitHubClient('fake_github_token', api_url='https://api.github.com')


# ============================================================================
# Headers / URL
# ============================================================================


class TestHeadersAndUrl:
    def test_make_headers(self):
        assert make_headers('abc') == {
            'Authorization': 'token abc',
            'Accept': 'application/vnd.github.v3+json',
        }

    def test_default_api_url(self, monkeypatch):
        monkeypatch.delenv('GITHUB_API_URL', raising=False)
        assert get_api_url() == 'https://api.github.com'

    def test_enterprise_api_url(self, monkeypatch):
        monkeypatch.setenv('GITHUB_API_URL', 'https://ghe.example.com/api/v3/')
        assert get_api_url() == 'https://ghe.example.com/api/v3'
        assert GitHubClient('t').api_url == 'https://ghe.example.com/api/v3'


# ============================================================================
# get_pull_request
# ============================================================================


class TestGetPullRequest:
    @patch('changed_files.utils.github_api_tools.requests.get')
    def test_success(self, mock_get, client):
        mock_get.return_value = Mock(status_code=200, json=Mock(return_value={'number': 12, 'changed_files': 3}))

        data = client.get_pull_request('owner', 'repo', 12)

        assert data == {'number': 12, 'changed_files': 3}
        mock_get.assert_called_once_with(
            'https://api.github.com/repos/owner/repo/pulls/12',
            headers=make_headers('fake_github_token'),
            params=None,
            timeout=30,
        )

    @patch('changed_files.utils.github_api_tools.requests.get')
    @patch('changed_files.utils.github_api_tools.bt.logging')
    def test_not_found_is_not_retried(self, mock_logging, mock_get, client):
        mock_get.return_value = Mock(status_code=404, text='{"message": "Not Found"}')

        with pytest.raises(UpstreamError) as exc_info:
            client.get_pull_request('owner', 'repo', 12)

        assert exc_info.value.status_code == 404
        assert 'Not Found' in str(exc_info.value)
        assert mock_get.call_count == 1
        mock_logging.error.assert_called_once()

    @patch('changed_files.utils.github_api_tools.requests.get')
    @patch('changed_files.utils.github_api_tools.bt.logging')
    def test_rate_limited_is_not_retried(self, mock_logging, mock_get, client):
        mock_get.return_value = Mock(status_code=403, text='API rate limit exceeded')

        with pytest.raises(UpstreamError) as exc_info:
            client.get_pull_request('owner', 'repo', 12)

        assert exc_info.value.status_code == 403
        assert mock_get.call_count == 1

    @patch('changed_files.utils.github_api_tools.requests.get')
    def test_unexpected_shape(self, mock_get, client):
        mock_get.return_value = Mock(status_code=200, json=Mock(return_value=[]))

        with pytest.raises(UpstreamError, match='Unexpected response shape'):
            client.get_pull_request('owner', 'repo', 12)


# ============================================================================
# list_pull_request_files
# ============================================================================


class TestListPullRequestFiles:
    @patch('changed_files.utils.github_api_tools.requests.get')
    def test_success_passes_page_params(self, mock_get, client):
        files = [{'filename': 'a.py', 'status': 'added'}]
        mock_get.return_value = Mock(status_code=200, json=Mock(return_value=files))

        result = client.list_pull_request_files('owner', 'repo', 5, page=2)

        assert result == files
        mock_get.assert_called_once_with(
            'https://api.github.com/repos/owner/repo/pulls/5/files',
            headers=make_headers('fake_github_token'),
            params={'page': 2, 'per_page': 100},
            timeout=30,
        )

    @patch('changed_files.utils.github_api_tools.requests.get')
    def test_page_zero_is_sent_unchanged(self, mock_get, client):
        mock_get.return_value = Mock(status_code=200, json=Mock(return_value=[]))

        client.list_pull_request_files('owner', 'repo', 5, page=0, per_page=50)

        assert mock_get.call_args.kwargs['params'] == {'page': 0, 'per_page': 50}

    @patch('changed_files.utils.github_api_tools.requests.get')
    @patch('changed_files.utils.github_api_tools.bt.logging')
    def test_connection_error(self, mock_logging, mock_get, client):
        mock_get.side_effect = requests.exceptions.ConnectionError('Connection refused')

        with pytest.raises(UpstreamError) as exc_info:
            client.list_pull_request_files('owner', 'repo', 5, page=0)

        assert exc_info.value.status_code is None
        assert 'Connection refused' in str(exc_info.value)
        assert mock_get.call_count == 1

    @patch('changed_files.utils.github_api_tools.requests.get')
    @patch('changed_files.utils.github_api_tools.bt.logging')
    def test_server_error(self, mock_logging, mock_get, client):
        mock_get.return_value = Mock(status_code=502, text='<html><title>502 Bad Gateway</title></html>')

        with pytest.raises(UpstreamError) as exc_info:
            client.list_pull_request_files('owner', 'repo', 5, page=1)

        assert exc_info.value.status_code == 502

    @patch('changed_files.utils.github_api_tools.requests.get')
    def test_invalid_json(self, mock_get, client):
        mock_get.return_value = Mock(status_code=200, json=Mock(side_effect=ValueError('Expecting value')))

        with pytest.raises(UpstreamError, match='invalid JSON'):
            client.list_pull_request_files('owner', 'repo', 5, page=0)

    @patch('changed_files.utils.github_api_tools.requests.get')
    def test_unexpected_shape(self, mock_get, client):
        mock_get.return_value = Mock(status_code=200, json=Mock(return_value={'message': 'oops'}))

        with pytest.raises(UpstreamError, match='Unexpected response shape'):
            client.list_pull_request_files('owner', 'repo', 5, page=0)
