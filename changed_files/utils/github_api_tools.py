# The MIT License (MIT)
# Copyright © 2025 Entrius

import os
from typing import Any, Dict, List, Optional

import bittensor as bt
import requests

from changed_files.constants import BASE_GITHUB_API_URL, FETCH_PER_PAGE, GITHUB_API_TIMEOUT
from changed_files.exceptions import UpstreamError


def make_headers(token: str) -> Dict[str, str]:
    """Build standard GitHub HTTP headers for a PAT.

    Args:
        token (str): Github pat
    Returns:
        Dict[str, str]: Mapping of HTTP header names to values.
    """
    return {
        "Authorization": f"token {token}",
        "Accept": "application/vnd.github.v3+json",
    }


def get_api_url() -> str:
    """Base REST URL, honoring GITHUB_API_URL on GitHub Enterprise Server runners."""
    return (os.environ.get('GITHUB_API_URL') or BASE_GITHUB_API_URL).rstrip('/')


class GitHubClient:
    """Minimal GitHub REST client exposing the two pull request calls the action needs.

    Every failure is raised as UpstreamError. There is no retry or
    rate limit wait: a run fails on the first error.
    """

    def __init__(self, token: str, api_url: Optional[str] = None, timeout: int = GITHUB_API_TIMEOUT):
        self.headers = make_headers(token)
        self.api_url = (api_url or get_api_url()).rstrip('/')
        self.timeout = timeout

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None, context: str = "") -> Any:
        url = f"{self.api_url}{path}"
        try:
            response = requests.get(url, headers=self.headers, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            bt.logging.error(f"GitHub request for {context} failed: {e}")
            raise UpstreamError(f"GitHub request for {context} failed: {e}") from e

        if response.status_code != 200:
            bt.logging.error(f"GitHub request for {context} failed with status {response.status_code}")
            raise UpstreamError(
                f"GitHub request for {context} failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                f"GitHub returned invalid JSON for {context}: {e}", status_code=response.status_code
            ) from e

    def get_pull_request(self, owner: str, repo: str, number: int) -> Dict[str, Any]:
        """Fetch a single pull request.

        Args:
            owner (str): Repository owner
            repo (str): Repository name
            number (int): PR number
        Returns:
            Dict[str, Any]: Pull request object, including `number` and `changed_files`
        """
        data = self._get(f"/repos/{owner}/{repo}/pulls/{number}", context=f"PR #{number}")
        if not isinstance(data, dict):
            raise UpstreamError(f"Unexpected response shape for PR #{number}: {type(data).__name__}")
        return data

    def list_pull_request_files(
        self, owner: str, repo: str, number: int, page: int, per_page: int = FETCH_PER_PAGE
    ) -> List[Dict[str, Any]]:
        """Fetch one page of the files changed by a pull request.

        Args:
            owner (str): Repository owner
            repo (str): Repository name
            number (int): PR number
            page (int): Page index, passed through unchanged
            per_page (int): Page size
        Returns:
            List[Dict[str, Any]]: Raw file entries (`filename`, `status`, `previous_filename`, ...)
        """
        data = self._get(
            f"/repos/{owner}/{repo}/pulls/{number}/files",
            params={'page': page, 'per_page': per_page},
            context=f"PR #{number} files page {page}",
        )
        if not isinstance(data, list):
            raise UpstreamError(f"Unexpected response shape for PR #{number} files: {type(data).__name__}")
        bt.logging.debug(f"Fetched {len(data)} file entries for PR #{number} (page {page})")
        return data
