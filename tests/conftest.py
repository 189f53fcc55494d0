# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Shared fixtures for changed-files tests.
"""

from typing import Dict, List, Optional

import pytest

from changed_files.classes import EventContext, PullRequestRef
from changed_files.exceptions import UpstreamError


class FakeGitHubClient:
    """In-memory stand-in for GitHubClient that records every call."""

    def __init__(
        self,
        pages: Optional[Dict[int, List[Dict]]] = None,
        pull_requests: Optional[Dict[int, Dict]] = None,
        fail_on_page: Optional[int] = None,
    ):
        self.pages = pages or {}
        self.pull_requests = pull_requests or {}
        self.fail_on_page = fail_on_page
        self.page_calls: List[Dict] = []
        self.pr_calls: List[Dict] = []

    def get_pull_request(self, owner, repo, number):
        self.pr_calls.append({'owner': owner, 'repo': repo, 'number': number})
        if number not in self.pull_requests:
            raise UpstreamError(f"GitHub request for PR #{number} failed with status 404: Not Found", status_code=404)
        return self.pull_requests[number]

    def list_pull_request_files(self, owner, repo, number, page, per_page=100):
        self.page_calls.append({'owner': owner, 'repo': repo, 'number': number, 'page': page, 'per_page': per_page})
        if self.fail_on_page == page:
            raise UpstreamError(f"GitHub request for PR #{number} files page {page} failed with status 502", 502)
        return self.pages.get(page, [])


def make_file(filename: str, status: str, previous_filename: Optional[str] = None) -> Dict:
    entry = {'filename': filename, 'status': status, 'additions': 1, 'deletions': 0, 'changes': 1}
    if previous_filename is not None:
        entry['previous_filename'] = previous_filename
    return entry


def make_pr(number: int = 1, changed_files: int = 0) -> PullRequestRef:
    return PullRequestRef(owner='owner', repo='repo', number=number, changed_files=changed_files)


@pytest.fixture
def event_context():
    """Event context of a pull_request event for PR #7 with 3 files."""
    return EventContext(
        owner='owner',
        repo='repo',
        payload={'action': 'opened', 'pull_request': {'number': 7, 'changed_files': 3}},
    )


@pytest.fixture
def empty_context():
    """Event context of an event that carries no pull request (e.g. push)."""
    return EventContext(owner='owner', repo='repo', payload={'ref': 'refs/heads/main'})
