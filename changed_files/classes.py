# The MIT License (MIT)
# Copyright © 2025 Entrius

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from changed_files.exceptions import ChangedFilesError, UpstreamError


@dataclass(frozen=True)
class PullRequestRef:
    """Pull request the run applies to"""

    owner: str
    repo: str
    number: int
    changed_files: int  # total file count as reported when the PR was resolved

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_github_response(cls, owner: str, repo: str, pr_data: Dict[str, Any]) -> 'PullRequestRef':
        """Create PullRequestRef from a GitHub pull request object"""
        try:
            return cls(
                owner=owner,
                repo=repo,
                number=int(pr_data['number']),
                changed_files=int(pr_data.get('changed_files') or 0),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamError(f"Malformed pull request object for {owner}/{repo}: {e}") from e

    def __str__(self) -> str:
        return f"PR #{self.number} in {self.full_name} ({self.changed_files} files)"


@dataclass(frozen=True)
class ChangedFileRecord:
    """Represents a single file entry of a PR files page"""

    filename: str
    status: str  # "added", "removed", "modified", "renamed", "copied", etc.
    previous_filename: Optional[str] = None  # only set for renames

    @classmethod
    def from_github_response(cls, file_data: Dict[str, Any]) -> 'ChangedFileRecord':
        """Create ChangedFileRecord from GitHub API response"""
        try:
            return cls(
                filename=file_data['filename'],
                status=file_data['status'],
                previous_filename=file_data.get('previous_filename'),
            )
        except (KeyError, TypeError) as e:
            raise UpstreamError(f"Malformed file entry in pull request files response: {e}") from e


@dataclass
class ChangedFiles:
    """Filenames of a PR grouped by change kind, in fetch order"""

    created: List[str] = field(default_factory=list)
    updated: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)

    def count(self) -> int:
        return len(self.created) + len(self.updated) + len(self.deleted)

    def as_dict(self) -> Dict[str, List[str]]:
        return {
            'created': list(self.created),
            'updated': list(self.updated),
            'deleted': list(self.deleted),
        }


@dataclass(frozen=True)
class EventContext:
    """Ambient invocation context: the repository and the triggering event payload"""

    owner: str = ''
    repo: str = ''
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def pull_request(self) -> Optional[Dict[str, Any]]:
        pull_request = self.payload.get('pull_request')
        return pull_request if isinstance(pull_request, dict) and pull_request else None


@dataclass(frozen=True)
class ActionInputs:
    """Raw action inputs, as strings"""

    repo_token: str
    pattern: str = ''
    pr_number: str = ''


@dataclass
class RunResult:
    """Outcome of a run: either the classified files or the error that ended it"""

    pull_request: Optional[PullRequestRef] = None
    changed_files: Optional[ChangedFiles] = None
    error: Optional[ChangedFilesError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, pull_request: PullRequestRef, changed_files: ChangedFiles) -> 'RunResult':
        return cls(pull_request=pull_request, changed_files=changed_files)

    @classmethod
    def failure(cls, error: ChangedFilesError) -> 'RunResult':
        return cls(error=error)
