# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Error kinds that end a run. None of them are retried."""

from typing import Optional


class ChangedFilesError(Exception):
    """Base class for every failure reported by the action."""


class InvalidInput(ChangedFilesError):
    """An input was missing or could not be parsed."""


class PullRequestNotFound(ChangedFilesError):
    """No pull request could be determined from the inputs or the event context."""


class UpstreamError(ChangedFilesError):
    """The GitHub API call failed (network, auth, rate limit, malformed response)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
