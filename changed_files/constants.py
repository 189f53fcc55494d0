# The MIT License (MIT)
# Copyright © 2025 Entrius

# =============================================================================
# GitHub API
# =============================================================================
BASE_GITHUB_API_URL = "https://api.github.com"
GITHUB_API_TIMEOUT = 30  # seconds, per request
FETCH_PER_PAGE = 100  # maximum page size accepted by the pull request files endpoint

# =============================================================================
# Classification
# =============================================================================
MATCH_ALL_PATTERN = ".*"
STATUS_ADDED = "added"
STATUS_REMOVED = "removed"
STATUS_MODIFIED = "modified"
STATUS_RENAMED = "renamed"

# =============================================================================
# Action inputs / outputs
# =============================================================================
INPUT_REPO_TOKEN = "repo-token"
INPUT_PATTERN = "pattern"
INPUT_PR_NUMBER = "pr-number"

OUTPUT_FILES_CREATED = "files_created"
OUTPUT_FILES_UPDATED = "files_updated"
OUTPUT_FILES_DELETED = "files_deleted"

NOT_FOUND_MESSAGE = "Could not get pull request from context, exiting"
