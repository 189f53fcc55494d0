# The MIT License (MIT)
# Copyright © 2025 Entrius

import re
from typing import Optional

from changed_files.classes import ChangedFileRecord, ChangedFiles, PullRequestRef
from changed_files.constants import (
    FETCH_PER_PAGE,
    MATCH_ALL_PATTERN,
    STATUS_ADDED,
    STATUS_MODIFIED,
    STATUS_REMOVED,
    STATUS_RENAMED,
)
from changed_files.exceptions import InvalidInput


def compile_pattern(pattern: Optional[str]) -> re.Pattern:
    """Compile the filename filter; an empty or missing pattern matches everything."""
    try:
        return re.compile(pattern if pattern else MATCH_ALL_PATTERN)
    except re.error as e:
        raise InvalidInput(f"Input 'pattern' is not a valid regular expression: {e}") from e


def classify_record(changed_files: ChangedFiles, record: ChangedFileRecord, matcher: re.Pattern) -> None:
    """Append a record that already passed the filter to its bucket(s)."""
    if record.status == STATUS_ADDED:
        changed_files.created.append(record.filename)
    elif record.status == STATUS_REMOVED:
        changed_files.deleted.append(record.filename)
    elif record.status == STATUS_MODIFIED:
        changed_files.updated.append(record.filename)
    elif record.status == STATUS_RENAMED:
        changed_files.created.append(record.filename)
        # the old name is filtered on its own
        if record.previous_filename and matcher.search(record.previous_filename):
            changed_files.deleted.append(record.previous_filename)


def get_changed_files(client, pull_request: PullRequestRef, pattern: Optional[str] = None) -> ChangedFiles:
    """
    Fetch every files page of a pull request, filter by `pattern` and classify.

    Pages of FETCH_PER_PAGE are requested from index 0 while
    `page_index * FETCH_PER_PAGE < pull_request.changed_files`; the bound is never refreshed.

    Args:
        client: Object exposing `list_pull_request_files(owner, repo, number, page, per_page)`
        pull_request (PullRequestRef): PR to inspect
        pattern (Optional[str]): Regular expression searched in each filename

    Returns:
        ChangedFiles: created/updated/deleted filenames in fetch order

    Raises:
        InvalidInput: `pattern` does not compile
        UpstreamError: any page request failed
    """
    matcher = compile_pattern(pattern)
    changed_files = ChangedFiles()

    page_index = 0
    while page_index * FETCH_PER_PAGE < pull_request.changed_files:
        page = client.list_pull_request_files(
            pull_request.owner,
            pull_request.repo,
            pull_request.number,
            page=page_index,
            per_page=FETCH_PER_PAGE,
        )
        for file_data in page:
            record = ChangedFileRecord.from_github_response(file_data)
            if matcher.search(record.filename):
                classify_record(changed_files, record, matcher)
        page_index += 1

    return changed_files
