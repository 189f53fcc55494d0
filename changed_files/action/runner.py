# The MIT License (MIT)
# Copyright © 2025 Entrius

import bittensor as bt

from changed_files.action.classifier import get_changed_files
from changed_files.action.resolver import resolve_pull_request
from changed_files.classes import ActionInputs, EventContext, RunResult
from changed_files.constants import NOT_FOUND_MESSAGE
from changed_files.exceptions import ChangedFilesError, PullRequestNotFound
from changed_files.utils.logging import log_changed_files


def run_action(client, inputs: ActionInputs, context: EventContext) -> RunResult:
    """
    Resolve the pull request and classify its changed files.

    Errors never escape: InvalidInput, PullRequestNotFound and UpstreamError are
    returned in the RunResult so the caller decides between emitting outputs and
    reporting failure.

    Args:
        client: GitHub client (see GitHubClient)
        inputs (ActionInputs): Action inputs
        context (EventContext): Repository and event payload of the invocation

    Returns:
        RunResult: changed files on success, otherwise the error that ended the run
    """
    try:
        pull_request = resolve_pull_request(client, inputs.pr_number, context)
        if pull_request is None:
            raise PullRequestNotFound(NOT_FOUND_MESSAGE)

        changed_files = get_changed_files(client, pull_request, inputs.pattern)
    except ChangedFilesError as e:
        bt.logging.debug(f"Run failed: {type(e).__name__}")
        return RunResult.failure(e)

    bt.logging.debug(f"Found {changed_files.count()} changed files for pr #{pull_request.number}")
    log_changed_files(pull_request, changed_files)
    return RunResult.success(pull_request, changed_files)
