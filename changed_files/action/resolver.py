# The MIT License (MIT)
# Copyright © 2025 Entrius

from typing import Optional

import bittensor as bt

from changed_files.classes import EventContext, PullRequestRef
from changed_files.exceptions import InvalidInput


def parse_pr_number(pr_number: str) -> int:
    """Parse the `pr-number` input as a base-10 integer.

    Raises:
        InvalidInput: if the value is not an integer
    """
    try:
        return int(pr_number.strip(), 10)
    except ValueError as e:
        raise InvalidInput(f"Input 'pr-number' is not a valid pull request number: {pr_number!r}") from e


def resolve_pull_request(client, pr_number: Optional[str], context: EventContext) -> Optional[PullRequestRef]:
    """
    Determine which pull request the run applies to.

    An explicit number wins and costs one API call. Without one, the pull request
    of the triggering event is used as-is.

    Args:
        client: Object exposing `get_pull_request(owner, repo, number)`
        pr_number (Optional[str]): Raw `pr-number` input, empty when not supplied
        context (EventContext): Repository and event payload of the invocation

    Returns:
        Optional[PullRequestRef]: The resolved pull request, or None if none can be determined

    Raises:
        InvalidInput: `pr_number` is supplied but not an integer
        UpstreamError: fetching the explicit pull request failed
    """
    if pr_number:
        number = parse_pr_number(pr_number)
        bt.logging.info(f"Fetching PR #{number} from {context.full_name}")
        pr_data = client.get_pull_request(context.owner, context.repo, number)
        return PullRequestRef.from_github_response(context.owner, context.repo, pr_data)

    pr_data = context.pull_request
    if not pr_data:
        bt.logging.warning("No pull request in the event context")
        return None

    bt.logging.info(f"Using PR #{pr_data.get('number')} from the event context")
    return PullRequestRef.from_github_response(context.owner, context.repo, pr_data)
