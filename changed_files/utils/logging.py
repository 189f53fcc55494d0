from typing import TYPE_CHECKING

import bittensor as bt

if TYPE_CHECKING:
    from changed_files.classes import ChangedFiles, PullRequestRef

MAX_FILES_LOGGED_PER_BUCKET = 20


def log_changed_files(pull_request: 'PullRequestRef', changed_files: 'ChangedFiles') -> None:
    """Log classification results for debugging."""
    bt.logging.debug(f'  ├─ {pull_request}: {changed_files.count()} files classified')

    buckets = changed_files.as_dict()
    last = list(buckets)[-1]
    for name, filenames in buckets.items():
        branch = '└─' if name == last else '├─'
        bt.logging.debug(f'  {branch} {name} ({len(filenames)}):')
        for filename in filenames[:MAX_FILES_LOGGED_PER_BUCKET]:
            bt.logging.debug(f'  │   {filename}')
        if len(filenames) > MAX_FILES_LOGGED_PER_BUCKET:
            bt.logging.debug(f'  │   ... {len(filenames) - MAX_FILES_LOGGED_PER_BUCKET} more')
