# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Action configuration.

Inputs are read the way the GitHub Actions runner exposes them: `INPUT_<NAME>`
environment variables, name upper-cased with spaces turned into underscores.
The event context comes from GITHUB_REPOSITORY and the JSON file at GITHUB_EVENT_PATH.
"""

import json
import os
from pathlib import Path
from typing import Optional

import bittensor as bt

from changed_files.classes import ActionInputs, EventContext
from changed_files.constants import INPUT_PATTERN, INPUT_PR_NUMBER, INPUT_REPO_TOKEN
from changed_files.exceptions import InvalidInput
from changed_files.utils.utils import parse_repository

# NOTE: bump this number when we make new updates
__version__ = "1.1.0"


def input_env_name(name: str) -> str:
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, required: bool = False) -> str:
    """Read an action input; missing inputs are empty strings unless required."""
    value = os.environ.get(input_env_name(name), '').strip()
    if required and not value:
        raise InvalidInput(f"Input required and not supplied: {name}")
    return value


def load_inputs(
    repo_token: Optional[str] = None,
    pattern: Optional[str] = None,
    pr_number: Optional[str] = None,
    required: bool = True,
) -> ActionInputs:
    """Read the action inputs; explicitly passed values win over INPUT_* variables.

    Raises:
        InvalidInput: `repo-token` is missing and `required` is set
    """
    return ActionInputs(
        repo_token=(repo_token or '').strip() or get_input(INPUT_REPO_TOKEN, required=required),
        pattern=pattern.strip() if pattern is not None else get_input(INPUT_PATTERN),
        pr_number=(pr_number or '').strip() or get_input(INPUT_PR_NUMBER),
    )


def load_event_payload(event_path: Optional[str]) -> dict:
    """Load the triggering event payload; an unreadable file is treated as an empty event."""
    if not event_path:
        return {}
    path = Path(event_path)
    if not path.exists():
        bt.logging.warning(f"Event file not found: {path}")
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            payload = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        bt.logging.warning(f"Could not read event file {path}: {e}")
        return {}
    return payload if isinstance(payload, dict) else {}


def load_event_context(repository: Optional[str] = None, event_path: Optional[str] = None) -> EventContext:
    """Build the EventContext from explicit values, falling back to the runner environment."""
    owner, repo = parse_repository(repository or os.environ.get('GITHUB_REPOSITORY', ''))
    payload = load_event_payload(event_path or os.environ.get('GITHUB_EVENT_PATH'))
    return EventContext(owner=owner, repo=repo, payload=payload)
