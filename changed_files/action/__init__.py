# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Pull request changed-files action.

Resolves the pull request, classifies its files into created/updated/deleted
and publishes them as step outputs and JSON files.
"""

from .classifier import get_changed_files
from .outputs import emit_outputs, set_failed
from .resolver import resolve_pull_request
from .runner import run_action

__all__ = ['emit_outputs', 'get_changed_files', 'resolve_pull_request', 'run_action', 'set_failed']
