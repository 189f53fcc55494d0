# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
PR changed files CLI

Usage:
    pr-changed-files run      # Classify PR files and emit outputs
    pr-changed-files inputs   # Show resolved inputs
"""

from .main import cli, main

__all__ = ['cli', 'main']
