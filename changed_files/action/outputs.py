# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Step outputs, result files and failure reporting."""

import json
import os
from pathlib import Path
from typing import Dict, Optional

import bittensor as bt

from changed_files.classes import ChangedFiles
from changed_files.constants import OUTPUT_FILES_CREATED, OUTPUT_FILES_DELETED, OUTPUT_FILES_UPDATED


def serialize_outputs(changed_files: ChangedFiles) -> Dict[str, str]:
    """Map each output name to its JSON-encoded filename array."""
    return {
        OUTPUT_FILES_CREATED: json.dumps(changed_files.created, ensure_ascii=False),
        OUTPUT_FILES_UPDATED: json.dumps(changed_files.updated, ensure_ascii=False),
        OUTPUT_FILES_DELETED: json.dumps(changed_files.deleted, ensure_ascii=False),
    }


def set_outputs(outputs: Dict[str, str], github_output: Optional[str] = None) -> None:
    """Append `name=value` lines to the GITHUB_OUTPUT file, or print them when there is none."""
    out_file = (github_output or os.environ.get('GITHUB_OUTPUT') or '').strip()
    if out_file:
        with open(out_file, 'a', encoding='utf-8') as fh:
            for name, value in outputs.items():
                fh.write(f"{name}={value}\n")
        return

    for name, value in outputs.items():
        print(f"{name}={value}")


def write_output_files(outputs: Dict[str, str], output_dir: Path) -> None:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    for name, value in outputs.items():
        path = output_dir / f"{name}.json"
        path.write_text(value, encoding='utf-8')
        bt.logging.debug(f"Wrote {path}")


def emit_outputs(
    changed_files: ChangedFiles, output_dir: Optional[Path] = None, github_output: Optional[str] = None
) -> Dict[str, str]:
    """
    Publish a successful result as one JSON file per bucket, then as step outputs.

    Step outputs are only set once every file is written, so a failed write
    leaves no outputs behind.

    Args:
        changed_files (ChangedFiles): Classified files
        output_dir (Optional[Path]): Directory for files_*.json, defaults to $HOME
        github_output (Optional[str]): Step output file, defaults to $GITHUB_OUTPUT

    Returns:
        Dict[str, str]: The outputs that were set

    Raises:
        OSError: the output directory or a file could not be written
    """
    outputs = serialize_outputs(changed_files)
    write_output_files(outputs, output_dir or Path(os.environ.get('HOME') or Path.home()))
    set_outputs(outputs, github_output)
    return outputs


def set_failed(message: str) -> None:
    """Report the run as failed with a workflow error annotation."""
    bt.logging.error(message)
    escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    print(f"::error::{escaped}")
