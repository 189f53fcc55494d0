# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
PR changed files CLI - Main entry point

Usage:
    pr-changed-files run       - Classify the files of a pull request and emit the outputs
    pr-changed-files inputs    - Show the inputs and event context the action would use
"""

from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from changed_files.action import emit_outputs, run_action, set_failed
from changed_files.classes import ChangedFiles
from changed_files.config import __version__, load_event_context, load_inputs
from changed_files.constants import INPUT_PATTERN, INPUT_PR_NUMBER, INPUT_REPO_TOKEN
from changed_files.exceptions import InvalidInput
from changed_files.utils.github_api_tools import GitHubClient, get_api_url
from changed_files.utils.utils import mask_secret

console = Console()


def _load_env_file(env_file: Optional[str]) -> None:
    if env_file:
        load_dotenv(env_file, override=False)


def print_summary(pr_number: int, changed_files: ChangedFiles) -> None:
    table = Table(title=f'PR #{pr_number}: {changed_files.count()} changed files', show_header=True)
    table.add_column('Bucket', style='cyan')
    table.add_column('Count', justify='right', style='green')
    table.add_column('Files', style='dim')

    for name, filenames in changed_files.as_dict().items():
        shown = escape(', '.join(filenames[:5]))
        if len(filenames) > 5:
            shown += f', ... (+{len(filenames) - 5})'
        table.add_row(name, str(len(filenames)), shown)

    console.print(table)


@click.group()
@click.version_option(version=__version__, prog_name='pr-changed-files')
def cli():
    """PR changed files - classify the files of a pull request as created, updated or deleted"""
    pass


@cli.command('run')
@click.option('--repo-token', default=None, help='GitHub token (default: INPUT_REPO-TOKEN)')
@click.option('--pattern', default=None, help='Regular expression filenames must match (default: match all)')
@click.option('--pr-number', default=None, help='Pull request number (default: PR of the triggering event)')
@click.option('--repository', default=None, help='owner/repo (default: GITHUB_REPOSITORY)')
@click.option('--event-path', default=None, help='Event payload JSON (default: GITHUB_EVENT_PATH)')
@click.option(
    '--output-dir',
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help='Directory for files_*.json (default: HOME)',
)
@click.option('--github-output', default=None, help='Step output file (default: GITHUB_OUTPUT)')
@click.option('--env-file', type=click.Path(dir_okay=False), default=None, help='Load variables from a .env file')
@click.option('--summary/--no-summary', default=True, help='Print a summary table on success')
@click.pass_context
def run_command(
    ctx,
    repo_token: Optional[str],
    pattern: Optional[str],
    pr_number: Optional[str],
    repository: Optional[str],
    event_path: Optional[str],
    output_dir: Optional[Path],
    github_output: Optional[str],
    env_file: Optional[str],
    summary: bool,
):
    """Classify the changed files of a pull request and emit the outputs.

    \b
    Outputs (JSON arrays, also written to <output-dir>/<name>.json):
        files_created    added files and new names of renamed files
        files_updated    modified files
        files_deleted    removed files and old names of renamed files

    \b
    Examples:
        pr-changed-files run
        pr-changed-files run --pr-number 42 --pattern '\\.py$'
        pr-changed-files run --env-file .env --repository owner/repo --pr-number 7
    """
    _load_env_file(env_file)
    try:
        inputs = load_inputs(repo_token, pattern, pr_number)
    except InvalidInput as e:
        set_failed(str(e))
        ctx.exit(1)

    context = load_event_context(repository, event_path)
    client = GitHubClient(inputs.repo_token)

    result = run_action(client, inputs, context)
    if not result.ok:
        set_failed(str(result.error))
        ctx.exit(1)

    try:
        emit_outputs(result.changed_files, output_dir, github_output)
    except OSError as e:
        set_failed(f'Could not write outputs: {e}')
        ctx.exit(1)

    if summary:
        print_summary(result.pull_request.number, result.changed_files)


@cli.command('inputs')
@click.option('--env-file', type=click.Path(dir_okay=False), default=None, help='Load variables from a .env file')
def show_inputs(env_file: Optional[str]):
    """Show the inputs and event context the action would use."""
    _load_env_file(env_file)
    inputs = load_inputs(required=False)
    context = load_event_context()
    pull_request = context.pull_request

    table = Table(show_header=True, header_style='bold magenta')
    table.add_column('Setting', style='cyan')
    table.add_column('Value', style='green')

    table.add_row(INPUT_REPO_TOKEN, mask_secret(inputs.repo_token))
    table.add_row(INPUT_PATTERN, escape(inputs.pattern) if inputs.pattern else '(match all)')
    table.add_row(INPUT_PR_NUMBER, inputs.pr_number or '(from event)')
    table.add_row('repository', context.full_name if context.owner else '(not set)')
    table.add_row('event pull request', f"#{pull_request.get('number')}" if pull_request else '(none)')
    table.add_row('api url', get_api_url())

    console.print('\n[bold cyan]PR Changed Files Inputs[/bold cyan]\n')
    console.print(table)


def main():
    """Main entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
