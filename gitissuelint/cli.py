#!/usr/bin/env python3
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape

from .config import DEFAULT_CONFIG_FILENAME, Config
from .history import read_commit_messages
from .linter import CommitLinter
from .observers import ConsoleLogObserver, FileLogObserver
from .workflow import WorkflowExpectations, check_workflow, load_workflow

console = Console()


def load_config(repo_path: Path, config_file: Optional[Path]) -> Config:
    """Load an explicit config file, or the repository's one if present."""
    if config_file is not None:
        return Config.load_file(config_file)
    return Config.load(repo_path)


def collect_messages(
    repo_path: Path,
    edit: Optional[Path],
    message: Optional[str],
    from_ref: Optional[str],
    to_ref: str,
    last: bool,
) -> List[Tuple[Optional[str], str]]:
    """Gather the messages to lint from the first input source given."""
    if edit is not None:
        return [(None, edit.read_text(encoding="utf-8"))]
    if message is not None:
        return [(None, message)]
    if from_ref is not None or last:
        return read_commit_messages(str(repo_path), from_ref=from_ref, to_ref=to_ref)

    stdin = click.get_text_stream("stdin")
    if stdin.isatty():
        raise ValueError("No input: pass --edit, --message, --from or --last, or pipe a message on stdin")
    return [(None, stdin.read())]


def print_config(config: Config) -> None:
    console.print("\n[bold]Effective rule set:[/bold]")
    console.print(f"[dim]Extends: {', '.join(config.extends) or 'nothing'}[/dim]")
    console.print(f"\n{'Rule':<26} {'Level':<8} {'Applicable':<11} {'Value'}")
    console.print("-" * 60)
    for name, setting in sorted(config.resolved_rules().items()):
        value = "" if setting.value is None else str(setting.value)
        console.print(f"{name:<26} {setting.level.name.lower():<8} {setting.applicable:<11} {value}", markup=False)
    console.print(
        f"\nTo modify these settings, create or edit {DEFAULT_CONFIG_FILENAME} in your repository root"
    )


def run_workflow_check(repo_path: Path, workflow_file: Path, config_file: str) -> bool:
    path = workflow_file if workflow_file.is_absolute() else repo_path / workflow_file
    workflow = load_workflow(path)
    passed, problems = check_workflow(workflow, WorkflowExpectations(config_file=config_file))
    if passed:
        console.print(f"[green]✔   Workflow has the expected structure: {str(path).replace(os.sep, '/')}[/green]")
    for problem in problems:
        console.print(f"[red]✖   {escape(problem)}[/red]")
    return passed


@click.command()
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path to git repository (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-e",
    "--edit",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Lint the commit message stored in this file (e.g. .git/COMMIT_EDITMSG)",
)
@click.option("-m", "--message", help="Lint the given commit message")
@click.option("--from", "from_ref", help="Lint commits after this revision")
@click.option("--to", "to_ref", default="HEAD", show_default=True, help="Last revision of the range")
@click.option("--last", is_flag=True, help="Lint the last commit")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help=f"Config file to use instead of {DEFAULT_CONFIG_FILENAME} in the repository",
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log lint results (overrides config setting)",
)
@click.option("--config-list", is_flag=True, help="Display the effective rule set")
@click.option(
    "--check-workflow",
    "workflow_file",
    is_flag=False,
    flag_value="",
    default=None,
    help="Check the commit lint CI workflow (defaults to the configured workflow file)",
)
@click.option("-q", "--quiet", is_flag=True, help="Only print messages that have problems")
@click.option("--version", is_flag=True, help="Display version information and exit")
def main(
    path: Path,
    edit: Optional[Path],
    message: Optional[str],
    from_ref: Optional[str],
    to_ref: str,
    last: bool,
    config_file: Optional[Path],
    log_file: Optional[Path],
    config_list: bool,
    workflow_file: Optional[str],
    quiet: bool,
    version: bool,
):
    """
    Lint commit messages: conventional commits ending with an issue reference.

    Every header must end with " #<issue-number>", except release commits
    starting with "chore(main):".

    Configuration can be set in .gitissuelint.toml in the repository root.
    Exits with status 1 when any message has errors.
    """
    try:
        if version:
            from .version import display_version_info

            display_version_info(console)
            return

        repo_path = path.absolute()
        config = load_config(repo_path, config_file)

        if config_list:
            print_config(config)
            return

        if workflow_file is not None:
            target = Path(workflow_file or config.workflow_file)
            lint_config = str(config_file) if config_file is not None else DEFAULT_CONFIG_FILENAME
            if not run_workflow_check(repo_path, target, lint_config):
                sys.exit(1)
            return

        linter = CommitLinter(config=config)
        linter.add_observer(ConsoleLogObserver(console, quiet=quiet))

        log_file_path = log_file or config.get_log_file()
        if log_file_path:
            linter.add_observer(FileLogObserver(str(log_file_path)))

        messages = collect_messages(repo_path, edit, message, from_ref, to_ref, last)
        reports = linter.lint_many(
            [(sha, text) if sha else text for sha, text in messages]
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort()

    if not all(report.valid for report in reports):
        sys.exit(1)


if __name__ == "__main__":
    main()
