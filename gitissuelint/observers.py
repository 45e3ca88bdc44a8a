"""Observer pattern for lint reports."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .models import LintReport


class LintObserver(ABC):
    """Abstract base class for lint observers."""

    @abstractmethod
    def on_commit_linted(self, report: LintReport) -> None:
        """Called after a single commit message is linted."""
        pass

    @abstractmethod
    def on_lint_completed(self, reports: List[LintReport]) -> None:
        """Called once all messages of a run are linted."""
        pass


def _summary(reports: List[LintReport]) -> str:
    errors = sum(len(r.errors) for r in reports)
    warnings = sum(len(r.warnings) for r in reports)
    return f"found {errors} problems, {warnings} warnings"


class ConsoleLogObserver(LintObserver):
    """Observer that prints reports to the console in commitlint's layout."""

    def __init__(self, console: Optional[Console] = None, quiet: bool = False):
        self.console = console or Console()
        self.quiet = quiet

    def on_commit_linted(self, report: LintReport) -> None:
        if self.quiet and not report.errors and not report.warnings:
            return
        header = report.input.split("\n")[0]
        prefix = f"{report.sha[:7]} " if report.sha else ""
        self.console.print(f"⧗   input: {prefix}{escape(header)}")
        for problem in report.errors:
            self.console.print(f"[red]✖   {escape(problem.message)} \\[{problem.name}][/red]")
        for problem in report.warnings:
            self.console.print(f"[yellow]⚠   {escape(problem.message)} \\[{problem.name}][/yellow]")
        if report.errors or report.warnings:
            style = "red" if report.errors else "yellow"
            self.console.print(f"\n[{style}]{'✖' if report.errors else '⚠'}   {_summary([report])}[/{style}]\n")
        else:
            self.console.print("[green]✔   all checks passed[/green]")

    def on_lint_completed(self, reports: List[LintReport]) -> None:
        if len(reports) < 2:
            return
        invalid = sum(1 for r in reports if not r.valid)
        if invalid:
            self.console.print(f"[red]{invalid} of {len(reports)} commits failed: {_summary(reports)}[/red]")
        elif not self.quiet:
            self.console.print(f"[green]All {len(reports)} commits passed[/green]")


class FileLogObserver(LintObserver):
    """Observer that logs lint results to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_commit_linted(self, report: LintReport) -> None:
        header = report.input.split("\n")[0]
        status = "Passed" if report.valid else "Failed"
        self._log(f"{status}: {header}")
        for problem in report.errors + report.warnings:
            self._log(f"  [{problem.level.name.lower()}] {problem.name}: {problem.message}")

    def on_lint_completed(self, reports: List[LintReport]) -> None:
        self._log(f"Linted {len(reports)} commit(s), {_summary(reports)}")
