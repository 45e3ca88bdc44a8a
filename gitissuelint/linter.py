"""Lint commit messages against the configured rule set."""
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .config import Config
from .models import LintProblem, LintReport, ParsedCommit, RuleLevel, RuleSetting
from .observers import LintObserver
from .parser import parse_commit_message
from .rules import RULES


class CommitLinter:
    """Runs every enabled rule over a commit message and collects problems."""

    def __init__(self, rules: Optional[Dict[str, RuleSetting]] = None, config: Optional[Config] = None):
        if rules is None:
            rules = (config or Config()).resolved_rules()
        unknown = [name for name in rules if name not in RULES]
        if unknown:
            raise ValueError(f"Unknown rule(s): {', '.join(sorted(unknown))}")
        self.rules = rules
        self.observers: List[LintObserver] = []

    def add_observer(self, observer: LintObserver) -> None:
        self.observers.append(observer)

    def remove_observer(self, observer: LintObserver) -> None:
        self.observers.remove(observer)

    def _check(self, parsed: ParsedCommit, sha: Optional[str] = None) -> LintReport:
        errors: List[LintProblem] = []
        warnings: List[LintProblem] = []
        for name, setting in sorted(self.rules.items()):
            if setting.level == RuleLevel.OFF:
                continue
            passed, explanation = RULES[name](parsed, setting.applicable, setting.value)
            if passed:
                continue
            problem = LintProblem(level=setting.level, name=name, message=explanation)
            if setting.level == RuleLevel.ERROR:
                errors.append(problem)
            else:
                warnings.append(problem)
        return LintReport(input=parsed.raw, valid=not errors, errors=errors, warnings=warnings, sha=sha)

    def lint(self, message: Union[str, ParsedCommit], sha: Optional[str] = None) -> LintReport:
        """Lint one commit message and notify observers.

        Args:
            message: A raw commit message or an already parsed commit
            sha: Optional commit hash, carried into the report

        Returns:
            LintReport: Errors and warnings for the message
        """
        parsed = message if isinstance(message, ParsedCommit) else parse_commit_message(message)
        report = self._check(parsed, sha)
        for observer in self.observers:
            observer.on_commit_linted(report)
        return report

    def lint_many(self, messages: Iterable[Union[str, Tuple[str, str]]]) -> List[LintReport]:
        """Lint several messages. Items are raw messages or ``(sha, message)`` pairs."""
        reports = []
        for item in messages:
            if isinstance(item, tuple):
                sha, message = item
                reports.append(self.lint(message, sha=sha))
            else:
                reports.append(self.lint(item))
        for observer in self.observers:
            observer.on_lint_completed(reports)
        return reports
