"""Base class for commit message rules."""
from abc import ABC, abstractmethod
from typing import Any, Optional

from ..models import ParsedCommit, ValidationResult


class LintRule(ABC):
    """Abstract base class for lint rules.

    A rule inspects a parsed commit and reports ``(passed, explanation)``.
    Rules never raise: every failure is carried by the returned tuple.

    Attributes:
        name (str): The rule name used in configuration and reports
    """

    name: str = ""

    def __call__(self, parsed: ParsedCommit, applicable: str = "always", value: Optional[Any] = None) -> ValidationResult:
        return self.validate(parsed, applicable, value)

    @abstractmethod
    def validate(self, parsed: ParsedCommit, applicable: str = "always", value: Optional[Any] = None) -> ValidationResult:
        """Validate the parsed commit.

        Args:
            parsed: The commit to inspect
            applicable: ``"always"`` or ``"never"``
            value: Rule specific option, such as a length limit

        Returns:
            ValidationResult: Pass flag and explanation
        """
        pass


def negated(applicable: str) -> bool:
    return applicable == "never"
