"""Commit message rules.

Every rule is registered under the name used in configuration files::

    from gitissuelint.rules import RULES

    passed, explanation = RULES["issue-number-required"](parsed)
"""

from typing import Dict

from .base import LintRule
from .conventional import (
    CONVENTIONAL_PRESET,
    CONVENTIONAL_TYPES,
    BodyLeadingBlankRule,
    BodyMaxLineLengthRule,
    FooterLeadingBlankRule,
    FooterMaxLineLengthRule,
    HeaderMaxLengthRule,
    HeaderTrimRule,
    SubjectEmptyRule,
    SubjectFullStopRule,
    TypeCaseRule,
    TypeEmptyRule,
    TypeEnumRule,
)
from .issue import (
    ISSUE_NUMBER_MESSAGE,
    UNPARSEABLE_MESSAGE,
    IssueNumberRequiredRule,
    issue_number_required,
)

RULES: Dict[str, LintRule] = {
    rule.name: rule
    for rule in (
        BodyLeadingBlankRule(),
        BodyMaxLineLengthRule(),
        FooterLeadingBlankRule(),
        FooterMaxLineLengthRule(),
        HeaderMaxLengthRule(),
        HeaderTrimRule(),
        SubjectEmptyRule(),
        SubjectFullStopRule(),
        TypeCaseRule(),
        TypeEmptyRule(),
        TypeEnumRule(),
        IssueNumberRequiredRule(),
    )
}

PRESETS: Dict[str, Dict[str, list]] = {
    "conventional": CONVENTIONAL_PRESET,
}

__all__ = [
    "LintRule",
    "RULES",
    "PRESETS",
    "CONVENTIONAL_TYPES",
    "ISSUE_NUMBER_MESSAGE",
    "UNPARSEABLE_MESSAGE",
    "issue_number_required",
]
