"""Issue reference rule for commit headers."""
import re
from typing import Any, Mapping, Optional

from ..models import ValidationResult
from .base import LintRule

RELEASE_COMMIT_PATTERN = re.compile(r'^chore\(main\):')
ISSUE_NUMBER_PATTERN = re.compile(r' #\d+\Z', re.ASCII)

UNPARSEABLE_MESSAGE = "Commit message could not be parsed"
ISSUE_NUMBER_MESSAGE = (
    'Commit message must end with " #<issue-number>" '
    '(e.g., "feat: add feature #123", "WIP: working on feature #456"). '
    'Exception: chore(main) commits do not require issue numbers.'
)


def _get_header(parsed: Any) -> Optional[str]:
    if parsed is None:
        return None
    if isinstance(parsed, Mapping):
        return parsed.get('header')
    return getattr(parsed, 'header', None)


def issue_number_required(parsed: Any) -> ValidationResult:
    """Require the header to end with `` #<digits>``.

    Release commits (``chore(main): ...``) pass without an issue number.
    Accepts a ``ParsedCommit``, any object with a ``header`` attribute, or a
    mapping with a ``header`` key.
    """
    header = _get_header(parsed)
    if not header or not isinstance(header, str):
        return False, UNPARSEABLE_MESSAGE

    if RELEASE_COMMIT_PATTERN.match(header):
        return True, ""

    if not ISSUE_NUMBER_PATTERN.search(header):
        return False, ISSUE_NUMBER_MESSAGE

    return True, ""


class IssueNumberRequiredRule(LintRule):
    """Headers must reference an issue, except release commits."""

    name = "issue-number-required"

    def validate(self, parsed, applicable: str = "always", value=None) -> ValidationResult:
        return issue_number_required(parsed)
