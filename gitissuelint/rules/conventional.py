"""Rules of the conventional commit preset."""
import re
from typing import Any, Callable, Dict, List, Optional

from ..models import ParsedCommit, ValidationResult
from ..parser import message_lines
from .base import LintRule, negated

CASE_CHECKS: Dict[str, Callable[[str], bool]] = {
    'lower-case': lambda s: s == s.lower(),
    'upper-case': lambda s: s == s.upper(),
    'kebab-case': lambda s: re.fullmatch(r'[a-z0-9]+(?:-[a-z0-9]+)*', s) is not None,
    'snake-case': lambda s: re.fullmatch(r'[a-z0-9]+(?:_[a-z0-9]+)*', s) is not None,
    'camel-case': lambda s: re.fullmatch(r'[a-z][a-zA-Z0-9]*', s) is not None,
    'pascal-case': lambda s: re.fullmatch(r'[A-Z][a-zA-Z0-9]*', s) is not None,
    'sentence-case': lambda s: s[:1] == s[:1].upper() and s[1:] == s[1:].lower(),
}


def _as_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def _max_line_length(text: Optional[str], limit: int) -> Optional[str]:
    """Return the first line of ``text`` longer than ``limit``."""
    if not text:
        return None
    for line in text.split('\n'):
        if len(line) > limit:
            return line
    return None


class HeaderMaxLengthRule(LintRule):
    name = "header-max-length"

    def validate(self, parsed: ParsedCommit, applicable: str = "always", value=None) -> ValidationResult:
        limit = int(value if value is not None else 100)
        header = parsed.header or ""
        if len(header) > limit:
            return False, f"header must not be longer than {limit} characters, current length is {len(header)}"
        return True, ""


class HeaderTrimRule(LintRule):
    name = "header-trim"

    def validate(self, parsed: ParsedCommit, applicable: str = "always", value=None) -> ValidationResult:
        header = parsed.header or ""
        if header != header.strip():
            return False, "header must not be surrounded by whitespace"
        return True, ""


class TypeEmptyRule(LintRule):
    name = "type-empty"

    def validate(self, parsed: ParsedCommit, applicable: str = "never", value=None) -> ValidationResult:
        empty = not parsed.type
        if negated(applicable):
            return (not empty), "" if not empty else "type may not be empty"
        return empty, "" if empty else "type must be empty"


class SubjectEmptyRule(LintRule):
    name = "subject-empty"

    def validate(self, parsed: ParsedCommit, applicable: str = "never", value=None) -> ValidationResult:
        empty = not parsed.subject
        if negated(applicable):
            return (not empty), "" if not empty else "subject may not be empty"
        return empty, "" if empty else "subject must be empty"


class SubjectFullStopRule(LintRule):
    name = "subject-full-stop"

    def validate(self, parsed: ParsedCommit, applicable: str = "never", value=None) -> ValidationResult:
        if not parsed.subject:
            return True, ""
        stop = value if value is not None else "."
        ends = parsed.subject.endswith(stop)
        if negated(applicable):
            return (not ends), "" if not ends else "subject may not end with full stop"
        return ends, "" if ends else "subject must end with full stop"


class TypeCaseRule(LintRule):
    name = "type-case"

    def validate(self, parsed: ParsedCommit, applicable: str = "always", value=None) -> ValidationResult:
        if not parsed.type:
            return True, ""
        cases = _as_list(value) or ['lower-case']
        unknown = [case for case in cases if case not in CASE_CHECKS]
        if unknown:
            return False, f"unknown case {', '.join(unknown)}"
        matches = any(CASE_CHECKS[case](parsed.type) for case in cases)
        if negated(applicable):
            return (not matches), "" if not matches else f"type must not be {', '.join(cases)}"
        return matches, "" if matches else f"type must be {', '.join(cases)}"


class TypeEnumRule(LintRule):
    name = "type-enum"

    def validate(self, parsed: ParsedCommit, applicable: str = "always", value=None) -> ValidationResult:
        if not parsed.type:
            return True, ""
        allowed = _as_list(value)
        listed = parsed.type in allowed
        if negated(applicable):
            return (not listed), "" if not listed else f"type must not be one of [{', '.join(allowed)}]"
        return listed, "" if listed else f"type must be one of [{', '.join(allowed)}]"


class BodyLeadingBlankRule(LintRule):
    name = "body-leading-blank"

    def validate(self, parsed: ParsedCommit, applicable: str = "always", value=None) -> ValidationResult:
        if not parsed.body:
            return True, ""
        lines = message_lines(parsed.raw)
        blank = len(lines) > 1 and not lines[1].strip()
        if negated(applicable):
            return (not blank), "" if not blank else "body may not have leading blank line"
        return blank, "" if blank else "body must have leading blank line"


class FooterLeadingBlankRule(LintRule):
    name = "footer-leading-blank"

    def validate(self, parsed: ParsedCommit, applicable: str = "always", value=None) -> ValidationResult:
        if not parsed.footer:
            return True, ""
        lines = message_lines(parsed.raw)
        first_footer_line = parsed.footer.split('\n')[0]
        # the footer never starts on the header line
        index = next((i for i in range(1, len(lines)) if lines[i] == first_footer_line), None)
        if index is None:
            return True, ""
        blank = not lines[index - 1].strip()
        if negated(applicable):
            return (not blank), "" if not blank else "footer may not have leading blank line"
        return blank, "" if blank else "footer must have leading blank line"


class BodyMaxLineLengthRule(LintRule):
    name = "body-max-line-length"

    def validate(self, parsed: ParsedCommit, applicable: str = "always", value=None) -> ValidationResult:
        limit = int(value if value is not None else 100)
        if _max_line_length(parsed.body, limit) is not None:
            return False, f"body's lines must not be longer than {limit} characters"
        return True, ""


class FooterMaxLineLengthRule(LintRule):
    name = "footer-max-line-length"

    def validate(self, parsed: ParsedCommit, applicable: str = "always", value=None) -> ValidationResult:
        limit = int(value if value is not None else 100)
        if _max_line_length(parsed.footer, limit) is not None:
            return False, f"footer's lines must not be longer than {limit} characters"
        return True, ""


CONVENTIONAL_TYPES = [
    'build', 'chore', 'ci', 'docs', 'feat', 'fix',
    'perf', 'refactor', 'revert', 'style', 'test',
]

CONVENTIONAL_PRESET: Dict[str, list] = {
    'body-leading-blank': [1, 'always'],
    'body-max-line-length': [2, 'always', 100],
    'footer-leading-blank': [1, 'always'],
    'footer-max-line-length': [2, 'always', 100],
    'header-max-length': [2, 'always', 100],
    'header-trim': [2, 'always'],
    'subject-empty': [2, 'never'],
    'subject-full-stop': [2, 'never', '.'],
    'type-case': [2, 'always', 'lower-case'],
    'type-empty': [2, 'never'],
    'type-enum': [2, 'always', CONVENTIONAL_TYPES],
}
