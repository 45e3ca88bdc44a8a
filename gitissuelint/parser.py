"""Parse raw commit messages into their conventional-commit parts."""
import re
from typing import List, Optional

from .models import ParsedCommit

HEADER_PATTERN = re.compile(r'^(\w*)(?:\(([^()\r\n]*)\))?!?: (.*)$')
FOOTER_PATTERN = re.compile(r'^(?:BREAKING[ -]CHANGE|[A-Za-z][\w-]*)(?:: | #)\S')


def message_lines(raw: str) -> List[str]:
    """Drop git comment lines and trailing blank lines."""
    # only \n and \r\n end a line
    lines = [line for line in re.split(r'\r?\n', raw) if not line.startswith('#')]
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def _join(lines: List[str]) -> Optional[str]:
    text = '\n'.join(lines).strip('\n')
    return text or None


def parse_commit_message(raw: str) -> ParsedCommit:
    """Split a commit message into header, type, scope, subject, body and footer.

    The header is the first line, kept exactly as written. Lines after it are
    body until the first trailer-looking line, which starts the footer.
    """
    lines = message_lines(raw or '')
    if not lines:
        return ParsedCommit(raw=raw or '', header=None)

    header = lines[0]
    match = HEADER_PATTERN.match(header)
    commit_type = scope = subject = None
    if match:
        commit_type = match.group(1) or None
        scope = match.group(2) or None
        subject = match.group(3) or None

    rest = lines[1:]
    footer_start = len(rest)
    for index, line in enumerate(rest):
        if FOOTER_PATTERN.match(line):
            footer_start = index
            break

    return ParsedCommit(
        raw=raw,
        header=header,
        type=commit_type,
        scope=scope,
        subject=subject,
        body=_join(rest[:footer_start]),
        footer=_join(rest[footer_start:]),
    )
