"""Tests for the conventional preset rules."""
import pytest
from gitissuelint.models import ParsedCommit
from gitissuelint.parser import parse_commit_message
from gitissuelint.rules import RULES


def check(name, message, applicable="always", value=None):
    return RULES[name](parse_commit_message(message), applicable, value)


def test_header_max_length():
    is_valid, msg = check("header-max-length", "feat: " + "x" * 95, value=100)
    assert not is_valid
    assert "header must not be longer than 100 characters, current length is 101" == msg

    # Test exactly max length
    assert check("header-max-length", "feat: " + "x" * 94, value=100)[0]


def test_header_trim():
    is_valid, msg = check("header-trim", "feat: padded #1 ")
    assert not is_valid
    assert "whitespace" in msg
    assert check("header-trim", "feat: tidy #1")[0]


def test_type_empty():
    assert not check("type-empty", "no type here #1", "never")[0]
    assert check("type-empty", "feat: typed #1", "never")[0]
    assert check("type-empty", "no type here #1", "always")[0]


def test_subject_empty():
    assert not check("subject-empty", "Update readme", "never")[0]
    assert check("subject-empty", "feat: has subject", "never")[0]


def test_subject_full_stop():
    is_valid, msg = check("subject-full-stop", "feat: add login.", "never", ".")
    assert not is_valid
    assert "full stop" in msg
    assert check("subject-full-stop", "feat: add login #42", "never", ".")[0]
    assert check("subject-full-stop", "feat: add login.", "always", ".")[0]


def test_type_case():
    assert not check("type-case", "WIP: idea #7", "always", "lower-case")[0]
    assert check("type-case", "wip: idea #7", "always", "lower-case")[0]
    assert check("type-case", "WIP: idea #7", "always", ["lower-case", "upper-case"])[0]
    assert not check("type-case", "feat: idea #7", "never", "lower-case")[0]


def test_type_case_unknown_case_fails():
    is_valid, msg = check("type-case", "feat: idea #7", "always", "spongebob-case")
    assert not is_valid
    assert "unknown case" in msg


def test_type_enum():
    allowed = ["feat", "fix"]
    is_valid, msg = check("type-enum", "WIP: idea #7", "always", allowed)
    assert not is_valid
    assert msg == "type must be one of [feat, fix]"
    assert check("type-enum", "fix: typo #2", "always", allowed)[0]
    assert not check("type-enum", "fix: typo #2", "never", allowed)[0]


def test_type_rules_skip_missing_type():
    assert check("type-enum", "Update readme #3", "always", ["feat"])[0]
    assert check("type-case", "Update readme #3", "always", "lower-case")[0]


def test_body_leading_blank():
    assert not check("body-leading-blank", "feat: x #1\nbody right away")[0]
    assert check("body-leading-blank", "feat: x #1\n\nbody after blank")[0]
    assert check("body-leading-blank", "feat: x #1")[0]


def test_footer_leading_blank():
    assert not check("footer-leading-blank", "feat: x #1\n\nbody\nRefs #2")[0]
    assert check("footer-leading-blank", "feat: x #1\n\nbody\n\nRefs #2")[0]
    assert check("footer-leading-blank", "feat: x #1\n\nbody only")[0]


def test_body_and_footer_max_line_length():
    long_line = "y" * 101
    is_valid, msg = check("body-max-line-length", f"feat: x #1\n\n{long_line}", value=100)
    assert not is_valid
    assert "body's lines" in msg
    assert check("body-max-line-length", "feat: x #1\n\nshort", value=100)[0]

    is_valid, msg = check("footer-max-line-length", f"feat: x #1\n\nRefs: {long_line}", value=100)
    assert not is_valid
    assert "footer's lines" in msg


@pytest.mark.parametrize("name", sorted(RULES))
def test_rules_never_raise_on_empty_message(name):
    is_valid, msg = RULES[name](parse_commit_message(""))
    assert isinstance(is_valid, bool)
    assert isinstance(msg, str)


def test_footer_leading_blank_with_footer_missing_from_raw():
    parsed = ParsedCommit(raw="feat: x #1", header="feat: x #1", footer="Refs: #2")
    assert RULES["footer-leading-blank"](parsed) == (True, "")
