"""git-issue-lint: conventional commit linting with issue references."""

__version__ = "0.1.0"
