import pytest
from pathlib import Path
from git import Repo


def _commit(repo: Repo, root: Path, name: str, message: str) -> str:
    path = root / name
    path.write_text(message)
    repo.index.add([name])
    return repo.index.commit(message).hexsha


@pytest.fixture
def temp_git_repo(tmp_path):
    """Create a temporary git repository with a small history.

    History, oldest first: a base commit, two commits referencing issues, and
    one commit missing the issue reference.
    """
    repo = Repo.init(tmp_path)
    _commit(repo, tmp_path, "base.txt", "chore: initial commit #1")
    _commit(repo, tmp_path, "login.txt", "feat: add login #42")
    _commit(repo, tmp_path, "typo.txt", "fix: typo")
    _commit(repo, tmp_path, "release.txt", "chore(main): release 1.2.0")
    return tmp_path


@pytest.fixture
def clean_git_repo(tmp_path):
    """Create a temporary git repository whose commits all pass."""
    repo = Repo.init(tmp_path)
    _commit(repo, tmp_path, "base.txt", "chore: initial commit #1")
    _commit(repo, tmp_path, "login.txt", "feat: add login #42")
    return tmp_path


@pytest.fixture
def clean_env(monkeypatch):
    """Remove GIT_ISSUE_LINT_* variables so defaults apply."""
    for name in (
        "GIT_ISSUE_LINT_ALWAYS_LOG",
        "GIT_ISSUE_LINT_LOG_FILE",
        "GIT_ISSUE_LINT_LOG_DIRECTORY",
        "GIT_ISSUE_LINT_WORKFLOW_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
