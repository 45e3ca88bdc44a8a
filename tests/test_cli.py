"""Tests for CLI functionality."""
import pytest
from pathlib import Path
from unittest.mock import patch
from click.testing import CliRunner

from gitissuelint.cli import main

pytestmark = pytest.mark.usefixtures("clean_env")

WORKFLOW = Path(__file__).parent.parent / ".github" / "workflows" / "commitlint.yml"


@pytest.fixture
def cli_runner():
    """Fixture for testing CLI commands."""
    return CliRunner()


def test_valid_message_exits_zero(cli_runner, tmp_path):
    result = cli_runner.invoke(main, ["-p", str(tmp_path), "-m", "feat: add login #42"])
    assert result.exit_code == 0
    assert "all checks passed" in result.output


def test_invalid_message_exits_one(cli_runner, tmp_path):
    result = cli_runner.invoke(main, ["-p", str(tmp_path), "-m", "fix: typo"])
    assert result.exit_code == 1
    assert "issue-number-required" in result.output


def test_release_commit_passes(cli_runner, tmp_path):
    result = cli_runner.invoke(main, ["-p", str(tmp_path), "-m", "chore(main): release 1.2.0"])
    assert result.exit_code == 0


def test_reads_stdin(cli_runner, tmp_path):
    result = cli_runner.invoke(main, ["-p", str(tmp_path)], input="WIP: exploring idea #7\n")
    assert result.exit_code == 0


def test_edit_file_as_commit_msg_hook(cli_runner, tmp_path):
    msg_file = tmp_path / "COMMIT_EDITMSG"
    msg_file.write_text("feat: bug #12a\n\n# Please enter the commit message\n")
    result = cli_runner.invoke(main, ["-p", str(tmp_path), "--edit", str(msg_file)])
    assert result.exit_code == 1


def test_range_with_failing_commit(cli_runner, temp_git_repo):
    result = cli_runner.invoke(main, ["-p", str(temp_git_repo), "--from", "HEAD~3"])
    assert result.exit_code == 1
    assert "1 of 3 commits failed" in result.output


def test_range_all_passing(cli_runner, clean_git_repo):
    result = cli_runner.invoke(main, ["-p", str(clean_git_repo), "--from", "HEAD~1", "-q"])
    assert result.exit_code == 0


def test_last_commit(cli_runner, temp_git_repo):
    result = cli_runner.invoke(main, ["-p", str(temp_git_repo), "--last"])
    assert result.exit_code == 0


def test_bad_revision_aborts(cli_runner, temp_git_repo):
    result = cli_runner.invoke(main, ["-p", str(temp_git_repo), "--from", "no-such-branch"])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_repository_config_is_used(cli_runner, tmp_path):
    (tmp_path / ".gitissuelint.toml").write_text('[rules]\nissue-number-required = [0]\n')
    result = cli_runner.invoke(main, ["-p", str(tmp_path), "-m", "fix: typo"])
    assert result.exit_code == 0


def test_explicit_config_errors_abort(cli_runner, tmp_path):
    config = tmp_path / "bad.toml"
    config.write_text('extends = ["angular"]\n')
    result = cli_runner.invoke(main, ["-p", str(tmp_path), "-c", str(config), "-m", "feat: x #1"])
    assert result.exit_code == 1
    assert "Unknown preset" in result.output


def test_log_file_option(cli_runner, tmp_path):
    log_file = tmp_path / "lint.log"
    result = cli_runner.invoke(main, ["-p", str(tmp_path), "-m", "fix: typo", "-l", str(log_file)])
    assert result.exit_code == 1
    assert "Failed: fix: typo" in log_file.read_text(encoding="utf-8")


def test_config_list(cli_runner, tmp_path):
    result = cli_runner.invoke(main, ["-p", str(tmp_path), "--config-list"])
    assert result.exit_code == 0
    assert "issue-number-required" in result.output
    assert "type-enum" in result.output


def test_check_workflow_with_path(cli_runner, tmp_path):
    result = cli_runner.invoke(main, ["-p", str(tmp_path), "--check-workflow", str(WORKFLOW)])
    assert result.exit_code == 0
    assert "expected structure" in result.output


def test_check_workflow_default_location(cli_runner, tmp_path):
    target = tmp_path / ".github" / "workflows"
    target.mkdir(parents=True)
    (target / "commitlint.yml").write_text(
        WORKFLOW.read_text(encoding="utf-8").replace("ubuntu-latest", "windows-latest"),
        encoding="utf-8",
    )
    result = cli_runner.invoke(main, ["-p", str(tmp_path), "--check-workflow"])
    assert result.exit_code == 1
    assert "runs-on must be 'ubuntu-latest'" in result.output


def test_version(cli_runner):
    with patch("gitissuelint.version.get_installed_version", return_value="0.1.0"):
        result = cli_runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "git-issue-lint" in result.output
