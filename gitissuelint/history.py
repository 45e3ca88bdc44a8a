"""Read commit messages from a git repository."""
from typing import List, Optional, Tuple

from git import Repo


def read_commit_messages(repo_path: str, from_ref: Optional[str] = None, to_ref: str = "HEAD") -> List[Tuple[str, str]]:
    """Collect ``(sha, message)`` pairs for a commit range.

    With ``from_ref`` the range is ``from_ref..to_ref``; without it only
    ``to_ref`` itself is returned. Commits come oldest first, merge commits
    are skipped.

    Raises:
        git.BadName: If a reference does not resolve
        git.GitCommandError: If git fails to list the range
    """
    repo = Repo(repo_path)
    if from_ref is None:
        commit = repo.commit(to_ref)
        return [(commit.hexsha, commit.message)]

    # Resolve both ends first so bad refs raise BadName
    repo.commit(from_ref)
    repo.commit(to_ref)
    commits = repo.iter_commits(f"{from_ref}..{to_ref}", no_merges=True, reverse=True)
    return [(commit.hexsha, commit.message) for commit in commits]
