"""Validation of commits already in a repository's history."""
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import git
from git import Repo

from .commit_message import CommitMessageValidator
from .errors import MessageSourceError
from .models import ValidationResult


@dataclass
class CommitCheck:
    sha: str
    message: str
    result: ValidationResult


def check_history(
    repo_path: Path, rev_range: str, validator: Optional[CommitMessageValidator] = None
) -> List[CommitCheck]:
    """Validate the message of every commit in ``rev_range``.

    Args:
        repo_path: Path inside the git repository
        rev_range: Any revision range git understands, e.g. ``origin/main..HEAD``
        validator: Validator to use, a default one when omitted

    Returns:
        List[CommitCheck]: One entry per commit, oldest first
    """
    validator = validator or CommitMessageValidator()
    try:
        repo = Repo(repo_path, search_parent_directories=True)
        commits = list(repo.iter_commits(rev_range))
    except (git.InvalidGitRepositoryError, git.NoSuchPathError) as e:
        raise MessageSourceError(f"Not a git repository: {repo_path}") from e
    except git.GitCommandError as e:
        raise MessageSourceError(f"Invalid revision range '{rev_range}': {str(e.stderr).strip()}") from e

    checks = []
    for commit in reversed(commits):
        message = commit.message
        if isinstance(message, bytes):
            message = message.decode("utf-8", errors="replace")
        message = message.strip("\n")
        checks.append(CommitCheck(commit.hexsha[:7], message, validator.validate(message)))
    return checks
