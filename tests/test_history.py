"""Tests for validating commits already in history."""
from pathlib import Path

import pytest

from gitcommitcheck.commit_message import CommitMessageValidator
from gitcommitcheck.config import Config
from gitcommitcheck.errors import MessageSourceError
from gitcommitcheck.history import check_history
from gitcommitcheck.models import ErrorKind


def test_check_history(temp_git_repo_with_history):
    checks = check_history(Path(temp_git_repo_with_history), "HEAD")

    assert [check.message.splitlines()[0] for check in checks] == [
        "Initial commit",
        "feat(parser): add ability to parse arrays",
        "fix(lexer): correct handling of escaped characters",
        "feat!: introduce new API for user authentication",
    ]
    assert [check.result.is_valid for check in checks] == [False, True, True, True]
    assert checks[0].result.error == ErrorKind.UNKNOWN_TYPE
    assert checks[3].result.commit.breaking is True
    assert all(len(check.sha) == 7 for check in checks)


def test_check_history_range(temp_git_repo_with_history):
    checks = check_history(Path(temp_git_repo_with_history), "HEAD~2..HEAD")

    assert len(checks) == 2
    assert all(check.result.is_valid for check in checks)


def test_check_history_uses_validator(temp_git_repo_with_history):
    validator = CommitMessageValidator(Config(max_subject_length=30))

    checks = check_history(Path(temp_git_repo_with_history), "HEAD~3..HEAD", validator)

    assert [check.result.error for check in checks] == [
        ErrorKind.SUBJECT_TOO_LONG,
        ErrorKind.SUBJECT_TOO_LONG,
        ErrorKind.SUBJECT_TOO_LONG,
    ]


def test_check_history_bad_range(temp_git_repo):
    with pytest.raises(MessageSourceError, match="Invalid revision range"):
        check_history(Path(temp_git_repo), "no-such-branch..HEAD")


def test_check_history_outside_repository(tmp_path):
    with pytest.raises(MessageSourceError, match="Not a git repository"):
        check_history(tmp_path, "HEAD")
