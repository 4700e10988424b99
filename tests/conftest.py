import os
import pytest
import tempfile
from pathlib import Path
from click.testing import CliRunner
from git import Repo


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep GIT_COMMIT_CHECK_* variables of the host out of the tests."""
    for name in list(os.environ):
        if name.startswith("GIT_COMMIT_CHECK_"):
            monkeypatch.delenv(name)
    yield


@pytest.fixture
def cli_runner():
    """Fixture for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def temp_git_repo():
    """Create a temporary git repository for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        repo = Repo.init(tmp_dir)

        test_file = Path(tmp_dir) / "test.txt"
        test_file.write_text("Initial content")

        repo.index.add(["test.txt"])
        repo.index.commit("Initial commit")

        yield tmp_dir


@pytest.fixture
def temp_git_repo_with_history(temp_git_repo):
    """Repository whose history mixes conventional and free-form messages."""
    repo = Repo(temp_git_repo)
    test_file = Path(temp_git_repo) / "test.txt"

    for content, message in [
        ("one", "feat(parser): add ability to parse arrays"),
        ("two", "fix(lexer): correct handling of escaped characters"),
        ("three", "feat!: introduce new API for user authentication\n\nBREAKING CHANGE: tokens are required"),
    ]:
        test_file.write_text(content)
        repo.index.add(["test.txt"])
        repo.index.commit(message)

    yield temp_git_repo
