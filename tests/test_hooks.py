"""Tests for the commit-msg hook installer."""
import os
from pathlib import Path

import pytest
from git import Repo

from gitcommitcheck.errors import HookInstallError
from gitcommitcheck.hooks import (
    HOOK_MARKER,
    get_hooks_dir,
    install_hook,
    is_hook_installed,
    uninstall_hook,
)


def test_install_hook(temp_git_repo):
    hook_file = install_hook(Path(temp_git_repo))

    assert hook_file == Path(Repo(temp_git_repo).git_dir) / "hooks" / "commit-msg"
    assert hook_file.exists()
    assert os.access(hook_file, os.X_OK)
    content = hook_file.read_text()
    assert HOOK_MARKER in content
    assert 'git-commit-check --file "$1"' in content
    assert is_hook_installed(Path(temp_git_repo))


def test_install_hook_from_subdirectory(temp_git_repo):
    subdir = Path(temp_git_repo) / "src" / "pkg"
    subdir.mkdir(parents=True)

    hook_file = install_hook(subdir)
    assert hook_file.parent == Path(Repo(temp_git_repo).git_dir) / "hooks"


def test_reinstall_own_hook(temp_git_repo):
    install_hook(Path(temp_git_repo))
    install_hook(Path(temp_git_repo))

    assert is_hook_installed(Path(temp_git_repo))


def test_install_refuses_foreign_hook(temp_git_repo):
    hooks_dir = get_hooks_dir(Path(temp_git_repo))
    hooks_dir.mkdir(parents=True, exist_ok=True)
    foreign = hooks_dir / "commit-msg"
    foreign.write_text("#!/bin/sh\nexit 0\n")

    with pytest.raises(HookInstallError, match="already exists"):
        install_hook(Path(temp_git_repo))
    assert foreign.read_text() == "#!/bin/sh\nexit 0\n"

    install_hook(Path(temp_git_repo), force=True)
    assert is_hook_installed(Path(temp_git_repo))


def test_uninstall_hook(temp_git_repo):
    hook_file = install_hook(Path(temp_git_repo))

    assert uninstall_hook(Path(temp_git_repo)) is True
    assert not hook_file.exists()
    assert uninstall_hook(Path(temp_git_repo)) is False


def test_uninstall_leaves_foreign_hook(temp_git_repo):
    hooks_dir = get_hooks_dir(Path(temp_git_repo))
    hooks_dir.mkdir(parents=True, exist_ok=True)
    foreign = hooks_dir / "commit-msg"
    foreign.write_text("#!/bin/sh\nexit 0\n")

    assert uninstall_hook(Path(temp_git_repo)) is False
    assert foreign.exists()


def test_hooks_path_config(temp_git_repo):
    repo = Repo(temp_git_repo)
    with repo.config_writer() as writer:
        writer.set_value("core", "hooksPath", ".githooks")

    hook_file = install_hook(Path(temp_git_repo))
    assert hook_file == Path(temp_git_repo) / ".githooks" / "commit-msg"
    assert hook_file.exists()


def test_install_outside_repository(tmp_path):
    with pytest.raises(HookInstallError, match="Not a git repository"):
        install_hook(tmp_path)
