"""Installation of the git commit-msg hook."""
import os
import stat
from pathlib import Path

import git
from git import Repo

from .errors import HookInstallError

HOOK_NAME = "commit-msg"
HOOK_MARKER = "# installed by git-commit-check"
HOOK_SCRIPT = f"""#!/bin/sh
{HOOK_MARKER}
exec git-commit-check --file "$1"
"""


def _open_repo(repo_path: Path) -> Repo:
    try:
        return Repo(repo_path, search_parent_directories=True)
    except (git.InvalidGitRepositoryError, git.NoSuchPathError) as e:
        raise HookInstallError(f"Not a git repository: {repo_path}") from e


def get_hooks_dir(repo_path: Path) -> Path:
    """Return the directory git runs hooks from.

    Honours ``core.hooksPath`` when it is set, relative paths being
    resolved against the working tree.
    """
    repo = _open_repo(repo_path)
    with repo.config_reader() as reader:
        hooks_path = reader.get_value("core", "hooksPath", default="")
    if hooks_path:
        hooks_dir = Path(os.path.expanduser(str(hooks_path)))
        if not hooks_dir.is_absolute():
            hooks_dir = Path(repo.working_tree_dir) / hooks_dir
        return hooks_dir
    return Path(repo.git_dir) / "hooks"


def is_hook_installed(repo_path: Path) -> bool:
    hook_file = get_hooks_dir(repo_path) / HOOK_NAME
    return hook_file.exists() and HOOK_MARKER in hook_file.read_text(errors="ignore")


def install_hook(repo_path: Path, force: bool = False) -> Path:
    """Install the commit-msg hook.

    Args:
        repo_path: Path inside the git repository
        force: Overwrite a commit-msg hook that was not written by us

    Returns:
        Path: Location of the installed hook

    Raises:
        HookInstallError: If the path is not a repository or a foreign hook exists
    """
    hook_file = get_hooks_dir(repo_path) / HOOK_NAME
    if hook_file.exists() and not force and not is_hook_installed(repo_path):
        raise HookInstallError(
            f"A {HOOK_NAME} hook already exists at {hook_file}; use --force to replace it"
        )

    try:
        hook_file.parent.mkdir(parents=True, exist_ok=True)
        hook_file.write_text(HOOK_SCRIPT)
        mode = hook_file.stat().st_mode
        hook_file.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    except OSError as e:
        raise HookInstallError(f"Could not write {hook_file}: {e}") from e
    return hook_file


def uninstall_hook(repo_path: Path) -> bool:
    """Remove the commit-msg hook if it was installed by git-commit-check.

    Returns:
        bool: True if a hook was removed, False otherwise
    """
    if not is_hook_installed(repo_path):
        return False
    hook_file = get_hooks_dir(repo_path) / HOOK_NAME
    try:
        hook_file.unlink()
    except OSError as e:
        raise HookInstallError(f"Could not remove {hook_file}: {e}") from e
    return True
