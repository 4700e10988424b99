"""Exceptions raised by git-commit-check.

Rejected commit messages are reported as ``ValidationResult`` values, not
exceptions. These cover the operational failures around them.
"""


class CommitCheckError(Exception):
    """Base class for git-commit-check errors."""


class MessageSourceError(CommitCheckError):
    """The commit message could not be read."""


class HookInstallError(CommitCheckError):
    """The commit-msg hook could not be installed or removed."""
