"""Conventional Commits checking for git commit messages."""

__version__ = "0.1.0"

from .commit_message import CommitMessageValidator, clean_message, validate
from .models import CommitType, ErrorKind, ParsedCommitMessage, ValidationResult

__all__ = [
    "__version__",
    "CommitMessageValidator",
    "CommitType",
    "ErrorKind",
    "ParsedCommitMessage",
    "ValidationResult",
    "clean_message",
    "validate",
]
