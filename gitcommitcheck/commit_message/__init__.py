"""Commit message validation package."""

from .parser import clean_message, split_lines, validate
from .validation import ValidationHandler, create_validation_chain
from .validator import CommitMessageValidator

__all__ = [
    'clean_message',
    'split_lines',
    'validate',
    'ValidationHandler',
    'create_validation_chain',
    'CommitMessageValidator',
]
