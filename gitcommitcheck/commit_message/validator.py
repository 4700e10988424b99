"""Commit message validation."""
import re
from typing import List, Optional

from ..config import Config
from ..models import ValidationResult
from ..observers import ValidationObserver
from .validation import create_validation_chain

# Messages git or common workflows generate on the author's behalf
EXEMPT_PATTERNS = [
    (re.compile(r'^Merge (branch|branches|commit|pull request|remote-tracking branch|tag) '), "Merge commit"),
    (re.compile(r'^Revert "'), "Revert commit"),
    (re.compile(r'^(fixup|squash|amend)! '), "Autosquash commit"),
]


class CommitMessageValidator:
    """Validates commit messages against conventional commit standards."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self.validation_chain = create_validation_chain(self.config)
        self.observers: List[ValidationObserver] = []

    def add_observer(self, observer: ValidationObserver) -> None:
        self.observers.append(observer)

    def remove_observer(self, observer: ValidationObserver) -> None:
        self.observers.remove(observer)

    def validate(self, message: str) -> ValidationResult:
        """Validate a commit message and notify observers of the result."""
        result = self._exemption(message) or self.validation_chain.handle(message)
        for observer in self.observers:
            observer.on_validated(message, result)
        return result

    def _exemption(self, message: str) -> Optional[ValidationResult]:
        if not self.config.allow_exempt_messages:
            return None
        for pattern, reason in EXEMPT_PATTERNS:
            if pattern.match(message):
                return ValidationResult.exempted(reason)
        return None
