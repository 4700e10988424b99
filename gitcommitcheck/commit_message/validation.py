"""Commit message linting using Chain of Responsibility pattern."""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..config import Config
from ..models import ErrorKind, ValidationResult
from .parser import split_lines, validate

# Returned by rules that passed; the chain keeps the parsed result of its head
_PASSED = ValidationResult(is_valid=True)


class ValidationHandler(ABC):
    """Abstract base class for validation handlers.

    Each handler checks one rule. ``handle`` returns the first failing
    result in the chain, or the result of the first handler when every
    rule passes, so a passing chain still carries the parsed message.
    """

    def __init__(self, next_handler: Optional['ValidationHandler'] = None):
        self.next_handler = next_handler

    def handle(self, message: str) -> ValidationResult:
        """Handle validation and pass to next handler if valid."""
        result = self.validate(message)
        if not result.is_valid or not self.next_handler:
            return result
        next_result = self.next_handler.handle(message)
        return next_result if not next_result.is_valid else result

    @abstractmethod
    def validate(self, message: str) -> ValidationResult:
        """Validate the commit message."""
        pass


class _StyleHandler(ValidationHandler):
    """Base for rules that run behind ConventionalFormatHandler.

    They only check their own rule and do not parse the message again.
    """

    def validate(self, message: str) -> ValidationResult:
        failure = self.check(split_lines(message))
        return failure if failure is not None else _PASSED

    @abstractmethod
    def check(self, lines: List[str]) -> Optional[ValidationResult]:
        pass


class ConventionalFormatHandler(ValidationHandler):
    """Validates the Conventional Commits grammar."""

    def validate(self, message: str) -> ValidationResult:
        return validate(message)


class BreakingFooterHandler(_StyleHandler):
    """Requires a BREAKING CHANGE footer whenever the header carries '!'."""

    def check(self, lines: List[str]) -> Optional[ValidationResult]:
        before_colon = lines[0].split(':', 1)[0]
        if not before_colon.endswith('!'):
            return None
        if any(line.startswith(('BREAKING CHANGE:', 'BREAKING-CHANGE:')) for line in lines[1:]):
            return None
        return ValidationResult.invalid(
            ErrorKind.INCONSISTENT_BREAKING_MARKER,
            "Header contains '!' but no 'BREAKING CHANGE:' footer explains it",
        )


class SubjectLengthHandler(_StyleHandler):
    """Validates the subject line length."""

    def __init__(self, max_length: int = 72, next_handler: Optional[ValidationHandler] = None):
        super().__init__(next_handler)
        self.max_length = max_length

    def check(self, lines: List[str]) -> Optional[ValidationResult]:
        subject = lines[0]
        if len(subject) > self.max_length:
            return ValidationResult.invalid(
                ErrorKind.SUBJECT_TOO_LONG,
                f"Subject line too long ({len(subject)} > {self.max_length})",
            )
        return None


class SubjectPeriodHandler(_StyleHandler):
    """Validates that the subject line doesn't end with a period."""

    def check(self, lines: List[str]) -> Optional[ValidationResult]:
        if lines[0].rstrip().endswith('.'):
            return ValidationResult.invalid(
                ErrorKind.SUBJECT_ENDS_WITH_PERIOD,
                "Subject line should not end with a period",
            )
        return None


class BlankLineHandler(_StyleHandler):
    """Validates blank line after subject."""

    def check(self, lines: List[str]) -> Optional[ValidationResult]:
        if len(lines) > 1 and lines[1].strip() != '':
            return ValidationResult.invalid(
                ErrorKind.MISSING_BLANK_LINE, "Leave one blank line after subject"
            )
        return None


class BodyLineLengthHandler(_StyleHandler):
    """Validates body line lengths. Lines holding a bare URL are exempt."""

    def __init__(self, max_length: int = 100, next_handler: Optional[ValidationHandler] = None):
        super().__init__(next_handler)
        self.max_length = max_length

    def check(self, lines: List[str]) -> Optional[ValidationResult]:
        for line in lines[2:]:
            if len(line) <= self.max_length or _is_url_line(line):
                continue
            return ValidationResult.invalid(
                ErrorKind.BODY_LINE_TOO_LONG,
                f"Body line too long ({len(line)} > {self.max_length}): {line[:40]}...",
            )
        return None


def _is_url_line(line: str) -> bool:
    words = line.split()
    return bool(words) and len(words) <= 2 and "://" in words[-1]


def create_validation_chain(config: Optional[Config] = None) -> ValidationHandler:
    """Create the validation chain for the given configuration."""
    config = config or Config()

    handlers: List[ValidationHandler] = [ConventionalFormatHandler()]
    if config.require_breaking_footer:
        handlers.append(BreakingFooterHandler())
    if config.max_subject_length:
        handlers.append(SubjectLengthHandler(config.max_subject_length))
    handlers.append(SubjectPeriodHandler())
    handlers.append(BlankLineHandler())
    if config.max_body_line_length:
        handlers.append(BodyLineLengthHandler(config.max_body_line_length))

    for handler, next_handler in zip(handlers, handlers[1:]):
        handler.next_handler = next_handler
    return handlers[0]
