"""Shared models for git-commit-check."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CommitType(str, Enum):
    FEAT = "feat"
    FIX = "fix"
    CHORE = "chore"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"

    @classmethod
    def values(cls) -> list:
        return [member.value for member in cls]


class ErrorKind(str, Enum):
    """Why a commit message was rejected."""

    UNKNOWN_TYPE = "UnknownType"
    MALFORMED_HEADER = "MalformedHeader"
    MISSING_DESCRIPTION = "MissingDescription"
    MALFORMED_SCOPE = "MalformedScope"
    INCONSISTENT_BREAKING_MARKER = "InconsistentBreakingMarker"
    SUBJECT_TOO_LONG = "SubjectTooLong"
    SUBJECT_ENDS_WITH_PERIOD = "SubjectEndsWithPeriod"
    MISSING_BLANK_LINE = "MissingBlankLine"
    BODY_LINE_TOO_LONG = "BodyLineTooLong"


class ParsedCommitMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: CommitType
    scope: Optional[str] = None
    breaking: bool = False
    description: str = Field(min_length=1)
    body: Optional[str] = None
    footer: Optional[str] = None


class ValidationResult(BaseModel):
    """Outcome of validating one commit message.

    A result is either valid, carrying the parsed message (or flagged as
    exempt for merge/revert/fixup messages), or invalid, carrying the
    error kind and a reason suitable for showing to the commit author.
    """

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    commit: Optional[ParsedCommitMessage] = None
    exempt: bool = False
    error: Optional[ErrorKind] = None
    reason: str = ""

    @classmethod
    def valid(cls, commit: ParsedCommitMessage) -> "ValidationResult":
        return cls(is_valid=True, commit=commit)

    @classmethod
    def exempted(cls, reason: str) -> "ValidationResult":
        return cls(is_valid=True, exempt=True, reason=reason)

    @classmethod
    def invalid(cls, error: ErrorKind, reason: str) -> "ValidationResult":
        return cls(is_valid=False, error=error, reason=reason)

    def __bool__(self) -> bool:
        return self.is_valid
