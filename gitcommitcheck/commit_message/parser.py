"""Conventional Commits grammar.

The header is matched as ``type(scope)!: description``. Everything after
the first line is split into an optional body and an optional footer; the
only structure checked there is the ``BREAKING CHANGE:`` marker.
"""
import re
from typing import List, Optional, Tuple, Union

from ..models import CommitType, ErrorKind, ParsedCommitMessage, ValidationResult

# Leading token runs up to the first scope, bang or colon
_TOKEN_RE = re.compile(r"^[^(!:]*")
_SCOPE_RE = re.compile(r"^[a-z0-9-]+$")
_BREAKING_RE = re.compile(r"^BREAKING[ -]CHANGE:")
_TRAILER_RE = re.compile(r"^(?:BREAKING[ -]CHANGE|[A-Za-z][A-Za-z0-9-]*)(?:: | #)")

SCISSORS_MARK = "------------------------ >8 ------------------------"
EXPECTED_FORMAT = "type(scope)!: description"


def split_lines(message: str) -> List[str]:
    """Split on newlines only, dropping the carriage return of CRLF endings.

    Other line breaking characters such as form feed or U+2028 stay part of
    the line they appear in.
    """
    return [line[:-1] if line.endswith("\r") else line for line in message.split("\n")]


def validate(message: str) -> ValidationResult:
    """Validate a commit message against the Conventional Commits grammar.

    Args:
        message: The full commit message, header first

    Returns:
        ValidationResult: valid with the parsed message, or invalid with
        the error kind and a reason for the author
    """
    if not message or not message.strip():
        return ValidationResult.invalid(ErrorKind.MALFORMED_HEADER, "empty commit message")

    lines = split_lines(message)
    header = lines[0]
    if not header.strip():
        return ValidationResult.invalid(
            ErrorKind.MALFORMED_HEADER,
            f"malformed header: first line is empty, expected '{EXPECTED_FORMAT}'",
        )

    parsed = _parse_header(header)
    if isinstance(parsed, ValidationResult):
        return parsed
    commit_type, scope, bang, description = parsed

    trailing = lines[1:]
    for line in trailing:
        if _BREAKING_RE.match(line) and not line.split(":", 1)[1].strip():
            return ValidationResult.invalid(
                ErrorKind.INCONSISTENT_BREAKING_MARKER,
                "breaking change marker: 'BREAKING CHANGE:' footer needs a description",
            )
    breaking = bang or any(_BREAKING_RE.match(line) for line in trailing)

    body, footer = _split_body_and_footer(trailing)
    return ValidationResult.valid(
        ParsedCommitMessage(
            type=commit_type,
            scope=scope,
            breaking=breaking,
            description=description,
            body=body,
            footer=footer,
        )
    )


def _parse_header(
    header: str,
) -> Union[Tuple[CommitType, Optional[str], bool, str], ValidationResult]:
    token = _TOKEN_RE.match(header).group(0)
    if token not in CommitType.values():
        return ValidationResult.invalid(
            ErrorKind.UNKNOWN_TYPE,
            f"unknown type '{token}', expected one of: {', '.join(CommitType.values())}",
        )
    pos = len(token)

    scope = None
    if header.startswith("(", pos):
        close = header.find(")", pos)
        if close == -1:
            return ValidationResult.invalid(
                ErrorKind.MALFORMED_SCOPE, "malformed scope: missing closing parenthesis"
            )
        scope = header[pos + 1:close]
        if not _SCOPE_RE.match(scope):
            return ValidationResult.invalid(
                ErrorKind.MALFORMED_SCOPE,
                f"malformed scope '{scope}': use lowercase letters, digits and hyphens",
            )
        pos = close + 1

    bang = header.startswith("!", pos)
    if bang:
        pos += 1

    if not header.startswith(":", pos):
        return ValidationResult.invalid(
            ErrorKind.MALFORMED_HEADER,
            f"malformed header: expected '{EXPECTED_FORMAT}'",
        )
    description = header[pos + 1:]
    if not description.strip():
        return ValidationResult.invalid(ErrorKind.MISSING_DESCRIPTION, "missing description")
    if not description.startswith(" ") or description[1].isspace():
        return ValidationResult.invalid(
            ErrorKind.MALFORMED_HEADER,
            "malformed header: put exactly one space after the colon",
        )

    return CommitType(token), scope, bang, description[1:].rstrip()


def _is_footer(paragraph: List[str]) -> bool:
    if not paragraph or not _TRAILER_RE.match(paragraph[0]):
        return False
    return all(_TRAILER_RE.match(line) or line[:1].isspace() for line in paragraph[1:])


def _split_body_and_footer(lines: List[str]) -> Tuple[Optional[str], Optional[str]]:
    """Split the lines after the header into body and footer."""
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    lines = lines[start:end]
    if not lines:
        return None, None

    # Last paragraph is the footer candidate
    split = len(lines)
    while split > 0 and lines[split - 1].strip():
        split -= 1
    candidate = lines[split:]
    if not _is_footer(candidate):
        return "\n".join(lines), None

    body = "\n".join(lines[:split]).rstrip()
    return body or None, "\n".join(candidate)


def clean_message(text: str, comment_char: str = "#") -> str:
    """Apply git's default cleanup to a message read from a commit file.

    Comment lines are dropped, everything from the scissors line on is
    discarded, trailing whitespace is stripped and runs of blank lines are
    collapsed into one.
    """
    scissors = f"{comment_char} {SCISSORS_MARK}"
    cleaned: List[str] = []
    for line in split_lines(text):
        if line.rstrip() == scissors:
            break
        if line.startswith(comment_char):
            continue
        line = line.rstrip()
        if not line and (not cleaned or not cleaned[-1]):
            continue
        cleaned.append(line)
    return "\n".join(cleaned).strip("\n")
