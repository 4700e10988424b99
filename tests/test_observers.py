"""Tests for validation observers."""
import io

from rich.console import Console

from gitcommitcheck.commit_message import validate
from gitcommitcheck.models import ValidationResult
from gitcommitcheck.observers import ConsoleLogObserver, FileLogObserver


def _console():
    output = io.StringIO()
    return Console(file=output, width=200, color_system=None), output


def test_console_observer_valid_message():
    console, output = _console()
    observer = ConsoleLogObserver(console)

    message = "feat(parser): add ability to parse arrays"
    observer.on_validated(message, validate(message))

    assert "Valid commit message: feat(parser): add ability to parse arrays" in output.getvalue()


def test_console_observer_invalid_message():
    console, output = _console()
    observer = ConsoleLogObserver(console)

    message = "oops: broke everything"
    observer.on_validated(message, validate(message))

    text = output.getvalue()
    assert "Invalid commit message: unknown type 'oops'" in text
    assert "Got: oops: broke everything" in text
    assert "Allowed types: feat, fix, chore, docs, style, refactor, perf, test" in text


def test_console_observer_exempt_message():
    console, output = _console()
    observer = ConsoleLogObserver(console)

    observer.on_validated("Merge branch 'x'", ValidationResult.exempted("Merge commit"))

    assert "Exempt (Merge commit): Merge branch 'x'" in output.getvalue()


def test_console_observer_prints_brackets_literally():
    console, output = _console()
    observer = ConsoleLogObserver(console)

    message = "fix: keep [bold] and [/red] in messages"
    observer.on_validated(message, validate(message))

    assert "[bold] and [/red]" in output.getvalue()


def test_file_observer(tmp_path):
    log_file = tmp_path / "logs" / "check.log"
    observer = FileLogObserver(str(log_file))

    # Parent directory is created up front
    assert log_file.parent.exists()

    for message in ["feat: add x", "oops: nope"]:
        observer.on_validated(message, validate(message))
    observer.on_validated("Revert \"feat: add x\"", ValidationResult.exempted("Revert commit"))

    lines = log_file.read_text().splitlines()
    assert len(lines) == 3
    assert lines[0].endswith(" - VALID - feat: add x")
    assert lines[1].endswith(" - INVALID(UnknownType) - oops: nope")
    assert lines[2].endswith(" - EXEMPT - Revert \"feat: add x\"")
