"""Observer pattern for validation results."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .commit_message.parser import split_lines
from .models import CommitType, ValidationResult


def _header(message: str) -> str:
    lines = split_lines(message.strip())
    return lines[0] if lines else ""


class ValidationObserver(ABC):
    """Abstract base class for validation observers."""

    @abstractmethod
    def on_validated(self, message: str, result: ValidationResult) -> None:
        """Called after a commit message has been validated."""
        pass


class ConsoleLogObserver(ValidationObserver):
    """Observer that reports validation results to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def on_validated(self, message: str, result: ValidationResult) -> None:
        header = escape(_header(message))
        reason = escape(result.reason)
        if result.exempt:
            self.console.print(f"[yellow]Exempt ({reason}): {header}[/yellow]")
            return
        if result.is_valid:
            self.console.print(f"[green]Valid commit message: {header}[/green]")
            return

        self.console.print(f"[red]Invalid commit message: {reason}[/red]")
        self.console.print(f"[dim]Got: {header}[/dim]")
        self.console.print("Expected: <type>(<scope>)!: <description>")
        self.console.print(f"Allowed types: {', '.join(CommitType.values())}")
        self.console.print("Examples:")
        self.console.print("  feat(parser): add ability to parse arrays")
        self.console.print("  fix(lexer): correct handling of escaped characters")
        self.console.print("  feat!: introduce new API for user authentication")


class FileLogObserver(ValidationObserver):
    """Observer that logs validation results to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_validated(self, message: str, result: ValidationResult) -> None:
        if result.exempt:
            status = "EXEMPT"
        elif result.is_valid:
            status = "VALID"
        else:
            status = f"INVALID({result.error.value})"
        self._log(f"{status} - {_header(message)}")
