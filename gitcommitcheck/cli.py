#!/usr/bin/env python3
import os
import sys
from pathlib import Path
from typing import Optional

import click
import pyperclip
from rich.console import Console
from rich.markup import escape

from .commit_message import CommitMessageValidator, clean_message, split_lines
from .config import DEFAULT_CONFIG_FILENAME, Config
from .errors import CommitCheckError, MessageSourceError
from .hooks import install_hook, uninstall_hook
from .history import check_history
from .observers import ConsoleLogObserver, FileLogObserver

console = Console()


def read_message_file(message_file: Path) -> str:
    """Read a commit message file the way git would present it."""
    try:
        return clean_message(message_file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise MessageSourceError(f"Could not read commit message from {message_file}: {e}") from e


def print_config(config: Config, config_path: Path) -> None:
    source = "config" if config_path.exists() else "default"

    console.print("\n[bold]Current Configuration Settings:[/bold]")
    if config_path.exists():
        console.print(f"[dim]Config file: {str(config_path).replace(os.sep, '/')}[/dim]")
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    console.print(f"\n{'Setting':<26} {'Value':<12} {'Source':<10}")
    console.print("-" * 50)
    for name, value in config.model_dump().items():
        console.print(f"{name:<26} {str(value if value is not None else 'None'):<12} {source:<10}")

    console.print(f"\nTo modify these settings, create or edit {DEFAULT_CONFIG_FILENAME} in your repository root")


def run_history_check(repo_path: Path, rev_range: str, validator: CommitMessageValidator) -> bool:
    checks = check_history(repo_path, rev_range, validator)
    failed = [check for check in checks if not check.result.is_valid]

    console.print(f"\nChecked {len(checks)} commit(s) in {escape(rev_range)}, {len(failed)} invalid")
    for check in failed:
        header = split_lines(check.message)[0]
        console.print(f"[red]{check.sha}[/red] {escape(header)}: {escape(check.result.reason)}")
    return not failed


@click.command()
@click.option("-m", "--message", help="Commit message to validate")
@click.option(
    "-f",
    "--file",
    "message_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Read the commit message from a file, e.g. .git/COMMIT_EDITMSG",
)
@click.option(
    "--rev-range",
    help="Validate every commit in a revision range, e.g. origin/main..HEAD",
)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path to git repository (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "--require-breaking-footer",
    is_flag=True,
    help="Require a BREAKING CHANGE footer when the header carries '!' (overrides config setting)",
)
@click.option(
    "--max-subject-length",
    type=click.IntRange(min=0),
    help="Maximum header length, 0 to disable (overrides config setting)",
)
@click.option(
    "--max-body-line-length",
    type=click.IntRange(min=0),
    help="Maximum body line length, 0 to disable (overrides config setting)",
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log validation results (overrides config setting)",
)
@click.option("-q", "--quiet", is_flag=True, help="Only report through the exit code")
@click.option(
    "--config-dir",
    is_flag=True,
    help="Display the config file location and copy it to clipboard",
)
@click.option(
    "--config-list", is_flag=True, help="Display current configuration settings"
)
@click.option("--install-hook", "install", is_flag=True, help="Install the commit-msg git hook")
@click.option("--uninstall-hook", "uninstall", is_flag=True, help="Remove the commit-msg git hook")
@click.option("--force", is_flag=True, help="Replace an existing commit-msg hook when installing")
@click.option("--version", is_flag=True, help="Display version information and exit")
@click.option("--check-updates", is_flag=True, help="Check for available updates")
def main(
    message: Optional[str],
    message_file: Optional[Path],
    rev_range: Optional[str],
    path: Path,
    require_breaking_footer: bool,
    max_subject_length: Optional[int],
    max_body_line_length: Optional[int],
    log_file: Optional[Path],
    quiet: bool,
    config_dir: bool,
    config_list: bool,
    install: bool,
    uninstall: bool,
    force: bool,
    version: bool,
    check_updates: bool,
):
    """
    Check commit messages against the Conventional Commits format.

    The message is taken from --message, --file, --rev-range or standard
    input. Install it as a commit-msg hook with --install-hook to check
    every commit as it is made.

    Configuration can be set in .gitcommitcheck.toml in the repository root.
    Command line options override configuration file settings.
    """
    success = True
    try:
        if version:
            from .version import display_version_info

            display_version_info()
            return

        if check_updates:
            from .version import check_updates_and_display

            check_updates_and_display()
            return

        repo_path = path.absolute()
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if config_list:
            print_config(Config.load(repo_path), config_path)
            return

        if config_dir:
            if not config_path.exists():
                Config().save(repo_path)
                console.print("[yellow]Created new config file with default values[/yellow]")

            console.print(f"[green]Config file location:[/green] {config_path}")
            try:
                pyperclip.copy(str(config_path))
                console.print("[green]Path copied to clipboard![/green]")
            except pyperclip.PyperclipException as e:
                console.print(f"[yellow]Could not copy to clipboard: {e}[/yellow]")
            return

        if install:
            hook_file = install_hook(repo_path, force=force)
            console.print(f"[green]Installed commit-msg hook:[/green] {hook_file}")
            return

        if uninstall:
            if uninstall_hook(repo_path):
                console.print("[green]Removed commit-msg hook[/green]")
            else:
                console.print("[yellow]No commit-msg hook installed by git-commit-check[/yellow]")
            return

        config = Config.load(repo_path)

        # Command line options override config
        if require_breaking_footer:
            config.require_breaking_footer = True
        if max_subject_length is not None:
            config.max_subject_length = max_subject_length
        if max_body_line_length is not None:
            config.max_body_line_length = max_body_line_length
        if log_file is not None:
            config.log_file = str(log_file)

        validator = CommitMessageValidator(config)
        if not quiet:
            validator.add_observer(ConsoleLogObserver(console))
        log_file_path = log_file or config.get_log_file()
        if log_file_path:
            validator.add_observer(FileLogObserver(str(log_file_path)))

        if rev_range:
            success = run_history_check(repo_path, rev_range, validator)
        else:
            if message is None and message_file is not None:
                message = read_message_file(message_file)
            elif message is None:
                stdin = click.get_text_stream("stdin")
                if stdin.isatty():
                    raise click.UsageError(
                        "Provide a commit message with --message, --file, --rev-range or on stdin"
                    )
                message = stdin.read().strip("\n")

            success = validator.validate(message).is_valid
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
    except CommitCheckError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort()

    if not success:
        sys.exit(1)


if __name__ == "__main__":
    main()
