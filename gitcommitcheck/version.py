"""Version management for git-commit-check."""

import importlib.metadata
from pathlib import Path
from typing import Optional, Tuple

import httpx
from packaging import version
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from . import __version__

DISTRIBUTION_NAME = "git-commit-check"
PYPI_URL = f"https://pypi.org/pypi/{DISTRIBUTION_NAME}/json"

console = Console()


def get_current_version() -> str:
    """Get the current version of git-commit-check."""
    return __version__


def get_installed_version() -> str:
    """Get the installed version from pip metadata."""
    try:
        return importlib.metadata.version(DISTRIBUTION_NAME)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_installation_path() -> Path:
    return Path(__file__).parent


def fetch_latest_version(timeout: float = 10.0) -> Optional[str]:
    """Ask PyPI for the latest released version."""
    response = httpx.get(PYPI_URL, timeout=timeout)
    if response.status_code != 200:
        return None
    return response.json().get("info", {}).get("version")


def check_for_updates() -> Tuple[bool, Optional[str]]:
    """Check if there's a newer version available on PyPI.

    Returns:
        Tuple[bool, Optional[str]]: whether an update exists, and the latest
        known version (the current one when no update was found)
    """
    current_version = get_current_version()
    try:
        latest_version = fetch_latest_version()
    except (httpx.HTTPError, ValueError) as e:
        console.print(f"[yellow]Warning: Could not fetch latest version: {e}[/yellow]")
        return False, None

    if latest_version and version.parse(latest_version) > version.parse(current_version):
        return True, latest_version
    return False, current_version


def display_version_info() -> None:
    """Display version information."""
    current_version = get_current_version()
    installed_version = get_installed_version()

    version_text = Text()
    version_text.append("git-commit-check\n", style="bold blue")
    version_text.append(f"Current version: {current_version}\n", style="green")
    version_text.append(f"Installed version: {installed_version}\n", style="cyan")
    version_text.append(f"Installation path: {get_installation_path()}\n", style="yellow")

    if current_version != installed_version:
        version_text.append("\nVersion mismatch detected!\n", style="red")
        version_text.append("Consider reinstalling: pip install -e .\n", style="yellow")

    console.print(Panel(version_text, title="Version Information", border_style="blue"))


def check_updates_and_display() -> None:
    """Check for updates and display results."""
    console.print("Checking for updates...")

    has_updates, latest_version = check_for_updates()
    current_version = get_current_version()

    if has_updates and latest_version:
        console.print(f"[green]New version available: {latest_version}[/green]")
        console.print(f"[yellow]Current version: {current_version}[/yellow]")
        console.print("\nTo update, run:")
        console.print(f"[cyan]pip install --upgrade {DISTRIBUTION_NAME}[/cyan]")
    elif latest_version:
        console.print(f"[green]You're running the latest version: {current_version}[/green]")
