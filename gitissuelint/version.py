"""Version information for git-issue-lint."""

import importlib.metadata
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from . import __version__


def get_current_version() -> str:
    """Get the current version of git-issue-lint."""
    return __version__


def get_installed_version() -> str:
    """Get the installed version from pip metadata."""
    try:
        return importlib.metadata.version("gitissuelint")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_installation_path() -> Optional[Path]:
    import gitissuelint
    return Path(gitissuelint.__file__).parent


def get_version_summary() -> str:
    """Get a brief version summary for CLI output."""
    current_version = get_current_version()
    installed_version = get_installed_version()

    if current_version == installed_version:
        return f"git-issue-lint {current_version}"
    return f"git-issue-lint {current_version} (installed: {installed_version})"


def display_version_info(console: Optional[Console] = None) -> None:
    """Display version information in a panel."""
    console = console or Console()
    current_version = get_current_version()
    installed_version = get_installed_version()

    version_text = Text()
    version_text.append("git-issue-lint\n", style="bold blue")
    version_text.append(f"Current version: {current_version}\n", style="green")
    version_text.append(f"Installed version: {installed_version}\n", style="cyan")
    version_text.append(f"Installation path: {get_installation_path()}\n", style="yellow")

    if current_version != installed_version:
        version_text.append("\n⚠️  Version mismatch detected!\n", style="red")
        version_text.append("Consider reinstalling: pip install -e .\n", style="yellow")

    console.print(Panel(version_text, title="Version Information", border_style="blue"))
