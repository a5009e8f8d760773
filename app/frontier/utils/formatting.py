"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from frontier.core.theme import get_theme

if TYPE_CHECKING:
    from frontier.managers.registry import ManagerDescriptor


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_manager_table(title: str = "Supported Package Managers") -> Table:
    """Create a pre-configured table for displaying package managers.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for manager display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Name", no_wrap=True, style="accent")
    table.add_column("Executable", style="text")
    table.add_column("Sudo", justify="center")
    table.add_column("Install Flags", style="muted")
    table.add_column("Available", justify="center")
    return table


def format_manager_row(
    descriptor: ManagerDescriptor, available: bool
) -> tuple[str, str, str, str, str]:
    """Format a manager descriptor as a table row.

    Args:
        descriptor: The manager to format.
        available: Whether its executable is on PATH.

    Returns:
        Tuple of cell strings with Rich markup.
    """
    sudo = "[warning]yes[/]" if descriptor.requires_privilege_escalation else "[muted]no[/]"
    status = "[success]✓[/]" if available else "[error]✗[/]"
    flags = " ".join(descriptor.config_args + [descriptor.default_install_flag])
    return (descriptor.key, descriptor.invocation_name, sudo, flags, status)


def print_step(message: str) -> None:
    """Print a progress message prefixed with the application tag."""
    console.print(f"[accent]\\[frontier][/] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_hint(message: str) -> None:
    """Print follow-up guidance for an error."""
    err_console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
