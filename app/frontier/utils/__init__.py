"""Utility modules for frontier.

This module exports commonly used utility functions.
"""

from frontier.utils.formatting import (
    console,
    create_manager_table,
    err_console,
    print_error,
    print_hint,
    print_info,
    print_step,
    print_success,
    print_warning,
)
from frontier.utils.shell import CommandResult, command_exists, run_command, run_interactive

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "create_manager_table",
    "err_console",
    "print_error",
    "print_hint",
    "print_info",
    "print_step",
    "print_success",
    "print_warning",
    "run_command",
    "run_interactive",
]
