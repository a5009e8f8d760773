"""Shared utilities for CLI commands.

This module provides the error boundary used by every command module.
"""

from typing import NoReturn

import typer

from frontier.exceptions import FrontierError
from frontier.utils.formatting import print_error, print_hint


def exit_with_error(error: FrontierError) -> NoReturn:
    """Print a frontier error with its hint and exit with status 1.

    Args:
        error: The error to report.

    Raises:
        typer.Exit: Always, with code 1.
    """
    print_error(str(error))
    if error.hint:
        print_hint(error.hint)
    raise typer.Exit(code=1) from error
