"""CLI package for frontier.

This package contains the Typer application and all subcommands.
"""

from frontier.cli.main import app

__all__ = ["app"]
