"""CLI commands for frontier.

This package contains all subcommand implementations.
"""

from frontier.cli.commands import generate, install, managers

__all__ = ["generate", "install", "managers"]
