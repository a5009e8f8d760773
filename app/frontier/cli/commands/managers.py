"""Managers command implementation.

Lists the supported package managers and their conventions.
"""

import typer

from frontier.managers.registry import MANAGERS, supported_managers
from frontier.utils.formatting import console, create_manager_table, format_manager_row
from frontier.utils.shell import command_exists

app = typer.Typer(
    help="List supported package managers.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def list_managers(ctx: typer.Context) -> None:
    """Show every supported package manager and whether it is installed."""
    if ctx.invoked_subcommand is not None:
        return

    table = create_manager_table()
    for key in supported_managers():
        descriptor = MANAGERS[key]
        table.add_row(*format_manager_row(descriptor, command_exists(descriptor.invocation_name)))

    console.print(table)
