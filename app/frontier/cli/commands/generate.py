"""Generate command implementation.

Creates a frontier configuration file from the packages a package
manager reports as explicitly installed.
"""

from pathlib import Path
from typing import Annotated

import typer

from frontier.cli.types import exit_with_error
from frontier.core.config import write_config
from frontier.core.generate import generate_config
from frontier.exceptions import FrontierError
from frontier.managers.registry import resolve_manager
from frontier.utils.formatting import print_step, print_success

app = typer.Typer(
    help="Generate a configuration file from installed packages.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def generate_from_system(
    ctx: typer.Context,
    manager: Annotated[
        str,
        typer.Option(
            "--manager",
            "-m",
            help="Package manager to query: apt, brew, pacman, paru or yay.",
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path. Prints to stdout when omitted.",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing output file.",
        ),
    ] = False,
) -> None:
    """Generate a configuration file reproducing the installed packages.

    Examples:
        frontier generate --manager yay                      # Print to stdout
        frontier generate -m pacman -o ~/frontier.toml       # Write a file
        frontier generate -m apt -o pkgs.toml --force        # Overwrite
    """
    # Skip if a subcommand is being invoked
    if ctx.invoked_subcommand is not None:
        return

    quiet = bool(ctx.obj and ctx.obj.get("quiet"))

    try:
        descriptor = resolve_manager(manager)
        if output is not None and not quiet:
            print_step(f"Reading installed packages from {descriptor.key}.")
        text = generate_config(descriptor)
        if output is None:
            typer.echo(text, nl=False)
            return
        saved_path = write_config(text, output, force=force)
    except FrontierError as e:
        exit_with_error(e)

    if not quiet:
        print_success(f"Configuration written: {saved_path}")
