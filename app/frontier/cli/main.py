"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from frontier import __version__
from frontier.cli.commands import generate, install, managers
from frontier.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="frontier",
    help="Declarative package installation from a TOML file.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"frontier version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route frontier log records to stderr, at DEBUG level when verbose."""
    logger = logging.getLogger("frontier")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """frontier - Declarative package installation.

    Describe a package manager and the packages you want in a TOML file,
    then install them all with one command, or generate that file from
    the packages already on this machine.
    """
    _configure_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.add_typer(install.app, name="install")
app.add_typer(generate.app, name="generate")
app.add_typer(managers.app, name="managers")


if __name__ == "__main__":
    app()
