"""Install command implementation.

Installs every package listed in a frontier configuration file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from frontier.cli.types import exit_with_error
from frontier.core.config import load_config
from frontier.core.installer import install_packages
from frontier.core.paths import get_default_config_path
from frontier.exceptions import FrontierError
from frontier.utils.formatting import console, print_step, print_success, print_warning

app = typer.Typer(
    help="Install packages from a frontier configuration file.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def install_from_config(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Configuration TOML file. Defaults to ~/.config/frontier/frontier.toml.",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show the install command without running it.",
        ),
    ] = False,
) -> None:
    """Install the packages listed in a configuration file.

    Runs the configured package manager once with every listed package.
    The package manager's own exit status is reported as a warning but
    does not fail the command.

    Examples:
        frontier install                          # Use the default config file
        frontier install --config ~/pkgs.toml     # Use a specific config file
        frontier install --dry-run                # Print the command only
    """
    # Skip if a subcommand is being invoked
    if ctx.invoked_subcommand is not None:
        return

    config_path = config or get_default_config_path()
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))

    try:
        frontier_config = load_config(config_path)
        packages = frontier_config.pkgs_to_install()
        descriptor = frontier_config.pkg_mgr()
        args = frontier_config.args_to_pkg_mgr()
    except FrontierError as e:
        exit_with_error(e)

    if not packages:
        print_warning(f"No packages to install in {config_path}")
        return

    if not quiet:
        print_step("Running install command.")

    try:
        result = install_packages(descriptor, args, packages, dry_run=dry_run)
    except FrontierError as e:
        exit_with_error(e)

    if result.dry_run:
        console.print(
            f"[info]DRY-RUN:[/] Would run: {escape(result.command_line)}",
            soft_wrap=True,
        )
        return

    if result.returncode != 0:
        print_warning(f"{descriptor.invocation_name} exited with status {result.returncode}")
    elif not quiet:
        print_success(f"Installed {len(packages)} package(s) with {descriptor.key}.")
