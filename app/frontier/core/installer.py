"""Install pipeline.

Turns a manager descriptor, the configured flags and a package list into
one install command, then runs it interactively. The child's exit status
is recorded but never treated as an error: a successful run means the
package manager was launched and waited on.
"""

import logging
import os
import shlex
from dataclasses import dataclass

from frontier.managers.registry import ManagerDescriptor
from frontier.utils.shell import run_interactive

logger = logging.getLogger(__name__)

# Environment variable selecting the privilege escalation tool
ESCALATION_ENV_VAR = "FRONTIER_ESCALATION_COMMAND"
DEFAULT_ESCALATION_COMMAND = "sudo"


@dataclass(frozen=True, slots=True)
class InstallResult:
    """Outcome of an install run.

    Attributes:
        command: The argv that was (or, in dry-run mode, would be) executed.
        returncode: Exit code of the package manager, None in dry-run mode.
        dry_run: Whether the command was only built, not executed.
    """

    command: list[str]
    returncode: int | None = None
    dry_run: bool = False

    @property
    def command_line(self) -> str:
        """Shell-quoted rendering of the command."""
        return shlex.join(self.command)


def get_escalation_command() -> str:
    """Get the privilege escalation tool.

    Returns:
        Value of FRONTIER_ESCALATION_COMMAND if set, else "sudo".
    """
    return os.environ.get(ESCALATION_ENV_VAR) or DEFAULT_ESCALATION_COMMAND


def assemble_install_args(descriptor: ManagerDescriptor, configured_args: list[str]) -> list[str]:
    """Append the install flag to the configured flags unless already present."""
    args = list(configured_args)
    if descriptor.default_install_flag not in args:
        args.append(descriptor.default_install_flag)
    return args


def build_install_command(
    descriptor: ManagerDescriptor,
    configured_args: list[str],
    packages: list[str],
    *,
    escalation_command: str | None = None,
) -> list[str]:
    """Build the full install argv.

    Args:
        descriptor: Package manager to invoke.
        configured_args: Flags from the configuration file, kept verbatim.
        packages: Packages to install.
        escalation_command: Privilege escalation tool. Defaults to
            get_escalation_command().

    Returns:
        Argument vector, prefixed with the escalation tool when the
        manager requires it.
    """
    command = [descriptor.invocation_name]
    if descriptor.requires_privilege_escalation:
        command.insert(0, escalation_command or get_escalation_command())

    return [*command, *assemble_install_args(descriptor, configured_args), *packages]


def install_packages(
    descriptor: ManagerDescriptor,
    configured_args: list[str],
    packages: list[str],
    *,
    dry_run: bool = False,
) -> InstallResult:
    """Install packages with the given package manager.

    The command inherits the terminal so the package manager can prompt
    and report progress. The call blocks until it exits.

    Args:
        descriptor: Package manager to invoke.
        configured_args: Flags from the configuration file.
        packages: Packages to install.
        dry_run: If True, only build the command.

    Returns:
        InstallResult with the command and the child's exit code.

    Raises:
        SpawnError: If the command cannot be launched.
        WaitError: If waiting on the command fails.
    """
    command = build_install_command(descriptor, configured_args, packages)

    logger.info(
        "Executing %s install for packages: %s (dry_run=%s)",
        descriptor.key,
        ", ".join(packages),
        dry_run,
    )

    if dry_run:
        return InstallResult(command=command, dry_run=True)

    returncode = run_interactive(command)
    if returncode != 0:
        logger.info("%s exited with status %d", descriptor.invocation_name, returncode)

    return InstallResult(command=command, returncode=returncode)
