"""Shell execution utilities.

Provides subprocess execution that reports launch and wait failures
as frontier errors instead of raw OSErrors.
"""

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass

from frontier.exceptions import SpawnError, WaitError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    cwd: str | None = None,
) -> CommandResult:
    """Execute a command and capture its output.

    Output is decoded as UTF-8; undecodable bytes are replaced rather
    than raising. The call blocks until the child exits.

    Args:
        args: Command and arguments to execute.
        cwd: Working directory for the command. If None, uses current directory.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        SpawnError: If the executable cannot be launched.
        WaitError: If waiting on the child process fails.
    """
    logger.debug("Running: %s", " ".join(args))
    try:
        process = subprocess.Popen(  # nosec: B603
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            cwd=cwd,
        )
    except OSError as e:
        raise SpawnError(f"unable to spawn child process '{args[0]}': {e}") from e
    try:
        stdout, stderr = process.communicate()
    except OSError as e:
        raise WaitError(f"failed to wait on child process '{args[0]}': {e}") from e

    return CommandResult(
        stdout=stdout,
        stderr=stderr,
        returncode=process.returncode,
    )


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


def run_interactive(
    args: list[str],
    *,
    cwd: str | None = None,
    env: dict[str, str] | None = None,
) -> int:
    """Execute a command interactively, inheriting the terminal.

    Unlike run_command(), this does NOT capture stdout/stderr,
    allowing the subprocess to prompt the user and print progress
    directly.

    Args:
        args: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Additional environment variables (merged with current env).

    Returns:
        Exit code of the command.

    Raises:
        SpawnError: If the executable cannot be launched.
        WaitError: If waiting on the child process fails.
    """
    full_env = {**os.environ, **(env or {})}
    logger.debug("Running interactively: %s", " ".join(args))
    try:
        process = subprocess.Popen(args, cwd=cwd, env=full_env)  # nosec: B603
    except OSError as e:
        raise SpawnError(f"unable to spawn child process '{args[0]}': {e}") from e
    try:
        return process.wait()
    except OSError as e:
        raise WaitError(f"failed to wait on child process '{args[0]}': {e}") from e
