"""Capture pipeline.

Lists the packages a package manager reports as explicitly installed
and renders them as frontier configuration text.
"""

import logging

from frontier.managers.registry import ManagerDescriptor
from frontier.utils.shell import run_command

logger = logging.getLogger(__name__)

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def quote_toml_string(value: str) -> str:
    """Render value as a TOML basic string."""
    chars: list[str] = []
    for char in value:
        if char in _ESCAPES:
            chars.append(_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            chars.append(f"\\u{ord(char):04X}")
        else:
            chars.append(char)
    return '"' + "".join(chars) + '"'


def split_package_list(output: str) -> list[str]:
    """Split list command output into one entry per line.

    Only the empty segment after a final newline is dropped; blank
    lines in the middle are kept.

    Args:
        output: Captured standard output.

    Returns:
        Lines in source order, without line terminators.
    """
    lines = [line.removesuffix("\r") for line in output.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def format_install_field(packages: list[str]) -> str:
    """Format the install array, one quoted package per indented line."""
    entries = "".join(f"\t{quote_toml_string(pkg)},\n" for pkg in packages)
    return f"install = [\n{entries}]"


def format_args_field(args: list[str]) -> str:
    """Format the args array on a single line."""
    return f"args = [{', '.join(quote_toml_string(arg) for arg in args)}]"


def render_config(descriptor: ManagerDescriptor, packages: list[str]) -> str:
    """Render a complete configuration document.

    The args line is omitted when the manager has no confirm flag.

    Args:
        descriptor: Package manager the document targets.
        packages: Packages for the install array.

    Returns:
        TOML text accepted by parse_config().
    """
    lines = ["[packageManager]", f"name = {quote_toml_string(descriptor.key)}"]
    if descriptor.config_args:
        lines.append(format_args_field(descriptor.config_args))
    lines.extend(["", "[pkgs]", format_install_field(packages)])
    return "\n".join(lines) + "\n"


def capture_installed(descriptor: ManagerDescriptor) -> list[str]:
    """List explicitly installed packages.

    The list command's exit status is not inspected; whatever it wrote
    to standard output is used.

    Args:
        descriptor: Package manager to query.

    Returns:
        Package names in the order the manager printed them.

    Raises:
        SpawnError: If the list command cannot be launched.
        WaitError: If waiting on the list command fails.
    """
    result = run_command(descriptor.list_command)
    if not result.success:
        logger.warning(
            "%s exited with status %d: %s",
            descriptor.list_command[0],
            result.returncode,
            result.stderr.strip(),
        )

    packages = split_package_list(result.stdout)
    logger.info("Captured %d packages from %s", len(packages), descriptor.key)
    return packages


def generate_config(descriptor: ManagerDescriptor) -> str:
    """Capture installed packages and render them as configuration text.

    Raises:
        SpawnError: If the list command cannot be launched.
        WaitError: If waiting on the list command fails.
    """
    return render_config(descriptor, capture_installed(descriptor))
