"""Registry of supported package managers.

Each supported manager is described by a static ManagerDescriptor that
captures its invocation conventions. The registry is a read-only mapping
built once at import time; supporting a new manager means adding one
descriptor to the table below.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from frontier.exceptions import UnsupportedManagerError


@dataclass(frozen=True, slots=True)
class ManagerDescriptor:
    """Invocation conventions for one package manager.

    Attributes:
        key: Canonical lowercase name used in configuration files.
        invocation_name: Executable run for installs.
        requires_privilege_escalation: Whether installs must run through
            the privilege escalation tool (sudo).
        default_install_flag: Flag or subcommand selecting install mode.
        default_confirm_flag: Flag suppressing interactive confirmation,
            or None if the manager has no such flag.
        list_installed_args: Arguments that print explicitly installed
            packages, one per line.
        list_invocation_name: Executable used for listing when it differs
            from invocation_name.
    """

    key: str
    invocation_name: str
    requires_privilege_escalation: bool
    default_install_flag: str
    default_confirm_flag: str | None
    list_installed_args: tuple[str, ...]
    list_invocation_name: str | None = None

    @property
    def list_command(self) -> list[str]:
        """Full argv that lists explicitly installed packages."""
        return [self.list_invocation_name or self.invocation_name, *self.list_installed_args]

    @property
    def config_args(self) -> list[str]:
        """Arguments written to generated configuration files."""
        if self.default_confirm_flag is None:
            return []
        return [self.default_confirm_flag]


_DESCRIPTORS = (
    ManagerDescriptor(
        key="apt",
        invocation_name="apt",
        requires_privilege_escalation=True,
        default_install_flag="install",
        default_confirm_flag="-y",
        list_installed_args=("showmanual",),
        list_invocation_name="apt-mark",
    ),
    ManagerDescriptor(
        key="brew",
        invocation_name="brew",
        requires_privilege_escalation=False,
        default_install_flag="install",
        default_confirm_flag=None,
        list_installed_args=("leaves", "--installed-on-request"),
    ),
    ManagerDescriptor(
        key="pacman",
        invocation_name="pacman",
        requires_privilege_escalation=True,
        default_install_flag="-S",
        default_confirm_flag="--noconfirm",
        list_installed_args=("-Qeq",),
    ),
    ManagerDescriptor(
        key="paru",
        invocation_name="paru",
        requires_privilege_escalation=False,
        default_install_flag="-S",
        default_confirm_flag="--noconfirm",
        list_installed_args=("-Qeq",),
    ),
    ManagerDescriptor(
        key="yay",
        invocation_name="yay",
        requires_privilege_escalation=False,
        default_install_flag="-S",
        default_confirm_flag="--noconfirm",
        list_installed_args=("-Qeq",),
    ),
)

MANAGERS: Mapping[str, ManagerDescriptor] = MappingProxyType(
    {descriptor.key: descriptor for descriptor in _DESCRIPTORS}
)


def supported_managers() -> list[str]:
    """Return the sorted keys of all supported package managers."""
    return sorted(MANAGERS)


def resolve_manager(name: str) -> ManagerDescriptor:
    """Look up the descriptor for a package manager name.

    Matching is exact and case-sensitive.

    Args:
        name: Package manager key from the configuration file.

    Returns:
        The matching ManagerDescriptor.

    Raises:
        UnsupportedManagerError: If no manager is registered under name.
    """
    try:
        return MANAGERS[name]
    except KeyError:
        msg = f"unsupported package manager '{name}', is it spelled correctly?"
        hint = f"Supported package managers: {', '.join(supported_managers())}"
        raise UnsupportedManagerError(msg, hint=hint) from None
