"""Exception hierarchy for frontier.

Every error that reaches the CLI boundary derives from
:class:`FrontierError`, so commands can print one clean message and exit.

Hierarchy
---------
FrontierError
├── ConfigError
│   ├── ConfigNotFoundError
│   ├── ConfigParseError
│   ├── ConfigExistsError
│   └── FieldTypeError
├── UnsupportedManagerError
└── CommandError
    ├── SpawnError
    └── WaitError
"""

from __future__ import annotations


class FrontierError(Exception):
    """Base exception for all frontier errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------


class ConfigError(FrontierError):
    """Base exception for configuration file errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file does not exist."""


class ConfigParseError(ConfigError):
    """Raised when configuration text is not valid TOML or has the wrong shape."""


class ConfigExistsError(ConfigError):
    """Raised when writing would overwrite an existing configuration file."""


class FieldTypeError(ConfigError):
    """Raised when a configuration field holds a value of the wrong type."""

    def __init__(self, message: str, *, field: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.field = field


# --- Package managers ------------------------------------------------------


class UnsupportedManagerError(FrontierError):
    """Raised when a package manager name is not in the registry."""


# --- Child processes -------------------------------------------------------


class CommandError(FrontierError):
    """Base exception for child process failures."""


class SpawnError(CommandError):
    """Raised when a child process cannot be launched."""


class WaitError(CommandError):
    """Raised when waiting on a child process fails."""
