"""XDG-compliant path management for frontier.

This module provides the standard locations of the configuration file
and user theme, following the XDG Base Directory Specification.

XDG defaults:
- Config: ~/.config/frontier/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "frontier"

# Environment variable overriding the default configuration file
CONFIG_ENV_VAR = "FRONTIER_CONFIG"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/frontier/ (or XDG_CONFIG_HOME/frontier/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_default_config_path() -> Path:
    """Get the configuration file used when none is given.

    Returns:
        Path from FRONTIER_CONFIG if set, else ~/.config/frontier/frontier.toml.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_config_dir() / "frontier.toml"


def get_user_theme_path() -> Path:
    """Get the user theme configuration path.

    Returns:
        Path to ~/.config/frontier/theme.toml.
    """
    return get_config_dir() / "theme.toml"
