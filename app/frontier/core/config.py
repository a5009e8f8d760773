"""Configuration file I/O operations.

This module provides functions for parsing, loading and saving frontier
configuration files in TOML format, validated with Pydantic models.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile

from pydantic import ValidationError

from frontier.exceptions import (
    ConfigError,
    ConfigExistsError,
    ConfigNotFoundError,
    ConfigParseError,
)
from frontier.models.config import FrontierConfig

logger = logging.getLogger(__name__)


def parse_config(text: str) -> FrontierConfig:
    """Parse and structurally validate configuration text.

    Only the document shape is checked here. Field value types are
    checked later by the FrontierConfig accessors.

    Args:
        text: Raw TOML text.

    Returns:
        Validated FrontierConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid or a required
            section or key is missing or has the wrong shape.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"invalid TOML syntax: {e}") from e

    try:
        return FrontierConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(f"invalid config structure: {e}") from e


def load_config(path: Path) -> FrontierConfig:
    """Load and validate a configuration file.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated FrontierConfig object.

    Raises:
        ConfigNotFoundError: If the file doesn't exist.
        ConfigParseError: If the content is not a valid configuration.
        ConfigError: If the file cannot be read.
    """
    if not path.exists():
        raise ConfigNotFoundError(f"config file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"config file is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ConfigError(f"failed to read config file: {e}") from e

    logger.debug("Loaded config from %s", path)
    return parse_config(text)


def write_config(text: str, path: Path, *, force: bool = False) -> Path:
    """Write configuration text to a file.

    The file is written atomically through a temporary file in the
    same directory followed by os.replace(). Parent directories are
    created as needed.

    Args:
        text: Complete configuration text.
        path: Destination path.
        force: Overwrite an existing file.

    Returns:
        Path where the configuration was saved.

    Raises:
        ConfigExistsError: If path exists and force is False.
        ConfigError: If the file cannot be written.
    """
    if path.exists() and not force:
        raise ConfigExistsError(
            f"output file already exists: {path}",
            hint="Use --force to overwrite or choose a different --output path.",
        )

    tmp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            f.write(text)
        os.replace(str(tmp_path), str(path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"failed to write config file: {e}") from e

    logger.debug("Wrote config to %s", path)
    return path
