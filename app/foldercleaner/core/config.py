"""Configuration file I/O operations.

This module provides functions for loading and saving routine
configuration files in TOML format with validation using Pydantic models.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import ValidationError

from foldercleaner.core.paths import get_config_path
from foldercleaner.core.routine import Routine
from foldercleaner.models.config import CleanerConfig, RoutineConfig


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration content is invalid."""


def load_config(path: Path | None = None) -> CleanerConfig:
    """Load and validate a configuration from a TOML file.

    Args:
        path: Path to the configuration file. If None, uses the default path.

    Returns:
        Validated CleanerConfig object.

    Raises:
        ConfigNotFoundError: If the configuration file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return CleanerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e


def load_routines(path: Path | None = None) -> list[Routine]:
    """Load the configuration and build one Routine per entry.

    Args:
        path: Path to the configuration file. If None, uses the default path.

    Returns:
        Routines in configuration order.

    Raises:
        ConfigError: If the configuration cannot be loaded.
    """
    config = load_config(path)
    return [Routine.from_config(routine) for routine in config.routines]


def save_config(config: CleanerConfig, path: Path | None = None) -> Path:
    """Save a configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    in the same directory and then using os.replace() for atomic rename.

    Args:
        config: The CleanerConfig object to save.
        path: Path to save the configuration. If None, uses the default path.

    Returns:
        Path where the configuration was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_exists(path: Path | None = None) -> bool:
    """Check if a configuration file exists.

    Args:
        path: Path to check. If None, uses the default path.

    Returns:
        True if the configuration file exists, False otherwise.
    """
    config_path = path or get_config_path()
    return config_path.exists()


def require_routines(config_path: Path | None = None) -> list[Routine]:
    """Load routines or exit with a helpful error message.

    This is a convenience wrapper around load_routines() that handles
    common error cases by printing user-friendly messages and exiting.

    Args:
        config_path: Optional custom configuration path.

    Returns:
        Routines built from the configuration.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    import typer

    from foldercleaner.utils.formatting import print_error, print_info

    path = config_path or get_config_path()
    try:
        return load_routines(path)
    except ConfigNotFoundError as e:
        print_error(f"Config not found: {path}")
        print_info("Run 'foldercleaner init' to create a starter config.")
        raise typer.Exit(code=1) from e
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e


def _config_to_dict(config: CleanerConfig) -> dict[str, Any]:
    """Convert a CleanerConfig to a dictionary suitable for TOML serialization.

    Intervals are written as whole seconds when possible, and as fractional
    seconds otherwise.
    """
    return {"routines": [_routine_to_dict(routine) for routine in config.routines]}


def _routine_to_dict(routine: RoutineConfig) -> dict[str, Any]:
    seconds = routine.interval.total_seconds()
    return {
        "directory": str(routine.directory),
        "interval": int(seconds) if seconds.is_integer() else seconds,
        "pattern": routine.pattern.model_dump(),
    }
