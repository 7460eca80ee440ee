"""Configuration management for clippings2org.

This module handles reading and writing configuration settings: where the
clippings file lives and which extras the outline renderer emits.
"""

import json
import logging
import os
import platform
from functools import lru_cache
from pathlib import Path
from typing import Any

from .exceptions import ValidationError
from .renderer import RenderOptions

logger = logging.getLogger(__name__)

# Default configuration settings
DEFAULT_CONFIG = {
    "clippings_file_path": "My Clippings.txt",
    "include_pdf_links": False,
    "include_pdf_folder": "",
    "include_date": False,
    "log_level": "INFO",
}

BOOLEAN_KEYS = ("include_pdf_links", "include_date")
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_config_dir() -> Path:
    """Get the platform-specific configuration directory."""
    system = platform.system()
    home = Path.home()

    if system == "Darwin":  # macOS
        config_dir = home / "Library" / "Application Support" / "clippings2org"
    elif system == "Windows":
        config_dir = Path(os.getenv("APPDATA", str(home / "AppData" / "Roaming"))) / "clippings2org"
    else:  # Linux and others
        config_dir = home / ".config" / "clippings2org"

    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


@lru_cache(maxsize=1)
def get_config_file_path() -> Path:
    """Get the path to the configuration file."""
    return get_config_dir() / "config.json"


def load_config() -> dict[str, Any]:
    """Load configuration from file, falling back to defaults if it doesn't exist."""
    config_file = get_config_file_path()

    if config_file.exists():
        try:
            with open(config_file) as f:
                config = json.load(f)
            logger.debug(f"Loaded configuration from {config_file}")

            # Merge with defaults to ensure all keys exist
            merged_config = DEFAULT_CONFIG.copy()
            merged_config.update(config)
            return merged_config
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading configuration: {e}")
            logger.info("Using default configuration instead")
            return DEFAULT_CONFIG.copy()

    logger.debug(f"No configuration file at {config_file}, using defaults")
    return DEFAULT_CONFIG.copy()


def save_config(config: dict[str, Any]) -> bool:
    """Save configuration to file.

    Args:
        config: Configuration dictionary to save

    Returns:
        bool: True if successful, False otherwise
    """
    config_file = get_config_file_path()
    try:
        with open(config_file, "w") as f:
            json.dump(config, f, indent=2)
        logger.debug(f"Saved configuration to {config_file}")
        return True
    except OSError as e:
        logger.error(f"Error saving configuration: {e}")
        return False


def get_config_value(key: str, default: Any = None) -> Any:
    """Get a configuration value by key.

    Args:
        key: The configuration key to retrieve
        default: Default value to return if key not found

    Returns:
        The configuration value or default if not found
    """
    config = load_config()
    return config.get(key, default)


def set_config_value(key: str, value: Any) -> bool:
    """Set a configuration value.

    Args:
        key: The configuration key to set
        value: The value to set

    Returns:
        bool: True if successful, False otherwise
    """
    config = load_config()
    config[key] = value
    return save_config(config)


def coerce_config_value(key: str, raw_value: str) -> Any:
    """Convert a command-line string into the stored type for ``key``.

    Raises:
        ValidationError: If the key is unknown or the value is invalid for it
    """
    if key not in DEFAULT_CONFIG:
        raise ValidationError(f"Unknown configuration key: {key}. Valid keys are: {', '.join(DEFAULT_CONFIG)}")

    if key in BOOLEAN_KEYS:
        if raw_value.lower() in ("true", "yes", "1", "on"):
            return True
        if raw_value.lower() in ("false", "no", "0", "off"):
            return False
        raise ValidationError(f"Invalid boolean value for {key}: {raw_value}. Use 'true' or 'false'.")

    if key == "log_level":
        if raw_value.upper() not in VALID_LOG_LEVELS:
            raise ValidationError(f"Invalid log level: {raw_value}. Valid values are: {', '.join(VALID_LOG_LEVELS)}")
        return raw_value.upper()

    return raw_value


def get_clippings_file_path() -> Path:
    """Get the path of the configured clippings file."""
    return Path(get_config_value("clippings_file_path", DEFAULT_CONFIG["clippings_file_path"])).expanduser()


def get_render_options(config: dict[str, Any] | None = None) -> RenderOptions:
    """Build the renderer options from configuration.

    Args:
        config: Configuration to read from; loaded from file when omitted
    """
    if config is None:
        config = load_config()
    return RenderOptions(
        include_pdf_links=config.get("include_pdf_links", False),
        include_pdf_folder=config.get("include_pdf_folder", ""),
        include_date=config.get("include_date", False),
    )


def list_config() -> dict[str, Any]:
    """Get a dictionary of all configuration values for display."""
    return load_config().copy()
