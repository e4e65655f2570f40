# src/stickersync/config.py

import os
from typing import Any, Dict, Optional, Tuple

import platformdirs
import yaml

from stickersync.constants import (
    APP_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_STICKER_ASSETS_URL,
    DEFAULT_WALLPAPER_ASSETS_URL,
)
from stickersync.exceptions import ConfigFileError, ConfigValidationError
from stickersync.log_utils import logger
from stickersync.sync.interfaces import AssetIdentity

# Get the config directory using platformdirs
CONFIG_DIR = platformdirs.user_config_dir(APP_NAME)
CONFIG_FILE = os.path.join(CONFIG_DIR, CONFIG_FILE_NAME)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the stickersync YAML configuration.

    Parameters:
        config_path (str | None): File to read; defaults to CONFIG_FILE.

    Returns:
        dict: The parsed configuration, or an empty dict when the file does not exist.

    Raises:
        ConfigFileError: If the file cannot be read, is not valid YAML, or is not a mapping.
    """
    path = config_path or CONFIG_FILE
    if not os.path.exists(path):
        logger.debug(f"No configuration file at {path}")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigFileError(f"Unable to read configuration {path}", str(e)) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigFileError(
            f"Configuration {path} must be a mapping",
            f"got {type(config).__name__}",
        )
    return config


def save_config(config: Dict[str, Any], config_path: Optional[str] = None) -> str:
    """
    Write the configuration as YAML, creating the directory if needed.

    Returns:
        str: The path that was written.

    Raises:
        ConfigFileError: If the file cannot be written.
    """
    path = config_path or CONFIG_FILE
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(config, f, default_flow_style=False)
    except OSError as e:
        raise ConfigFileError(f"Unable to write configuration {path}", str(e)) from e
    logger.debug(f"Saved configuration to {path}")
    return path


def current_asset_identity(config: Dict[str, Any]) -> AssetIdentity:
    """
    Read the active sticker from the `STICKER` section of the configuration.

    Raises:
        ConfigValidationError: If the section is missing or lacks a non-empty `path` and `name`.
    """
    sticker = config.get("STICKER")
    if not isinstance(sticker, dict):
        raise ConfigValidationError(
            "No sticker configured",
            "set STICKER.path and STICKER.name or run 'stickersync set'",
        )

    values = {}
    for key in ("path", "name"):
        value = sticker.get(key)
        if not isinstance(value, str) or not value.strip():
            raise ConfigValidationError(f"Invalid sticker {key}: {value!r}")
        values[key] = value.strip()

    return AssetIdentity(path=values["path"], name=values["name"])


def get_config_root(config: Dict[str, Any]) -> str:
    """Directory holding the `stickers/` and `wallpapers/` folders."""
    assets_dir = config.get("ASSETS_DIR")
    if assets_dir:
        return os.path.expanduser(str(assets_dir))
    return CONFIG_DIR


def get_asset_endpoints(config: Dict[str, Any]) -> Tuple[str, str]:
    """Return the (sticker, wallpaper) base URLs, falling back to the public asset server."""
    return (
        str(config.get("STICKER_ASSETS_URL") or DEFAULT_STICKER_ASSETS_URL),
        str(config.get("WALLPAPER_ASSETS_URL") or DEFAULT_WALLPAPER_ASSETS_URL),
    )


def get_request_timeout(config: Dict[str, Any]) -> float:
    """
    Read `REQUEST_TIMEOUT` in seconds; invalid or non-positive values fall back to the default.
    """
    raw_value = config.get("REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)
    try:
        timeout = float(raw_value)
    except (TypeError, ValueError):
        logger.warning(
            "Invalid REQUEST_TIMEOUT value %r; using default of %d",
            raw_value,
            DEFAULT_REQUEST_TIMEOUT,
        )
        return float(DEFAULT_REQUEST_TIMEOUT)
    if timeout <= 0:
        logger.warning(
            "REQUEST_TIMEOUT must be > 0; using default of %d", DEFAULT_REQUEST_TIMEOUT
        )
        return float(DEFAULT_REQUEST_TIMEOUT)
    return timeout
