from __future__ import annotations

"""
Configuration Domain Management.

Handles the runtime defaults and the persisted user preferences stored
as JSON in the user data directory. Missing or corrupted files fall back
to defaults without interrupting a listing.
"""

import json
import logging
import os
from typing import Any, Dict

from betterls.domain.constants import CURRENT_CONFIG_VERSION
from betterls.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"

# Keys that describe a single invocation and are never persisted
_TRANSIENT_KEYS = ("path",)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Target
        "path": ".",

        # Output Format
        "json_output": False,
        "json_indent": None,

        # Diagnostics
        "log_level": "WARNING",
        "log_file": "",
    }


def get_default_app_state() -> Dict[str, Any]:
    """Full structure of config.json."""
    return {
        "version": CURRENT_CONFIG_VERSION,
        "preferences": {k: v for k, v in get_default_config().items() if k not in _TRANSIENT_KEYS},
    }


def get_config_file() -> str:
    """Absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(create=False), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Returns:
        Dict[str, Any]: The stored state merged over defaults, or the
                        default structure if the file is missing or invalid.
    """
    state = get_default_app_state()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return state

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{config_file}': {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return state

    prefs = data.get("preferences")
    if isinstance(prefs, dict):
        state["preferences"].update(prefs)

    return state


def save_app_state(state: Dict[str, Any]) -> bool:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.

    Returns:
        bool: True if the file was written.
    """
    config_file = get_config_file()
    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

    logger.debug(f"Configuration saved to {config_file}")
    return True


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """Defaults overlaid with the persisted preferences."""
    config = get_default_config()
    config.update(load_app_state().get("preferences", {}))
    return config


def save_config(config: Dict[str, Any]) -> bool:
    """Persist the provided config as the user preferences."""
    state = load_app_state()
    state["preferences"] = {k: v for k, v in config.items() if k not in _TRANSIENT_KEYS}
    return save_app_state(state)
