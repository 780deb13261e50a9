from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the last session and application settings
as JSON in the user data directory, with default fallback.
"""

import json
import logging
import os
from typing import Any, Dict

from treeforge.domain.constants import (
    APPEARANCE_MODES,
    CURRENT_CONFIG_VERSION,
    DEFAULT_APPEARANCE_MODE,
    DEFAULT_LOG_LEVEL,
    LOG_LEVELS,
)
from treeforge.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default session configuration.

    An empty 'output_root' means "next to the diagram file".

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "diagram_path": "",
        "output_root": "",

        # Source rules
        "require_txt_extension": True,

        # Behavior
        "create_missing_root": True,
        "print_tree": False,
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default application state structure.

    Returns:
        Dict[str, Any]: The full JSON structure for config.json.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "app_settings": {
            "theme": DEFAULT_APPEARANCE_MODE,
            "log_level": DEFAULT_LOG_LEVEL,
        },
        "last_session": get_default_config(),
    }


def get_app_settings(state: Dict[str, Any]) -> Dict[str, str]:
    """
    Extract the GUI appearance mode and log level from an app-state document.

    Hand-edited values are matched case-insensitively; anything unknown
    falls back to the default.

    Args:
        state: Document as returned by `load_app_state`.

    Returns:
        Dict[str, str]: {"theme": ..., "log_level": ...}
    """
    raw = state.get("app_settings")
    if not isinstance(raw, dict):
        raw = {}

    theme = str(raw.get("theme", "")).strip().capitalize()
    if theme not in APPEARANCE_MODES:
        theme = DEFAULT_APPEARANCE_MODE

    level = str(raw.get("log_level", "")).strip().upper()
    if level not in LOG_LEVELS:
        level = DEFAULT_LOG_LEVEL

    return {"theme": theme, "log_level": level}


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Unknown or corrupted documents fall back to defaults; missing keys are
    filled from defaults so older files keep working.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    state = get_default_app_state()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return state

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return state

    if isinstance(data.get("app_settings"), dict):
        state["app_settings"].update(data["app_settings"])
    if isinstance(data.get("last_session"), dict):
        state["last_session"].update(data["last_session"])

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> None:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
    """
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """Retrieve the last session merged over defaults."""
    defaults = get_default_config()
    defaults.update(load_app_state().get("last_session", {}))
    return defaults


def save_config(config: Dict[str, Any]) -> None:
    """Save the provided config as the 'last_session'."""
    state = load_app_state()
    state["last_session"] = config
    save_app_state(state)
