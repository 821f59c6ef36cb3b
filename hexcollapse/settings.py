"""
Settings Module for the hex collapse analyzer

Provides persistent storage for user preferences using JSON.
Settings are stored in config.json in the working directory; command
line flags override them for a single run.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug_enabled": False,
    "strategy_name": "countdown",
    "timeout_sec": None,
    "log_file": "solver.log",
}


def load_settings(path: Path = SETTINGS_FILE) -> Dict[str, Any]:
    """
    Load settings from a JSON file.

    Args:
        path: Settings file to read

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    if not path.exists():
        logger.debug(f"Settings file {path} not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    if not isinstance(settings, dict):
        logger.warning(f"Settings file {path} does not hold an object, using defaults")
        return DEFAULT_SETTINGS.copy()

    unknown = sorted(set(settings) - set(DEFAULT_SETTINGS))
    if unknown:
        logger.warning(f"Ignoring unknown settings: {', '.join(unknown)}")

    # Merge with defaults to handle missing keys
    result = DEFAULT_SETTINGS.copy()
    result.update({k: v for k, v in settings.items() if k in DEFAULT_SETTINGS})
    logger.debug(f"Settings loaded: {result}")
    return result


def save_settings(settings: Dict[str, Any], path: Path = SETTINGS_FILE) -> None:
    """
    Save settings to a JSON file.

    Args:
        settings: Settings dictionary to save
        path: Settings file to write
    """
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except OSError as e:
        logger.error(f"Failed to save settings: {e}")
