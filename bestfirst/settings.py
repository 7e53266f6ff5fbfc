"""
Settings Module for the bestfirst command line

Provides persistent storage for run preferences using JSON.
Settings are stored in config.json in the working directory.

Every known key has an expected JSON type. A value of the wrong type is
replaced by its default with a warning. Unknown keys are kept as they are.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Tuple

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "log_level": "INFO",
    "log_file": None,
    "report_interval": 0,
    "tracked": False,
}

# Accepted Python types per key, as decoded by json
SETTING_TYPES: Dict[str, Tuple[type, ...]] = {
    "log_level": (str,),
    "log_file": (str, type(None)),
    "report_interval": (int,),
    "tracked": (bool,),
}


def _has_valid_type(key: str, value: Any) -> bool:
    """
    Check a value against the expected type of its key.

    bool is a subclass of int, so true/false is not accepted as a number.
    """
    expected = SETTING_TYPES.get(key)
    if expected is None:
        return True
    if isinstance(value, bool) and bool not in expected:
        return False
    return isinstance(value, expected)


def validate_settings(settings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge settings over the defaults, dropping values of the wrong type.

    Args:
        settings: Raw settings, e.g. decoded from config.json

    Returns:
        New settings dictionary containing every default key
    """
    result = DEFAULT_SETTINGS.copy()
    for key, value in settings.items():
        if _has_valid_type(key, value):
            result[key] = value
        else:
            logger.warning(
                f"Setting {key!r} has invalid value {value!r}, "
                f"using default {DEFAULT_SETTINGS[key]!r}"
            )
    return result


def load_settings(path: Path = SETTINGS_FILE) -> Dict[str, Any]:
    """
    Load settings from config.json.

    Args:
        path: Settings file to read

    Returns:
        Validated settings dictionary. Returns defaults if file missing or
        unreadable.
    """
    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    if not isinstance(settings, dict):
        logger.warning(f"Settings file {path} is not a JSON object, using defaults")
        return DEFAULT_SETTINGS.copy()

    result = validate_settings(settings)
    logger.debug(f"Settings loaded: {result}")
    return result


def save_settings(settings: Dict[str, Any], path: Path = SETTINGS_FILE) -> None:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file to write
    """
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")
