"""Get path to the desktop-actions config file."""

from pathlib import Path

from ...constants import CONFIG_FILENAME
from .get_home_dir import get_home_dir


def get_config_path() -> Path:
    """Get path to config file based on DESKTOP_ACTIONS_HOME or default to ~/.desktop_actions."""
    return get_home_dir(CONFIG_FILENAME)
