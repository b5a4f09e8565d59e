"""Get desktop-actions home directory path or path under it."""

import os
from pathlib import Path

from ...constants import DESKTOP_ACTIONS_HOME_ENV, DESKTOP_ACTIONS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get desktop-actions home directory path or path under it.

    This is the application's own state directory (config, logs), not the
    user home where shortcuts are placed.

    Checks DESKTOP_ACTIONS_HOME environment variable first, defaults to
    ~/.desktop_actions if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.desktop_actions")
        >>> get_home_dir("config.json")
        Path("/Users/user/.desktop_actions/config.json")
    """
    home_env = os.environ.get(DESKTOP_ACTIONS_HOME_ENV)
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home_env = os.environ.get("HOME")
        if user_home_env:
            home = Path(user_home_env) / DESKTOP_ACTIONS_HOME_EXT
        else:
            home = Path.home() / DESKTOP_ACTIONS_HOME_EXT

    return home / Path(*parts) if parts else home
