"""Shared constants for desktop-actions home directory and shortcut placement."""

DESKTOP_ACTIONS_HOME_EXT = ".desktop_actions"  # user-level state/config directory suffix

DESKTOP_ACTIONS_HOME_ENV = "DESKTOP_ACTIONS_HOME"

CONFIG_FILENAME = "config.json"

LOG_FILENAME = "desktop_actions.log"

# Folder under the user home that holds desktop items on every supported platform
DEFAULT_DESKTOP_DIRNAME = "Desktop"
