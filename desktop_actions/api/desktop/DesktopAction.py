"""Actions a desktop-services provider may support."""

from enum import Enum


class DesktopAction(str, Enum):
    """Capabilities probed before each delegated desktop call."""

    BROWSE = "browse"
    OPEN = "open"
    MOVE_TO_TRASH = "move_to_trash"
