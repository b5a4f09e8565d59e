"""desktop-actions: open URLs, executables, folders, trash and shortcuts from Python."""

from .api.config.DesktopConfig import DesktopConfig
from .api.desktop import (
    BrowseFailedError,
    DesktopAction,
    DesktopActionError,
    DesktopActions,
    ErrorMessage,
    InvalidArgumentError,
    InvalidUrlError,
    MissingFileError,
    NotDirectoryError,
    OperationFailedError,
    ProcessStartError,
    ShortcutCreationError,
    UnsupportedOperationError,
)
from .api.types.URI import URI

__version__ = "0.1.0"

__all__ = [
    "BrowseFailedError",
    "DesktopAction",
    "DesktopActionError",
    "DesktopActions",
    "DesktopConfig",
    "ErrorMessage",
    "InvalidArgumentError",
    "InvalidUrlError",
    "MissingFileError",
    "NotDirectoryError",
    "OperationFailedError",
    "ProcessStartError",
    "ShortcutCreationError",
    "URI",
    "UnsupportedOperationError",
]
