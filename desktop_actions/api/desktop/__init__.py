"""Desktop module - the DesktopActions facade, its errors and platform backends."""

from .DesktopAction import DesktopAction
from .DesktopActionError import (
    BrowseFailedError,
    DesktopActionError,
    InvalidArgumentError,
    InvalidUrlError,
    MissingFileError,
    NotDirectoryError,
    OperationFailedError,
    ProcessStartError,
    ShortcutCreationError,
    UnsupportedOperationError,
)
from .DesktopActions import DesktopActions
from .ErrorMessage import ErrorMessage

__all__ = [
    "BrowseFailedError",
    "DesktopAction",
    "DesktopActionError",
    "DesktopActions",
    "ErrorMessage",
    "InvalidArgumentError",
    "InvalidUrlError",
    "MissingFileError",
    "NotDirectoryError",
    "OperationFailedError",
    "ProcessStartError",
    "ShortcutCreationError",
    "UnsupportedOperationError",
]
