"""Exception family raised by DesktopActions.

Every error is raised from the call that detected it. Errors wrapping a
platform failure are raised ``from`` it, so ``__cause__`` holds the original.
"""

from .ErrorMessage import ErrorMessage


class DesktopActionError(Exception):
    """Base class for all desktop action failures."""

    def __init__(self, error_message: ErrorMessage, detail: str = ""):
        self.error_message = error_message
        self.detail = detail
        super().__init__(f"{error_message.value}{detail}")


class InvalidArgumentError(DesktopActionError):
    """A required string argument was None or blank."""


class InvalidUrlError(DesktopActionError):
    """A URL string could not be parsed."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(ErrorMessage.INVALID_URL, url)


class MissingFileError(DesktopActionError):
    """The referenced file or directory does not exist."""


class NotDirectoryError(DesktopActionError):
    """The referenced path exists but is not a directory."""


class UnsupportedOperationError(DesktopActionError):
    """Desktop services, or the requested action, are unavailable."""


class ProcessStartError(DesktopActionError):
    """Spawning an executable failed."""


class OperationFailedError(DesktopActionError):
    """A file manager or trash call failed."""


class BrowseFailedError(DesktopActionError):
    """The browser could not be opened."""


class ShortcutCreationError(DesktopActionError):
    """The shortcut writer failed."""
