"""Desktop services backed by the host platform."""

import logging
import os
import webbrowser
from pathlib import Path

from send2trash import send2trash

from ..types.URI import URI
from ._AbstractDesktopServices import _AbstractDesktopServices
from ._AbstractImpl import _AbstractImpl
from .DesktopAction import DesktopAction

logger = logging.getLogger(__name__)


class _SystemDesktopServices(_AbstractDesktopServices):
    """Browse via webbrowser, open via the platform backend, trash via send2trash."""

    def __init__(self, impl: _AbstractImpl):
        self._impl = impl

    def is_supported(self) -> bool:
        return self._impl.has_desktop()

    def is_action_supported(self, action: DesktopAction) -> bool:
        if action is DesktopAction.BROWSE:
            try:
                webbrowser.get()
            except webbrowser.Error:
                return False
            return True
        if action is DesktopAction.OPEN:
            return self._impl.can_open()
        if action is DesktopAction.MOVE_TO_TRASH:
            return True
        return False

    def browse(self, uri: URI) -> None:
        logger.debug(f"Opening {uri} in default browser")
        if not webbrowser.open(str(uri)):
            raise OSError(f"No browser accepted {uri}")

    def open(self, directory: Path) -> None:
        logger.debug(f"Opening directory {directory}")
        self._impl.open_path(directory)

    def move_to_trash(self, file: Path) -> bool:
        logger.debug(f"Moving {file} to trash")
        send2trash(str(file))
        return not os.path.lexists(file)
