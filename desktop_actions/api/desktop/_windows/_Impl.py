"""Windows backend - Explorer for file locations, .lnk shortcuts via WScript.Shell."""

import logging
import os
from pathlib import Path, PureWindowsPath

from .._AbstractImpl import _AbstractImpl

logger = logging.getLogger(__name__)


class _Impl(_AbstractImpl):
    """Windows-specific backend."""

    SHORTCUT_EXTENSION = ".lnk"
    PURE_PATH = PureWindowsPath

    def has_desktop(self) -> bool:
        return True

    def can_open(self) -> bool:
        return hasattr(os, "startfile")

    def open_path(self, path: Path) -> None:
        os.startfile(str(path))  # type: ignore[attr-defined]

    def reveal_command(self, path: Path) -> list[str] | None:
        return ["explorer", "/select,", str(path.absolute())]

    def create_link(self, target_path: str, link_path: str) -> None:
        from win32com.client import Dispatch  # type: ignore

        logger.debug(f"Writing shell link {link_path} -> {target_path}")
        shell = Dispatch("WScript.Shell")
        shortcut = shell.CreateShortcut(link_path)
        shortcut.TargetPath = target_path
        shortcut.WorkingDirectory = str(PureWindowsPath(target_path).parent)
        shortcut.Save()
