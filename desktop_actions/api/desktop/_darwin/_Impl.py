"""macOS backend - Finder via open(1), shortcuts as symbolic links."""

import os
import shutil
import subprocess
from pathlib import Path

from .._AbstractImpl import _AbstractImpl


class _Impl(_AbstractImpl):
    """macOS-specific backend.

    Finder aliases are an opaque bookmark format; a symbolic link is the
    shortcut Finder and the shell both follow, and it carries no extension.
    """

    SHORTCUT_EXTENSION = ""

    def has_desktop(self) -> bool:
        return True

    def can_open(self) -> bool:
        return shutil.which("open") is not None

    def open_path(self, path: Path) -> None:
        try:
            subprocess.run(["open", str(path)], check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as e:
            raise RuntimeError(f"open failed: {e.stderr.strip()}") from e

    def create_link(self, target_path: str, link_path: str) -> None:
        os.symlink(target_path, link_path)
