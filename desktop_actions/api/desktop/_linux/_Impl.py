"""Linux backend - xdg-open for directories, freedesktop .desktop entries for shortcuts."""

import os
import shutil
import subprocess
from pathlib import Path

from .._AbstractImpl import _AbstractImpl

# Characters that must be backslash-escaped inside a quoted Exec argument
_EXEC_RESERVED = ('"', "`", "$", "\\")


def _quote_exec_arg(arg: str) -> str:
    escaped = "".join(f"\\{c}" if c in _EXEC_RESERVED else c for c in arg)
    # The key file format itself treats backslash as an escape, so double it again.
    # A literal percent sign would otherwise start a field code such as %U.
    return '"' + escaped.replace("\\", "\\\\").replace("%", "%%") + '"'


class _Impl(_AbstractImpl):
    """Freedesktop (Linux/BSD) backend."""

    SHORTCUT_EXTENSION = ".desktop"

    @staticmethod
    def _create_entry_content(target_path: str, name: str) -> str:
        """Create desktop entry content: Application for executables, Link otherwise."""
        target = Path(target_path).expanduser()
        if target.is_file() and os.access(target, os.X_OK):
            body = f"Type=Application\nExec={_quote_exec_arg(str(target.absolute()))}\n"
        else:
            body = f"Type=Link\nURL={target.absolute().as_uri()}\n"
        return f"[Desktop Entry]\nVersion=1.0\nName={name}\n{body}"

    def has_desktop(self) -> bool:
        return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))

    def can_open(self) -> bool:
        return shutil.which("xdg-open") is not None

    def open_path(self, path: Path) -> None:
        try:
            subprocess.run(["xdg-open", str(path)], check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else f"exit status {e.returncode}"
            raise RuntimeError(f"xdg-open failed: {error_msg}") from e

    def create_link(self, target_path: str, link_path: str) -> None:
        link = Path(link_path)
        name = link.name.removesuffix(self.SHORTCUT_EXTENSION) or link.name
        link.write_text(self._create_entry_content(target_path, name), encoding="utf-8")
        # File managers only launch entries marked executable
        link.chmod(0o755)
