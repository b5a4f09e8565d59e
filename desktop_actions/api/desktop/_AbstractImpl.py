"""Abstract base class for platform backends (file manager, shortcut writer)."""

from abc import ABC, abstractmethod
from pathlib import Path, PurePath, PurePosixPath

from ...constants import DEFAULT_DESKTOP_DIRNAME


class _AbstractImpl(ABC):
    """Abstract base class for platform-specific desktop backends.

    A backend knows how its platform opens a directory, whether it can reveal
    and select a single file, and how it writes a shortcut file.
    """

    SHORTCUT_EXTENSION: str = ""
    DESKTOP_DIRNAME: str = DEFAULT_DESKTOP_DIRNAME
    # Path flavour used to split caller-supplied target paths
    PURE_PATH: type[PurePath] = PurePosixPath

    @abstractmethod
    def has_desktop(self) -> bool:
        """Whether a graphical desktop session is available."""
        pass

    @abstractmethod
    def can_open(self) -> bool:
        """Whether the platform file opener is available."""
        pass

    @abstractmethod
    def open_path(self, path: Path) -> None:
        """Open a path with the platform file manager.

        Raises:
            OSError or RuntimeError: If the opener fails
        """
        pass

    @abstractmethod
    def create_link(self, target_path: str, link_path: str) -> None:
        """Write a shortcut at link_path pointing at target_path.

        Raises:
            Exception: Whatever the underlying writer raises on failure
        """
        pass

    def reveal_command(self, path: Path) -> list[str] | None:
        """Command that opens the file manager with path selected.

        Returns:
            The command, or None when the platform has no reveal-and-select
            primitive and callers should open the parent directory instead
        """
        return None

    def shortcut_name(self, target_path: str) -> str:
        """Base name of target_path without its last extension, plus SHORTCUT_EXTENSION."""
        name = self.PURE_PATH(target_path).name
        stem = name.rpartition(".")[0] or name
        return f"{stem}{self.SHORTCUT_EXTENSION}"
