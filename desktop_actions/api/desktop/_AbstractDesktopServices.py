"""Abstract desktop-services capability (browse, open, trash)."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..types.URI import URI
from .DesktopAction import DesktopAction


class _AbstractDesktopServices(ABC):
    """Capability the facade probes before delegating.

    Probing (``is_supported``/``is_action_supported``) and invocation are
    separate calls, so a failure before invocation is distinguishable from a
    failure during it.
    """

    @abstractmethod
    def is_supported(self) -> bool:
        """Whether any desktop services are available on this host."""
        pass

    @abstractmethod
    def is_action_supported(self, action: DesktopAction) -> bool:
        """Whether the given action is available on this host."""
        pass

    @abstractmethod
    def browse(self, uri: URI) -> None:
        """Open the URI in the default browser. Raises on failure."""
        pass

    @abstractmethod
    def open(self, directory: Path) -> None:
        """Open the directory in the file manager. Raises on failure."""
        pass

    @abstractmethod
    def move_to_trash(self, file: Path) -> bool:
        """Move the file to the trash.

        Returns:
            False if the platform reports the file was not moved
        """
        pass
