"""Unit test fixtures.

Fakes for the desktop-services capability, the platform backend and the
process spawner, so no unit test opens a browser, file manager or process.
"""

from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath

import pytest

from desktop_actions.api.desktop._AbstractDesktopServices import _AbstractDesktopServices
from desktop_actions.api.desktop._AbstractImpl import _AbstractImpl
from desktop_actions.api.desktop.DesktopAction import DesktopAction
from desktop_actions.api.desktop.DesktopActions import DesktopActions


class FakeDesktopServices(_AbstractDesktopServices):
    """Records every call; support flags and failures are set per test."""

    def __init__(self):
        self.supported = True
        self.actions = set(DesktopAction)
        self.raise_on: dict[str, Exception] = {}
        self.trash_result = True
        self.calls: list[tuple] = []

    def is_supported(self) -> bool:
        self.calls.append(("is_supported",))
        return self.supported

    def is_action_supported(self, action: DesktopAction) -> bool:
        self.calls.append(("is_action_supported", action))
        return action in self.actions

    def _invoke(self, name: str, arg):
        self.calls.append((name, arg))
        if name in self.raise_on:
            raise self.raise_on[name]

    def browse(self, uri) -> None:
        self._invoke("browse", uri)

    def open(self, directory: Path) -> None:
        self._invoke("open", directory)

    def move_to_trash(self, file: Path) -> bool:
        self._invoke("move_to_trash", file)
        return self.trash_result

    def invoked(self) -> list[str]:
        """Names of delegated (non-probe) calls."""
        return [c[0] for c in self.calls if c[0] not in ("is_supported", "is_action_supported")]


class FakeImpl(_AbstractImpl):
    """Platform backend double; reveals like Windows when reveal=True."""

    def __init__(
        self,
        extension: str = ".lnk",
        pure_path: type[PurePath] = PurePosixPath,
        reveal: bool = False,
    ):
        self.SHORTCUT_EXTENSION = extension
        self.PURE_PATH = pure_path
        self.reveal = reveal
        self.links: list[tuple[str, str]] = []
        self.link_error: Exception | None = None

    def has_desktop(self) -> bool:
        return True

    def can_open(self) -> bool:
        return True

    def open_path(self, path: Path) -> None:
        raise AssertionError("FakeImpl.open_path is reached only through desktop services")

    def reveal_command(self, path: Path) -> list[str] | None:
        if not self.reveal:
            return None
        return ["explorer", "/select,", str(path.absolute())]

    def create_link(self, target_path: str, link_path: str) -> None:
        self.links.append((target_path, link_path))
        if self.link_error is not None:
            raise self.link_error


class RecordingSpawner:
    """Process spawner double."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.commands: list[list[str]] = []

    def __call__(self, args: list[str]):
        self.commands.append(args)
        if self.error is not None:
            raise self.error
        return object()


@pytest.fixture
def services() -> FakeDesktopServices:
    return FakeDesktopServices()


@pytest.fixture
def impl() -> FakeImpl:
    return FakeImpl(pure_path=PureWindowsPath)


@pytest.fixture
def spawner() -> RecordingSpawner:
    return RecordingSpawner()


@pytest.fixture
def actions(desktop_config, services, impl, spawner) -> DesktopActions:
    """Facade wired entirely to fakes."""
    return DesktopActions(config=desktop_config, services=services, impl=impl, spawn=spawner)
