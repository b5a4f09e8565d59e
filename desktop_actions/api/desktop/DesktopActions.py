"""DesktopActions public API - opens URLs, executables, folders, trash and shortcuts."""

import logging
import os
import subprocess
from collections.abc import Callable
from pathlib import Path
from typing import Any

from ...utils.normalize_path import normalize_path
from ..config.DesktopConfig import DesktopConfig
from ..config.detect_os import _BACKEND_REGISTRY
from ..types.URI import URI
from ._AbstractDesktopServices import _AbstractDesktopServices
from ._AbstractImpl import _AbstractImpl
from ._SystemDesktopServices import _SystemDesktopServices
from .DesktopAction import DesktopAction
from .DesktopActionError import (
    BrowseFailedError,
    InvalidArgumentError,
    InvalidUrlError,
    MissingFileError,
    NotDirectoryError,
    OperationFailedError,
    ProcessStartError,
    ShortcutCreationError,
    UnsupportedOperationError,
)
from .ErrorMessage import ErrorMessage

logger = logging.getLogger(__name__)

Spawner = Callable[[list[str]], Any]


def _spawn_detached(args: list[str]) -> subprocess.Popen:
    """Start args as a child process that outlives the call."""
    return subprocess.Popen(
        args,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _as_str(value: Any) -> Any:
    """Turn a FileRef into its path string; anything else passes through."""
    return os.fspath(value) if isinstance(value, os.PathLike) else value


class DesktopActions:
    """Public API for desktop actions.

    Every operation validates its arguments, probes the desktop-services
    capability where it needs one, delegates to the platform, and raises a
    DesktopActionError subclass on failure. Nothing is retried or cached:
    files are re-checked and the user home is re-read on every call.

    Example:
        >>> actions = DesktopActions()
        >>> if actions.is_desktop_supported():
        ...     actions.browse("https://www.example.com")
    """

    def __init__(
        self,
        config: DesktopConfig | None = None,
        services: _AbstractDesktopServices | None = None,
        impl: _AbstractImpl | None = None,
        spawn: Spawner | None = None,
    ):
        """Initialize the facade.

        Args:
            config: Configuration values. If None, uses DesktopConfig defaults.
            services: Desktop-services capability. If None, uses the host platform's.
            impl: Platform backend. If None, loaded from config.type.
            spawn: Process spawner taking an argument list. If None, uses subprocess.Popen.
        """
        self.config = config if config is not None else DesktopConfig()
        self._impl = impl if impl is not None else self.load_impl(self.config.type)
        self._services = services if services is not None else _SystemDesktopServices(self._impl)
        self._spawn = spawn if spawn is not None else _spawn_detached

    @staticmethod
    def load_impl(backend_type: str) -> _AbstractImpl:
        """Instantiate the platform backend registered under backend_type.

        Raises:
            ValueError: If backend_type is not a registered backend
        """
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY)})")

        # Import implementation class directly from backend _Impl module
        module = __import__(f"desktop_actions.api.desktop._{backend_type}._Impl", fromlist=[""])
        return module._Impl()

    @staticmethod
    def _resolve_file(path: str | os.PathLike | None) -> Path:
        """Turn a path string or FileRef into an existing Path."""
        if isinstance(path, os.PathLike):
            file = normalize_path(Path(path))
        else:
            if _is_blank(path):
                raise InvalidArgumentError(ErrorMessage.FILE_PATH_IS_NULL)
            file = normalize_path(path)

        if not file.exists():
            raise MissingFileError(ErrorMessage.FILE_IS_NULL, f" ({file})")
        return file

    def _require(self, action: DesktopAction) -> None:
        """Probe desktop services for action before anything is invoked."""
        if not self._services.is_supported():
            raise UnsupportedOperationError(ErrorMessage.NOT_SUPPORTED)
        if not self._services.is_action_supported(action):
            raise UnsupportedOperationError(ErrorMessage.NOT_SUPPORTED, f" ({action.value})")

    def open(self, executable_path: str | os.PathLike) -> None:
        """Start an executable as a new process without waiting for it.

        The string is passed as the command as is; no arguments are parsed
        out of it.

        Raises:
            InvalidArgumentError: If executable_path is None or blank
            ProcessStartError: If the process cannot be started
        """
        executable_path = _as_str(executable_path)
        if _is_blank(executable_path):
            raise InvalidArgumentError(ErrorMessage.EXECUTABLE_PATH_IS_NULL)

        logger.debug(f"Starting process {executable_path}")
        try:
            self._spawn([executable_path])
        except (OSError, ValueError) as e:
            raise ProcessStartError(ErrorMessage.PROCESS_START_FAILED, executable_path) from e

    def browse(self, url: str | URI) -> None:
        """Open a URL in the default web browser.

        A URL string must be absolute with a scheme; schemeless references
        such as "example.com/path" raise InvalidUrlError rather than being
        resolved against anything.

        Raises:
            InvalidArgumentError: If a URL string is None or blank
            InvalidUrlError: If a URL string does not parse
            UnsupportedOperationError: If desktop services or browsing are unavailable
            BrowseFailedError: If the browser call fails
        """
        uri = url if isinstance(url, URI) else self._parse_url(url)

        self._require(DesktopAction.BROWSE)
        try:
            self._services.browse(uri)
        except Exception as e:
            raise BrowseFailedError(ErrorMessage.BROWSE_FAILED) from e

    @staticmethod
    def _parse_url(url: str | None) -> URI:
        if _is_blank(url):
            raise InvalidArgumentError(ErrorMessage.URL_IS_NULL)
        try:
            return URI(url)
        except ValueError as e:
            raise InvalidUrlError(url) from e

    def open_file_location(self, path: str | os.PathLike) -> None:
        """Show a file in the platform file manager.

        Windows opens Explorer with the file selected. Other platforms have no
        reveal-and-select primitive, so the containing folder is opened
        instead, with open_file_directory's errors.

        Raises:
            InvalidArgumentError: If a path string is None or blank
            MissingFileError: If the file does not exist
            OperationFailedError: If the file manager cannot be started
        """
        file = self._resolve_file(path)

        command = self._impl.reveal_command(file)
        if command is None:
            self.open_file_directory(file.parent)
            return

        logger.debug(f"Revealing {file}")
        try:
            self._spawn(command)
        except (OSError, ValueError) as e:
            raise OperationFailedError(ErrorMessage.OPEN_FILE_LOCATION_FAILED, str(file)) from e

    def open_file_directory(self, path: str | os.PathLike) -> None:
        """Open a directory in the platform file manager.

        Raises:
            InvalidArgumentError: If a path string is None or blank
            MissingFileError: If the directory does not exist
            NotDirectoryError: If the path is not a directory
            UnsupportedOperationError: If desktop services or opening are unavailable
            OperationFailedError: If the platform open call fails
        """
        directory = self._resolve_file(path)
        if not directory.is_dir():
            raise NotDirectoryError(ErrorMessage.FILE_IS_NOT_DIRECTORY)

        self._require(DesktopAction.OPEN)
        try:
            self._services.open(directory)
        except Exception as e:
            raise OperationFailedError(ErrorMessage.OPEN_FILE_DIRECTORY_FAILED, str(directory)) from e

    def move_to_trash(self, path: str | os.PathLike) -> None:
        """Move a file or directory to the trash/recycle bin.

        Raises:
            InvalidArgumentError: If a path string is None or blank
            MissingFileError: If the file does not exist
            UnsupportedOperationError: If desktop services or trash are unavailable
            OperationFailedError: If the trash call raises or reports the file was not moved
        """
        file = self._resolve_file(path)

        self._require(DesktopAction.MOVE_TO_TRASH)
        try:
            moved = self._services.move_to_trash(file)
        except Exception as e:
            raise OperationFailedError(ErrorMessage.MOVE_TO_TRASH_FAILED, str(file)) from e

        if not moved:
            raise OperationFailedError(ErrorMessage.MOVE_TO_TRASH_FAILED, str(file))

    def create_shortcut(self, target_path: str | os.PathLike, link_path: str | os.PathLike | None = None) -> None:
        """Create a shortcut file pointing at target_path.

        Args:
            target_path: Path the shortcut points at, passed to the writer as a string
            link_path: Where to write the shortcut. If None, the user's desktop
                (see default_link_path).

        Raises:
            InvalidArgumentError: If target_path, or a supplied link_path, is blank
            ShortcutCreationError: If the shortcut writer fails
        """
        target_path = _as_str(target_path)
        if _is_blank(target_path):
            raise InvalidArgumentError(ErrorMessage.TARGET_PATH_IS_NULL)

        if link_path is None:
            link = self.default_link_path(target_path)
        else:
            link = _as_str(link_path)
            if _is_blank(link):
                raise InvalidArgumentError(ErrorMessage.LINK_PATH_IS_NULL)

        logger.debug(f"Creating shortcut {link} -> {target_path}")
        try:
            self._impl.create_link(target_path, link)
        except Exception as e:
            raise ShortcutCreationError(ErrorMessage.SHORTCUT_CREATION_FAILED) from e

    def default_link_path(self, target_path: str) -> str:
        """Shortcut path on the desktop: <home>/Desktop/<name without last extension><ext>."""
        desktop_dir = self.config.resolve_desktop_dir(self._impl.DESKTOP_DIRNAME)
        return str(desktop_dir / self._impl.shortcut_name(target_path))

    def is_desktop_supported(self) -> bool:
        """Whether desktop services are available. Never raises."""
        try:
            return bool(self._services.is_supported())
        except Exception:
            logger.debug("Desktop support probe failed", exc_info=True)
            return False
