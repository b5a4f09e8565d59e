"""Detect the host operating system and map it to a desktop backend."""

import platform

# Registry: add new backends here (ONLY place backend types are enumerated).
# Each name matches a desktop_actions.api.desktop._<name> package.
_BACKEND_REGISTRY: tuple[str, ...] = ("windows", "linux", "darwin")

# Unix-likes served by the freedesktop (xdg-open) backend
_XDG_SYSTEMS = ("linux", "freebsd", "openbsd", "netbsd", "dragonfly", "sunos")


def detect_os() -> str:
    """Detect the current operating system.

    Returns:
        Backend type: "windows", "darwin", or "linux" (any freedesktop Unix)

    Raises:
        RuntimeError: If the OS has no desktop backend
    """
    system = platform.system().lower()
    if system in ("windows", "darwin"):
        return system
    if system in _XDG_SYSTEMS:
        return "linux"
    raise RuntimeError(f"Unsupported operating system: {system}")
