import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILENAME

# Prevent multiple configurations
_CONFIGURED = False

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(home: Path | None = None, level: str = "INFO", to_file: bool = False) -> logging.Logger:
    """Configure the desktop_actions logger hierarchy.

    The library never calls this itself; applications embedding it opt in.

    Args:
        home: Application home directory for the log file. If None, derived from environment.
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        to_file: Also write to a rotating log file under ``home``

    Returns:
        The configured ``desktop_actions`` logger
    """
    global _CONFIGURED
    root_logger = logging.getLogger("desktop_actions")
    if _CONFIGURED:
        return root_logger

    root_logger.setLevel(getattr(logging, level.upper()))
    formatter = logging.Formatter(_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if to_file:
        if home is None:
            from ..api.config.get_home_dir import get_home_dir

            home = get_home_dir()
        home.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            home / LOG_FILENAME,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _CONFIGURED = True
    return root_logger
