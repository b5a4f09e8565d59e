import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the desktop_actions hierarchy."""
    return logging.getLogger(f"desktop_actions.{name}")
