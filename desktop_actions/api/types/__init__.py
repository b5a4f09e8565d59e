"""Value objects shared across the desktop-actions API."""

from .URI import URI

__all__ = ["URI"]
