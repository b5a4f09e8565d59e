"""API module for desktop-actions.

Subpackages:
    config: pydantic configuration models and home-directory helpers
    desktop: the DesktopActions facade, its error family and platform backends
    types: value objects shared across the API
"""

__all__ = []
