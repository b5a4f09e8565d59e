"""Configuration module - pydantic models and application home helpers."""

from .DesktopConfig import DesktopConfig
from .LogConfig import LogConfig
from .detect_os import detect_os
from .get_config_path import get_config_path
from .get_home_dir import get_home_dir

__all__ = [
    "DesktopConfig",
    "LogConfig",
    "detect_os",
    "get_config_path",
    "get_home_dir",
]
