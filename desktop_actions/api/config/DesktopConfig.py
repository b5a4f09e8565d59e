"""Top-level desktop-actions configuration with Pydantic validation."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...constants import DEFAULT_DESKTOP_DIRNAME
from .detect_os import _BACKEND_REGISTRY, detect_os
from .LogConfig import LogConfig
from .get_config_path import get_config_path


class DesktopConfig(BaseModel):
    """Configuration values the facade reads at call time."""

    model_config = ConfigDict(extra="forbid")

    type: str = Field(default_factory=detect_os, description="Platform backend type")
    home_dir: Path | None = Field(None, description="User home for shortcut placement (None: current user home)")
    desktop_dirname: str | None = Field(None, description="Desktop folder name under the user home")
    log: LogConfig = Field(default_factory=LogConfig)

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        if v not in _BACKEND_REGISTRY:
            raise ValueError(f"Unknown desktop backend type: {v!r} (supported: {list(_BACKEND_REGISTRY)})")
        return v

    @field_validator("home_dir")
    @classmethod
    def _normalize_home_dir(cls, v: Path | None) -> Path | None:
        from ...utils.normalize_path import normalize_path

        return normalize_path(v)

    @field_validator("desktop_dirname")
    @classmethod
    def validate_desktop_dirname(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("desktop_dirname cannot be blank")
        return v

    def resolve_user_home(self) -> Path:
        """Return the configured user home, or the current user's home read now."""
        return self.home_dir if self.home_dir is not None else Path.home()

    def resolve_desktop_dir(self, default_dirname: str = DEFAULT_DESKTOP_DIRNAME) -> Path:
        """Return the desktop folder, re-reading the user home on every call."""
        return self.resolve_user_home() / (self.desktop_dirname or default_dirname)

    @classmethod
    def load(cls, path: Path | None = None) -> "DesktopConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = path or get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must hold a JSON object, got {type(raw).__name__}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def configure_logging(self, home: Path | None = None) -> logging.Logger:
        """Apply the log section through utils.configure_logging."""
        from ...utils.configure_logging import configure_logging

        return configure_logging(home=home, level=self.log.level, to_file=self.log.file)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return self.model_dump(mode="json")
