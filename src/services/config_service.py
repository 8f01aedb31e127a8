"""Configuration service for the password strength meter.

Updates:
    v0.1.0 - 2026-10-19 - Exposes app, logging and password field settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.config_loader import ConfigLoader


@dataclass(slots=True, frozen=True)
class FieldSettings:
    """Validation and normalization options for the password field."""

    min_length: int = 8
    required: bool = True
    trim_trailing_space: bool = True


class ConfigService:
    """Loads and exposes configuration for meter components."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize configuration caches.

        Args:
            config_path (Path | None): Optional override for the configuration directory.
        """

        self._loader = ConfigLoader(base_path=config_path)
        self._settings = self._loader.load("settings")

    @property
    def config_path(self) -> Path:
        return self._loader.base_path

    @property
    def app_metadata(self) -> dict[str, Any]:
        """Return general application metadata."""
        app_section = self._settings.get("app", {})
        return dict(app_section) if isinstance(app_section, dict) else {}

    @property
    def logging_config(self) -> dict[str, Any]:
        """Return logging configuration settings."""
        logging_section = self._settings.get("logging", {})
        return dict(logging_section) if isinstance(logging_section, dict) else {}

    @property
    def field_settings(self) -> FieldSettings:
        """Return password field settings, falling back to defaults.

        Raises:
            ValueError: If `min_length` is not a non-negative integer.
        """

        section = self._settings.get("field", {})
        if not isinstance(section, dict):
            return FieldSettings()
        defaults = FieldSettings()

        min_length = section.get("min_length", defaults.min_length)
        # bool is an int subclass; reject it explicitly
        if isinstance(min_length, bool) or not isinstance(min_length, int):
            raise ValueError(f"field.min_length must be an integer, got {min_length!r}")
        if min_length < 0:
            raise ValueError("field.min_length must not be negative.")

        return FieldSettings(
            min_length=min_length,
            required=bool(section.get("required", defaults.required)),
            trim_trailing_space=bool(
                section.get("trim_trailing_space", defaults.trim_trailing_space)
            ),
        )

    @staticmethod
    def clear_cache() -> None:
        """Clear cached configuration to reflect file updates."""

        ConfigLoader.load.cache_clear()
