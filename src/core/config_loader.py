"""Configuration loader utilities.

Updates:
    v0.1.0 - 2026-10-19 - YAML loader for password meter settings.
"""

from __future__ import annotations

import functools
import os
from pathlib import Path
from typing import Any, Dict

import yaml

CONFIG_ENV_VAR = "PSM_CONFIG_PATH"


class ConfigLoader:
    """Loads YAML configuration files from the project's config directory."""

    def __init__(self, base_path: Path | None = None) -> None:
        """Configure the loader with the base directory location.

        Args:
            base_path (Path | None): Custom configuration directory if provided.

        Raises:
            FileNotFoundError: If the resolved configuration path does not exist.
        """

        self._base_path = (
            base_path or Path(os.environ.get(CONFIG_ENV_VAR, "config"))
        ).resolve()
        if not self._base_path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {self._base_path}")

    @property
    def base_path(self) -> Path:
        return self._base_path

    def _resolve(self, name: str) -> Path:
        candidate = self._base_path / name
        if candidate.suffix not in {".yaml", ".yml"}:
            candidate = candidate.with_suffix(".yaml")
        if not candidate.exists():
            raise FileNotFoundError(f"Config file not found: {candidate}")
        return candidate

    @functools.lru_cache(maxsize=None)
    def load(self, name: str) -> Dict[str, Any]:
        """Load and cache a configuration file as a dictionary.

        Args:
            name (str): Logical configuration name (with or without `.yaml`).

        Returns:
            dict[str, Any]: Parsed YAML content, empty when the file is blank.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the document is not a mapping.
        """

        path = self._resolve(name)
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return data

    def __hash__(self) -> int:
        return hash(self._base_path)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ConfigLoader) and other._base_path == self._base_path


def load_config(name: str, base_path: Path | None = None) -> Dict[str, Any]:
    """Load a configuration file without explicitly creating a loader."""

    loader = ConfigLoader(base_path=base_path)
    return loader.load(name)
