"""Utility helpers shared across CLI command modules."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

logger = logging.getLogger(__name__)


def _cli():
    return sys.modules["src.cli"]


def apply_log_override(log_level: Optional[str]) -> None:
    """Override logging level for the current invocation."""

    if not log_level or not isinstance(log_level, str):
        return
    try:
        _cli().set_runtime_level(log_level)
        logger.info("Log level overridden to %s", log_level.upper())
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def read_passwords(path: Path) -> list[str]:
    """Read one password per line, keeping everything but the line ending.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """

    if not path.is_file():
        raise FileNotFoundError(f"Password file not found: {path}")
    text = path.read_text(encoding="utf-8")
    return text.splitlines()


__all__ = ["apply_log_override", "read_passwords"]
