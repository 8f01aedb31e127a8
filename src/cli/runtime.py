"""Runtime wiring for the password meter CLI."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Any, Callable

from src.core.config_loader import CONFIG_ENV_VAR
from src.core.logging_setup import configure_logging
from src.core.logging_setup import set_runtime_level  # re-exported by src.cli
from src.core.orchestrator import Orchestrator
from src.services.config_service import ConfigService, FieldSettings
from src.services.password_field import PasswordField
from src.workflows.config_summary import ConfigSummaryWorkflow
from src.workflows.evaluate_batch import EvaluateBatchWorkflow
from src.workflows.evaluate_password import EvaluatePasswordWorkflow

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]

_DEFAULT_CONFIG_SERVICE = ConfigService
_DEFAULT_EVALUATE_WORKFLOW = EvaluatePasswordWorkflow
_DEFAULT_BATCH_WORKFLOW = EvaluateBatchWorkflow
_DEFAULT_CONFIG_SUMMARY_WORKFLOW = ConfigSummaryWorkflow


@dataclass(slots=True)
class Runtime:
    """Lazily built services shared by CLI commands."""

    orchestrator: Orchestrator
    field_settings: FieldSettings

    def create_field(self) -> PasswordField:
        return field_factory(self.field_settings)()


_RUNTIME_CACHE: Runtime | None = None


def field_factory(settings: FieldSettings) -> Callable[[], PasswordField]:
    """Return a zero-argument factory building fields from ``settings``."""

    return partial(
        PasswordField,
        min_length=settings.min_length,
        required=settings.required,
        trim_trailing_space=settings.trim_trailing_space,
    )


def resolve_config_path() -> Path | None:
    """Return the config directory, falling back to the bundled one.

    `PSM_CONFIG_PATH` and a `config/` directory in the working directory take
    precedence; ``None`` lets the loader apply its own resolution.
    """

    if os.environ.get(CONFIG_ENV_VAR) or Path("config").is_dir():
        return None
    bundled = PROJECT_ROOT / "config"
    return bundled if bundled.is_dir() else None


def initialize_runtime() -> Runtime:
    """Initialize configuration, logging and workflows for CLI usage."""

    config_path = resolve_config_path()
    config_service_cls = _resolve_dependency("ConfigService", _DEFAULT_CONFIG_SERVICE)
    config_service = config_service_cls(config_path=config_path)
    _resolve_dependency("configure_logging", configure_logging)(
        config_service.logging_config
    )
    logger.debug("Runtime initialization starting.")

    field_settings = config_service.field_settings
    make_field = field_factory(field_settings)

    evaluate_workflow_cls = _resolve_dependency(
        "EvaluatePasswordWorkflow", _DEFAULT_EVALUATE_WORKFLOW
    )
    batch_workflow_cls = _resolve_dependency(
        "EvaluateBatchWorkflow", _DEFAULT_BATCH_WORKFLOW
    )
    config_summary_workflow_cls = _resolve_dependency(
        "ConfigSummaryWorkflow", _DEFAULT_CONFIG_SUMMARY_WORKFLOW
    )
    orchestrator_cls = _resolve_dependency("Orchestrator", Orchestrator)

    orchestrator = orchestrator_cls(
        workflows={
            "evaluate_password": evaluate_workflow_cls(field_factory=make_field),
            "evaluate_batch": batch_workflow_cls(field_factory=make_field),
            "config_summary": config_summary_workflow_cls(config_path=config_path),
        }
    )
    logger.debug("Runtime initialized (min_length=%s).", field_settings.min_length)
    return Runtime(orchestrator=orchestrator, field_settings=field_settings)


def get_runtime() -> Runtime:
    """Return the lazily-initialized runtime."""

    global _RUNTIME_CACHE
    if _RUNTIME_CACHE is None:
        _RUNTIME_CACHE = initialize_runtime()
    return _RUNTIME_CACHE


def set_runtime(runtime: Runtime | None) -> None:
    """Replace the cached runtime; ``None`` forces re-initialization."""

    global _RUNTIME_CACHE
    _RUNTIME_CACHE = runtime


def get_orchestrator() -> Orchestrator:
    """Return the cached orchestrator instance."""

    return _resolve_dependency("get_runtime", get_runtime)().orchestrator


def create_field() -> PasswordField:
    """Build a password field configured from settings."""

    return _resolve_dependency("get_runtime", get_runtime)().create_field()


def _resolve_dependency(name: str, default: Any) -> Any:
    """Return a dependency, preferring overrides on the cli package."""

    from sys import modules

    cli_module = modules.get("src.cli")
    if cli_module is not None and hasattr(cli_module, name):
        return getattr(cli_module, name)
    return default


__all__ = [
    "PROJECT_ROOT",
    "Runtime",
    "create_field",
    "field_factory",
    "get_orchestrator",
    "get_runtime",
    "initialize_runtime",
    "resolve_config_path",
    "set_runtime",
    "set_runtime_level",
]
