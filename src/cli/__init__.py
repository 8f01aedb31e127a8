"""Password strength meter CLI package."""

from __future__ import annotations

import logging

import typer

from src.cli.commands.core import QUIT_COMMAND, batch, check, interactive, settings
from src.cli.io import console
from src.cli.renderers import (
    build_meter,
    error_messages,
    render_batch_output,
    render_strength_output,
)
from src.cli.runtime import (
    PROJECT_ROOT,
    Runtime,
    create_field,
    field_factory,
    get_orchestrator,
    get_runtime,
    initialize_runtime,
    resolve_config_path,
    set_runtime,
    set_runtime_level,
)
from src.cli.utils import apply_log_override, read_passwords
from src.core.logging_setup import configure_logging
from src.core.orchestrator import Orchestrator
from src.services.config_service import ConfigService
from src.workflows.config_summary import ConfigSummaryWorkflow
from src.workflows.evaluate_batch import EvaluateBatchWorkflow
from src.workflows.evaluate_password import EvaluatePasswordWorkflow

logger = logging.getLogger(__name__)

# Typer application ----------------------------------------------------------

app = typer.Typer(
    add_completion=False,
    help="Classify password strength by the character classes it contains.",
)

app.command()(check)
app.command()(batch)
app.command()(interactive)
app.command()(settings)


def main() -> None:
    """CLI entry point."""

    app()


__all__: list[str] = [
    # Typer app / entrypoint
    "app",
    "main",
    # Console & logging
    "console",
    "logger",
    # Runtime
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
    # Commands
    "QUIT_COMMAND",
    "batch",
    "check",
    "interactive",
    "settings",
    # Renderers
    "build_meter",
    "error_messages",
    "render_batch_output",
    "render_strength_output",
    # Utilities
    "apply_log_override",
    "read_passwords",
    # External classes re-exported for tests/compatibility
    "ConfigService",
    "ConfigSummaryWorkflow",
    "EvaluateBatchWorkflow",
    "EvaluatePasswordWorkflow",
    "Orchestrator",
    "configure_logging",
]
