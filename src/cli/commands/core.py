"""Primary CLI commands for the password meter."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import typer

from src.cli.io import console
from src.cli.renderers import render_batch_output, render_strength_output
from src.cli.utils import apply_log_override, read_passwords

logger = logging.getLogger(__name__)

QUIT_COMMAND = ":q"


def _cli() -> Any:
    return sys.modules["src.cli"]


def _log_level_option() -> Any:
    return typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation (e.g., DEBUG, INFO).",
    )


def check(
    password: str = typer.Argument(..., help="Password to evaluate."),
    as_json: bool = typer.Option(False, "--json", help="Emit the raw result as JSON."),
    keystrokes: bool = typer.Option(
        False,
        "--keystrokes",
        "-k",
        help="Replay the password one character at a time, as if typed.",
    ),
    log_level: str | None = _log_level_option(),
) -> None:
    """Classify a single password."""

    apply_log_override(log_level)

    orchestrator = _cli().get_orchestrator()
    try:
        result = orchestrator.execute(
            "evaluate_password", {"password": password, "keystrokes": keystrokes}
        )
    except ValueError as exc:
        console.print(f"[red]Check failed: {exc}[/]")
        raise typer.Exit(code=1) from exc

    logger.info("Password evaluated (strength=%s)", result.get("strength"))
    if as_json:
        console.print_json(data=result)
        return
    render_strength_output(result)


def batch(
    file: Path = typer.Argument(..., help="File with one password per line."),
    as_json: bool = typer.Option(False, "--json", help="Emit the raw result as JSON."),
    log_level: str | None = _log_level_option(),
) -> None:
    """Classify every line of a password file."""

    apply_log_override(log_level)

    try:
        passwords = read_passwords(file)
    except (FileNotFoundError, UnicodeDecodeError) as exc:
        console.print(f"[red]Batch failed: {exc}[/]")
        raise typer.Exit(code=1) from exc

    orchestrator = _cli().get_orchestrator()
    result = orchestrator.execute("evaluate_batch", {"passwords": passwords})
    logger.info("Batch evaluated (count=%s)", len(passwords))
    if as_json:
        console.print_json(data=result)
        return
    render_batch_output(result.get("results") or [], result.get("summary") or {})


def interactive(
    log_level: str | None = _log_level_option(),
) -> None:
    """Edit a password field repeatedly and watch the meter update.

    Each entry replaces the field text. Enter `:q`, or an empty entry while the
    field is already empty, to leave.
    """

    apply_log_override(log_level)

    password_field = _cli().create_field()
    unsubscribe = password_field.subscribe(
        lambda state: render_strength_output(state.as_dict())
    )
    console.print(f"[dim]Type a password; `{QUIT_COMMAND}` quits.[/]")
    try:
        while True:
            entry = typer.prompt("Password", default="", show_default=False)
            if entry == QUIT_COMMAND or (not entry and not password_field.value):
                break
            password_field.set_value(entry)
    except typer.Abort:
        console.print()
    finally:
        unsubscribe()
        password_field.close()


def settings(
    log_level: str | None = _log_level_option(),
) -> None:
    """Display the current configuration payload."""

    apply_log_override(log_level)

    try:
        summary = _cli().get_orchestrator().execute("config_summary", {})
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]Settings failed: {exc}[/]")
        raise typer.Exit(code=1) from exc
    console.print_json(data=summary)


__all__ = ["QUIT_COMMAND", "batch", "check", "interactive", "settings"]
