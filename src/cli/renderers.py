"""Rich renderers for CLI outputs."""

from __future__ import annotations

from typing import Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from src.cli.io import console
from src.core.strength import PasswordStrength
from src.services.password_field import MINLENGTH_MESSAGE, REQUIRED_MESSAGE

METER_SEGMENTS = 3

# strength -> (filled segments, colour)
_METER_STYLES: dict[str, tuple[int, str]] = {
    PasswordStrength.EMPTY.value: (0, "grey50"),
    PasswordStrength.EASY.value: (1, "red"),
    PasswordStrength.MEDIUM.value: (2, "yellow"),
    PasswordStrength.STRONG.value: (3, "green"),
}


def build_meter(strength: str) -> Text:
    """Return the three-segment strength bar for ``strength``."""

    filled, colour = _METER_STYLES.get(strength, (0, "grey50"))
    meter = Text()
    for idx in range(METER_SEGMENTS):
        if idx:
            meter.append(" ")
        style = colour if idx < filled else "grey23"
        meter.append("■■■■", style=style)
    return meter


def error_messages(errors: dict[str, Any]) -> list[str]:
    """Translate validator errors into display messages."""

    messages: list[str] = []
    if errors.get("required"):
        messages.append(REQUIRED_MESSAGE)
    minlength = errors.get("minlength")
    if isinstance(minlength, dict):
        messages.append(
            MINLENGTH_MESSAGE.format(required_length=minlength.get("required_length"))
        )
    return messages


def render_strength_output(result: dict[str, Any], *, title: str = "Password Strength") -> None:
    """Display the meter, verdict and validation messages for one evaluation."""

    strength = str(result.get("strength") or PasswordStrength.EMPTY.value)
    _, colour = _METER_STYLES.get(strength, (0, "grey50"))

    body = Text()
    body.append_text(build_meter(strength))
    body.append("\n")
    body.append("Strength: ", style="bold")
    body.append(strength, style=colour)
    if result.get("trimmed"):
        body.append("\nTrailing space removed.", style="dim")
    for message in error_messages(result.get("errors") or {}):
        body.append(f"\n{message}", style="red")

    console.print(Panel(body, title=title))


def render_batch_output(results: list[dict[str, Any]], summary: dict[str, int]) -> None:
    """Render a table of batch verdicts followed by per-strength counts."""

    if not results:
        console.print(Panel("No passwords to evaluate.", title="Batch"))
        return

    table = Table(title="Password Strength")
    table.add_column("#", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Meter")
    table.add_column("Strength")
    table.add_column("Validation")

    for idx, result in enumerate(results, start=1):
        strength = str(result.get("strength"))
        _, colour = _METER_STYLES.get(strength, (0, "grey50"))
        messages = error_messages(result.get("errors") or {})
        table.add_row(
            str(idx),
            str(len(result.get("value") or "")),
            build_meter(strength),
            Text(strength, style=colour),
            "; ".join(messages) or "ok",
        )

    console.print(table)
    counts = ", ".join(f"{name}: {count}" for name, count in summary.items())
    console.print(Panel(counts, title="Summary"))


__all__ = [
    "build_meter",
    "error_messages",
    "render_batch_output",
    "render_strength_output",
]
