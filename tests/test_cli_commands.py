from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

import src.cli as cli
from src.cli.commands import core as core_commands
from src.services.config_service import FieldSettings
from tests.helpers.cli import RecordingOrchestrator, make_cli_runtime, patch_runtime


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def recording(monkeypatch: pytest.MonkeyPatch, config_dir: Path) -> RecordingOrchestrator:
    runtime, orchestrator = make_cli_runtime(config_path=config_dir)
    patch_runtime(monkeypatch, runtime)
    return orchestrator


def test_check_renders_meter(runner: CliRunner, recording: RecordingOrchestrator) -> None:
    result = runner.invoke(cli.app, ["check", "a1!"])

    assert result.exit_code == 0, result.output
    assert "Strength: strong" in result.output
    assert "Password must be at least 8 characters long." in result.output
    assert recording.calls == [
        ("evaluate_password", {"password": "a1!", "keystrokes": False})
    ]


def test_check_json_output(runner: CliRunner, recording: RecordingOrchestrator) -> None:
    result = runner.invoke(cli.app, ["check", "--json", "abc123 "])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["value"] == "abc123"
    assert payload["strength"] == "medium"
    assert payload["trimmed"] is True
    assert payload["errors"]["minlength"]["actual_length"] == 6


def test_check_keystrokes_flag(runner: CliRunner, recording: RecordingOrchestrator) -> None:
    result = runner.invoke(cli.app, ["check", "--json", "--keystrokes", "ab  "])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["value"] == "ab"
    assert recording.calls[0][1]["keystrokes"] is True


def test_check_rejects_invalid_log_level(
    runner: CliRunner, recording: RecordingOrchestrator
) -> None:
    result = runner.invoke(cli.app, ["check", "abc", "--log-level", "LOUD"])

    assert result.exit_code == 2
    assert recording.calls == []


def test_batch_json_output(
    runner: CliRunner, recording: RecordingOrchestrator, tmp_path: Path
) -> None:
    source = tmp_path / "passwords.txt"
    source.write_text("abc\n123\nabc123\nabc123!@#\n\n", encoding="utf-8")

    result = runner.invoke(cli.app, ["batch", str(source), "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["summary"] == {"easy": 2, "medium": 1, "strong": 1, "empty": 1}


def test_batch_renders_summary(
    runner: CliRunner, recording: RecordingOrchestrator, tmp_path: Path
) -> None:
    source = tmp_path / "passwords.txt"
    source.write_text("abc\nabc123!@#xyz\n", encoding="utf-8")

    result = runner.invoke(cli.app, ["batch", str(source)])

    assert result.exit_code == 0, result.output
    assert "Summary" in result.output
    assert "easy: 1, medium: 0, strong: 1, empty: 0" in result.output
    assert "abc123!@#xyz" not in result.output


def test_batch_missing_file_exits_with_error(
    runner: CliRunner, recording: RecordingOrchestrator, tmp_path: Path
) -> None:
    result = runner.invoke(cli.app, ["batch", str(tmp_path / "missing.txt")])

    assert result.exit_code == 1
    assert "Batch failed" in result.output
    assert recording.calls == []


def test_interactive_updates_on_each_entry(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch, recording: RecordingOrchestrator
) -> None:
    rendered: list[dict[str, Any]] = []
    monkeypatch.setattr(core_commands, "render_strength_output", rendered.append)

    result = runner.invoke(cli.app, ["interactive"], input="abc\nabc1\nabc1!\n:q\n")

    assert result.exit_code == 0, result.output
    assert [item["strength"] for item in rendered] == ["easy", "medium", "strong"]


def test_interactive_empty_entry_on_empty_field_quits(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch, recording: RecordingOrchestrator
) -> None:
    rendered: list[dict[str, Any]] = []
    monkeypatch.setattr(core_commands, "render_strength_output", rendered.append)

    result = runner.invoke(cli.app, ["interactive"], input="abc\n\n\n")

    assert result.exit_code == 0, result.output
    assert [item["value"] for item in rendered] == ["abc", ""]


def test_interactive_stops_at_end_of_input(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch, recording: RecordingOrchestrator
) -> None:
    monkeypatch.setattr(core_commands, "render_strength_output", lambda result: None)

    result = runner.invoke(cli.app, ["interactive"], input="abc\n")

    assert result.exit_code == 0, result.output


def test_interactive_uses_configured_field(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    runtime, _ = make_cli_runtime(FieldSettings(min_length=2))
    patch_runtime(monkeypatch, runtime)
    rendered: list[dict[str, Any]] = []
    monkeypatch.setattr(core_commands, "render_strength_output", rendered.append)

    result = runner.invoke(cli.app, ["interactive"], input="abc\n:q\n")

    assert result.exit_code == 0, result.output
    assert rendered[0]["valid"] is True


def test_settings_prints_configuration(
    runner: CliRunner, recording: RecordingOrchestrator
) -> None:
    result = runner.invoke(cli.app, ["settings"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["field"]["min_length"] == 8
    assert payload["app"]["name"] == "Password Strength Meter"
