from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

import src.cli as cli
from src.cli import runtime as runtime_module
from src.services.config_service import FieldSettings


@pytest.fixture(autouse=True)
def reset_runtime(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(runtime_module, "_RUNTIME_CACHE", None)


def test_initialize_runtime_bootstraps_workflows(
    monkeypatch: pytest.MonkeyPatch, config_dir: Path
) -> None:
    logging_configs: list[dict[str, Any]] = []
    monkeypatch.setattr(cli, "configure_logging", logging_configs.append)

    runtime = cli.initialize_runtime()

    assert logging_configs == [{"level": "WARNING"}]
    assert runtime.field_settings == FieldSettings()
    assert runtime.orchestrator.names() == [
        "config_summary",
        "evaluate_batch",
        "evaluate_password",
    ]
    result = runtime.orchestrator.execute("evaluate_password", {"password": "abc123!@#"})
    assert result["strength"] == "strong"


def test_initialize_runtime_applies_field_settings(
    monkeypatch: pytest.MonkeyPatch, config_dir: Path
) -> None:
    (config_dir / "settings.yaml").write_text(
        "field: {min_length: 3, trim_trailing_space: false}\n", encoding="utf-8"
    )
    monkeypatch.setattr(cli, "configure_logging", lambda config: None)

    runtime = cli.initialize_runtime()
    field = runtime.create_field()

    state = field.set_value("abc ")
    assert state.value == "abc "
    assert state.valid


def test_get_runtime_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    created: list[object] = []

    def _fake_initialize() -> object:
        marker = object()
        created.append(marker)
        return marker

    monkeypatch.setattr(runtime_module, "initialize_runtime", _fake_initialize)

    first = runtime_module.get_runtime()
    second = runtime_module.get_runtime()

    assert first is second
    assert len(created) == 1


def test_set_runtime_replaces_cache() -> None:
    runtime = cli.Runtime(orchestrator=cli.Orchestrator(), field_settings=FieldSettings())

    cli.set_runtime(runtime)

    assert runtime_module.get_runtime() is runtime
    assert runtime_module.get_orchestrator() is runtime.orchestrator


def test_resolve_config_path_prefers_environment(config_dir: Path) -> None:
    assert cli.resolve_config_path() is None


def test_resolve_config_path_falls_back_to_bundled(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("PSM_CONFIG_PATH", raising=False)
    monkeypatch.chdir(tmp_path)

    assert cli.resolve_config_path() == cli.PROJECT_ROOT / "config"
