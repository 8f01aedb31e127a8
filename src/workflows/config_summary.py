"""Config summary workflow definitions.

Updates:
    v0.1.0 - 2026-10-19 - Report app, logging and field settings.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path

from ..services.config_service import ConfigService


@dataclass
class ConfigSummaryWorkflow:
    name: str = "config_summary"
    config_path: Path | None = None

    def run(self, context: dict) -> dict:
        """Return configuration details suitable for CLI rendering.

        Args:
            context (dict): Unused, maintained for workflow interface compatibility.

        Returns:
            dict: Aggregated configuration data to display.
        """

        service = ConfigService(config_path=self.config_path)
        return {
            "app": service.app_metadata,
            "logging": service.logging_config,
            "field": asdict(service.field_settings),
        }
