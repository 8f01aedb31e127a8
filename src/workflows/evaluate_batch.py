"""Evaluate batch workflow.

Updates:
    v0.1.0 - 2026-10-19 - Evaluate several passwords and tally verdicts.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Callable

from ..core.strength import PasswordStrength
from ..services.password_field import PasswordField


@dataclass
class EvaluateBatchWorkflow:
    field_factory: Callable[[], PasswordField] = field(default=PasswordField)
    name: str = "evaluate_batch"

    def run(self, context: dict) -> dict:
        """Evaluate each password in `passwords` with a fresh field.

        Raises:
            ValueError: If `passwords` is missing or not a list.
        """

        passwords = context.get("passwords")
        if not isinstance(passwords, list):
            raise ValueError("Context missing 'passwords' list.")

        results = []
        for password in passwords:
            password_field = self.field_factory()
            results.append(password_field.set_value(str(password)).as_dict())

        counts = Counter(result["strength"] for result in results)
        summary = {strength.value: counts.get(strength.value, 0) for strength in PasswordStrength}
        return {"results": results, "summary": summary}
