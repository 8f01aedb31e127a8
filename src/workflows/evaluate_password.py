"""Evaluate password workflow.

Updates:
    v0.1.0 - 2026-10-19 - Single password evaluation through the field model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from ..services.password_field import PasswordField


@dataclass
class EvaluatePasswordWorkflow:
    field_factory: Callable[[], PasswordField] = field(default=PasswordField)
    name: str = "evaluate_password"

    def run(self, context: dict) -> dict:
        """Run the evaluate password workflow.

        Args:
            context (dict): Context payload containing `password` and an
                optional `keystrokes` flag.

        Returns:
            dict: Field state payload with value, strength, signals and errors.

        Raises:
            ValueError: If the password is missing from context.
        """

        if "password" not in context:
            raise ValueError("Context missing 'password'.")
        password = context.get("password") or ""
        password_field = self.field_factory()
        if context.get("keystrokes"):
            state = password_field.type_text(password)
        else:
            state = password_field.set_value(password)
        password_field.close()
        return state.as_dict()
