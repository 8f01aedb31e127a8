"""Reactive password field model.

Holds the authoritative text of a password input, normalizes every edit,
re-classifies the stored value and recomputes validation errors. Listeners
are notified once per edit with the resulting :class:`FieldState`.

Updates:
    v0.1.0 - 2026-10-19 - Added field model with required/minlength validators.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from ..core.preprocessor import TextPreprocessor, TrailingSpaceNormalizer
from ..core.strength import PasswordStrength, classify, signals_for

logger = logging.getLogger(__name__)

Listener = Callable[["FieldState"], None]

REQUIRED_MESSAGE = "Password is required."
MINLENGTH_MESSAGE = "Password must be at least {required_length} characters long."


@dataclass(slots=True, frozen=True)
class FieldState:
    """Snapshot of the field after an edit."""

    value: str
    strength: PasswordStrength
    errors: dict[str, Any] = field(default_factory=dict)
    trimmed: bool = False

    @property
    def valid(self) -> bool:
        return not self.errors

    def as_dict(self) -> dict[str, Any]:
        return {
            "value": self.value,
            "strength": self.strength.value,
            "signals": signals_for(self.value).as_dict(),
            "errors": dict(self.errors),
            "valid": self.valid,
            "trimmed": self.trimmed,
        }


class PasswordField:
    """In-memory counterpart of a password form control."""

    def __init__(
        self,
        *,
        min_length: int = 8,
        required: bool = True,
        trim_trailing_space: bool = True,
        classifier: Callable[[str], PasswordStrength] = classify,
        normalizer: Optional[TextPreprocessor] = None,
    ) -> None:
        if min_length < 0:
            raise ValueError("min_length must not be negative.")
        self._min_length = min_length
        self._required = required
        self._trim = trim_trailing_space
        self._classifier = classifier
        self._normalizer = normalizer or TrailingSpaceNormalizer()
        self._listeners: list[Listener] = []
        self._state = self._build_state("", trimmed=False)

    @property
    def value(self) -> str:
        return self._state.value

    @property
    def state(self) -> FieldState:
        return self._state

    def set_value(self, raw: str | None) -> FieldState:
        """Apply an edit and notify listeners.

        Args:
            raw (str | None): New raw text of the input; ``None`` means empty.

        Returns:
            FieldState: State computed from the normalized value.
        """

        text = raw or ""
        value = self._normalizer.normalize(text) if self._trim else text
        self._state = self._build_state(value, trimmed=value != text)
        logger.debug(
            "Field updated (length=%s, strength=%s, trimmed=%s)",
            len(value),
            self._state.strength.value,
            self._state.trimmed,
        )
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def type_text(self, text: str) -> FieldState:
        """Replay ``text`` one character at a time onto the current value."""

        state = self._state
        for char in text:
            state = self.set_value(self._state.value + char)
        return state

    def clear(self) -> FieldState:
        return self.set_value("")

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            Callable[[], None]: Function removing the listener again.
        """

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def close(self) -> None:
        """Drop all listeners."""

        self._listeners.clear()

    def _build_state(self, value: str, *, trimmed: bool) -> FieldState:
        return FieldState(
            value=value,
            strength=self._classifier(value),
            errors=self._validate(value),
            trimmed=trimmed,
        )

    def _validate(self, value: str) -> dict[str, Any]:
        errors: dict[str, Any] = {}
        if not value:
            if self._required:
                errors["required"] = True
            return errors
        if len(value) < self._min_length:
            errors["minlength"] = {
                "required_length": self._min_length,
                "actual_length": len(value),
            }
        return errors


__all__ = [
    "FieldState",
    "MINLENGTH_MESSAGE",
    "PasswordField",
    "REQUIRED_MESSAGE",
]
