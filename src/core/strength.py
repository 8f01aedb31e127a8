"""Password strength classification.

Updates:
    v0.1.0 - 2026-10-19 - Added character-class classifier and strength enum.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class PasswordStrength(str, Enum):
    """Flat strength verdict; values double as style class names."""

    EASY = "easy"
    MEDIUM = "medium"
    STRONG = "strong"
    EMPTY = "empty"


# \d, \w and \s are spelled out with browser regex semantics: ASCII digits and
# word characters, and the ECMAScript whitespace set (which includes U+FEFF but
# not U+001C-U+001F or U+0085, unlike Python's \s).
_JS_SPACE = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_SYMBOL_CLASS = rf"[^A-Za-z0-9_{_JS_SPACE}]"

_LETTERS = re.compile(r"[a-zA-Z]")
_SYMBOLS = re.compile(_SYMBOL_CLASS)
_DIGITS = re.compile(r"[0-9]")

# Anchored single-class patterns, kept separate from the presence patterns.
_ONLY_LETTERS = re.compile(r"[a-zA-Z]+")
_ONLY_DIGITS = re.compile(r"[0-9]+")
_ONLY_SYMBOLS = re.compile(_SYMBOL_CLASS + "+")


@dataclass(slots=True, frozen=True)
class CharacterClassSignals:
    """Presence of each character class somewhere in a string."""

    has_letters: bool
    has_symbols: bool
    has_digits: bool

    def as_dict(self) -> dict[str, bool]:
        return {
            "has_letters": self.has_letters,
            "has_symbols": self.has_symbols,
            "has_digits": self.has_digits,
        }


def signals_for(value: str) -> CharacterClassSignals:
    """Compute the character-class presence triple for ``value``.

    Args:
        value (str): Candidate password.

    Returns:
        CharacterClassSignals: Letters, symbols and digits presence flags.
    """

    return CharacterClassSignals(
        has_letters=_LETTERS.search(value) is not None,
        has_symbols=_SYMBOLS.search(value) is not None,
        has_digits=_DIGITS.search(value) is not None,
    )


def is_easy(value: str) -> bool:
    """Return True when every character belongs to one single class."""

    letters = _ONLY_LETTERS.fullmatch(value) is not None
    digits = _ONLY_DIGITS.fullmatch(value) is not None
    symbols = _ONLY_SYMBOLS.fullmatch(value) is not None
    return letters or digits or symbols


def is_medium(value: str) -> bool:
    """Return True when exactly two of the three classes are present."""

    signals = signals_for(value)
    letters_symbols = (
        signals.has_letters and signals.has_symbols and not signals.has_digits
    )
    letters_digits = (
        signals.has_letters and not signals.has_symbols and signals.has_digits
    )
    digits_symbols = (
        not signals.has_letters and signals.has_symbols and signals.has_digits
    )
    return (letters_symbols or letters_digits or digits_symbols) and not (
        letters_symbols and letters_digits and digits_symbols
    )


def is_strong(value: str) -> bool:
    """Return True when letters, symbols and digits are all present."""

    signals = signals_for(value)
    return signals.has_letters and signals.has_symbols and signals.has_digits


def classify(value: str) -> PasswordStrength:
    """Classify a password by the character classes it contains.

    Rules are evaluated in order and the first match wins: easy, medium,
    strong. Anything left over (the empty string, whitespace-only input)
    is reported as empty.

    Args:
        value (str): Normalized password text.

    Returns:
        PasswordStrength: Strength verdict for ``value``.
    """

    if is_easy(value):
        return PasswordStrength.EASY
    if is_medium(value):
        return PasswordStrength.MEDIUM
    if is_strong(value):
        return PasswordStrength.STRONG
    return PasswordStrength.EMPTY


__all__ = [
    "CharacterClassSignals",
    "PasswordStrength",
    "classify",
    "is_easy",
    "is_medium",
    "is_strong",
    "signals_for",
]
