"""Text preprocessing utilities.

Updates:
    v0.1.0 - 2026-10-19 - Trailing-space normalizer for password input.
"""

from __future__ import annotations

from typing import Protocol


class TextPreprocessor(Protocol):
    """Protocol describing preprocessor capabilities."""

    def normalize(self, text: str) -> str:
        """Normalize the provided text into a canonical form.

        Args:
            text (str): Input string to normalize.

        Returns:
            str: Normalized text representation.
        """

        ...


class TrailingSpaceNormalizer:
    """Removes a single trailing space from raw password input."""

    _suffix = " "

    def normalize(self, text: str) -> str:
        """Strip at most one trailing space character.

        Repeated calls are needed to drop several trailing spaces; the field
        re-runs this on every edit so they disappear one keystroke at a time.

        Args:
            text (str): Raw password text as typed.

        Returns:
            str: ``text`` without its final space, or ``text`` unchanged.
        """

        if text.endswith(self._suffix):
            return text[: -len(self._suffix)]
        return text


_default_normalizer = TrailingSpaceNormalizer()


def normalize(raw: str) -> str:
    """Module-level shortcut for :class:`TrailingSpaceNormalizer`."""

    return _default_normalizer.normalize(raw)


__all__ = ["TextPreprocessor", "TrailingSpaceNormalizer", "normalize"]
