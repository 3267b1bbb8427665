"""Exceptions shared by the transposition engine.

Every failure the engine can report is a lookup that matched nothing: a note
or instrument spelling missing from the chromatic table, or a key name missing
from the key signature catalog. Arithmetic on resolved pitch classes is total.
"""

from __future__ import annotations

from typing import Any


class MatchException(Exception):
    """Exception raised when a value matches no table entry."""

    def __init__(self, value: Any, message: str | None = None) -> None:
        """Initialize a MatchException with the unmatched value.

        Args:
            value: The value that failed to match any entry.
            message: Optional override for the exception message.
        """
        super().__init__(message or f"Failed to match value: {value}")
        self.value = value


class UnknownSpelling(MatchException):
    """A note or instrument-key spelling matches no pitch class."""

    def __init__(self, value: Any) -> None:
        super().__init__(value, f"Unknown spelling: {value!r}")


class UnknownKey(MatchException):
    """A key signature name matches no catalog entry."""

    def __init__(self, value: Any) -> None:
        super().__init__(value, f"Unknown key: {value!r}")
