"""
Exception hierarchy.

Every error raised by the library derives from :class:`CsvAutoError`.
Configuration and row-shape errors also subclass :class:`ValueError`.
I/O failures (``OSError``, ``UnicodeDecodeError``) and ``csv.Error`` are
not wrapped and propagate unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "CsvAutoError",
    "ConfigurationError",
    "SeparatorDetectionError",
    "RowShapeError",
]


class CsvAutoError(Exception):
    """Base class for all csv_auto errors."""


class ConfigurationError(CsvAutoError, ValueError):
    """The file or options cannot be used; raised before any row is read."""


class SeparatorDetectionError(ConfigurationError):
    """Zero or several separator candidates fit the sampled lines."""

    def __init__(self, path: str, candidates: Sequence[str]) -> None:
        self.path = path
        self.candidates = tuple(candidates)
        if self.candidates:
            found = ", ".join(repr(c) for c in self.candidates)
            detail = f"ambiguous candidates {found}"
        else:
            detail = "no candidate fits"
        super().__init__(
            f'Unable to automatically detect the separator of "{path}": {detail}'
        )


class RowShapeError(CsvAutoError, ValueError):
    """A data row does not have as many fields as the header."""

    def __init__(self, row_number: int, expected: int, actual: int) -> None:
        self.row_number = row_number
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Header count does not match row #{row_number}"
            f" (1-based record number, header included;"
            f" expected {expected} fields, got {actual})"
        )
