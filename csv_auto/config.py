"""
csv_auto configuration — every tunable knob in one place.

Defaults read every row of a file with an auto-detected separator.
Override via ``CsvAutoConfig(sep_char="|", max_rows=50)`` or
``config.replace(...)``.

Option mapping
--------------
- sep_char        → separator; auto-detected when unset
- headers         → explicit header names (first record is then data)
- format_headers  → normalise headers read from the file
- skip_rows       → physical record numbers to ignore
- max_rows        → stop after this many data rows
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

__all__ = ["CsvAutoConfig", "DEFAULT_SEPARATORS"]

DEFAULT_SEPARATORS: tuple[str, ...] = (",", "\t", "|", ";", ":")


@dataclass(frozen=True)
class CsvAutoConfig:
    """Immutable configuration for reading and analysing one file."""

    # ── Separator ────────────────────────────────────────────────────
    sep_char: str | None = None
    """Field separator.  ``None`` means detect it from a sample of the file."""

    separator_candidates: tuple[str, ...] = DEFAULT_SEPARATORS
    """Characters considered during separator detection."""

    sample_lines: int = 100
    """Number of non-empty lines the detector inspects."""

    # ── Headers ──────────────────────────────────────────────────────
    headers: tuple[str, ...] | None = None
    """Explicit header names.  When set the first record is treated as data."""

    format_headers: bool = True
    """Lowercase / underscore / de-duplicate headers read from the file."""

    # ── Row selection ────────────────────────────────────────────────
    skip_rows: frozenset[int] = frozenset()
    """1-based physical record numbers (header included) to skip entirely."""

    max_rows: int | None = None
    """Stop after this many data rows.  ``None`` or ``0`` reads everything."""

    # ── Reader dialect ───────────────────────────────────────────────
    encoding: str = "utf-8"
    quote_char: str = '"'
    escape_char: str | None = None

    def __post_init__(self) -> None:
        # Accept lists / ranges from callers and store hashable tuples.
        if self.headers is not None and not isinstance(self.headers, tuple):
            object.__setattr__(self, "headers", tuple(self.headers))
        if not isinstance(self.skip_rows, frozenset):
            object.__setattr__(self, "skip_rows", frozenset(self.skip_rows))
        if not isinstance(self.separator_candidates, tuple):
            object.__setattr__(
                self, "separator_candidates", tuple(self.separator_candidates),
            )
        if self.sep_char is not None and len(self.sep_char) != 1:
            raise ValueError(
                f"sep_char must be a single character, got {self.sep_char!r}"
            )
        if self.max_rows is not None and self.max_rows < 0:
            raise ValueError(f"max_rows must not be negative, got {self.max_rows}")

    @property
    def row_limit(self) -> int | None:
        """Effective data-row cap (``None`` when unlimited)."""
        return self.max_rows or None

    def replace(self, **changes: Any) -> CsvAutoConfig:
        """Return a copy with *changes* applied.

        Raises :class:`TypeError` for names that are not config fields.
        """
        names = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(set(changes) - names)
        if unknown:
            raise TypeError(f"Unknown option(s): {', '.join(unknown)}")
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_options(
        cls,
        config: CsvAutoConfig | None = None,
        **options: Any,
    ) -> CsvAutoConfig:
        """Merge keyword *options* on top of *config* (or the defaults)."""
        base = config if config is not None else cls()
        return base.replace(**options) if options else base

