"""
Type profiler — streaming per-column type inference.

Each raw field value is classified into exactly one shape (blank,
integer, decimal, MDY date, YMD date or string) and folded into the
running :class:`ColumnProfile` of its column.  A column can end up with
several shapes set at once (e.g. ``integer`` *and* ``string``); that
coexistence is reported as-is and never collapsed into a single type.

Classification is purely pattern based, so there is no parse-error
path: anything that is not numeric or date shaped is a string.

Usage::

    profiler = TypeProfiler()
    for row, headers in rows:
        profiler.observe_row(row, headers)
    profiles = profiler.finalize(headers)
"""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

__all__ = [
    "ValueShape",
    "Classification",
    "ColumnProfile",
    "TypeProfiler",
    "classify_value",
    "digit_width",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

class ValueShape(Enum):
    """The primary shape of one raw field value."""

    BLANK = "undef"
    INTEGER = "integer"
    DECIMAL = "decimal"
    MDY_DATE = "mdy_date"
    YMD_DATE = "ymd_date"
    STRING = "string"


# Rules in precedence order; numbers must match whole, dates only as a prefix.
_RE_INTEGER = re.compile(r"(-?)([0-9]+)")
_RE_DECIMAL = re.compile(r"(-?)([0-9]+)\.([0-9]+)")
_RE_MDY_DATE = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")
_RE_YMD_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def digit_width(digits: str) -> int:
    """Number of digits in the canonical form of *digits*.

    >>> digit_width("007")
    1
    >>> digit_width("12070")
    5
    """
    return len(digits.lstrip("0")) or 1


def _parse_integer(value: str, digits: str) -> int | Decimal:
    # int() refuses strings past the interpreter's digit limit.
    if len(digits) > sys.get_int_max_str_digits() > 0:
        return Decimal(value)
    return int(value)


@dataclass(frozen=True)
class Classification:
    """Result of :func:`classify_value`.

    Numeric fields are only populated for ``INTEGER`` / ``DECIMAL``.
    """

    shape: ValueShape
    negative: bool = False
    integer_length: int | None = None
    fractional_length: int | None = None
    number: int | Decimal | None = None

    @property
    def is_number(self) -> bool:
        return self.number is not None


def classify_value(value: str) -> Classification:
    """Classify a raw field value; the first matching rule wins.

    >>> classify_value("-007").shape, classify_value("-007").integer_length
    (<ValueShape.INTEGER: 'integer'>, 1)
    >>> classify_value("01/15/2020 10:00").shape
    <ValueShape.MDY_DATE: 'mdy_date'>
    """
    if value == "":
        return Classification(ValueShape.BLANK)

    m = _RE_INTEGER.fullmatch(value)
    if m:
        sign, left = m.groups()
        return Classification(
            ValueShape.INTEGER,
            negative=bool(sign),
            integer_length=digit_width(left),
            number=_parse_integer(value, left),
        )

    m = _RE_DECIMAL.fullmatch(value)
    if m:
        sign, left, right = m.groups()
        return Classification(
            ValueShape.DECIMAL,
            negative=bool(sign),
            integer_length=digit_width(left),
            fractional_length=len(right),
            number=Decimal(value),
        )

    if _RE_MDY_DATE.match(value):
        return Classification(ValueShape.MDY_DATE)

    if _RE_YMD_DATE.match(value):
        return Classification(ValueShape.YMD_DATE)

    return Classification(ValueShape.STRING)


# ---------------------------------------------------------------------------
# ColumnProfile — accumulated flags / widths / range for one column
# ---------------------------------------------------------------------------

def _widest(current: int | None, width: int) -> int:
    return width if current is None or width > current else current


@dataclass
class ColumnProfile:
    """Everything observed about one column.

    Flags default to ``False`` and widths / bounds to ``None``: both mean
    "never observed", which is why :meth:`as_dict` leaves them out.
    """

    header: str

    undef: bool = False
    """An empty value was found."""

    string: bool = False
    string_length: int | None = None
    """Character length of the longest string-classified value."""

    integer: bool = False
    integer_length: int | None = None
    """Widest canonical integer part among integer *and* decimal values."""

    decimal: bool = False
    fractional_length: int | None = None
    """Most digits after the point among decimal values."""

    negative: bool = False
    """A numeric value carried a minus sign."""

    mdy_date: bool = False
    ymd_date: bool = False

    # One range shared by integer and decimal values.
    min_value: int | Decimal | None = None
    max_value: int | Decimal | None = None

    def update(self, value: str) -> ValueShape:
        """Fold one raw *value* into the profile and return its shape."""
        result = classify_value(value)
        shape = result.shape

        if shape is ValueShape.BLANK:
            self.undef = True
        elif shape is ValueShape.INTEGER:
            self.integer = True
        elif shape is ValueShape.DECIMAL:
            self.decimal = True
            self.fractional_length = _widest(
                self.fractional_length, result.fractional_length,
            )
        elif shape is ValueShape.MDY_DATE:
            self.mdy_date = True
        elif shape is ValueShape.YMD_DATE:
            self.ymd_date = True
        else:
            self.string = True
            self.string_length = _widest(self.string_length, len(value))

        if result.is_number:
            if result.negative:
                self.negative = True
            self.integer_length = _widest(self.integer_length, result.integer_length)
            self._update_range(result.number)

        return shape

    def _update_range(self, number: int | Decimal) -> None:
        if self.min_value is None or number < self.min_value:
            self.min_value = number
        if self.max_value is None or number > self.max_value:
            self.max_value = number

    @property
    def shapes(self) -> list[ValueShape]:
        """Every shape seen in this column, in classification order."""
        return [s for s in ValueShape if getattr(self, s.value)]

    def as_dict(self) -> dict[str, Any]:
        """Sparse summary: ``header`` plus only the observed keys.

        >>> p = ColumnProfile("id"); _ = p.update("1"); _ = p.update("2")
        >>> p.as_dict()
        {'header': 'id', 'integer': True, 'integer_length': 1, 'min': 1, 'max': 2}
        """
        summary: dict[str, Any] = {"header": self.header}
        fields = (
            ("undef", self.undef),
            ("string", self.string),
            ("string_length", self.string_length),
            ("integer", self.integer),
            ("integer_length", self.integer_length),
            ("decimal", self.decimal),
            ("fractional_length", self.fractional_length),
            ("negative", self.negative),
            ("mdy_date", self.mdy_date),
            ("ymd_date", self.ymd_date),
            ("min", self.min_value),
            ("max", self.max_value),
        )
        for key, value in fields:
            if value is not None and value is not False:
                summary[key] = value
        return summary


# ---------------------------------------------------------------------------
# TypeProfiler — owns one profile per column for a single analysis
# ---------------------------------------------------------------------------

class TypeProfiler:
    """Accumulates :class:`ColumnProfile` objects over a row stream.

    Not thread-safe; use one instance per analysis.
    """

    def __init__(self) -> None:
        self._profiles: dict[str, ColumnProfile] = {}
        self._observations = 0
        self._finalized = False

    def observe(self, header: str, value: str) -> None:
        """Record one field *value* for the column *header*."""
        if self._finalized:
            raise RuntimeError("TypeProfiler has already been finalized")
        profile = self._profiles.get(header)
        if profile is None:
            profile = self._profiles[header] = ColumnProfile(header)
        profile.update(value)
        self._observations += 1

    def observe_row(self, row: Mapping[str, str], headers: Iterable[str]) -> None:
        """Record every field of *row* for the columns in *headers*."""
        for header in headers:
            self.observe(header, row[header])

    def finalize(self, column_order: Iterable[str]) -> list[ColumnProfile]:
        """Return the profiles in *column_order*, skipping unseen columns.

        May only be called once.
        """
        if self._finalized:
            raise RuntimeError("TypeProfiler has already been finalized")
        self._finalized = True
        profiles = [
            self._profiles[header]
            for header in column_order
            if header in self._profiles
        ]
        logger.debug(
            "Finalized %d column profiles from %d observations",
            len(profiles), self._observations,
        )
        return profiles

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, header: object) -> bool:
        return header in self._profiles
