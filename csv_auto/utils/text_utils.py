"""
Header normalisation utilities.

Turns the raw first record of a file into unique, machine-friendly column
identifiers.  Only applied to headers read from the file; headers passed
in explicitly are used as given.
"""

from __future__ import annotations

import itertools
import re
from collections.abc import Iterable

__all__ = ["normalise_header", "format_headers"]

# Pre-compiled regexes, applied in this order.
_RE_INVALID = re.compile(r"[^a-z_0-9-]+")
_RE_EDGE_UNDERSCORES = re.compile(r"^_*(.+?)_*$", re.DOTALL)
_RE_REPEATED_UNDERSCORES = re.compile(r"_{2,}")


def normalise_header(header: str) -> str:
    """Canonicalise a single header name.

    Steps:
    1. Lowercase
    2. ``-`` → ``_``
    3. Runs of characters outside ``[a-z0-9_]`` → ``_``
    4. Strip leading / trailing underscores
    5. Collapse repeated underscores

    >>> normalise_header("Parent Age")
    'parent_age'
    >>> normalise_header("  Zip-Code (5) ")
    'zip_code_5'
    """
    header = header.lower().replace("-", "_")
    header = _RE_INVALID.sub("_", header)
    header = _RE_EDGE_UNDERSCORES.sub(r"\1", header)
    return _RE_REPEATED_UNDERSCORES.sub("_", header)


def format_headers(headers: Iterable[str]) -> list[str]:
    """Normalise *headers* and make them unique.

    A name already assigned gets the first free ``_2``, ``_3``, … suffix.

    >>> format_headers(["Child Name", "Child Age", "Child Name", "Child Age"])
    ['child_name', 'child_age', 'child_name_2', 'child_age_2']
    """
    seen: set[str] = set()
    formatted: list[str] = []
    for raw in headers:
        header = normalise_header(raw)
        if header in seen:
            header = next(
                candidate
                for candidate in (f"{header}_{n}" for n in itertools.count(2))
                if candidate not in seen
            )
        seen.add(header)
        formatted.append(header)
    return formatted
