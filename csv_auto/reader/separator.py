"""
Separator detection.

Samples the first non-empty lines of a file, removes quoted sections
(which may span lines) and narrows the candidate characters:

1. keep candidates present on the header line;
2. among several, prefer those present on every sampled line;
3. among several, prefer those with the same count on every line.

Ragged data rows therefore do not hide the separator; the row driver
reports them.  A file is only auto-detectable when exactly one candidate
survives.
"""

from __future__ import annotations

import itertools
import logging
import re
from collections.abc import Callable, Sequence
from pathlib import Path

from csv_auto.config import DEFAULT_SEPARATORS
from csv_auto.errors import SeparatorDetectionError

__all__ = ["separator_candidates", "detect_separator"]

logger = logging.getLogger(__name__)


def _strip_quoted(text: str, quote_char: str) -> str:
    """Drop ``"..."`` sections (doubled quotes and newlines included)."""
    q = re.escape(quote_char)
    return re.sub(f"{q}(?:[^{q}]|{q}{q})*{q}?", "", text)


def _sample_lines(
    path: str | Path,
    *,
    limit: int,
    encoding: str,
    quote_char: str,
) -> list[str]:
    with open(path, encoding=encoding, newline="") as f:
        sample = "".join(
            itertools.islice((line for line in f if line.strip("\r\n")), limit)
        )
    if quote_char:
        sample = _strip_quoted(sample, quote_char)
    return [line for line in re.split(r"\r\n|\r|\n", sample) if line]


def separator_candidates(
    path: str | Path,
    *,
    candidates: Sequence[str] = DEFAULT_SEPARATORS,
    sample_lines: int = 100,
    encoding: str = "utf-8",
    quote_char: str = '"',
) -> list[str]:
    """Return the candidates that best fit the sampled lines.

    The result keeps the order of *candidates*.  An empty list means no
    candidate occurs on the header line.
    """
    lines = _sample_lines(
        path, limit=sample_lines, encoding=encoding, quote_char=quote_char,
    )
    if not lines:
        return []

    found = [char for char in candidates if char in lines[0]]
    preferences: tuple[Callable[[str], bool], ...] = (
        lambda char: all(char in line for line in lines),
        lambda char: len({line.count(char) for line in lines}) == 1,
    )
    for prefer in preferences:
        if len(found) <= 1:
            break
        narrowed = [char for char in found if prefer(char)]
        if narrowed:
            found = narrowed
    logger.debug("Separator candidates for %s: %r", path, found)
    return found


def detect_separator(
    path: str | Path,
    *,
    candidates: Sequence[str] = DEFAULT_SEPARATORS,
    sample_lines: int = 100,
    encoding: str = "utf-8",
    quote_char: str = '"',
) -> str:
    """Return the single separator that fits *path*.

    Raises :class:`SeparatorDetectionError` when zero or several
    candidates remain.
    """
    found = separator_candidates(
        path,
        candidates=candidates,
        sample_lines=sample_lines,
        encoding=encoding,
        quote_char=quote_char,
    )
    if len(found) != 1:
        raise SeparatorDetectionError(str(path), found)
    logger.info("Detected separator %r for %s", found[0], path)
    return found[0]
