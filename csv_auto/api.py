"""
Public API: process, slurp and analyse delimited text files.

Every entry point takes a path, an optional :class:`CsvAutoConfig` and
keyword overrides for any config field::

    from csv_auto import analyze_csv, process_csv, slurp_csv

    process_csv("people.csv", lambda row, headers: print(row["name"]))
    rows = slurp_csv("people.csv", max_rows=50)
    profiles = analyze_csv("people.tsv", skip_rows=[2])

The path is validated and the separator resolved once, before any row is
read.  Errors propagate to the caller; nothing is returned on failure.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

from csv_auto.config import CsvAutoConfig
from csv_auto.errors import ConfigurationError
from csv_auto.profiler.type_profiler import ColumnProfile, TypeProfiler
from csv_auto.reader.rows import iter_rows
from csv_auto.reader.separator import detect_separator

__all__ = [
    "RowCallback",
    "resolve_config",
    "iter_csv",
    "process_csv",
    "slurp_csv",
    "analyze_csv",
]

logger = logging.getLogger(__name__)

RowCallback = Callable[[dict[str, str], list[str]], Any]


def _validate_path(path: str | Path | None) -> None:
    if not path:
        raise ConfigurationError("A filename must be passed as the first argument")
    if not os.path.exists(path):
        raise ConfigurationError(f'The file "{path}" does not exist')
    if not os.path.isfile(path):
        raise ConfigurationError(f'The file name "{path}" is not a file')


def resolve_config(
    path: str | Path,
    config: CsvAutoConfig | None = None,
    **options: Any,
) -> CsvAutoConfig:
    """Validate *path* and return a config with ``sep_char`` filled in.

    Passing the result back into any entry point skips detection.
    """
    _validate_path(path)
    cfg = CsvAutoConfig.from_options(config, **options)
    if not cfg.sep_char:
        sep_char = detect_separator(
            path,
            candidates=cfg.separator_candidates,
            sample_lines=cfg.sample_lines,
            encoding=cfg.encoding,
            quote_char=cfg.quote_char,
        )
        cfg = cfg.replace(sep_char=sep_char)
    return cfg


def iter_csv(
    path: str | Path,
    config: CsvAutoConfig | None = None,
    **options: Any,
) -> Iterator[dict[str, str]]:
    """Lazily yield each data row as a ``{header: raw value}`` dict."""
    cfg = resolve_config(path, config, **options)
    for row, _headers in iter_rows(path, cfg):
        yield row


def process_csv(
    path: str | Path,
    callback: RowCallback,
    config: CsvAutoConfig | None = None,
    **options: Any,
) -> None:
    """Call ``callback(row, headers)`` for every data row of *path*."""
    cfg = resolve_config(path, config, **options)
    for row, headers in iter_rows(path, cfg):
        callback(row, headers)


def slurp_csv(
    path: str | Path,
    config: CsvAutoConfig | None = None,
    **options: Any,
) -> list[dict[str, str]]:
    """Return all data rows of *path* as a list of dicts."""
    rows: list[dict[str, str]] = []
    process_csv(path, lambda row, _headers: rows.append(row), config, **options)
    return rows


def analyze_csv(
    path: str | Path,
    config: CsvAutoConfig | None = None,
    **options: Any,
) -> list[ColumnProfile]:
    """Profile every column of *path*.

    Returns one :class:`ColumnProfile` per header, in header order.  A file
    without data rows yields an empty list.
    """
    profiler = TypeProfiler()
    column_order: list[str] = []

    def observe(row: dict[str, str], headers: list[str]) -> None:
        if not column_order:
            column_order.extend(headers)
        profiler.observe_row(row, column_order)

    process_csv(path, observe, config, **options)

    profiles = profiler.finalize(column_order)
    logger.info("Analyzed %d columns of %s", len(profiles), path)
    return profiles
