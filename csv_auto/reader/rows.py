"""
Row reading and iteration.

:func:`read_records` tokenises a file with the standard library ``csv``
reader (quoting, escaping and embedded newlines are handled there).
:func:`iter_rows` drives it: assigns headers, skips configured records,
drops blank records, validates row shape and honours the row cap.

Both are generators that own their file handle, so each call starts a
fresh single-pass read.
"""

from __future__ import annotations

import contextlib
import csv
import logging
from collections.abc import Iterator
from pathlib import Path

from csv_auto.config import CsvAutoConfig
from csv_auto.errors import ConfigurationError, RowShapeError
from csv_auto.utils.text_utils import format_headers

__all__ = ["read_records", "iter_rows", "is_blank_record"]

logger = logging.getLogger(__name__)


def read_records(
    path: str | Path,
    *,
    sep_char: str,
    encoding: str = "utf-8",
    quote_char: str = '"',
    escape_char: str | None = None,
) -> Iterator[list[str]]:
    """Yield every physical record of *path* as a list of raw field strings."""
    with open(path, encoding=encoding, newline="") as f:
        reader = csv.reader(
            f,
            delimiter=sep_char,
            quotechar=quote_char or None,
            quoting=csv.QUOTE_MINIMAL if quote_char else csv.QUOTE_NONE,
            escapechar=escape_char,
            strict=True,
        )
        yield from reader


def is_blank_record(record: list[str]) -> bool:
    """``True`` for an empty line (``[]``) or a single empty field (``[""]``)."""
    return not record or (len(record) == 1 and record[0] == "")


def iter_rows(
    path: str | Path,
    config: CsvAutoConfig,
) -> Iterator[tuple[dict[str, str], list[str]]]:
    """Yield ``(row, headers)`` for every data row of *path*.

    *row* maps each header to its raw field string.  *config* must carry
    a ``sep_char`` (see :func:`csv_auto.api.resolve_config`).

    Record numbers are physical and 1-based, counting the header record,
    and are used both for ``skip_rows`` and in :class:`RowShapeError`.
    """
    if not config.sep_char:
        raise ConfigurationError("A separator must be resolved before reading rows")

    headers = list(config.headers) if config.headers is not None else None
    limit = config.row_limit
    processed = 0

    records = read_records(
        path,
        sep_char=config.sep_char,
        encoding=config.encoding,
        quote_char=config.quote_char,
        escape_char=config.escape_char,
    )
    with contextlib.closing(records):
        for record_number, record in enumerate(records, 1):
            if record_number in config.skip_rows:
                continue

            if headers is None:
                headers = format_headers(record) if config.format_headers else record
                logger.debug("Headers for %s: %s", path, headers)
                continue

            if is_blank_record(record):
                continue

            if len(record) != len(headers):
                raise RowShapeError(record_number, len(headers), len(record))

            yield dict(zip(headers, record)), headers
            processed += 1

            if limit and processed >= limit:
                logger.debug("Row cap of %d reached for %s", limit, path)
                break

    logger.info("Processed %d rows from %s", processed, path)
