"""
csv-auto CLI — inspect delimited files from the command line.

Commands
--------
- ``analyze`` — infer a type profile for every column.
- ``slurp`` — print the data rows.
- ``detect`` — print the detected separator.

Usage::

    csv-auto analyze people.csv
    csv-auto analyze big.tsv --max-rows 500 --json
    csv-auto slurp export.txt --sep "|" --skip-row 2 --limit 20
    csv-auto detect people.csv

Option defaults can also come from ``CSV_AUTO_SEP_CHAR``,
``CSV_AUTO_ENCODING`` and ``CSV_AUTO_MAX_ROWS`` (a ``.env`` file in the
working directory is loaded first).
"""

from __future__ import annotations

import csv
import functools
import json
import logging
from collections.abc import Callable
from decimal import Decimal
from pathlib import Path
from typing import Any

import click
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.table import Table

from csv_auto.api import analyze_csv, resolve_config, slurp_csv
from csv_auto.config import CsvAutoConfig
from csv_auto.errors import CsvAutoError

console = Console()

_PROFILE_COLUMNS = (
    "string", "string_length", "integer", "integer_length", "decimal",
    "fractional_length", "min", "max", "negative", "mdy_date", "ymd_date",
    "undef",
)


def _json_default(value: Any) -> Any:
    # Decimals are emitted as their exact text.
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def _print_json(payload: Any) -> None:
    console.print_json(json.dumps(payload, default=_json_default))


def _build_config(
    sep: str | None,
    header: tuple[str, ...],
    format_headers: bool,
    skip_row: tuple[int, ...],
    max_rows: int | None,
    encoding: str,
) -> CsvAutoConfig:
    try:
        return CsvAutoConfig(
            sep_char=sep.replace("\\t", "\t") if sep else None,
            headers=header or None,
            format_headers=format_headers,
            skip_rows=skip_row,
            max_rows=max_rows,
            encoding=encoding,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def reader_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the shared reader options and turn them into ``config``."""

    @click.option("--sep", envvar="CSV_AUTO_SEP_CHAR", help="Field separator (default: detect). Use \\t for tab.")
    @click.option("--header", multiple=True, help="Explicit header name; repeat for each column.")
    @click.option("--format-headers/--no-format-headers", default=True, show_default=True, help="Normalise headers read from the file.")
    @click.option("--skip-row", multiple=True, type=click.IntRange(min=1), help="1-based record number to skip; repeatable.")
    @click.option("--max-rows", envvar="CSV_AUTO_MAX_ROWS", type=click.IntRange(min=0), default=None, help="Stop after this many data rows.")
    @click.option("--encoding", envvar="CSV_AUTO_ENCODING", default="utf-8", show_default=True)
    @functools.wraps(func)
    def wrapper(
        sep: str | None,
        header: tuple[str, ...],
        format_headers: bool,
        skip_row: tuple[int, ...],
        max_rows: int | None,
        encoding: str,
        **kwargs: Any,
    ) -> Any:
        config = _build_config(sep, header, format_headers, skip_row, max_rows, encoding)
        try:
            return func(config=config, **kwargs)
        except (CsvAutoError, OSError, UnicodeDecodeError, csv.Error) as exc:
            raise click.ClickException(str(exc)) from exc

    return wrapper


# ── Group ────────────────────────────────────────────────────────────

@click.group()
@click.version_option(package_name="csv-auto")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
def main(verbose: bool) -> None:
    """csv-auto — automatic loading and analysis of delimited files."""
    load_dotenv(find_dotenv(usecwd=True))
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        datefmt="%H:%M:%S",
    )


# ── analyze ──────────────────────────────────────────────────────────

@main.command("analyze")
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print profiles as JSON.")
@reader_options
def analyze(path: Path, as_json: bool, config: CsvAutoConfig) -> None:
    """Infer a type profile for every column of PATH."""
    profiles = analyze_csv(path, config)

    if as_json:
        _print_json([p.as_dict() for p in profiles])
        return

    table = Table(title=f"Column profiles for {path.name}")
    table.add_column("header", style="bold")
    for key in _PROFILE_COLUMNS:
        table.add_column(key, justify="right")

    for profile in profiles:
        summary = profile.as_dict()
        cells = []
        for key in _PROFILE_COLUMNS:
            value = summary.get(key)
            if value is True:
                cells.append("✓")
            elif value is None:
                cells.append("")
            else:
                cells.append(str(value))
        table.add_row(profile.header, *cells)

    console.print(table)
    console.print(f"{len(profiles)} column(s)")


# ── slurp ────────────────────────────────────────────────────────────

@main.command("slurp")
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print rows as JSON.")
@click.option("--limit", default=25, show_default=True, type=click.IntRange(min=0), help="Rows displayed in the table (0 = all).")
@reader_options
def slurp(path: Path, as_json: bool, limit: int, config: CsvAutoConfig) -> None:
    """Print the data rows of PATH."""
    rows = slurp_csv(path, config)

    if as_json:
        _print_json(rows)
        return

    table = Table(title=str(path.name))
    if rows:
        for header in rows[0]:
            table.add_column(header)
    shown = rows[:limit] if limit else rows
    for row in shown:
        table.add_row(*row.values())

    console.print(table)
    console.print(f"{len(shown)} of {len(rows)} row(s)")


# ── detect ───────────────────────────────────────────────────────────

@main.command("detect")
@click.argument("path", type=click.Path(path_type=Path))
@reader_options
def detect(path: Path, config: CsvAutoConfig) -> None:
    """Print the separator detected for PATH."""
    resolved = resolve_config(path, config)
    console.print(repr(resolved.sep_char), markup=False)


if __name__ == "__main__":
    main()
