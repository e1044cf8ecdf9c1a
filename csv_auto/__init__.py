"""
csv_auto — automatic loading, processing and analysis of delimited files.

Point it at a CSV / TSV / pipe-delimited file; the separator is detected,
headers are normalised and every row is handed over as a dict.  The
analyser infers a type profile per column.

Quick start::

    from csv_auto import analyze_csv
    for profile in analyze_csv("people.csv"):
        print(profile.as_dict())
"""

from csv_auto.api import analyze_csv, iter_csv, process_csv, resolve_config, slurp_csv
from csv_auto.config import CsvAutoConfig
from csv_auto.errors import (
    ConfigurationError,
    CsvAutoError,
    RowShapeError,
    SeparatorDetectionError,
)
from csv_auto.profiler.type_profiler import ColumnProfile, TypeProfiler

__all__ = [
    "analyze_csv",
    "iter_csv",
    "process_csv",
    "resolve_config",
    "slurp_csv",
    "CsvAutoConfig",
    "ColumnProfile",
    "TypeProfiler",
    "CsvAutoError",
    "ConfigurationError",
    "RowShapeError",
    "SeparatorDetectionError",
]
__version__ = "0.2.0"
