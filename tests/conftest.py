"""Shared fixtures for csv_auto tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def write_file(tmp_path: Path):
    """Write *text* to ``tmp_path / name`` and return the path."""

    def _write(text: str, name: str = "data.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8", newline="")
        return path

    return _write


@pytest.fixture
def people_csv(write_file) -> Path:
    return write_file("id,name\n1,Jill\n2,Bob\n", "people.csv")
