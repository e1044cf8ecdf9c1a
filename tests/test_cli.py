"""Tests for csv_auto.cli."""

import json

import pytest
from click.testing import CliRunner

from csv_auto.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestAnalyzeCommand:
    def test_json(self, runner, people_csv):
        result = runner.invoke(main, ["analyze", str(people_csv), "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == [
            {"header": "id", "integer": True, "integer_length": 1, "min": 1, "max": 2},
            {"header": "name", "string": True, "string_length": 4},
        ]

    def test_decimal_json(self, runner, write_file):
        path = write_file("v\n4\n4.5\n3\n")
        result = runner.invoke(main, ["analyze", str(path), "--sep", ",", "--json"])
        assert result.exit_code == 0, result.output
        (profile,) = json.loads(result.output)
        assert profile["min"] == 3
        assert profile["max"] == "4.5"

    def test_long_decimal_json_keeps_digits(self, runner, write_file):
        path = write_file("v\n0.12345678901234567890123\n")
        result = runner.invoke(main, ["analyze", str(path), "--sep", ",", "--json"])
        assert result.exit_code == 0, result.output
        (profile,) = json.loads(result.output)
        assert profile["max"] == "0.12345678901234567890123"
        assert profile["fractional_length"] == 23

    def test_table(self, runner, people_csv):
        result = runner.invoke(main, ["analyze", str(people_csv)])
        assert result.exit_code == 0, result.output
        assert "2 column(s)" in result.output

    def test_max_rows_from_env(self, runner, people_csv, monkeypatch):
        monkeypatch.setenv("CSV_AUTO_MAX_ROWS", "1")
        result = runner.invoke(main, ["analyze", str(people_csv), "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)[0]["max"] == 1

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["analyze", str(tmp_path / "nope.csv")])
        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_shape_error(self, runner, write_file):
        path = write_file("id,name\n1\n")
        result = runner.invoke(main, ["analyze", str(path), "--sep", ","])
        assert result.exit_code == 1
        assert "row #2" in result.output


class TestSlurpCommand:
    def test_json(self, runner, people_csv):
        result = runner.invoke(main, ["slurp", str(people_csv), "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == [
            {"id": "1", "name": "Jill"},
            {"id": "2", "name": "Bob"},
        ]

    def test_options(self, runner, people_csv):
        args = ["slurp", str(people_csv), "--json", "--skip-row", "2", "--header", "a", "--header", "b"]
        result = runner.invoke(main, args)
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == [
            {"a": "id", "b": "name"},
            {"a": "2", "b": "Bob"},
        ]

    def test_table_limit(self, runner, people_csv):
        result = runner.invoke(main, ["slurp", str(people_csv), "--limit", "1"])
        assert result.exit_code == 0, result.output
        assert "1 of 2 row(s)" in result.output


class TestDetectCommand:
    def test_detect(self, runner, write_file):
        path = write_file("a|b\n1|2\n")
        result = runner.invoke(main, ["detect", str(path)])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "'|'"

    def test_ambiguous(self, runner, write_file):
        path = write_file("a,b;c\n1,2;3\n")
        result = runner.invoke(main, ["detect", str(path)])
        assert result.exit_code == 1
        assert "Unable to automatically detect" in result.output
