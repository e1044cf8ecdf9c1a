"""Tests for csv_auto.reader.rows."""

import pytest

from csv_auto.config import CsvAutoConfig
from csv_auto.errors import ConfigurationError, RowShapeError
from csv_auto.reader.rows import is_blank_record, iter_rows, read_records


def _rows(path, **options):
    cfg = CsvAutoConfig(sep_char=options.pop("sep_char", ","), **options)
    return [row for row, _headers in iter_rows(path, cfg)]


# ── read_records ─────────────────────────────────────────────────────

class TestReadRecords:
    def test_quoting_resolved(self, write_file):
        path = write_file('id,note\n1,"a, b"\n2,"line1\nline2"\n3,"say ""hi"""\n')
        records = list(read_records(path, sep_char=","))
        assert records == [
            ["id", "note"],
            ["1", "a, b"],
            ["2", "line1\nline2"],
            ["3", 'say "hi"'],
        ]

    def test_crlf(self, write_file):
        path = write_file("a,b\r\n1,2\r\n")
        assert list(read_records(path, sep_char=",")) == [["a", "b"], ["1", "2"]]

    def test_blank_record(self):
        assert is_blank_record([])
        assert is_blank_record([""])
        assert not is_blank_record(["", ""])
        assert not is_blank_record(["x"])


# ── iter_rows ────────────────────────────────────────────────────────

class TestIterRows:
    def test_rows_as_dicts(self, people_csv):
        assert _rows(people_csv) == [
            {"id": "1", "name": "Jill"},
            {"id": "2", "name": "Bob"},
        ]

    def test_headers_yielded(self, people_csv):
        cfg = CsvAutoConfig(sep_char=",")
        headers = [h for _row, h in iter_rows(people_csv, cfg)]
        assert headers == [["id", "name"], ["id", "name"]]

    def test_headers_formatted(self, write_file):
        path = write_file("Parent Age,Parent-Age\n40,41\n")
        assert _rows(path) == [{"parent_age": "40", "parent_age_2": "41"}]

    def test_headers_unformatted(self, write_file):
        path = write_file("Parent Age,Child\n40,4\n")
        assert _rows(path, format_headers=False) == [{"Parent Age": "40", "Child": "4"}]

    def test_explicit_headers_make_first_record_data(self, people_csv):
        rows = _rows(people_csv, headers=["Key", "Value"])
        assert rows[0] == {"Key": "id", "Value": "name"}
        assert len(rows) == 3

    def test_blank_records_elided(self, write_file):
        path = write_file("id,name\n1,Jill\n\n2,Bob\n\n\n")
        assert len(_rows(path)) == 2

    def test_row_with_empty_fields_kept(self, write_file):
        path = write_file("a,b\n,\n")
        assert _rows(path) == [{"a": "", "b": ""}]

    def test_skip_rows_counts_physical_records(self, write_file):
        path = write_file("id,name\nnotes,about,this\n1,Jill\n2,Bob\n3,Joe\n")
        assert _rows(path, skip_rows=[2, 4]) == [
            {"id": "1", "name": "Jill"},
            {"id": "3", "name": "Joe"},
        ]

    def test_skipping_first_record_moves_header(self, write_file):
        path = write_file("Report generated today\nid,name\n1,Jill\n")
        assert _rows(path, skip_rows=[1]) == [{"id": "1", "name": "Jill"}]

    def test_max_rows(self, people_csv):
        assert _rows(people_csv, max_rows=1) == [{"id": "1", "name": "Jill"}]
        assert len(_rows(people_csv, max_rows=0)) == 2

    def test_max_rows_stops_before_bad_row(self, write_file):
        path = write_file("id,name\n1,Jill\n2\n")
        assert _rows(path, max_rows=1) == [{"id": "1", "name": "Jill"}]

    def test_shape_mismatch(self, write_file):
        path = write_file("id,name\n1,Jill\n2\n")
        with pytest.raises(RowShapeError, match="row #3") as info:
            _rows(path)
        assert info.value.row_number == 3
        assert info.value.expected == 2
        assert info.value.actual == 1
        assert "header included" in str(info.value)

    def test_rows_are_streamed(self, write_file):
        path = write_file("id,name\n1,Jill\n2,Bob,extra\n")
        rows = iter_rows(path, CsvAutoConfig(sep_char=","))
        row, _headers = next(rows)
        assert row == {"id": "1", "name": "Jill"}
        with pytest.raises(RowShapeError):
            next(rows)

    def test_each_call_rereads(self, people_csv):
        cfg = CsvAutoConfig(sep_char=",")
        assert list(iter_rows(people_csv, cfg)) == list(iter_rows(people_csv, cfg))

    def test_header_only(self, write_file):
        assert _rows(write_file("id,name\n")) == []

    def test_requires_separator(self, people_csv):
        with pytest.raises(ConfigurationError):
            list(iter_rows(people_csv, CsvAutoConfig()))

    def test_pipe_separator(self, write_file):
        path = write_file("a|b\nx, y|2\n")
        assert _rows(path, sep_char="|") == [{"a": "x, y", "b": "2"}]
