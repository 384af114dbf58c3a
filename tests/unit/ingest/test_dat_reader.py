"""Unit tests for .dat file reading and line reassembly."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import MalformedRecordError, PathIsDirectoryError, UnreadableFileError
from core.schemas import EN_SCHEMA
from core.types import SchemaDescriptor
from ingest.dat_reader import read_dat_file, reassemble_lines, split_physical_lines
from tests.fixture_paths import fixture_path

THREE_FIELDS = SchemaDescriptor(name="T3", field_names=("FIRST", "SECOND", "THIRD"))


def test_reassemble_lines_joins_embedded_line_break() -> None:
    """A separator-deficient line should absorb the next physical line."""
    logical_lines = reassemble_lines(["A|B C", "D|"], THREE_FIELDS.arity)

    assert logical_lines == ["A|B C<LF>D|"]


def test_reassemble_lines_keeps_complete_lines_apart() -> None:
    """Lines that already hold enough separators should stay separate."""
    logical_lines = reassemble_lines(["A|B|C", "D|E|F"], THREE_FIELDS.arity)

    assert logical_lines == ["A|B|C", "D|E|F"]


def test_split_physical_lines_strips_carriage_returns() -> None:
    """CRLF input should split into clean lines without a trailing blank."""
    lines = split_physical_lines("A|B|C\r\nD|E|F\r\n")

    assert lines == ["A|B|C", "D|E|F"]


def test_split_physical_lines_of_empty_text() -> None:
    """An empty file should hold no lines."""
    assert split_physical_lines("") == []


def test_read_dat_file_parses_multiline_record(tmp_path: Path) -> None:
    """Embedded line breaks should survive as a placeholder inside one field."""
    file_path = tmp_path / "T3.dat"
    file_path.write_bytes(b"A|B C\nD|\n")

    records = read_dat_file(file_path, THREE_FIELDS)

    assert [record.values for record in records] == [("A", "B C<LF>D", "")]


def test_read_dat_file_raises_for_unrecoverable_final_line(tmp_path: Path) -> None:
    """A short record at end of file should be malformed and name the file."""
    file_path = tmp_path / "T3.dat"
    file_path.write_bytes(b"X|Y|Z\nA|B\n")

    with pytest.raises(MalformedRecordError) as error_info:
        read_dat_file(file_path, THREE_FIELDS)

    assert (error_info.value.source_name, error_info.value.line_number) == ("T3.dat", 2)


def test_read_dat_file_raises_for_missing_file(tmp_path: Path) -> None:
    """A missing source file should be unreadable."""
    with pytest.raises(UnreadableFileError):
        read_dat_file(tmp_path / "EN.dat", EN_SCHEMA)


def test_read_dat_file_raises_for_directory(tmp_path: Path) -> None:
    """A directory in place of a source file should be rejected."""
    directory = tmp_path / "EN.dat"
    directory.mkdir()

    with pytest.raises(PathIsDirectoryError):
        read_dat_file(directory, EN_SCHEMA)


def test_read_dat_file_reads_fixture_entities() -> None:
    """The EN fixture should reassemble its split address record."""
    records = read_dat_file(fixture_path("uls_valid/EN.dat"), EN_SCHEMA)
    by_id = {record.record_id: record for record in records}

    assert by_id["200"]["STREET_ADDRESS"] == "1 LONG ROAD<LF>APARTMENT 4"
