"""ULS .dat file readers.

This module loads one pipe-delimited source file into ordered records.
ULS extracts sometimes hold raw line breaks inside a field, so physical
lines are stitched back into logical records before parsing.
"""

from __future__ import annotations

import stat
from pathlib import Path
from typing import Iterator, Sequence

from core.constants import FIELD_SEPARATOR, LINE_BREAK_PLACEHOLDER, SOURCE_ENCODING
from core.errors import MalformedRecordError, PathIsDirectoryError, UnreadableFileError
from core.logging_config import get_logger
from core.types import DatRecord, SchemaDescriptor
from ingest.record_parser import parse_record

_LOGGER = get_logger(__name__)


def read_dat_file(file_path: Path, schema: SchemaDescriptor) -> list[DatRecord]:
    """Load every record of one source file.

    Args:
        file_path: Path to the .dat file.
        schema: Schema of the records in the file.

    Returns:
        Records in file order.

    Raises:
        UnreadableFileError: If the file is missing or cannot be read.
        PathIsDirectoryError: If the path names a directory.
        MalformedRecordError: If a logical record has the wrong field count;
            the error names the file and starting line.
    """
    text = _read_source_text(file_path)
    records: list[DatRecord] = []
    for line_number, logical_line in iter_logical_lines(split_physical_lines(text), schema.arity):
        try:
            records.append(parse_record(logical_line, schema))
        except MalformedRecordError as error:
            raise error.with_source(file_path.name, line_number) from error
    _LOGGER.info(
        "source_loaded",
        schema=schema.name,
        path=str(file_path),
        record_count=len(records),
    )
    return records


def split_physical_lines(text: str) -> list[str]:
    """Split file text into physical lines with carriage returns removed.

    A terminating newline does not produce a trailing empty line.
    """
    lines = text.replace("\r", "").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def reassemble_lines(lines: Sequence[str], arity: int) -> list[str]:
    """Join physical lines into logical records.

    Args:
        lines: Physical lines in file order.
        arity: Field count of the target schema.

    Returns:
        Logical lines; embedded breaks become the placeholder token.
    """
    return [logical_line for _, logical_line in iter_logical_lines(lines, arity)]


def iter_logical_lines(lines: Sequence[str], arity: int) -> Iterator[tuple[int, str]]:
    """Yield ``(first_line_number, logical_line)`` pairs.

    A record keeps absorbing following lines while it holds fewer than
    ``arity - 1`` separators and lines remain. This is best effort: a field
    whose own text spans a separator-deficient fragment can be misread, and
    a record still short of separators at end of file is left for the
    parser to reject.
    """
    required_separators = arity - 1
    index = 0
    while index < len(lines):
        start_index = index
        buffer = lines[index]
        separator_count = buffer.count(FIELD_SEPARATOR)
        while separator_count < required_separators and index < len(lines) - 1:
            index += 1
            buffer += LINE_BREAK_PLACEHOLDER + lines[index]
            separator_count += lines[index].count(FIELD_SEPARATOR)
        yield start_index + 1, buffer
        index += 1


def _read_source_text(file_path: Path) -> str:
    """Read a source file as text.

    Raises:
        UnreadableFileError: If the file is missing, unstatable or unreadable.
        PathIsDirectoryError: If the path names a directory.
    """
    try:
        status = file_path.stat()
    except FileNotFoundError as error:
        raise UnreadableFileError(
            f"Cannot open file {file_path}: path does not exist. "
            "Unpack the ULS amateur extract into the source directory."
        ) from error
    except OSError as error:
        raise UnreadableFileError(f"Unable to stat file {file_path}: {error}.") from error
    if stat.S_ISDIR(status.st_mode):
        raise PathIsDirectoryError(f"{file_path} is a directory, expected a .dat file.")
    try:
        payload = file_path.read_bytes()
    except OSError as error:
        raise UnreadableFileError(f"Cannot read file {file_path}: {error}.") from error
    return payload.decode(SOURCE_ENCODING)
