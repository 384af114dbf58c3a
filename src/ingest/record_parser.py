"""Pipe-delimited record parsing.

This module turns one reassembled logical line into a schema record.
Only ASCII letters are upper-cased and only ASCII whitespace is trimmed,
so every other source byte passes through unchanged.
"""

from __future__ import annotations

import string

from core.constants import FIELD_SEPARATOR
from core.errors import MalformedRecordError
from core.types import DatRecord, SchemaDescriptor

_ASCII_WHITESPACE = " \t\n\r\x0b\x0c"
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def parse_record(line: str, schema: SchemaDescriptor) -> DatRecord:
    """Parse one logical line into an upper-cased record.

    A line ending in the separator carries an empty final field; ``split``
    keeps that trailing empty segment.

    Args:
        line: Logical line, possibly holding line-break placeholders.
        schema: Target schema.

    Returns:
        Parsed record with exactly ``schema.arity`` fields.

    Raises:
        MalformedRecordError: If the field count differs from the arity.
    """
    text = line.strip(_ASCII_WHITESPACE)
    fields = text.translate(_ASCII_UPPER).split(FIELD_SEPARATOR)
    if len(fields) != schema.arity:
        raise MalformedRecordError(text=text, expected=schema.arity, actual=len(fields))
    return DatRecord(schema=schema, values=tuple(fields))
