"""ULS merge exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class UlsMergeError(Exception):
    """Base exception for all ULS merge failures."""


class UlsConfigError(UlsMergeError):
    """Raised for invalid runtime configuration."""


class UlsSchemaError(UlsMergeError):
    """Raised for schema descriptor misuse."""


class UnknownFieldError(UlsSchemaError):
    """Raised when a record is addressed by a field name its schema lacks."""

    def __init__(self, schema_name: str, field_name: str) -> None:
        super().__init__(
            f"Schema {schema_name} has no field named '{field_name}'. "
            "Use one of the field names declared in core.schemas."
        )
        self.schema_name = schema_name
        self.field_name = field_name


class UlsIngestError(UlsMergeError):
    """Raised for source reading and parsing failures."""


class UnreadableFileError(UlsIngestError):
    """Raised when a source file cannot be opened, statted, or read."""


class PathIsDirectoryError(UlsIngestError):
    """Raised when a source file path names a directory."""


class MalformedRecordError(UlsIngestError):
    """Raised when a logical line does not split into the schema arity."""

    def __init__(
        self,
        text: str,
        expected: int,
        actual: int,
        source_name: str | None = None,
        line_number: int | None = None,
    ) -> None:
        self.text = text
        self.expected = expected
        self.actual = actual
        self.source_name = source_name
        self.line_number = line_number
        super().__init__(self._build_message())

    def with_source(self, source_name: str, line_number: int) -> "MalformedRecordError":
        """Return a copy of this error annotated with its source location."""
        return MalformedRecordError(
            text=self.text,
            expected=self.expected,
            actual=self.actual,
            source_name=source_name,
            line_number=line_number,
        )

    def _build_message(self) -> str:
        location = ""
        if self.source_name is not None:
            location = f" in {self.source_name}"
            if self.line_number is not None:
                location += f":{self.line_number}"
        return (
            f"Incorrect number of fields{location}: expected {self.expected}, "
            f"found {self.actual} in record '{self.text}'."
        )


class DateFormatError(UlsMergeError):
    """Raised when a date field is not in MM/DD/YYYY form."""

    def __init__(
        self,
        value: str,
        schema_name: str | None = None,
        record_id: str | None = None,
        field_name: str | None = None,
    ) -> None:
        self.value = value
        self.schema_name = schema_name
        self.record_id = record_id
        self.field_name = field_name
        super().__init__(self._build_message())

    def with_field(self, schema_name: str, record_id: str, field_name: str) -> "DateFormatError":
        """Return a copy of this error annotated with the record field it came from."""
        return DateFormatError(
            value=self.value,
            schema_name=schema_name,
            record_id=record_id,
            field_name=field_name,
        )

    def _build_message(self) -> str:
        location = ""
        if self.schema_name is not None:
            location = f" in {self.schema_name} key {self.record_id} field {self.field_name}"
        return f"Invalid date '{self.value}'{location}: expected MM/DD/YYYY."


class UlsJoinError(UlsMergeError):
    """Raised when cross-file merge consistency is violated."""


class JoinTargetMissingError(UlsJoinError):
    """Raised when a record must update an ID the merge store lacks."""

    def __init__(self, schema_name: str, record_id: str) -> None:
        super().__init__(
            f"{schema_name} key {record_id} not present in merged records. "
            "The source snapshot is inconsistent; download a fresh copy."
        )
        self.schema_name = schema_name
        self.record_id = record_id


class CallsignMismatchError(UlsJoinError):
    """Raised when a contribution disagrees with the stored callsign."""

    def __init__(self, schema_name: str, record_id: str, stored: str, found: str) -> None:
        super().__init__(
            f"{schema_name} callsign {found} for key {record_id} does not match "
            f"merged callsign {stored}."
        )
        self.schema_name = schema_name
        self.record_id = record_id
        self.stored = stored
        self.found = found
