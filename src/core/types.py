"""Shared typed models.

This module defines the schema descriptor and the record models used by
the parser, merge store, filter stage, and serializer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from core.errors import UnknownFieldError

ID_FIELD = "ID"
CALLSIGN_FIELD = "CALLSIGN"


@dataclass(frozen=True)
class SchemaDescriptor:
    """Named, ordered field layout of one record type.

    Attributes:
        name: Short schema name, e.g. ``AM`` or ``FCC``.
        field_names: Field names in file order.
    """

    name: str
    field_names: tuple[str, ...]
    _positions: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        positions = {name: index for index, name in enumerate(self.field_names)}
        object.__setattr__(self, "_positions", positions)

    @property
    def arity(self) -> int:
        """Number of fields in one record."""
        return len(self.field_names)

    def index_of(self, field_name: str) -> int:
        """Return the position of a field.

        Args:
            field_name: Field name declared by this schema.

        Returns:
            Zero-based field position.

        Raises:
            UnknownFieldError: If the schema does not declare the field.
        """
        try:
            return self._positions[field_name]
        except KeyError as error:
            raise UnknownFieldError(self.name, field_name) from error


@dataclass(frozen=True)
class DatRecord:
    """Immutable parsed input record.

    Attributes:
        schema: Schema the values conform to.
        values: Upper-cased field values in schema order.
    """

    schema: SchemaDescriptor
    values: tuple[str, ...]

    def __getitem__(self, field_name: str) -> str:
        return self.values[self.schema.index_of(field_name)]

    @property
    def record_id(self) -> str:
        """Global unique system identifier."""
        return self[ID_FIELD]

    @property
    def callsign(self) -> str:
        """Callsign carried by this record."""
        return self[CALLSIGN_FIELD]


class MergedRecord:
    """Mutable output record built field by field during merge."""

    def __init__(self, schema: SchemaDescriptor, values: list[str] | None = None) -> None:
        self.schema = schema
        self._values = list(values) if values is not None else [""] * schema.arity

    @classmethod
    def blank(cls, schema: SchemaDescriptor, record_id: str) -> "MergedRecord":
        """Create an empty record stamped with its global ID."""
        record = cls(schema)
        record[ID_FIELD] = record_id
        return record

    def __getitem__(self, field_name: str) -> str:
        return self._values[self.schema.index_of(field_name)]

    def __setitem__(self, field_name: str, value: str) -> None:
        self._values[self.schema.index_of(field_name)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MergedRecord):
            return NotImplemented
        return self.schema == other.schema and self._values == other._values

    def __repr__(self) -> str:
        return f"MergedRecord({self.schema.name}, id={self.record_id!r}, callsign={self.callsign!r})"

    @property
    def values(self) -> tuple[str, ...]:
        """Field values in schema order."""
        return tuple(self._values)

    @property
    def record_id(self) -> str:
        """Global unique system identifier."""
        return self[ID_FIELD]

    @property
    def callsign(self) -> str:
        """Merged callsign, empty until an AM record sets it."""
        return self[CALLSIGN_FIELD]


@dataclass(frozen=True)
class IngestionPolicy:
    """Per-schema rules for copying source fields into merged records.

    Attributes:
        schema: Input schema consumed by this pass.
        creates_entries: Whether unknown IDs create new merged records.
        tolerate_missing_id: Whether unknown IDs are skipped instead of fatal.
        copy_fields: Output field to source field pairs copied verbatim.
        date_fields: Output field to source field pairs reformatted to ISO
            dates when the source value is non-empty.
    """

    schema: SchemaDescriptor
    creates_entries: bool
    tolerate_missing_id: bool
    copy_fields: tuple[tuple[str, str], ...]
    date_fields: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class IngestionSummary:
    """Outcome counts of one ingestion pass.

    Attributes:
        schema_name: Input schema name.
        applied: Records merged into the store.
        skipped: Records dropped because their ID was unknown.
    """

    schema_name: str
    applied: int
    skipped: int


@dataclass(frozen=True)
class ExclusionSets:
    """IDs of licenses removed before merge.

    Attributes:
        expired: IDs whose expiration date is in the past.
        cancelled: IDs whose cancellation date is in the past.
    """

    expired: frozenset[str]
    cancelled: frozenset[str]

    def __contains__(self, record_id: object) -> bool:
        return record_id in self.expired or record_id in self.cancelled


@dataclass(frozen=True)
class SourceStreams:
    """The four parsed input streams, each in file order."""

    am: list[DatRecord]
    co: list[DatRecord]
    en: list[DatRecord]
    hd: list[DatRecord]


@dataclass(frozen=True)
class MergeResult:
    """Output of one complete merge run.

    Attributes:
        records: Merged records in final callsign order.
        summaries: Ingestion counts in pass order.
        exclusions: IDs filtered out before merge.
    """

    records: tuple[MergedRecord, ...]
    summaries: tuple[IngestionSummary, ...]
    exclusions: ExclusionSets
