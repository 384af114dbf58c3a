"""ID-keyed store of merged license records.

This module owns the merged records for one run. A single generic pass
applies any input stream under its ingestion policy; the policy decides
whether unknown IDs create, skip, or abort.
"""

from __future__ import annotations

from typing import Iterable

from core.dates import to_iso_date
from core.errors import CallsignMismatchError, DateFormatError, JoinTargetMissingError
from core.logging_config import get_logger
from core.types import (
    DatRecord,
    IngestionPolicy,
    IngestionSummary,
    MergedRecord,
    SchemaDescriptor,
)

_LOGGER = get_logger(__name__)


class MergeStore:
    """Mapping from global ID to merged output record.

    Every stored record's ``ID`` field equals its key, and only policies
    with ``creates_entries`` add keys.
    """

    def __init__(self, schema: SchemaDescriptor) -> None:
        """Initialize an empty store.

        Args:
            schema: Output schema of the merged records.
        """
        self._schema = schema
        self._records: dict[str, MergedRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def get(self, record_id: str) -> MergedRecord | None:
        """Return the merged record for an ID, if present."""
        return self._records.get(record_id)

    def records(self) -> list[MergedRecord]:
        """Return all merged records in insertion order."""
        return list(self._records.values())

    def ingest(self, records: Iterable[DatRecord], policy: IngestionPolicy) -> IngestionSummary:
        """Merge one input stream into the store.

        Args:
            records: Parsed records of ``policy.schema``.
            policy: Field routing and missing-ID rule for the stream.

        Returns:
            Counts of applied and skipped records.

        Raises:
            JoinTargetMissingError: If an ID is unknown and the policy
                neither creates entries nor tolerates missing IDs.
            CallsignMismatchError: If a record's callsign disagrees with the
                callsign already merged for its ID.
            DateFormatError: If a non-empty date field is malformed.
        """
        applied = 0
        skipped = 0
        for source in records:
            target = self._resolve_target(source, policy)
            if target is None:
                skipped += 1
                continue
            _apply_fields(target, source, policy)
            applied += 1
        summary = IngestionSummary(schema_name=policy.schema.name, applied=applied, skipped=skipped)
        _LOGGER.info(
            "ingestion_completed",
            schema=summary.schema_name,
            applied=summary.applied,
            skipped=summary.skipped,
            store_size=len(self._records),
        )
        return summary

    def drop_records_without_callsign(self) -> int:
        """Remove merged records whose callsign is empty.

        Returns:
            Number of records removed.
        """
        missing = [key for key, record in self._records.items() if not record.callsign]
        for key in missing:
            del self._records[key]
        if missing:
            _LOGGER.warning("records_without_callsign_dropped", dropped_count=len(missing))
        return len(missing)

    def _resolve_target(self, source: DatRecord, policy: IngestionPolicy) -> MergedRecord | None:
        record_id = source.record_id
        target = self._records.get(record_id)
        if target is None:
            if policy.creates_entries:
                target = MergedRecord.blank(self._schema, record_id)
                self._records[record_id] = target
                return target
            if policy.tolerate_missing_id:
                return None
            raise JoinTargetMissingError(policy.schema.name, record_id)
        if policy.creates_entries and not target.callsign:
            return target
        if target.callsign != source.callsign:
            raise CallsignMismatchError(
                policy.schema.name,
                record_id,
                stored=target.callsign,
                found=source.callsign,
            )
        return target


def _apply_fields(target: MergedRecord, source: DatRecord, policy: IngestionPolicy) -> None:
    """Copy policy fields from one input record into its merged record."""
    for output_field, source_field in policy.copy_fields:
        target[output_field] = source[source_field]
    for output_field, source_field in policy.date_fields:
        value = source[source_field]
        if not value:
            continue
        try:
            target[output_field] = to_iso_date(value)
        except DateFormatError as error:
            raise error.with_field(policy.schema.name, source.record_id, source_field) from error
