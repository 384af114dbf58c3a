"""Expired and cancelled license filtering.

This module derives excluded license IDs from the HD stream and removes
every record carrying one of those IDs from all four source streams,
before any merge pass runs.
"""

from __future__ import annotations

from typing import Iterable

from core.dates import to_iso_date
from core.errors import DateFormatError
from core.logging_config import get_logger
from core.types import DatRecord, ExclusionSets, SourceStreams

_LOGGER = get_logger(__name__)


def is_expired(record: DatRecord, today: str) -> bool:
    """Return whether an HD record's expiration date is before today.

    Args:
        record: HD record.
        today: Current date as YYYY-MM-DD.

    Returns:
        False when the expiration date is empty.
    """
    return _is_before(record, "EXPIRED_DATE", today)


def is_cancelled(record: DatRecord, today: str) -> bool:
    """Return whether an HD record's cancellation date is before today."""
    return _is_before(record, "CANCELLATION_DATE", today)


def collect_excluded_ids(hd_records: Iterable[DatRecord], today: str) -> ExclusionSets:
    """Collect the IDs of expired and cancelled licenses.

    Args:
        hd_records: Loaded HD stream.
        today: Current date as YYYY-MM-DD.

    Returns:
        Expired and cancelled ID sets.

    Raises:
        DateFormatError: If a non-empty date is not MM/DD/YYYY.
    """
    expired: set[str] = set()
    cancelled: set[str] = set()
    for record in hd_records:
        if is_expired(record, today):
            expired.add(record.record_id)
        if is_cancelled(record, today):
            cancelled.add(record.record_id)
    _LOGGER.info(
        "exclusions_computed",
        today=today,
        expired_count=len(expired),
        cancelled_count=len(cancelled),
    )
    return ExclusionSets(expired=frozenset(expired), cancelled=frozenset(cancelled))


def remove_excluded(streams: SourceStreams, exclusions: ExclusionSets) -> SourceStreams:
    """Drop excluded IDs from every stream, preserving file order.

    Args:
        streams: Loaded source streams.
        exclusions: IDs to remove.

    Returns:
        New streams without records whose ID is excluded.
    """
    return SourceStreams(
        am=_without_excluded("AM", streams.am, exclusions),
        co=_without_excluded("CO", streams.co, exclusions),
        en=_without_excluded("EN", streams.en, exclusions),
        hd=_without_excluded("HD", streams.hd, exclusions),
    )


def _without_excluded(
    schema_name: str,
    records: list[DatRecord],
    exclusions: ExclusionSets,
) -> list[DatRecord]:
    kept = [record for record in records if record.record_id not in exclusions]
    _LOGGER.info(
        "excluded_records_removed",
        schema=schema_name,
        removed_count=len(records) - len(kept),
    )
    return kept


def _is_before(record: DatRecord, field_name: str, today: str) -> bool:
    us_date = record[field_name]
    if not us_date:
        return False
    try:
        return to_iso_date(us_date) < today
    except DateFormatError as error:
        raise error.with_field(record.schema.name, record.record_id, field_name) from error
