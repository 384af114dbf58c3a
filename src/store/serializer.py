"""Final ordering and text rendering of merged records.

Records are emitted in callsign order, one pipe-delimited line each.
When several records share a callsign only the first placed is kept;
records are placed in ascending numeric ID order, so the smallest ID wins.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import FIELD_SEPARATOR
from core.types import MergedRecord
from transforms.callsign_order import callsign_sort_key


def order_records(records: Iterable[MergedRecord]) -> list[MergedRecord]:
    """Sort merged records by callsign and drop duplicate callsigns.

    Args:
        records: Validated merged records.

    Returns:
        Records in callsign order with unique callsigns.
    """
    by_id = sorted(records, key=lambda record: _numeric_id_key(record.record_id))
    by_callsign = sorted(by_id, key=lambda record: callsign_sort_key(record.callsign))
    ordered: list[MergedRecord] = []
    for record in by_callsign:
        if ordered and ordered[-1].callsign == record.callsign:
            continue
        ordered.append(record)
    return ordered


def format_record(record: MergedRecord) -> str:
    """Render one record as its fields joined by the separator."""
    return FIELD_SEPARATOR.join(record.values)


def serialize_records(records: Iterable[MergedRecord]) -> str:
    """Render ordered records as newline-terminated lines.

    Args:
        records: Records already in output order.

    Returns:
        Output text; empty when there are no records.
    """
    return "".join(f"{format_record(record)}\n" for record in records)


def _numeric_id_key(record_id: str) -> tuple[int, str]:
    """Order digit-only IDs numerically without parsing them."""
    stripped = record_id.lstrip("0")
    return len(stripped), stripped
