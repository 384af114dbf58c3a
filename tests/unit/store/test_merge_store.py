"""Unit tests for the ID-keyed merge store."""

from __future__ import annotations

import pytest

from core.errors import CallsignMismatchError, DateFormatError, JoinTargetMissingError
from core.schemas import AM_SCHEMA, CO_SCHEMA, EN_SCHEMA, FCC_SCHEMA, HD_SCHEMA
from core.types import MergedRecord
from store.ingestion_policies import AM_POLICY, CO_POLICY, EN_POLICY, HD_POLICY
from store.merge_store import MergeStore
from tests.record_builders import build_record


def _store_with_am(record_id: str = "100", callsign: str = "W1AW") -> MergeStore:
    store = MergeStore(FCC_SCHEMA)
    store.ingest([build_record(AM_SCHEMA, ID=record_id, CALLSIGN=callsign)], AM_POLICY)
    return store


def test_am_ingestion_creates_id_stamped_entry() -> None:
    """AM should create entries whose ID field equals the key."""
    store = MergeStore(FCC_SCHEMA)
    am_record = build_record(
        AM_SCHEMA,
        ID="100",
        CALLSIGN="W1AW",
        OPERATOR_CLASS="E",
        TRUSTEE_NAME="HIRAM",
    )

    store.ingest([am_record], AM_POLICY)
    merged = store.get("100")

    assert merged is not None and (merged.record_id, merged.callsign, merged["TRUSTEE_NAME"]) == (
        "100",
        "W1AW",
        "HIRAM",
    )


def test_co_ingestion_copies_comment_fields() -> None:
    """A matching CO record should fill the comment fields."""
    store = _store_with_am()
    co_record = build_record(
        CO_SCHEMA,
        ID="100",
        CALLSIGN="W1AW",
        COMMENT_DATE="01/15/2020",
        DESCRIPTION="CLUB STATION",
        STATUS_CODE="A",
        STATUS_DATE="02/01/2020",
    )

    store.ingest([co_record], CO_POLICY)
    merged = store.get("100")

    assert merged is not None and (
        merged["COMMENT_DATE"],
        merged["DESCRIPTION"],
        merged["CO_STATUS_CODE"],
        merged["CO_STATUS_DATE"],
    ) == ("2020-01-15", "CLUB STATION", "A", "2020-02-01")


def test_co_ingestion_requires_existing_entry() -> None:
    """A CO record for an unknown ID should be fatal."""
    store = _store_with_am()

    with pytest.raises(JoinTargetMissingError):
        store.ingest([build_record(CO_SCHEMA, ID="200", CALLSIGN="K1ABC")], CO_POLICY)


@pytest.mark.parametrize(
    ("schema", "policy"),
    [(EN_SCHEMA, EN_POLICY), (HD_SCHEMA, HD_POLICY)],
)
def test_auxiliary_ingestion_skips_unknown_id(schema, policy) -> None:
    """EN and HD records for unknown IDs should be skipped silently."""
    store = _store_with_am()
    before = store.get("100")
    snapshot = MergedRecord(FCC_SCHEMA, list(before.values)) if before else None

    summary = store.ingest([build_record(schema, ID="999", CALLSIGN="K9ZZZ")], policy)

    assert (summary.skipped, len(store), store.get("100")) == (1, 1, snapshot)


def test_en_ingestion_rejects_callsign_mismatch() -> None:
    """An EN callsign that disagrees with the merged one should be fatal."""
    store = _store_with_am()

    with pytest.raises(CallsignMismatchError):
        store.ingest([build_record(EN_SCHEMA, ID="100", CALLSIGN="W1AX")], EN_POLICY)


def test_hd_ingestion_rejects_callsign_mismatch() -> None:
    """An HD callsign that disagrees with the merged one should be fatal."""
    store = _store_with_am()

    with pytest.raises(CallsignMismatchError):
        store.ingest([build_record(HD_SCHEMA, ID="100", CALLSIGN="W1AX")], HD_POLICY)


def test_en_ingestion_copies_entity_and_linked_fields() -> None:
    """EN should fill name, address, status and linked-license fields."""
    store = _store_with_am()
    en_record = build_record(
        EN_SCHEMA,
        ID="100",
        CALLSIGN="W1AW",
        ENTITY_NAME="ARRL INC",
        CITY="NEWINGTON",
        STATUS_CODE="A",
        STATUS_DATE="03/04/2020",
        LINKED_ID="42",
        LINKED_CALLSIGN="W1AX",
    )

    store.ingest([en_record], EN_POLICY)
    merged = store.get("100")

    assert merged is not None and (
        merged["ENTITY_NAME"],
        merged["CITY"],
        merged["EN_STATUS_CODE"],
        merged["EN_STATUS_DATE"],
        merged["LINKED_ID"],
        merged["LINKED_CALLSIGN"],
    ) == ("ARRL INC", "NEWINGTON", "A", "2020-03-04", "42", "W1AX")


def test_hd_ingestion_reformats_dates_and_leaves_empty_ones_blank() -> None:
    """HD dates should be converted to ISO and empty dates left empty."""
    store = _store_with_am()
    hd_record = build_record(
        HD_SCHEMA,
        ID="100",
        CALLSIGN="W1AW",
        LICENSE_STATUS="A",
        GRANT_DATE="03/04/2020",
        EXPIRED_DATE="03/04/2030",
        LAST_ACTION_DATE="03/05/2020",
    )

    store.ingest([hd_record], HD_POLICY)
    merged = store.get("100")

    assert merged is not None and (
        merged["LICENSE_STATUS"],
        merged["GRANT_DATE"],
        merged["EXPIRED_DATE"],
        merged["CANCELLATION_DATE"],
        merged["LAST_ACTION_DATE"],
    ) == ("A", "2020-03-04", "2030-03-04", "", "2020-03-05")


def test_hd_ingestion_rejects_malformed_date() -> None:
    """A non-empty date in the wrong layout should be fatal."""
    store = _store_with_am()

    with pytest.raises(DateFormatError):
        store.ingest(
            [build_record(HD_SCHEMA, ID="100", CALLSIGN="W1AW", GRANT_DATE="2020-03-04")],
            HD_POLICY,
        )


def test_drop_records_without_callsign_removes_only_blank_callsigns() -> None:
    """Validation should drop callsign-less entries and keep the rest."""
    store = MergeStore(FCC_SCHEMA)
    store.ingest(
        [
            build_record(AM_SCHEMA, ID="100", CALLSIGN="W1AW"),
            build_record(AM_SCHEMA, ID="200", CALLSIGN=""),
        ],
        AM_POLICY,
    )

    dropped_count = store.drop_records_without_callsign()

    assert (dropped_count, [record.record_id for record in store.records()]) == (1, ["100"])


def test_co_ingestion_rejects_callsign_mismatch() -> None:
    """A CO callsign that disagrees with the merged one should be fatal."""
    store = _store_with_am()

    with pytest.raises(CallsignMismatchError) as error_info:
        store.ingest([build_record(CO_SCHEMA, ID="100", CALLSIGN="W1AX")], CO_POLICY)

    assert (error_info.value.schema_name, error_info.value.stored, error_info.value.found) == (
        "CO",
        "W1AW",
        "W1AX",
    )


def test_am_repeat_fills_entry_with_empty_callsign() -> None:
    """A repeated AM ID should overwrite an entry that has no callsign yet."""
    store = _store_with_am(callsign="")

    store.ingest([build_record(AM_SCHEMA, ID="100", CALLSIGN="W1AW")], AM_POLICY)
    merged = store.get("100")

    assert merged is not None and (len(store), merged.callsign) == (1, "W1AW")


def test_am_repeat_rejects_different_callsign() -> None:
    """A repeated AM ID should not replace a callsign already merged."""
    store = _store_with_am()

    with pytest.raises(CallsignMismatchError):
        store.ingest([build_record(AM_SCHEMA, ID="100", CALLSIGN="K1ABC")], AM_POLICY)


def test_malformed_date_error_names_schema_key_and_field() -> None:
    """A bad date should report the schema, the record ID and the source field."""
    store = _store_with_am()

    with pytest.raises(DateFormatError) as error_info:
        store.ingest(
            [build_record(CO_SCHEMA, ID="100", CALLSIGN="W1AW", STATUS_DATE="2020-02-01")],
            CO_POLICY,
        )

    assert str(error_info.value) == (
        "Invalid date '2020-02-01' in CO key 100 field STATUS_DATE: expected MM/DD/YYYY."
    )
