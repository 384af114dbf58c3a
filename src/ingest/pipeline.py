"""Merge orchestration for one ULS snapshot.

This module coordinates source loading, expiry filtering, the ordered
merge passes, validation, and final ordering into one run.
"""

from __future__ import annotations

from core.config import MergeConfig
from core.dates import today_iso
from core.logging_config import get_logger
from core.schemas import FCC_SCHEMA
from core.types import DatRecord, IngestionPolicy, MergeResult, SourceStreams
from ingest.parallel_load import load_source_streams
from store.ingestion_policies import AM_POLICY, CO_POLICY, EN_POLICY, HD_POLICY
from store.merge_store import MergeStore
from store.serializer import order_records
from transforms.expiry_filter import collect_excluded_ids, remove_excluded

_LOGGER = get_logger(__name__)


class MergePipelineRunner:
    """Runner for a full load, filter, merge and order cycle."""

    def __init__(self, config: MergeConfig, today: str | None = None) -> None:
        self._config = config
        self._today = today or today_iso()

    def run(self) -> MergeResult:
        """Load the configured snapshot and return the merged result."""
        streams = load_source_streams(self._config)
        return merge_streams(streams, self._today)


def merge_sources(config: MergeConfig, today: str | None = None) -> MergeResult:
    """Run the merge pipeline against a source directory.

    Args:
        config: Runtime configuration.
        today: Optional YYYY-MM-DD override for the expiry cutoff; the
            current UTC date when omitted.

    Returns:
        Ordered merged records plus run counts.

    Raises:
        UlsIngestError: If any source file is unreadable or malformed.
        UlsJoinError: If the sources are inconsistent.
        DateFormatError: If a date field is malformed.
    """
    runner = MergePipelineRunner(config, today)
    return runner.run()


def merge_streams(streams: SourceStreams, today: str) -> MergeResult:
    """Filter and merge already loaded streams.

    Passes run strictly in AM, CO, EN, HD order against one store.

    Args:
        streams: Parsed source streams.
        today: Expiry cutoff as YYYY-MM-DD.

    Returns:
        Ordered merged records plus run counts.
    """
    exclusions = collect_excluded_ids(streams.hd, today)
    filtered = remove_excluded(streams, exclusions)
    store = MergeStore(FCC_SCHEMA)
    summaries = tuple(
        store.ingest(records, policy) for records, policy in _ordered_passes(filtered)
    )
    dropped_count = store.drop_records_without_callsign()
    ordered = order_records(store.records())
    _LOGGER.info(
        "merge_completed",
        record_count=len(store),
        output_count=len(ordered),
        dropped_without_callsign=dropped_count,
        duplicate_callsigns=len(store) - len(ordered),
    )
    return MergeResult(records=tuple(ordered), summaries=summaries, exclusions=exclusions)


def _ordered_passes(
    streams: SourceStreams,
) -> tuple[tuple[list[DatRecord], IngestionPolicy], ...]:
    """Pair each stream with its policy in merge order."""
    return (
        (streams.am, AM_POLICY),
        (streams.co, CO_POLICY),
        (streams.en, EN_POLICY),
        (streams.hd, HD_POLICY),
    )
