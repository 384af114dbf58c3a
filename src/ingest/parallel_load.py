"""Concurrent loading of the four ULS source files.

Each file is parsed on its own worker into an isolated list. The call
returns only after every load has finished, so later stages never observe
a partially loaded snapshot.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from core.config import MergeConfig
from core.logging_config import get_logger
from core.schemas import INPUT_SCHEMAS
from core.types import DatRecord, SourceStreams
from ingest.dat_reader import read_dat_file

_LOGGER = get_logger(__name__)


def load_source_streams(config: MergeConfig) -> SourceStreams:
    """Load AM, CO, EN and HD concurrently and wait for all of them.

    Args:
        config: Runtime configuration naming the source directory.

    Returns:
        The four parsed streams.

    Raises:
        UlsIngestError: The first load failure; pending loads are cancelled
            and the results of loads still running are discarded.
    """
    loaded: dict[str, list[DatRecord]] = {}
    with ThreadPoolExecutor(max_workers=config.load_workers) as executor:
        futures: dict[Future[list[DatRecord]], str] = {
            executor.submit(read_dat_file, config.source_path(schema.name), schema): schema.name
            for schema in INPUT_SCHEMAS
        }
        try:
            for future in as_completed(futures):
                loaded[futures[future]] = future.result()
        except Exception:
            for pending in futures:
                pending.cancel()
            raise
    _LOGGER.info(
        "sources_loaded",
        source_dir=str(config.source_dir),
        record_counts={name: len(records) for name, records in sorted(loaded.items())},
    )
    return SourceStreams(am=loaded["AM"], co=loaded["CO"], en=loaded["EN"], hd=loaded["HD"])
