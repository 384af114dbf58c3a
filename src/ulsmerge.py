"""Public SDK surface for ULS merge.

This module provides a stable import path for library users.
It re-exports the merge entry points and typed models.
"""

from __future__ import annotations

from core.config import MergeConfig
from core.schemas import AM_SCHEMA, CO_SCHEMA, EN_SCHEMA, FCC_SCHEMA, HD_SCHEMA
from core.types import DatRecord, MergedRecord, MergeResult, SchemaDescriptor
from ingest.dat_reader import read_dat_file
from ingest.pipeline import merge_sources, merge_streams
from store.serializer import order_records, serialize_records
from transforms.callsign_order import callsign_sort_key, compare_callsigns

__all__ = [
    "AM_SCHEMA",
    "CO_SCHEMA",
    "DatRecord",
    "EN_SCHEMA",
    "FCC_SCHEMA",
    "HD_SCHEMA",
    "MergeConfig",
    "MergeResult",
    "MergedRecord",
    "SchemaDescriptor",
    "callsign_sort_key",
    "compare_callsigns",
    "merge_sources",
    "merge_streams",
    "order_records",
    "read_dat_file",
    "serialize_records",
]
