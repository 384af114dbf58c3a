"""ULS merge CLI entry point.

This module maps the command line onto one merge run and writes the
merged dataset to stdout. Diagnostics go to stderr.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from core.config import MergeConfig
from core.constants import SOURCE_ENCODING
from core.errors import UlsMergeError
from ingest.pipeline import merge_sources
from store.serializer import serialize_records


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="uls-merge",
        description="Merge FCC ULS amateur AM, CO, EN and HD files into one record per license",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        help="Directory holding AM.dat, CO.dat, EN.dat and HD.dat (default: current directory)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ULS merge CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = MergeConfig.from_source_dir(args.directory)
        result = merge_sources(config)
    except UlsMergeError as error:
        print(f"merge_error={error}", file=sys.stderr)
        return 1
    # Latin-1 round-trips every source byte.
    sys.stdout.buffer.write(serialize_records(result.records).encode(SOURCE_ENCODING))
    sys.stdout.buffer.flush()
    return 0
