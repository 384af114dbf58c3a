"""Runtime configuration model for ULS merge.

This module owns source-directory resolution and validation.
Other modules consume a typed config object instead of raw arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.constants import (
    AM_FILE_NAME,
    CO_FILE_NAME,
    DEFAULT_LOAD_WORKERS,
    EN_FILE_NAME,
    HD_FILE_NAME,
)
from core.errors import UlsConfigError

_SOURCE_FILE_NAMES = {
    "AM": AM_FILE_NAME,
    "CO": CO_FILE_NAME,
    "EN": EN_FILE_NAME,
    "HD": HD_FILE_NAME,
}


@dataclass(frozen=True)
class MergeConfig:
    """Validated runtime configuration.

    Attributes:
        source_dir: Directory holding the AM, CO, EN and HD .dat files.
        load_workers: Worker threads used to load source files.
    """

    source_dir: Path
    load_workers: int = DEFAULT_LOAD_WORKERS

    @classmethod
    def from_source_dir(cls, source_dir: str | Path | None = None) -> "MergeConfig":
        """Build config from a source directory argument.

        Args:
            source_dir: Directory path; the current directory when omitted.

        Returns:
            A validated config object.

        Raises:
            UlsConfigError: If the path is missing or not a directory.
        """
        raw_path = Path(source_dir) if source_dir else Path.cwd()
        resolved = raw_path.expanduser().resolve()
        if not resolved.exists():
            raise UlsConfigError(
                f"Source directory {resolved} does not exist. "
                "Pass the directory holding the unpacked ULS .dat files."
            )
        if not resolved.is_dir():
            raise UlsConfigError(
                f"Source path {resolved} is not a directory. "
                "Pass the directory holding the unpacked ULS .dat files."
            )
        return cls(source_dir=resolved)

    def source_path(self, schema_name: str) -> Path:
        """Return the expected .dat file path for one input schema.

        Raises:
            UlsConfigError: If the schema is not a consumed input schema.
        """
        file_name = _SOURCE_FILE_NAMES.get(schema_name)
        if file_name is None:
            raise UlsConfigError(
                f"No source file is defined for schema '{schema_name}'. "
                f"Supported schemas: {tuple(_SOURCE_FILE_NAMES)}."
            )
        return self.source_dir / file_name
