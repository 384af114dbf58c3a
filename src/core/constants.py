"""Core constants used across ULS merge modules.

This module centralizes format and file-layout constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

FIELD_SEPARATOR = "|"
LINE_BREAK_PLACEHOLDER = "<LF>"
SOURCE_ENCODING = "latin-1"
AM_FILE_NAME = "AM.dat"
CO_FILE_NAME = "CO.dat"
EN_FILE_NAME = "EN.dat"
HD_FILE_NAME = "HD.dat"
DEFAULT_LOAD_WORKERS = 4
