"""Date helpers for ULS fields.

ULS files carry US-style MM/DD/YYYY dates; merged output uses ISO 8601
extended dates, which also compare correctly as plain strings.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from core.errors import DateFormatError

_US_DATE_PATTERN = re.compile(r"\d{2}/\d{2}/\d{4}")


def to_iso_date(us_date: str) -> str:
    """Reformat an MM/DD/YYYY date as YYYY-MM-DD.

    Only the layout is checked; calendar validity is not.

    Args:
        us_date: Date string from a ULS record.

    Returns:
        ISO 8601 extended-format date.

    Raises:
        DateFormatError: If the value is not a fixed-width US date.
    """
    if not _US_DATE_PATTERN.fullmatch(us_date):
        raise DateFormatError(us_date)
    return f"{us_date[6:10]}-{us_date[0:2]}-{us_date[3:5]}"


def today_iso() -> str:
    """Return the current UTC calendar date as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()
