"""Classical callsign sort order.

Differences from plain code-point order, decided at the first differing
character: letters come before digits, ``0`` is the highest digit, and
``/`` comes after everything else. A callsign sorts before any longer
callsign it prefixes.
"""

from __future__ import annotations

import string
from functools import cmp_to_key
from typing import Any

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_PORTABLE_SEPARATOR = "/"


def compare_callsigns(first: str, second: str) -> int:
    """Three-way compare two callsigns.

    Args:
        first: Left callsign.
        second: Right callsign.

    Returns:
        Negative if ``first`` sorts earlier, positive if later, zero if equal.
    """
    for left, right in zip(first, second):
        if left != right:
            return _compare_characters(left, right)
    return len(first) - len(second)


_CALLSIGN_KEY = cmp_to_key(compare_callsigns)


def callsign_sort_key(callsign: str) -> Any:
    """Return a sort key ordering callsigns by ``compare_callsigns``."""
    return _CALLSIGN_KEY(callsign)


def _compare_characters(left: str, right: str) -> int:
    """Order two distinct characters."""
    if right == _PORTABLE_SEPARATOR:
        return -1
    if left == _PORTABLE_SEPARATOR:
        return 1
    if left in _LETTERS and right in _DIGITS:
        return -1
    if left in _DIGITS and right in _LETTERS:
        return 1
    if left in _DIGITS and right in _DIGITS:
        if left == "0":
            return 1
        if right == "0":
            return -1
    return -1 if left < right else 1
