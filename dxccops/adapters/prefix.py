"""Longest-match search for callsign prefixes."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Tuple

from dxccops.adapters.clublog import ClubLogQuery
from dxccops.models.clublog import Prefix


def is_single_char_appendix(part: str) -> bool:
    return len(part) == 1 and part.isalpha()


def is_single_digit_appendix(part: str) -> bool:
    return len(part) == 1 and part.isdigit()


def get_prefix(
    query: ClubLogQuery,
    potential_prefix: str,
    timestamp: datetime,
    appendices: Iterable[str] = (),
) -> Optional[Tuple[Prefix, int]]:
    """Search for the most specific prefix of ``potential_prefix``.

    The candidate is shortened char by char from the back until a prefix
    matches, so ``UA9ABC`` hits ``UA9`` before ``U``.  At every length the
    single letter appendices are tried first as ``<candidate>/<appendix>``
    to catch compound prefixes like ``SV/A`` for ``SV1ABC/A``.

    Args:
        query: Reference data backend
        potential_prefix: Part of a callsign, e.g. ``UA9ABC``
        timestamp: Point in time to check
        appendices: Other parts of the callsign

    Returns:
        Matching prefix and the number of chars removed, or None
    """
    if not potential_prefix:
        raise ValueError("Potential prefix must not be empty")

    single_chars = [a for a in appendices if is_single_char_appendix(a)]

    length = len(potential_prefix)
    for cnt in range(length, 0, -1):
        candidate = potential_prefix[:cnt]
        for appendix in single_chars:
            pref = query.get_prefix(f"{candidate}/{appendix}", timestamp)
            if pref is not None:
                return pref, length - cnt

        pref = query.get_prefix(candidate, timestamp)
        if pref is not None:
            return pref, length - cnt

    return None
