"""Adapter exports."""

from .callsign import analyze_callsign
from .clublog import ClubLogAdapter, ClubLogMapAdapter, ClubLogQuery, get_clublog_adapter
from .prefix import get_prefix
from .segmenter import segment_callsign
from .whitelist import check_whitelist

__all__ = [
    "analyze_callsign",
    "check_whitelist",
    "get_clublog_adapter",
    "get_prefix",
    "segment_callsign",
    "ClubLogAdapter",
    "ClubLogMapAdapter",
    "ClubLogQuery",
]
