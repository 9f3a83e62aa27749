"""Resolve amateur radio callsigns to DXCC entities using ClubLog data."""

from .adapters import (
    ClubLogAdapter,
    ClubLogMapAdapter,
    ClubLogQuery,
    analyze_callsign,
    check_whitelist,
    get_clublog_adapter,
)
from .models import (
    ADIF_ID_NO_DXCC,
    Callsign,
    CallsignError,
    CallsignErrorKind,
    CallsignException,
    ClubLog,
    Entity,
    InvalidOperation,
    Prefix,
    ZoneException,
    is_in_time_window,
)

__version__ = "0.1.0"

__all__ = [
    "ADIF_ID_NO_DXCC",
    "Callsign",
    "CallsignError",
    "CallsignErrorKind",
    "CallsignException",
    "ClubLog",
    "ClubLogAdapter",
    "ClubLogMapAdapter",
    "ClubLogQuery",
    "Entity",
    "InvalidOperation",
    "Prefix",
    "ZoneException",
    "analyze_callsign",
    "check_whitelist",
    "get_clublog_adapter",
    "is_in_time_window",
]
