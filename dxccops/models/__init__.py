"""Model exports."""

from .callsign import Callsign, CallsignError, CallsignErrorKind
from .clublog import (
    ADIF_ID_NO_DXCC,
    ENTITY_AERONAUTICAL_MOBILE,
    ENTITY_INVALID,
    ENTITY_MARITIME_MOBILE,
    ENTITY_SATELLITE,
    CallsignException,
    ClubLog,
    Entity,
    InvalidOperation,
    Prefix,
    ZoneException,
    is_in_time_window,
)

__all__ = [
    "ADIF_ID_NO_DXCC",
    "ENTITY_AERONAUTICAL_MOBILE",
    "ENTITY_INVALID",
    "ENTITY_MARITIME_MOBILE",
    "ENTITY_SATELLITE",
    "Callsign",
    "CallsignError",
    "CallsignErrorKind",
    "CallsignException",
    "ClubLog",
    "Entity",
    "InvalidOperation",
    "Prefix",
    "ZoneException",
    "is_in_time_window",
]
