"""Pydantic models for the ClubLog entity and prefix reference data.

The ClubLog data set lists DXCC entities together with the callsign
prefixes, callsign exceptions, invalid operations and CQ zone exceptions
that map a callsign to an entity.  Every record carries an optional
validity window; a record only applies to contacts made within it.
"""

from __future__ import annotations

from datetime import datetime, timezone
from itertools import combinations
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator


# Special ADIF identifier representing "no DXCC" (/AM, /MM, /SAT)
ADIF_ID_NO_DXCC = 0

# Special entity names used by prefixes and callsign exceptions
ENTITY_INVALID = "INVALID"
ENTITY_MARITIME_MOBILE = "MARITIME MOBILE"
ENTITY_AERONAUTICAL_MOBILE = "AERONAUTICAL MOBILE"
ENTITY_SATELLITE = "SATELLITE, INTERNET OR REPEATER"


def as_utc(timestamp: datetime) -> datetime:
    """Return ``timestamp`` as an aware UTC datetime (naive means UTC)."""
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc)


def is_in_time_window(
    timestamp: datetime,
    start: Optional[datetime],
    end: Optional[datetime],
) -> bool:
    """Check whether ``timestamp`` lies within ``[start, end]``.

    A missing bound leaves the window open on that side.
    """
    timestamp = as_utc(timestamp)
    if start is not None and timestamp < start:
        return False
    if end is not None and timestamp > end:
        return False
    return True


def _windows_overlap(first: "TimeWindowed", second: "TimeWindowed") -> bool:
    if first.start is not None and second.end is not None and first.start > second.end:
        return False
    if second.start is not None and first.end is not None and second.start > first.end:
        return False
    return True


class TimeWindowed(BaseModel):
    """Base for all records with an optional validity window."""

    model_config = ConfigDict(frozen=True)

    start: Optional[datetime] = None  # first instant the record applies
    end: Optional[datetime] = None  # last instant the record applies

    @field_validator("start", "end")
    @classmethod
    def window_to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value) if value is not None else None

    def is_active(self, timestamp: datetime) -> bool:
        """True if the record applies at ``timestamp``."""
        return is_in_time_window(timestamp, self.start, self.end)


class Entity(TimeWindowed):
    """Single DXCC entity.

    If ``whitelist`` is set, only approved callsigns count for the entity.
    The approved calls are part of the callsign exception list.  The
    whitelist window is independent of the entity's own validity window
    and either bound may be missing even when the entity is whitelisted.
    """

    adif: int
    name: str
    prefix: str = ""  # main prefix
    deleted: bool = False
    cqz: Optional[int] = None
    cont: Optional[str] = None
    long: Optional[float] = None
    lat: Optional[float] = None
    whitelist: Optional[bool] = None
    whitelist_start: Optional[datetime] = None
    whitelist_end: Optional[datetime] = None

    @field_validator("whitelist_start", "whitelist_end")
    @classmethod
    def whitelist_window_to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value) if value is not None else None


class Prefix(TimeWindowed):
    """Callsign prefix such as ``DL``, or a compound one such as ``SV/A``."""

    record: int = 0
    call: str
    entity: str
    adif: int
    cqz: Optional[int] = None
    cont: Optional[str] = None
    long: Optional[float] = None
    lat: Optional[float] = None

    @property
    def is_maritime_mobile(self) -> bool:
        return self.entity == ENTITY_MARITIME_MOBILE

    @property
    def is_invalid(self) -> bool:
        return self.entity == ENTITY_INVALID

    @property
    def is_compound(self) -> bool:
        """True for prefixes like ``SV/A`` that include an appendix."""
        return "/" in self.call


class CallsignException(TimeWindowed):
    """Entity override for one exact callsign.

    Exceptions for /AM, /MM and /SAT style operations name one of the
    special entities and carry ``ADIF_ID_NO_DXCC``.  Valid calls for a
    whitelisted entity are listed here as well.
    """

    record: int = 0
    call: str
    entity: str
    adif: int
    cqz: Optional[int] = None
    cont: Optional[str] = None
    long: Optional[float] = None
    lat: Optional[float] = None


class InvalidOperation(TimeWindowed):
    """Callsign that was never valid within the window."""

    record: int = 0
    call: str


class ZoneException(TimeWindowed):
    """CQ zone override for one exact callsign."""

    record: int = 0
    call: str
    zone: int


# (record kind, key, first record, second record)
Overlap = Tuple[str, object, TimeWindowed, TimeWindowed]


class ClubLog(BaseModel):
    """Complete reference table, immutable once built.

    Record lists keep the order of the source document, which decides the
    winner if two records for the same key are active at the same time.
    """

    model_config = ConfigDict(frozen=True)

    date: Optional[datetime] = None  # timestamp of the data set
    entities: List[Entity] = []
    exceptions: List[CallsignException] = []
    prefixes: List[Prefix] = []
    invalid_operations: List[InvalidOperation] = []
    zone_exceptions: List[ZoneException] = []

    def key_groups(self) -> Iterable[Tuple[str, Dict[object, List[TimeWindowed]]]]:
        """Yield ``(kind, {key: records})`` for every record list."""
        lists = (
            ("entity", self.entities, lambda r: r.adif),
            ("exception", self.exceptions, lambda r: r.call),
            ("prefix", self.prefixes, lambda r: r.call),
            ("invalid_operation", self.invalid_operations, lambda r: r.call),
            ("zone_exception", self.zone_exceptions, lambda r: r.call),
        )
        for kind, records, key in lists:
            groups: Dict[object, List[TimeWindowed]] = {}
            for record in records:
                groups.setdefault(key(record), []).append(record)
            yield kind, groups

    def overlapping_windows(self) -> List[Overlap]:
        """List record pairs sharing a key whose validity windows overlap.

        Lookups take the first active record, so any pair reported here
        makes the result depend on the record order.
        """
        overlaps: List[Overlap] = []
        for kind, groups in self.key_groups():
            for key, records in groups.items():
                for first, second in combinations(records, 2):
                    if _windows_overlap(first, second):
                        overlaps.append((kind, key, first, second))
        return overlaps
