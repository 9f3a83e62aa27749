"""Time-windowed queries against the ClubLog reference data.

Two interchangeable backends implement ``ClubLogQuery``:

- ``ClubLogAdapter`` scans the record lists on every lookup.
- ``ClubLogMapAdapter`` groups the records by key once and only scans the
  records sharing the requested key.

Both return the first record, in table order, whose validity window
contains the timestamp, so they always agree.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Protocol, Sequence, TypeVar

from dxccops import config
from dxccops.log import log_info, log_warning
from dxccops.models.clublog import (
    CallsignException,
    ClubLog,
    Entity,
    Prefix,
    TimeWindowed,
)

R = TypeVar("R", bound=TimeWindowed)


class ClubLogQuery(Protocol):
    """Access to the reference data at a given point in time."""

    def get_entity(self, adif: int, timestamp: datetime) -> Optional[Entity]:
        ...

    def get_prefix(self, prefix: str, timestamp: datetime) -> Optional[Prefix]:
        ...

    def get_callsign_exception(
        self, callsign: str, timestamp: datetime
    ) -> Optional[CallsignException]:
        ...

    def get_zone_exception(self, callsign: str, timestamp: datetime) -> Optional[int]:
        ...

    def is_invalid_operation(self, callsign: str, timestamp: datetime) -> bool:
        ...


def _first_active(records: Sequence[R], timestamp: datetime) -> Optional[R]:
    for record in records:
        if record.is_active(timestamp):
            return record
    return None


class ClubLogAdapter:
    """Linear search over the complete table."""

    def __init__(self, clublog: ClubLog):
        self.clublog = clublog

    def get_entity(self, adif: int, timestamp: datetime) -> Optional[Entity]:
        return next(
            (e for e in self.clublog.entities if e.adif == adif and e.is_active(timestamp)),
            None,
        )

    def get_prefix(self, prefix: str, timestamp: datetime) -> Optional[Prefix]:
        return next(
            (p for p in self.clublog.prefixes if p.call == prefix and p.is_active(timestamp)),
            None,
        )

    def get_callsign_exception(
        self, callsign: str, timestamp: datetime
    ) -> Optional[CallsignException]:
        return next(
            (
                e
                for e in self.clublog.exceptions
                if e.call == callsign and e.is_active(timestamp)
            ),
            None,
        )

    def get_zone_exception(self, callsign: str, timestamp: datetime) -> Optional[int]:
        exc = next(
            (
                z
                for z in self.clublog.zone_exceptions
                if z.call == callsign and z.is_active(timestamp)
            ),
            None,
        )
        return exc.zone if exc is not None else None

    def is_invalid_operation(self, callsign: str, timestamp: datetime) -> bool:
        return any(
            o.call == callsign and o.is_active(timestamp)
            for o in self.clublog.invalid_operations
        )


class ClubLogMapAdapter:
    """Dict based index from lookup key to the records sharing it."""

    def __init__(self, clublog: ClubLog):
        """Build the indices and report ambiguous key groups."""
        self.clublog = clublog
        groups: Dict[str, Dict[object, List[TimeWindowed]]] = dict(clublog.key_groups())
        self.entities = groups["entity"]
        self.callsign_exceptions = groups["exception"]
        self.prefixes = groups["prefix"]
        self.invalid_operations = groups["invalid_operation"]
        self.zone_exceptions = groups["zone_exception"]

        for kind, key, first, second in clublog.overlapping_windows():
            log_warning(
                "clublog_overlapping_windows",
                kind=kind,
                key=key,
                first=[first.start, first.end],
                second=[second.start, second.end],
            )
        log_info(
            "clublog_indexed",
            entities=len(self.entities),
            prefixes=len(self.prefixes),
            exceptions=len(self.callsign_exceptions),
        )

    def get_entity(self, adif: int, timestamp: datetime) -> Optional[Entity]:
        return _first_active(self.entities.get(adif, ()), timestamp)

    def get_prefix(self, prefix: str, timestamp: datetime) -> Optional[Prefix]:
        return _first_active(self.prefixes.get(prefix, ()), timestamp)

    def get_callsign_exception(
        self, callsign: str, timestamp: datetime
    ) -> Optional[CallsignException]:
        return _first_active(self.callsign_exceptions.get(callsign, ()), timestamp)

    def get_zone_exception(self, callsign: str, timestamp: datetime) -> Optional[int]:
        exc = _first_active(self.zone_exceptions.get(callsign, ()), timestamp)
        return exc.zone if exc is not None else None

    def is_invalid_operation(self, callsign: str, timestamp: datetime) -> bool:
        return _first_active(self.invalid_operations.get(callsign, ()), timestamp) is not None


BACKENDS = {
    "scan": ClubLogAdapter,
    "map": ClubLogMapAdapter,
}


def get_clublog_adapter(clublog: ClubLog, backend: Optional[str] = None) -> ClubLogQuery:
    """Wrap ``clublog`` in a query backend.

    Args:
        clublog: Reference table
        backend: "scan", "map" or "auto"; defaults to ``DXCCOPS_QUERY_BACKEND``

    Returns:
        Backend implementing ``ClubLogQuery``
    """
    backend = (backend or config.QUERY_BACKEND).lower()
    if backend == "auto":
        backend = "map" if len(clublog.prefixes) >= config.INDEX_THRESHOLD else "scan"
    if backend not in BACKENDS:
        raise ValueError(f"Unknown query backend {backend!r}, expected one of {sorted(BACKENDS)}")
    return BACKENDS[backend](clublog)
