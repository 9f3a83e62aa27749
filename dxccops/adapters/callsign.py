"""Analyze callsigns against the ClubLog reference data.

``analyze_callsign`` tells the entity, CQ zone, continent and location a
callsign counted for at a given point in time.  The rules are applied in
a fixed order:

1. invalid operations reject the call,
2. callsign exceptions replace everything else,
3. the call is split into prefixes and appendices and resolved by shape,
4. CQ zone exceptions patch the zone of the result.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from dxccops.adapters.clublog import ClubLogQuery
from dxccops.adapters.prefix import get_prefix, is_single_digit_appendix
from dxccops.adapters.segmenter import State, segment_callsign
from dxccops.log import log_debug
from dxccops.models.callsign import Callsign, CallsignError, CallsignErrorKind
from dxccops.models.clublog import Prefix, as_utc

RE_COMPLETE_CALL = re.compile(r"^[A-Z0-9]+(?:/[A-Z0-9]+)*$")
RE_HOMECALL_DIGIT = re.compile(r"^([A-Z0-9]+)(\d)([A-Z0-9]+)$")

# Appendices meaning the call counts for no entity at all
NO_ENTITY_APPENDICES = {
    "AM": Callsign.aeronautical_mobile,
    "MM": Callsign.maritime_mobile,
    "SAT": Callsign.satellite,
}


def is_valid_format(call: str) -> bool:
    """Only A-Z, 0-9 and inner single slashes; at least two chars."""
    return len(call) >= 2 and RE_COMPLETE_CALL.match(call) is not None


def apply_zone_exception(
    query: ClubLogQuery, callsign: Callsign, timestamp: datetime
) -> Callsign:
    """Return ``callsign`` with the CQ zone of an active zone exception."""
    cqz = query.get_zone_exception(callsign.call, timestamp)
    if cqz is None:
        return callsign
    return callsign.model_copy(update={"cqzone": cqz})


def _from_prefix(
    query: ClubLogQuery, call: str, prefix: Prefix, timestamp: datetime
) -> Callsign:
    return apply_zone_exception(query, Callsign.from_prefix(call, prefix), timestamp)


@dataclass(frozen=True)
class _Homecall:
    """Context of a call made of one prefix and appendices, e.g. W1AW/P."""

    query: ClubLogQuery
    call: str
    timestamp: datetime
    homecall: str
    appendices: Sequence[str]
    prefix: Prefix


def _special_appendix(ctx: _Homecall) -> Optional[Callsign]:
    """/AM, /MM or /SAT: the prefix does not matter."""
    found = [a for a in ctx.appendices if a in NO_ENTITY_APPENDICES]
    if not found:
        return None
    if len(found) > 1:
        raise CallsignError(CallsignErrorKind.MULTIPLE_SPECIAL_APPENDICES, ctx.call)
    return NO_ENTITY_APPENDICES[found[0]](ctx.call)


def _maritime_prefix(ctx: _Homecall) -> Optional[Callsign]:
    """Prefix record itself refers to maritime mobile."""
    if ctx.prefix.is_maritime_mobile:
        return Callsign.maritime_mobile(ctx.call)
    return None


def _single_digit_appendix(ctx: _Homecall) -> Optional[Callsign]:
    """A single digit appendix may move the call to another prefix.

    Example: SV0ABC/9 where SV is Greece but SV9 is Crete.
    """
    digits = [a for a in ctx.appendices if is_single_digit_appendix(a)]
    if not digits:
        return None
    if len(digits) > 1:
        raise CallsignError(CallsignErrorKind.MULTIPLE_SINGLE_DIGIT_APPENDICES, ctx.call)

    match = RE_HOMECALL_DIGIT.match(ctx.homecall)
    if match is None:
        return None
    new_homecall = f"{match.group(1)}{digits[0]}{match.group(3)}"

    found = get_prefix(ctx.query, new_homecall, ctx.timestamp, ctx.appendices)
    if found is None:
        return None
    return _from_prefix(ctx.query, ctx.call, found[0], ctx.timestamp)


def _homecall_prefix(ctx: _Homecall) -> Optional[Callsign]:
    return _from_prefix(ctx.query, ctx.call, ctx.prefix, ctx.timestamp)


# Evaluated in order, the first stage returning a callsign wins
HOMECALL_STAGES: List[Callable[[_Homecall], Optional[Callsign]]] = [
    _special_appendix,
    _maritime_prefix,
    _single_digit_appendix,
    _homecall_prefix,
]


def _resolve_single_prefix(query: ClubLogQuery, call: str, timestamp: datetime) -> Callsign:
    prefix = get_prefix(query, call, timestamp)[0]
    if prefix.is_maritime_mobile:
        return Callsign.maritime_mobile(call)
    return _from_prefix(query, call, prefix, timestamp)


def _resolve_homecall(
    query: ClubLogQuery, call: str, parts: List[str], timestamp: datetime
) -> Callsign:
    homecall, appendices = parts[0], parts[1:]
    prefix = get_prefix(query, homecall, timestamp, appendices)[0]
    ctx = _Homecall(query, call, timestamp, homecall, appendices, prefix)
    for stage in HOMECALL_STAGES:
        callsign = stage(ctx)
        if callsign is not None:
            return callsign
    raise AssertionError("Homecall stages must always produce a callsign")


def _resolve_two_prefixes(
    query: ClubLogQuery, call: str, parts: List[str], timestamp: datetime
) -> Callsign:
    # The prefix that needed fewer chars removed wins, ties go to the first
    # one.  A compound match like 3D2/R for the first part already used the
    # second part as its appendix and wins outright.  This heuristic is not
    # known to be right for every compound prefix.
    appendices = parts[1:]
    first, first_removed = get_prefix(query, parts[0], timestamp, appendices)
    second, second_removed = get_prefix(query, parts[1], timestamp, appendices)

    if first.is_compound or first_removed <= second_removed:
        prefix = first
    else:
        prefix = second
    return _from_prefix(query, call, prefix, timestamp)


def analyze_callsign(query: ClubLogQuery, call: str, timestamp: datetime) -> Callsign:
    """Analyze a callsign to get its entity, CQ zone and location.

    Args:
        query: Reference data backend
        call: Complete callsign, e.g. ``W1AW/P`` (upper case)
        timestamp: Point in time of the contact

    Returns:
        Analyzed callsign

    Raises:
        CallsignError: The call is malformed, invalid or ambiguous
    """
    timestamp = as_utc(timestamp)
    try:
        callsign = _analyze(query, call, timestamp)
    except CallsignError as e:
        log_debug("callsign_rejected", call=call, timestamp=timestamp, reason=e.kind.value)
        raise
    log_debug(
        "callsign_analyzed",
        call=call,
        timestamp=timestamp,
        adif=callsign.adif,
        cqzone=callsign.cqzone,
    )
    return callsign


def _analyze(query: ClubLogQuery, call: str, timestamp: datetime) -> Callsign:
    if not is_valid_format(call):
        raise CallsignError(CallsignErrorKind.BASIC_FORMAT, call)

    if query.is_invalid_operation(call, timestamp):
        raise CallsignError(CallsignErrorKind.INVALID_OPERATION, call)

    exc = query.get_callsign_exception(call, timestamp)
    if exc is not None:
        return Callsign.from_exception(call, exc)

    elements, state = segment_callsign(query, call, timestamp)
    parts = [e.part for e in elements]

    if state is State.SINGLE_PREFIX:
        return _resolve_single_prefix(query, call, timestamp)
    if state is State.PREFIX_COMPLETE_1:
        return _resolve_homecall(query, call, parts, timestamp)
    return _resolve_two_prefixes(query, call, parts, timestamp)
