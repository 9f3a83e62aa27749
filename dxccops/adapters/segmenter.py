"""Split a callsign into its parts and check its overall shape."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Tuple

from dxccops.adapters.clublog import ClubLogQuery
from dxccops.adapters.prefix import get_prefix
from dxccops.models.callsign import CallsignError, CallsignErrorKind

# Appendices that are never prefixes unless they start the call.
# MM as a whole call is Scotland, as an appendix it means maritime mobile.
APPENDIX_SPECIAL = ("AM", "MM", "SAT", "P", "M", "QRP", "LH")


class PartType(Enum):
    PREFIX = "prefix"
    OTHER = "other"


class State(Enum):
    """State of the part classification state machine."""

    NO_PREFIX = "no_prefix"
    SINGLE_PREFIX = "single_prefix"  # call is exactly one prefix
    PREFIX_COMPLETE_1 = "prefix_complete_1"  # one prefix, then appendices
    PREFIX_COMPLETE_2 = "prefix_complete_2"  # two prefixes, then appendices


@dataclass(frozen=True)
class Element:
    """Part of a callsign."""

    part: str
    part_type: PartType


def is_special_appendix(part: str) -> bool:
    return part in APPENDIX_SPECIAL


def classify_parts(query: ClubLogQuery, call: str, timestamp: datetime) -> List[Element]:
    """Split ``call`` on ``/`` and tag each part as prefix or other."""
    elements = []
    for pos, part in enumerate(call.split("/")):
        if get_prefix(query, part, timestamp) is None:
            part_type = PartType.OTHER
        elif pos >= 1 and is_special_appendix(part):
            part_type = PartType.OTHER
        else:
            part_type = PartType.PREFIX
        elements.append(Element(part, part_type))
    return elements


def segment_callsign(
    query: ClubLogQuery, call: str, timestamp: datetime
) -> Tuple[List[Element], State]:
    """Classify the parts of ``call`` and run them through the state machine.

    The call must begin with a prefix and may hold at most two leading
    prefixes; everything after them is treated as an appendix.

    Raises:
        CallsignError: BEGIN_WITHOUT_PREFIX or THIRD_PREFIX
    """
    elements = classify_parts(query, call, timestamp)

    state = State.NO_PREFIX
    for element in elements:
        is_prefix = element.part_type is PartType.PREFIX
        if state is State.NO_PREFIX:
            if not is_prefix:
                raise CallsignError(CallsignErrorKind.BEGIN_WITHOUT_PREFIX, call)
            state = State.SINGLE_PREFIX
        elif state is State.SINGLE_PREFIX:
            state = State.PREFIX_COMPLETE_2 if is_prefix else State.PREFIX_COMPLETE_1
        elif is_prefix:
            raise CallsignError(CallsignErrorKind.THIRD_PREFIX, call)

    return elements, state
