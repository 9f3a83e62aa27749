"""Pydantic model representing an analyzed callsign."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from dxccops.models.clublog import (
    ADIF_ID_NO_DXCC,
    ENTITY_AERONAUTICAL_MOBILE,
    ENTITY_MARITIME_MOBILE,
    ENTITY_SATELLITE,
    CallsignException,
    Prefix,
)


class Callsign(BaseModel):
    """Callsign together with its entity, zone and location."""

    model_config = ConfigDict(frozen=True)

    call: str
    adif: int  # ADIF DXCC identifier
    dxcc: Optional[str] = None  # entity name
    cqzone: Optional[int] = None
    continent: Optional[str] = None
    longitude: Optional[float] = None
    latitude: Optional[float] = None

    def is_special_entity(self) -> bool:
        """True if the call counts for no DXCC (like /AM, /MM or /SAT)."""
        return self.adif == ADIF_ID_NO_DXCC

    @classmethod
    def from_prefix(cls, call: str, prefix: Prefix) -> "Callsign":
        return cls(
            call=call,
            adif=prefix.adif,
            dxcc=prefix.entity,
            cqzone=prefix.cqz,
            continent=prefix.cont,
            longitude=prefix.long,
            latitude=prefix.lat,
        )

    @classmethod
    def from_exception(cls, call: str, exc: CallsignException) -> "Callsign":
        return cls(
            call=call,
            adif=exc.adif,
            dxcc=exc.entity,
            cqzone=exc.cqz,
            continent=exc.cont,
            longitude=exc.long,
            latitude=exc.lat,
        )

    # The no-DXCC constructors only differ in the entity name, which is
    # kept for display; all geo fields stay empty.

    @classmethod
    def maritime_mobile(cls, call: str) -> "Callsign":
        return cls(call=call, adif=ADIF_ID_NO_DXCC, dxcc=ENTITY_MARITIME_MOBILE)

    @classmethod
    def aeronautical_mobile(cls, call: str) -> "Callsign":
        return cls(call=call, adif=ADIF_ID_NO_DXCC, dxcc=ENTITY_AERONAUTICAL_MOBILE)

    @classmethod
    def satellite(cls, call: str) -> "Callsign":
        return cls(call=call, adif=ADIF_ID_NO_DXCC, dxcc=ENTITY_SATELLITE)


class CallsignErrorKind(str, Enum):
    """Reasons for rejecting a callsign."""

    BASIC_FORMAT = "basic_format"
    INVALID_OPERATION = "invalid_operation"
    BEGIN_WITHOUT_PREFIX = "begin_without_prefix"
    THIRD_PREFIX = "third_prefix"
    MULTIPLE_SINGLE_DIGIT_APPENDICES = "multiple_single_digit_appendices"
    MULTIPLE_SPECIAL_APPENDICES = "multiple_special_appendices"


_MESSAGES = {
    CallsignErrorKind.BASIC_FORMAT: "Callsign is of invalid format or includes invalid characters",
    CallsignErrorKind.INVALID_OPERATION: "Callsign was used in an invalid operation",
    CallsignErrorKind.BEGIN_WITHOUT_PREFIX: "Callsign does not begin with a valid prefix",
    CallsignErrorKind.THIRD_PREFIX: "Unexpected third prefix",
    CallsignErrorKind.MULTIPLE_SINGLE_DIGIT_APPENDICES: "Multiple single digit appendices",
    CallsignErrorKind.MULTIPLE_SPECIAL_APPENDICES: "Multiple special appendices that indicate no entity",
}


class CallsignError(ValueError):
    """Raised when a callsign cannot be analyzed.

    ``kind`` tells the reason; the failure only depends on the call, the
    timestamp and the reference data, so retrying will not help.
    """

    def __init__(self, kind: CallsignErrorKind, call: str = "") -> None:
        self.kind = kind
        self.call = call
        message = _MESSAGES[kind]
        super().__init__(f"{call}: {message}" if call else message)
