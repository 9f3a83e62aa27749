"""Whitelist check for entities that only accept approved callsigns."""

from __future__ import annotations

from datetime import datetime

from dxccops.adapters.clublog import ClubLogQuery
from dxccops.log import log_debug
from dxccops.models.clublog import as_utc


def check_whitelist(query: ClubLogQuery, call: str, adif: int, timestamp: datetime) -> bool:
    """Check the call against the whitelist of entity ``adif``, if enabled.

    This does not check the call itself; run ``analyze_callsign`` first and
    pass the resolved ADIF identifier.

    Returns:
        False if whitelisting is active for the entity at ``timestamp`` and
        the call is not approved, True otherwise
    """
    timestamp = as_utc(timestamp)

    # Not every ADIF identifier refers to an entity (e.g. /AM calls)
    entity = query.get_entity(adif, timestamp)
    if entity is None or entity.whitelist is not True:
        return True

    # An exception for the call may refer to a different entity
    exc = query.get_callsign_exception(call, timestamp)
    if exc is not None:
        return exc.adif == adif

    if entity.whitelist_start is not None and timestamp < entity.whitelist_start:
        return True
    if entity.whitelist_end is not None and timestamp > entity.whitelist_end:
        return True

    log_debug("whitelist_rejected", call=call, adif=adif, timestamp=timestamp)
    return False
