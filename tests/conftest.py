"""
Pytest configuration and fixtures.

The reference table is built explicitly for every test instead of being
loaded from a ClubLog XML file.
"""

from datetime import datetime, timezone

import pytest

from dxccops import ClubLog, get_clublog_adapter


def utc(year, month=1, day=1):
    return datetime(year, month, day, tzinfo=timezone.utc)


NOW = utc(2020)


def clublog_data() -> dict:
    """Synthetic reference data in the shape of the ClubLog document."""
    return {
        "date": "2020-01-01T00:00:00+00:00",
        "entities": [
            {"adif": 100, "name": "E100", "prefix": "AB", "cqz": 10, "cont": "EU"},
            {
                "adif": 200,
                "name": "E200",
                "prefix": "AB9",
                "cqz": 20,
                "cont": "AS",
                "whitelist": True,
                "whitelist_start": "2000-01-01T00:00:00+00:00",
                "whitelist_end": "2010-01-01T00:00:00+00:00",
            },
            {"adif": 300, "name": "E300", "prefix": "SV", "cqz": 30, "cont": "EU"},
            {"adif": 400, "name": "E400", "prefix": "CC/A", "cqz": 40, "cont": "EU"},
            {"adif": 279, "name": "SCOTLAND", "prefix": "MM", "cqz": 14, "cont": "EU"},
            {"adif": 227, "name": "FRANCE", "prefix": "F", "cqz": 14, "cont": "EU"},
            {"adif": 291, "name": "UNITED STATES OF AMERICA", "prefix": "K", "cqz": 5, "cont": "NA"},
        ],
        "prefixes": [
            {"record": 1, "call": "AB", "entity": "E100", "adif": 100, "cqz": 10,
             "cont": "EU", "long": 10.5, "lat": 50.25},
            {"record": 2, "call": "AB9", "entity": "E200", "adif": 200, "cqz": 20, "cont": "AS"},
            {"record": 3, "call": "SV", "entity": "E300", "adif": 300, "cqz": 30, "cont": "EU"},
            {"record": 4, "call": "SV9", "entity": "E300 ISLAND", "adif": 301, "cqz": 31, "cont": "EU"},
            {"record": 5, "call": "CC/A", "entity": "E400", "adif": 400, "cqz": 40, "cont": "EU"},
            {"record": 6, "call": "CC", "entity": "E402", "adif": 402, "cqz": 41, "cont": "EU"},
            {"record": 7, "call": "MM", "entity": "SCOTLAND", "adif": 279, "cqz": 14, "cont": "EU"},
            {"record": 8, "call": "M", "entity": "ENGLAND", "adif": 223, "cqz": 14, "cont": "EU"},
            {"record": 9, "call": "F", "entity": "FRANCE", "adif": 227, "cqz": 14, "cont": "EU"},
            {"record": 10, "call": "W", "entity": "UNITED STATES OF AMERICA", "adif": 291,
             "cqz": 5, "cont": "NA"},
            {"record": 11, "call": "XM", "entity": "MARITIME MOBILE", "adif": 0},
            {"record": 12, "call": "Y2", "entity": "GERMAN DEMOCRATIC REPUBLIC", "adif": 229,
             "cqz": 14, "end": "1990-10-02T23:59:59+00:00"},
            {"record": 13, "call": "Y2", "entity": "FEDERAL REPUBLIC OF GERMANY", "adif": 230,
             "cqz": 14, "start": "1990-10-03T00:00:00+00:00"},
        ],
        "exceptions": [
            {"record": 1, "call": "AB1ZZ", "entity": "E200", "adif": 200, "cqz": 20, "cont": "AS"},
            {"record": 2, "call": "AB7XX", "entity": "E100", "adif": 100, "cqz": 10, "cont": "EU"},
            {"record": 3, "call": "AB4SAT", "entity": "SATELLITE, INTERNET OR REPEATER", "adif": 0},
            {"record": 4, "call": "AB5OLD", "entity": "E300", "adif": 300, "cqz": 30,
             "start": "1990-01-01T00:00:00+00:00", "end": "1995-01-01T00:00:00+00:00"},
        ],
        "invalid_operations": [
            {"record": 1, "call": "AB3BAD", "start": "2019-01-01T00:00:00+00:00",
             "end": "2021-01-01T00:00:00+00:00"},
        ],
        "zone_exceptions": [
            {"record": 1, "call": "AB2WW", "zone": 99, "start": "2019-01-01T00:00:00+00:00",
             "end": "2021-01-01T00:00:00+00:00"},
        ],
    }


@pytest.fixture
def clublog():
    """Fresh reference table for each test."""
    return ClubLog.model_validate(clublog_data())


@pytest.fixture(params=["scan", "map"])
def query(request, clublog):
    """Run the test against both query backends."""
    return get_clublog_adapter(clublog, request.param)
