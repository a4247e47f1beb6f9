"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from pathlib import Path

# TEMPOCH Imports
from tempoch.engine.calendar import civilToMJDDay
from tempoch.time.civil_time import CivilTime

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"

# Common civil times
J2000_CIVIL = CivilTime(2000, 1, 1, 12)
TEST_CIVIL = CivilTime(2026, 7, 15, 22)
LEAP_SECOND_CIVIL = CivilTime(2016, 12, 31, 23, 59, 60)
"""CivilTime: the leap second inserted at the end of 2016."""

ROUND_TRIP_ATOL: float = 5e-9
"""float: absolute tolerance (days) of a cross-scale round trip."""

CIVIL_ATOL: float = 1e-3
"""float: absolute tolerance (seconds) of a civil round trip through a derived scale."""


def civilSeconds(civil: CivilTime) -> float:
    """Return a civil breakdown as seconds on a uniform 86400 s/day count.

    Only meant to compare two breakdowns that are close to each other.
    """
    days = civilToMJDDay(civil.year, civil.month, civil.day)
    return days * 86400.0 + civil.hour * 3600 + civil.minute * 60 + civil.second + civil.nanosecond * 1e-9
