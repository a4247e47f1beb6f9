"""Hold common label types for easier importing."""

from __future__ import annotations

# Standard Library Imports
from enum import Enum, IntEnum, unique


@unique
class TimeScale(str, Enum):
    """Defines the closed set of supported time scales.

    Members carry no payload beyond their label; they only select which scale descriptor and
    which conversion edges apply to a raw value.
    """

    JD: str = "JD"
    """``str``: Julian Date, the conversion hub. Day count on the TT axis."""

    MJD: str = "MJD"
    """``str``: Modified Julian Date, JD - 2400000.5."""

    UTC: str = "UTC"
    """``str``: Coordinated Universal Time, stored with the MJD representation."""

    TT: str = "TT"
    """``str``: Terrestrial Time, as a Julian day count."""

    TAI: str = "TAI"
    """``str``: International Atomic Time, as a Julian day count."""

    TDB: str = "TDB"
    """``str``: Barycentric Dynamical Time, as a Julian day count."""

    TCG: str = "TCG"
    """``str``: Geocentric Coordinate Time, as a Julian day count."""

    TCB: str = "TCB"
    """``str``: Barycentric Coordinate Time, as a Julian day count."""

    GPS: str = "GPS"
    """``str``: GPS Time, as a Julian day count."""

    UT1: str = "UT1"
    """``str``: Universal Time (UT1), as a Julian day count."""

    JDE: str = "JDE"
    """``str``: Julian Ephemeris Date."""

    UNIX: str = "Unix"
    """``str``: POSIX seconds since 1970-01-01T00:00:00 UTC."""


@unique
class TempochStatus(IntEnum):
    """Status codes returned across the engine boundary."""

    OK = 0
    NULL_POINTER = 1
    UTC_CONVERSION_FAILED = 2
    INVALID_PERIOD = 3
    NO_INTERSECTION = 4


@unique
class TimeUnit(IntEnum):
    """Unit identifiers understood by the engine's quantity primitives."""

    MILLISECOND = 1
    SECOND = 2
    MINUTE = 3
    HOUR = 4
    DAY = 5
    WEEK = 6
    JULIAN_YEAR = 7
    JULIAN_CENTURY = 8

    @property
    def symbol(self) -> str:
        """``str``: conventional short symbol for this unit."""
        return _UNIT_SYMBOLS[self]


_UNIT_SYMBOLS: dict[TimeUnit, str] = {
    TimeUnit.MILLISECOND: "ms",
    TimeUnit.SECOND: "s",
    TimeUnit.MINUTE: "min",
    TimeUnit.HOUR: "h",
    TimeUnit.DAY: "d",
    TimeUnit.WEEK: "wk",
    TimeUnit.JULIAN_YEAR: "a",
    TimeUnit.JULIAN_CENTURY: "cy",
}
