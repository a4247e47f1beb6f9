"""Civil (UTC) calendar conversions for the reference engine.

Civil fields are read as UTC on the proleptic Gregorian calendar. From the first tabulated
leap second (1972-01-01) on, TT - UTC is TAI - UTC + 32.184 s and days that end with a leap
second are 86401 s long. Before the table, UTC is approximated by UT1 and TT - UTC by ΔT.

References:
    #. :cite:t:`vallado_2013_astro`, Section 3.5.5, Algorithm 16
    #. Hinnant, H., *chrono-Compatible Low-Level Date Algorithms* (days_from_civil)
"""

from __future__ import annotations

# Standard Library Imports
from math import ceil, floor, isfinite, log10
from typing import TYPE_CHECKING

# Local Imports
from ..common.labels import TempochStatus
from .constants import (
    DAYS2SEC,
    MAX_CIVIL_YEAR,
    MIN_CIVIL_YEAR,
    MJD_OFFSET,
    SEC2DAYS,
    TT_MINUS_TAI,
    UNIX_EPOCH_MJD,
)
from .delta_t import deltaT
from .leap_seconds import getLeapSecondTable
from .layout import CivilTimeStruct

if TYPE_CHECKING:
    # Local Imports
    from .leap_seconds import LeapSecondTable

NANOSECONDS_PER_SECOND = 1_000_000_000

DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# ΔT reaches about 2600 days at the ends of the civil range
_DELTA_T_MARGIN_DAYS = 10_000


def isLeapYear(year: int) -> bool:
    """Return whether `year` is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def daysInMonth(year: int, month: int) -> int:
    """Return the number of days in `month` of `year`."""
    if month == 2 and isLeapYear(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def civilToMJDDay(year: int, month: int, day: int) -> int:
    """Return the integer MJD of 0h on a Gregorian calendar date."""
    year -= month <= 2
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    days_since_unix_epoch = era * 146097 + day_of_era - 719468
    return days_since_unix_epoch + int(UNIX_EPOCH_MJD)


def mjdDayToCivil(mjd_day: int) -> tuple[int, int, int]:
    """Return the Gregorian ``(year, month, day)`` of an integer MJD."""
    days = mjd_day - int(UNIX_EPOCH_MJD) + 719468
    era = days // 146097
    day_of_era = days - era * 146097
    year_of_era = (day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (month <= 2)
    return year, month, day


MIN_TT_MJD = civilToMJDDay(MIN_CIVIL_YEAR, 1, 1) - _DELTA_T_MARGIN_DAYS
"""int: earliest TT MJD that can still name a civil instant."""

MAX_TT_MJD = civilToMJDDay(MAX_CIVIL_YEAR + 1, 1, 1) + _DELTA_T_MARGIN_DAYS
"""int: latest TT MJD that can still name a civil instant."""


def dayLength(mjd_day: int, table: LeapSecondTable | None = None) -> float:
    """Return the length (seconds) of the UTC day starting at integer `mjd_day`."""
    if table is None:
        table = getLeapSecondTable()
    return DAYS2SEC + table.leapSecondsInDay(mjd_day)


def utcToTT(mjd_day: int, seconds_of_day: float, table: LeapSecondTable | None = None) -> float:
    """Return the TT MJD of a UTC instant given as a day and SI seconds into that day."""
    if table is None:
        table = getLeapSecondTable()

    if table.covers(mjd_day):
        offset = table.taiMinusUTC(mjd_day) + TT_MINUS_TAI
        return mjd_day + (seconds_of_day + offset) * SEC2DAYS

    mjd_ut = mjd_day + seconds_of_day * SEC2DAYS
    return mjd_ut + deltaT(mjd_ut + MJD_OFFSET) * SEC2DAYS


def ttToUTC(mjd_tt: float, table: LeapSecondTable | None = None) -> tuple[int, float]:
    """Return the UTC ``(mjd_day, seconds_of_day)`` of a TT MJD.

    Inverse of :func:`.utcToTT`. Seconds may reach 86400 on days ending with a leap second.
    """
    if table is None:
        table = getLeapSecondTable()

    # ΔT changes slowly enough that two fixed-point passes are plenty
    mjd_ut = mjd_tt - deltaT(mjd_tt + MJD_OFFSET) * SEC2DAYS
    mjd_ut = mjd_tt - deltaT(mjd_ut + MJD_OFFSET) * SEC2DAYS
    if not table.covers(mjd_ut):
        mjd_day = floor(mjd_ut)
        return mjd_day, (mjd_ut - mjd_day) * DAYS2SEC

    mjd_day = floor(mjd_tt - (table.taiMinusUTC(mjd_ut) + TT_MINUS_TAI) * SEC2DAYS)
    # Only leap-second days can push the first estimate one day off
    for _ in range(2):
        seconds_of_day = (mjd_tt - mjd_day) * DAYS2SEC - (table.taiMinusUTC(mjd_day) + TT_MINUS_TAI)
        if seconds_of_day < 0.0 and table.covers(mjd_day - 1):
            mjd_day -= 1
        elif seconds_of_day >= dayLength(mjd_day, table):
            mjd_day += 1
        else:
            break

    seconds_of_day = (mjd_tt - mjd_day) * DAYS2SEC - (table.taiMinusUTC(mjd_day) + TT_MINUS_TAI)
    # The ΔT/table seam at 1972-01-01 overlaps by a few hundredths of a second
    return mjd_day, max(seconds_of_day, 0.0)


def validateCivil(civil: CivilTimeStruct, table: LeapSecondTable | None = None) -> bool:
    """Return whether the civil fields name a real UTC instant within the supported range."""
    if table is None:
        table = getLeapSecondTable()

    if not MIN_CIVIL_YEAR <= civil.year <= MAX_CIVIL_YEAR:
        return False
    if not 1 <= civil.month <= 12:
        return False
    if not 1 <= civil.day <= daysInMonth(civil.year, civil.month):
        return False
    if civil.hour > 23 or civil.minute > 59 or civil.second > 60:
        return False
    if civil.nanosecond >= NANOSECONDS_PER_SECOND:
        return False

    mjd_day = civilToMJDDay(civil.year, civil.month, civil.day)
    seconds_of_day = civil.hour * 3600 + civil.minute * 60 + civil.second
    if civil.second == 60 and (civil.hour != 23 or civil.minute != 59):
        return False
    return seconds_of_day < dayLength(mjd_day, table)


def civilToTT(civil: CivilTimeStruct | None) -> tuple[TempochStatus, float | None]:
    """Convert UTC civil fields to a TT MJD.

    Returns:
        ``tuple``: status and the TT MJD, or ``None`` on failure
    """
    if civil is None:
        return TempochStatus.NULL_POINTER, None

    table = getLeapSecondTable()
    if not validateCivil(civil, table):
        return TempochStatus.UTC_CONVERSION_FAILED, None

    mjd_day = civilToMJDDay(civil.year, civil.month, civil.day)
    seconds_of_day = (
        civil.hour * 3600 + civil.minute * 60 + civil.second + civil.nanosecond / NANOSECONDS_PER_SECOND
    )
    mjd_tt = utcToTT(mjd_day, seconds_of_day, table)
    if not isfinite(mjd_tt):
        return TempochStatus.UTC_CONVERSION_FAILED, None
    return TempochStatus.OK, mjd_tt


def roundingStep(resolution: float) -> int:
    """Return the nanosecond step civil fields are rounded to for a value of given `resolution`.

    The step is the smallest power of ten covering the resolution (days): the finest decimal digit
    the value actually holds.
    """
    spacing_ns = abs(resolution) * DAYS2SEC * NANOSECONDS_PER_SECOND
    if spacing_ns <= 1.0:
        return 1
    return 10 ** ceil(log10(spacing_ns))


def ttToCivil(mjd_tt: float, resolution: float = 0.0) -> tuple[TempochStatus, CivilTimeStruct | None]:
    """Convert a TT MJD to UTC civil fields.

    Args:
        mjd_tt (``float``): TT Modified Julian date
        resolution (``float``, optional): spacing (days) of the value the caller converted from.
            Defaults to ``0.0``, rounding to the nearest nanosecond.

    Returns:
        ``tuple``: status and the civil fields, or ``None`` on failure
    """
    if not isfinite(mjd_tt) or not isfinite(resolution):
        return TempochStatus.UTC_CONVERSION_FAILED, None
    if not MIN_TT_MJD <= mjd_tt <= MAX_TT_MJD:
        return TempochStatus.UTC_CONVERSION_FAILED, None

    table = getLeapSecondTable()
    mjd_day, seconds_of_day = ttToUTC(mjd_tt, table)
    step = roundingStep(resolution)
    total_ns = round(seconds_of_day * NANOSECONDS_PER_SECOND / step) * step
    day_ns = round(dayLength(mjd_day, table) * NANOSECONDS_PER_SECOND)
    if total_ns >= day_ns:
        mjd_day += 1
        total_ns -= day_ns

    year, month, day = mjdDayToCivil(mjd_day)
    if not MIN_CIVIL_YEAR <= year <= MAX_CIVIL_YEAR:
        return TempochStatus.UTC_CONVERSION_FAILED, None

    whole_seconds, nanosecond = divmod(total_ns, NANOSECONDS_PER_SECOND)
    if whole_seconds >= DAYS2SEC:
        hour, minute, second = 23, 59, 60 + int(whole_seconds - DAYS2SEC)
    else:
        hour, remainder = divmod(int(whole_seconds), 3600)
        minute, second = divmod(remainder, 60)

    return TempochStatus.OK, CivilTimeStruct(year, month, day, hour, minute, second, nanosecond)
