"""Status-code API of the reference engine.

Functions that can fail return a ``(TempochStatus, value)`` pair where ``value`` is ``None``
unless the status is :attr:`.TempochStatus.OK`. Callers must pass the status through
:func:`.checkStatus` before using the value. Infallible primitives return plain values.
"""

from __future__ import annotations

# Standard Library Imports
from math import isfinite

# Third Party Imports
from numpy import spacing

# Local Imports
from ..common.labels import TempochStatus, TimeUnit
from .calendar import civilToTT, ttToCivil
from .constants import DAYS_PER_JULIAN_CENTURY, J2000, MJD_OFFSET, SECONDS_PER_UNIT
from .delta_t import deltaT
from .layout import CivilTimeStruct, PeriodStruct, QuantityStruct


# Civil conversions


def jdFromUTC(civil: CivilTimeStruct | None) -> tuple[TempochStatus, float | None]:
    """Convert UTC civil fields to a Julian date."""
    status, mjd_tt = civilToTT(civil)
    if status != TempochStatus.OK:
        return status, None
    return status, mjd_tt + MJD_OFFSET


def jdToUTC(julian_date: float) -> tuple[TempochStatus, CivilTimeStruct | None]:
    """Convert a Julian date to UTC civil fields, rounded to the resolution of `julian_date`."""
    return ttToCivil(julian_date - MJD_OFFSET, spacing(julian_date))


def mjdFromUTC(civil: CivilTimeStruct | None) -> tuple[TempochStatus, float | None]:
    """Convert UTC civil fields to a Modified Julian date."""
    return civilToTT(civil)


def mjdToUTC(mjd: float) -> tuple[TempochStatus, CivilTimeStruct | None]:
    """Convert a Modified Julian date to UTC civil fields, rounded to the resolution of `mjd`."""
    return ttToCivil(mjd, spacing(mjd))


# Day-count primitives


def jdToMJD(julian_date: float) -> float:
    return julian_date - MJD_OFFSET


def mjdToJD(mjd: float) -> float:
    return mjd + MJD_OFFSET


def jdAddDays(julian_date: float, days: float) -> float:
    return julian_date + days


def jdDifference(first: float, second: float) -> float:
    """Return ``first - second`` in days."""
    return first - second


def mjdAddDays(mjd: float, days: float) -> float:
    return mjd + days


def mjdDifference(first: float, second: float) -> float:
    """Return ``first - second`` in days."""
    return first - second


def jdJ2000() -> float:
    """Return the J2000.0 epoch as a Julian date."""
    return J2000


def jdJulianCenturies(julian_date: float) -> float:
    """Return Julian centuries elapsed since J2000.0."""
    return (julian_date - J2000) / DAYS_PER_JULIAN_CENTURY


def jdJulianCenturiesQuantity(julian_date: float) -> QuantityStruct:
    """Return Julian centuries since J2000.0 tagged with :attr:`.TimeUnit.JULIAN_CENTURY`."""
    return QuantityStruct(jdJulianCenturies(julian_date), TimeUnit.JULIAN_CENTURY)


def deltaTSeconds(julian_date: float) -> float:
    """Return ΔT = TT - UT1 (seconds) at a Julian date."""
    return deltaT(julian_date)


# Quantity primitives


def convertQuantity(value: float, from_unit: int, to_unit: int) -> float:
    """Convert `value` between two unit identifiers.

    Raises:
        ValueError: if either identifier isn't a :class:`.TimeUnit`
    """
    from_unit, to_unit = TimeUnit(from_unit), TimeUnit(to_unit)
    if from_unit == to_unit:
        return value
    return value * SECONDS_PER_UNIT[from_unit] / SECONDS_PER_UNIT[to_unit]


def _quantityDays(quantity: QuantityStruct) -> float:
    return convertQuantity(quantity.value, quantity.unit, TimeUnit.DAY)


def jdAddQuantity(julian_date: float, quantity: QuantityStruct) -> float:
    return jdAddDays(julian_date, _quantityDays(quantity))


def jdDifferenceQuantity(first: float, second: float) -> QuantityStruct:
    return QuantityStruct(jdDifference(first, second), TimeUnit.DAY)


def mjdAddQuantity(mjd: float, quantity: QuantityStruct) -> float:
    return mjdAddDays(mjd, _quantityDays(quantity))


def mjdDifferenceQuantity(first: float, second: float) -> QuantityStruct:
    return QuantityStruct(mjdDifference(first, second), TimeUnit.DAY)


# Periods


def periodNew(start_mjd: float, end_mjd: float) -> tuple[TempochStatus, PeriodStruct | None]:
    """Validate and build an inclusive MJD period.

    Both bounds must be finite and ``start_mjd <= end_mjd``.
    """
    if not (isfinite(start_mjd) and isfinite(end_mjd)) or start_mjd > end_mjd:
        return TempochStatus.INVALID_PERIOD, None
    return TempochStatus.OK, PeriodStruct(start_mjd, end_mjd)


def periodDurationDays(period: PeriodStruct) -> float:
    return period.end_mjd - period.start_mjd


def periodIntersection(
    first: PeriodStruct | None, second: PeriodStruct | None
) -> tuple[TempochStatus, PeriodStruct | None]:
    """Return the overlap of two periods.

    Bounds are inclusive, so periods that only touch overlap in a zero-length period.
    """
    if first is None or second is None:
        return TempochStatus.NULL_POINTER, None

    start_mjd = max(first.start_mjd, second.start_mjd)
    end_mjd = min(first.end_mjd, second.end_mjd)
    if start_mjd > end_mjd:
        return TempochStatus.NO_INTERSECTION, None
    return TempochStatus.OK, PeriodStruct(start_mjd, end_mjd)
