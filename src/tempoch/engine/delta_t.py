"""ΔT = TT - UT1, from the Espenak & Meeus piecewise polynomial fits.

References:
    #. Espenak, F. & Meeus, J., *Five Millennium Canon of Solar Eclipses: -1999 to +3000*,
       NASA/TP-2006-214141, Section 2.6
"""

from __future__ import annotations

# Standard Library Imports
from typing import NamedTuple

# Third Party Imports
from numpy import isfinite
from numpy.polynomial.polynomial import polyval

# Local Imports
from .constants import DAYS_PER_JULIAN_YEAR, J2000


class DeltaTSegment(NamedTuple):
    """Polynomial valid on ``[start_year, end_year)``, evaluated at ``(year - origin) / scale``."""

    start_year: float
    end_year: float
    origin: float
    scale: float
    coefficients: tuple[float, ...]
    """Ascending powers, as expected by :func:`numpy.polynomial.polynomial.polyval`."""


DELTA_T_SEGMENTS: tuple[DeltaTSegment, ...] = (
    DeltaTSegment(
        -500, 500, 0, 100,
        (10583.6, -1014.41, 33.78311, -5.952053, -0.1798452, 0.022174192, 0.0090316521),
    ),
    DeltaTSegment(
        500, 1600, 1000, 100,
        (1574.2, -556.01, 71.23472, 0.319781, -0.8503463, -0.005050998, 0.0083572073),
    ),
    DeltaTSegment(1600, 1700, 1600, 1, (120.0, -0.9808, -0.01532, 1 / 7129)),
    DeltaTSegment(1700, 1800, 1700, 1, (8.83, 0.1603, -0.0059285, 0.00013336, -1 / 1174000)),
    DeltaTSegment(
        1800, 1860, 1800, 1,
        (13.72, -0.332447, 0.0068612, 0.0041116, -0.00037436, 0.0000121272, -0.0000001699, 0.000000000875),
    ),
    DeltaTSegment(1860, 1900, 1860, 1, (7.62, 0.5737, -0.251754, 0.01680668, -0.0004473624, 1 / 233174)),
    DeltaTSegment(1900, 1920, 1900, 1, (-2.79, 1.494119, -0.0598939, 0.0061966, -0.000197)),
    DeltaTSegment(1920, 1941, 1920, 1, (21.20, 0.84493, -0.076100, 0.0020936)),
    DeltaTSegment(1941, 1961, 1950, 1, (29.07, 0.407, -1 / 233, 1 / 2547)),
    DeltaTSegment(1961, 1986, 1975, 1, (45.45, 1.067, -1 / 260, -1 / 718)),
    DeltaTSegment(
        1986, 2005, 2000, 1,
        (63.86, 0.3345, -0.060374, 0.0017275, 0.000651814, 0.00002373599),
    ),
    DeltaTSegment(2005, 2050, 2000, 1, (62.92, 0.32217, 0.005589)),
)
"""tuple[DeltaTSegment, ...]: fits between -500 and 2050, in ascending order."""


def _longTermParabola(year: float) -> float:
    """ΔT (seconds) outside the tabulated fits."""
    u = (year - 1820.0) / 100.0
    return -20.0 + 32.0 * u * u


def _fitValue(segment: DeltaTSegment, year: float) -> float:
    return float(polyval((year - segment.origin) / segment.scale, segment.coefficients))


def _seamOffsets(segments: tuple[DeltaTSegment, ...]) -> tuple[float, ...]:
    """Constant shifts (seconds) that make each fit end where the next one starts.

    The last fit is left as published and the shifts accumulate backwards from it.
    """
    offsets = [0.0] * len(segments)
    for index in range(len(segments) - 2, -1, -1):
        current, following = segments[index], segments[index + 1]
        offsets[index] = (
            _fitValue(following, following.start_year)
            + offsets[index + 1]
            - _fitValue(current, current.end_year)
        )
    return tuple(offsets)


SEGMENT_OFFSETS = _seamOffsets(DELTA_T_SEGMENTS)
"""tuple[float, ...]: seconds added to each of :data:`.DELTA_T_SEGMENTS` so ΔT is continuous."""

_FIRST_SEGMENT = DELTA_T_SEGMENTS[0]
_LAST_SEGMENT = DELTA_T_SEGMENTS[-1]
_BLEND_END_YEAR = 2150.0

# The parabola before the first fit is lifted onto the first fit's start value
_EARLY_PARABOLA_OFFSET = (
    _fitValue(_FIRST_SEGMENT, _FIRST_SEGMENT.start_year)
    + SEGMENT_OFFSETS[0]
    - _longTermParabola(_FIRST_SEGMENT.start_year)
)

# Rate (seconds/year) of the linear correction blending the last fit into the parabola
_BLEND_RATE = (
    _longTermParabola(_LAST_SEGMENT.end_year) - _fitValue(_LAST_SEGMENT, _LAST_SEGMENT.end_year)
) / (_BLEND_END_YEAR - _LAST_SEGMENT.end_year)


def decimalYear(julian_date: float) -> float:
    """Return the decimal year of a Julian date, counted in Julian years from J2000."""
    return 2000.0 + (julian_date - J2000) / DAYS_PER_JULIAN_YEAR


def deltaTAtYear(year: float) -> float:
    """Return ΔT (seconds) for a decimal year.

    ΔT is continuous in `year`, so UT1 = TT - ΔT never jumps.

    Raises:
        ValueError: if `year` isn't finite
    """
    if not isfinite(year):
        raise ValueError(f"ΔT requires a finite year, got {year!r}")

    if year < _FIRST_SEGMENT.start_year:
        return _longTermParabola(year) + _EARLY_PARABOLA_OFFSET

    for segment, offset in zip(DELTA_T_SEGMENTS, SEGMENT_OFFSETS):
        if segment.start_year <= year < segment.end_year:
            return _fitValue(segment, year) + offset

    if year < _BLEND_END_YEAR:
        return _longTermParabola(year) - _BLEND_RATE * (_BLEND_END_YEAR - year)

    return _longTermParabola(year)


def deltaT(julian_date: float) -> float:
    """Return ΔT = TT - UT1 (seconds) at a Julian date."""
    return deltaTAtYear(decimalYear(julian_date))
