from __future__ import annotations

# Third Party Imports
import pytest
from numpy import isclose

# TEMPOCH Imports
from tempoch.engine.constants import J2000
from tempoch.engine.delta_t import (
    DELTA_T_SEGMENTS,
    SEGMENT_OFFSETS,
    decimalYear,
    deltaT,
    deltaTAtYear,
)

SEAM_YEARS = [segment.start_year for segment in DELTA_T_SEGMENTS] + [2050.0, 2150.0]


def testSegmentsAreContiguous():
    """Test that the polynomial fits tile -500 to 2050 without gaps."""
    for previous, current in zip(DELTA_T_SEGMENTS, DELTA_T_SEGMENTS[1:]):
        assert previous.end_year == current.start_year
    assert DELTA_T_SEGMENTS[0].start_year == -500
    assert DELTA_T_SEGMENTS[-1].end_year == 2050


def testSeamOffsets():
    """Test that the last fit is unshifted and the others move by under a second."""
    assert len(SEGMENT_OFFSETS) == len(DELTA_T_SEGMENTS)
    assert SEGMENT_OFFSETS[-1] == 0.0
    assert all(abs(offset) < 1.0 for offset in SEGMENT_OFFSETS)


@pytest.mark.parametrize(
    ("year", "expected"),
    [
        (2000.0, 63.86),
        (1900.0, -2.79),
        (1975.0, 45.45),
        (1600.0, 120.0),
    ],
)
def testFitOrigins(year: float, expected: float):
    """Test ΔT at the origin of several fits, within the shift applied at the seams."""
    assert isclose(deltaTAtYear(year), expected, atol=1.0)


@pytest.mark.parametrize(
    ("year", "expected"),
    [
        # The 2005-2050 fit is used as published
        (2020.0, 62.92 + 0.32217 * 20.0 + 0.005589 * 400.0),
        # Long-term parabola after the blend
        (2200.0, -20.0 + 32.0 * 3.8**2),
    ],
)
def testKnownValues(year: float, expected: float):
    """Test ΔT where no seam correction applies."""
    assert isclose(deltaTAtYear(year), expected)


def testExtrapolations():
    """Test the parabola before the fits and the 2050-2150 blend stay near the published curves."""
    assert isclose(deltaTAtYear(-1000.0), -20.0 + 32.0 * 28.2**2, atol=15.0)
    assert isclose(deltaTAtYear(2100.0), -20.0 + 32.0 * 2.8**2 - 0.5628 * 50.0, atol=0.01)


@pytest.mark.parametrize("year", SEAM_YEARS)
def testSegmentSeams(year: float):
    """Test that ΔT is continuous across every boundary between fits and extrapolations."""
    before = deltaTAtYear(year - 1e-9)
    after = deltaTAtYear(year)
    assert abs(before - after) < 1e-6


def testModernTrend():
    """Test that ΔT grew through the late twentieth century."""
    assert deltaTAtYear(1990.0) < deltaTAtYear(2000.0) < deltaTAtYear(2020.0)


def testJulianDateInput():
    """Test the Julian date wrapper."""
    assert decimalYear(J2000) == 2000.0
    assert isclose(decimalYear(J2000 + 365.25 * 26), 2026.0)
    assert deltaT(J2000) == deltaTAtYear(2000.0)


@pytest.mark.parametrize("year", [float("nan"), float("inf"), -float("inf")])
def testNonFiniteYear(year: float):
    """Test that non-finite input is rejected."""
    with pytest.raises(ValueError, match="finite"):
        deltaTAtYear(year)
