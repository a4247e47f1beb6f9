from __future__ import annotations

# Third Party Imports
import pytest
from numpy import isclose

# TEMPOCH Imports
from tempoch.common.exceptions import UtcConversionError
from tempoch.common.labels import TimeScale, TimeUnit
from tempoch.engine.constants import J2000
from tempoch.engine.delta_t import deltaT
from tempoch.time.civil_time import CivilTime
from tempoch.time.instant import (
    GPS,
    JD,
    JDE,
    MJD,
    TAI,
    TCB,
    TCG,
    TDB,
    TIME_CLASSES,
    TT,
    UT1,
    UTC,
    JulianDate,
    ModifiedJulianDate,
    Time,
    Unix,
)
from tempoch.units import Duration

# Local Imports
from .. import CIVIL_ATOL, J2000_CIVIL, LEAP_SECOND_CIVIL, ROUND_TRIP_ATOL, TEST_CIVIL, civilSeconds


def testEveryScaleHasAClass():
    """Test that each marker is bound by exactly one class."""
    assert set(TIME_CLASSES) == set(TimeScale)
    for scale, time_class in TIME_CLASSES.items():
        assert time_class.SCALE is scale
        assert time_class.label() == scale.value

    assert JD is JulianDate
    assert MJD is ModifiedJulianDate
    assert Unix.label() == "Unix"


def testConstruction():
    """Test wrapping raw values."""
    mjd = MJD(60200)
    assert mjd.value == 60200.0
    assert isinstance(mjd.value, float)
    assert mjd.scale == TimeScale.MJD

    with pytest.raises(ValueError, match="finite"):
        MJD(float("nan"))

    with pytest.raises(ValueError, match="finite"):
        TDB(float("-inf"))

    with pytest.raises(TypeError, match="does not bind"):
        Time(60200.0)


def testImmutable():
    """Test that a point can't be changed in place."""
    mjd = MJD(60200.0)
    with pytest.raises(AttributeError):
        mjd.value = 1.0  # type: ignore[misc]

    with pytest.raises(AttributeError):
        mjd.other = 1.0  # type: ignore[attr-defined]


def testJulianDateFromCivil():
    """Test J2000 civil noon on the TT-axis Julian Date."""
    julian_date = JD.fromCivil(J2000_CIVIL)
    assert isclose(julian_date.value, 2451545.000742870, rtol=0.0, atol=1e-3)
    assert julian_date.toCivil() == J2000_CIVIL


def testModifiedJulianDateCivil():
    """Test civil round trips on the MJD and UTC scales."""
    assert MJD.fromCivil(TEST_CIVIL).toCivil() == TEST_CIVIL
    assert UTC.fromCivil(TEST_CIVIL).value == MJD.fromCivil(TEST_CIVIL).value
    assert UTC.fromCivil(LEAP_SECOND_CIVIL).toCivil() == LEAP_SECOND_CIVIL


@pytest.mark.parametrize("time_class", [TT, TAI, TDB, TCG, TCB, GPS, UT1, JDE, Unix])
def testDerivedCivil(time_class: type[Time]):
    """Test that derived scales return the civil time they were built from."""
    back = time_class.fromCivil(TEST_CIVIL).toCivil()
    assert isclose(civilSeconds(back), civilSeconds(TEST_CIVIL), rtol=0.0, atol=CIVIL_ATOL)


def testCivilErrors():
    """Test bad civil input and values outside the civil range."""
    with pytest.raises(UtcConversionError):
        MJD.fromCivil(CivilTime(2023, 2, 29))

    with pytest.raises(UtcConversionError):
        UTC.fromCivil(CivilTime(2017, 12, 31, 23, 59, 60))

    with pytest.raises(UtcConversionError):
        MJD(1e12).toCivil()

    with pytest.raises(UtcConversionError):
        MJD(1e200).toCivil()

    with pytest.raises(UtcConversionError):
        JD(-1e200).toCivil()


def testMicrosecondCivil():
    """Test that MJD keeps microseconds through a civil round trip."""
    civil = CivilTime(2026, 7, 15, 22, 0, 0, 123_456_000)
    assert MJD.fromCivil(civil).toCivil() == civil


def testUnixLeapSecond():
    """Test that POSIX time folds a leap second onto the first second of the next day."""
    inside_leap = CivilTime(2016, 12, 31, 23, 59, 60, 500_000_000)
    next_day = CivilTime(2017, 1, 1, 0, 0, 0, 500_000_000)
    unix = Unix.fromCivil(inside_leap)
    assert isclose(unix.value, Unix.fromCivil(next_day).value, rtol=0.0, atol=1e-3)

    back = unix.toCivil()
    assert (back.year, back.month, back.day) == (2017, 1, 1)
    assert isclose(civilSeconds(back), civilSeconds(next_day), rtol=0.0, atol=CIVIL_ATOL)


def testUnixEpoch():
    """Test POSIX seconds for a well-known civil time."""
    unix = Unix.fromCivil(CivilTime(2000, 1, 1))
    assert isclose(unix.value, 946684800.0, rtol=0.0, atol=1e-3)


def testConversions():
    """Test explicit conversions between scales."""
    epoch = JD.J2000()
    assert epoch.value == 2451545.0
    assert epoch.to(MJD) == MJD(51544.5)
    assert epoch.toMJD() == MJD(51544.5)
    assert epoch.to(TT).value == 2451545.0
    assert epoch.to(JD) == epoch
    assert isclose((epoch.value - epoch.to(TAI).value) * 86400.0, 32.184, rtol=0.0, atol=1e-4)

    mjd = MJD.fromCivil(TEST_CIVIL)
    assert isclose(mjd.to(TDB).to(MJD).value, mjd.value, rtol=0.0, atol=ROUND_TRIP_ATOL)
    assert isclose(mjd.to(Unix).to(MJD).value, mjd.value, rtol=0.0, atol=ROUND_TRIP_ATOL)


def testJulianDateHelpers():
    """Test the Julian-Date-specific helpers."""
    epoch = JD.J2000()
    assert epoch.julianCenturies() == 0.0
    assert JD(2451545.0 + 36525.0).julianCenturies() == 1.0
    assert JD(2451545.0 + 36525.0).julianCenturiesQuantity() == Duration(1.0, TimeUnit.JULIAN_CENTURY)

    assert MJD.fromJulianDate(epoch) == MJD(51544.5)
    assert MJD(51544.5).toJulianDate() == epoch

    with pytest.raises(TypeError, match="Expected a JulianDate"):
        MJD.fromJulianDate(MJD(51544.5))  # type: ignore[arg-type]


def testDeltaT():
    """Test ΔT reported by a UT1 point."""
    delta_t = JD.J2000().to(UT1).deltaT()
    assert delta_t.unit == TimeUnit.SECOND
    assert isclose(delta_t.value, deltaT(J2000), rtol=0.0, atol=1e-6)


def testUniversalTimeAt2005():
    """Test converting a UT1 value that falls just before the 2005 ΔT boundary."""
    ut1 = UT1(2451545.0 + 5.0 * 365.25 - 64.695 / 86400.0)
    assert isclose(ut1.to(JD).to(UT1).value, ut1.value, rtol=0.0, atol=ROUND_TRIP_ATOL)


def testUniversalTimeOverflow():
    """Test that a Julian date too large for ΔT can't become a UT1 value."""
    with pytest.raises(ValueError, match="finite"):
        JD(1e200).to(UT1)


def testArithmetic():
    """Test shifting and differencing points on the same scale."""
    mjd = MJD(60200.0)
    assert mjd.addDays(1.5) == MJD(60201.5)
    assert mjd + Duration(12, TimeUnit.HOUR) == MJD(60200.5)
    assert mjd - Duration(1, TimeUnit.WEEK) == MJD(60193.0)
    assert MJD(60201.0) - mjd == Duration(1.0, TimeUnit.DAY)
    assert mjd.difference(MJD(60201.0)) == Duration(-1.0)
    assert isinstance(mjd + Duration(1.0), MJD)

    julian_date = JD(2460200.5)
    assert julian_date + Duration(24, TimeUnit.HOUR) == julian_date.addDays(1.0) == JD(2460201.5)

    with pytest.raises(TypeError):
        mjd + 1.0  # type: ignore[operator]

    with pytest.raises(TypeError):
        mjd - 1.0  # type: ignore[operator]


def testDerivedArithmetic():
    """Test that derived-scale arithmetic follows the Julian Date hub."""
    tdb = TDB(2451545.0)
    shifted = tdb + Duration(1.0, TimeUnit.DAY)
    assert isinstance(shifted, TDB)
    assert isclose((shifted - tdb).value, 1.0, rtol=0.0, atol=1e-8)

    unix = Unix(946684800.0)
    assert isclose(unix.addDays(1.0).value, 946771200.0, rtol=0.0, atol=1e-3)
    assert isclose((unix.addDays(1.0) - unix).to(TimeUnit.SECOND).value, 86400.0, rtol=0.0, atol=1e-3)


def testComparisons():
    """Test ordering and equality on one scale."""
    early, late = MJD(60200.0), MJD(60201.0)
    assert early < late
    assert early <= late
    assert late > early
    assert late >= early
    assert early != late
    assert early == MJD(60200.0)
    assert sorted([late, early]) == [early, late]
    assert len({early, MJD(60200.0), late}) == 2


def testMixingScales():
    """Test that operations across scales are refused until converted."""
    mjd, tdb = MJD(60200.0), TDB(60200.0)
    message = "Cannot perform operations between ModifiedJulianDate/BarycentricDynamicalTime"
    with pytest.raises(TypeError, match=message):
        mjd < tdb  # noqa: B015

    with pytest.raises(TypeError, match=message):
        mjd == tdb  # noqa: B015

    with pytest.raises(TypeError, match=message):
        mjd - tdb

    with pytest.raises(TypeError, match=message):
        mjd.difference(tdb)  # type: ignore[arg-type]

    with pytest.raises(TypeError):
        MJD(51544.5) >= JD(2451545.0)  # noqa: B015

    # Comparing with something that isn't a time point is simply unequal
    assert mjd != 60200.0
    assert not mjd == "60200"  # noqa: SIM201


def testRepresentation():
    """Test the text forms of a point."""
    assert repr(MJD(60200.0)) == "ModifiedJulianDate(60200.0)"
    assert repr(Unix(0)) == "UnixTime(0.0)"
    assert str(JD(2451545.0)) == "2451545.0"
