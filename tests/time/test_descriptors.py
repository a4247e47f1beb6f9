from __future__ import annotations

# Third Party Imports
import pytest
from numpy import isclose

# TEMPOCH Imports
from tempoch.common.exceptions import NullPointerError, UtcConversionError
from tempoch.common.labels import TimeScale, TimeUnit
from tempoch.time.civil_time import CivilTime
from tempoch.time.descriptors import (
    DESCRIPTORS,
    JULIAN_DATE_BIJECTIONS,
    JulianDateBackedDescriptor,
    JulianDateDescriptor,
    ModifiedJulianDateDescriptor,
    UTCDescriptor,
    getDescriptor,
)
from tempoch.units import Duration

# Local Imports
from .. import CIVIL_ATOL, J2000_CIVIL, LEAP_SECOND_CIVIL, TEST_CIVIL, civilSeconds


def testEveryScaleHasADescriptor():
    """Test that the table covers the closed set of scales, labelled by their marker."""
    assert set(DESCRIPTORS) == set(TimeScale)
    for scale, descriptor in DESCRIPTORS.items():
        assert descriptor.label == scale.value
        assert getDescriptor(scale) is descriptor

    assert set(JULIAN_DATE_BIJECTIONS) == set(TimeScale) - {TimeScale.JD, TimeScale.MJD, TimeScale.UTC}


def testDescriptorTypes():
    """Test which scales use the direct primitives and which are derived."""
    assert isinstance(DESCRIPTORS[TimeScale.JD], JulianDateDescriptor)
    assert isinstance(DESCRIPTORS[TimeScale.MJD], ModifiedJulianDateDescriptor)
    assert isinstance(DESCRIPTORS[TimeScale.UTC], UTCDescriptor)
    for scale in JULIAN_DATE_BIJECTIONS:
        assert isinstance(DESCRIPTORS[scale], JulianDateBackedDescriptor)

    assert repr(DESCRIPTORS[TimeScale.JD]) == "JulianDateDescriptor('JD')"
    assert repr(DESCRIPTORS[TimeScale.UNIX]) == "JulianDateBackedDescriptor('Unix')"


def testTableIsReadOnly():
    """Test that descriptors can't be swapped out at runtime."""
    with pytest.raises(TypeError):
        DESCRIPTORS[TimeScale.JD] = ModifiedJulianDateDescriptor()  # type: ignore[index]


def testUnknownScale():
    """Test looking up a scale that isn't registered."""
    with pytest.raises(KeyError, match="No scale descriptor"):
        getDescriptor("Stardate")  # type: ignore[arg-type]


def testJulianDate():
    """Test the hub's civil conversion at J2000."""
    descriptor = getDescriptor(TimeScale.JD)
    julian_date = descriptor.civilToNative(J2000_CIVIL)
    assert isclose(julian_date, 2451545.000742870, rtol=0.0, atol=1e-3)
    assert descriptor.nativeToCivil(julian_date) == J2000_CIVIL


def testModifiedJulianDate():
    """Test that MJD and UTC share the same representation."""
    mjd = getDescriptor(TimeScale.MJD)
    utc = getDescriptor(TimeScale.UTC)
    jd = getDescriptor(TimeScale.JD)

    assert utc.civilToNative(TEST_CIVIL) == mjd.civilToNative(TEST_CIVIL)
    assert isclose(mjd.civilToNative(TEST_CIVIL), jd.civilToNative(TEST_CIVIL) - 2400000.5, rtol=0.0, atol=1e-9)
    assert utc.nativeToCivil(utc.civilToNative(LEAP_SECOND_CIVIL)) == LEAP_SECOND_CIVIL


def testCivilErrors():
    """Test that engine statuses surface as typed exceptions."""
    descriptor = getDescriptor(TimeScale.MJD)
    with pytest.raises(NullPointerError, match="mjdFromUTC"):
        descriptor.civilToNative(None)  # type: ignore[arg-type]

    with pytest.raises(UtcConversionError, match="mjdFromUTC failed"):
        descriptor.civilToNative(CivilTime(2023, 2, 30))

    with pytest.raises(UtcConversionError, match="jdToUTC failed"):
        getDescriptor(TimeScale.TT).nativeToCivil(1e13)


@pytest.mark.parametrize("scale", list(JULIAN_DATE_BIJECTIONS))
def testDerivedCivilRoundTrip(scale: TimeScale):
    """Test that every derived scale brings a civil time back within a millisecond."""
    descriptor = getDescriptor(scale)
    for civil in (J2000_CIVIL, TEST_CIVIL):
        back = descriptor.nativeToCivil(descriptor.civilToNative(civil))
        assert isclose(civilSeconds(back), civilSeconds(civil), rtol=0.0, atol=CIVIL_ATOL)


def testDerivedAgreesWithHub():
    """Test that a derived scale's native value maps back to the hub's value."""
    hub = getDescriptor(TimeScale.JD)
    julian_date = hub.civilToNative(TEST_CIVIL)
    for scale in JULIAN_DATE_BIJECTIONS:
        descriptor = getDescriptor(scale)
        native = descriptor.civilToNative(TEST_CIVIL)
        assert isclose(descriptor.toJulianDate(native), julian_date, rtol=0.0, atol=5e-9)
        assert descriptor.fromJulianDate(julian_date) == native

    # TT shares the hub's axis
    assert getDescriptor(TimeScale.TT).civilToNative(TEST_CIVIL) == julian_date


def testDayArithmetic():
    """Test day shifts and differences on direct and derived scales."""
    jd = getDescriptor(TimeScale.JD)
    assert jd.addDays(2451545.0, 0.5) == 2451545.5
    assert jd.difference(2451545.5, 2451545.0) == 0.5

    mjd = getDescriptor(TimeScale.MJD)
    assert mjd.addQuantity(60200.0, Duration(6, TimeUnit.HOUR)) == 60200.25
    assert mjd.differenceQuantity(60200.0, 60199.0) == Duration(1.0, TimeUnit.DAY)

    tai = getDescriptor(TimeScale.TAI)
    assert isclose(tai.addDays(2451545.0, 1.0), 2451546.0, rtol=0.0, atol=1e-9)
    assert isclose(tai.difference(2451546.0, 2451545.0), 1.0, rtol=0.0, atol=1e-9)


def testUnixArithmetic():
    """Test that Unix arithmetic works in days even though its values are seconds."""
    unix = getDescriptor(TimeScale.UNIX)
    assert isclose(unix.addDays(946684800.0, 1.0), 946771200.0, rtol=0.0, atol=1e-3)
    assert isclose(unix.addQuantity(946684800.0, Duration(90, TimeUnit.MINUTE)), 946690200.0, rtol=0.0, atol=1e-3)

    difference = unix.differenceQuantity(946771200.0, 946684800.0)
    assert difference.unit == TimeUnit.DAY
    assert isclose(difference.value, 1.0, rtol=0.0, atol=1e-8)
    assert isclose(unix.difference(946684800.0, 946771200.0), -1.0, rtol=0.0, atol=1e-8)
