"""Defines the generic :class:`.Time` point and one subclass per supported scale.

A value is only meaningful together with its scale, so every subclass binds exactly one
:class:`.TimeScale` marker and the raw value is never reinterpreted through another scale
without an explicit conversion:

.. code-block:: python

    mjd = MJD.fromCivil(CivilTime(2026, 7, 15, 22))
    tdb = mjd.to(TDB)

    mjd + Duration(12, TimeUnit.HOUR)  # works, returns a new MJD
    mjd < tdb  # throws TypeError, convert first
"""

from __future__ import annotations

# Standard Library Imports
from math import isfinite
from typing import TYPE_CHECKING, ClassVar, TypeVar

# Local Imports
from ..common.labels import TimeScale, TimeUnit
from ..engine import api
from ..units import Duration
from .conversion import convert
from .descriptors import getDescriptor

if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Self

    # Local Imports
    from .civil_time import CivilTime
    from .descriptors import ScaleDescriptor

TimeT = TypeVar("TimeT", bound="Time")


class Time:
    """Point in time on the scale bound by the subclass's :attr:`.SCALE`.

    Instances are immutable; arithmetic returns new instances of the same class.
    """

    SCALE: ClassVar[TimeScale]
    """:class:`.TimeScale`: marker selecting the descriptor and conversion edges."""

    __slots__ = ("_value",)

    def __init__(self, value: float):
        """Wrap a raw value already expressed on this scale.

        Args:
            value (``float``): native value, days for every scale except Unix (seconds)

        Raises:
            TypeError: if the class binds no scale
            ValueError: if `value` isn't finite
        """
        if getattr(type(self), "SCALE", None) is None:
            raise TypeError(f"{type(self).__name__} does not bind a time scale")
        value = float(value)
        if not isfinite(value):
            raise ValueError(f"{type(self).__name__} requires a finite value, got {value}")
        self._value = value

    @classmethod
    def _descriptor(cls) -> ScaleDescriptor:
        return getDescriptor(cls.SCALE)

    @classmethod
    def fromCivil(cls, civil: CivilTime) -> Self:
        """Build a time point from a UTC civil breakdown.

        Raises:
            :class:`.UtcConversionError`: if the breakdown is invalid or out of range
        """
        return cls(cls._descriptor().civilToNative(civil))

    @classmethod
    def label(cls) -> str:
        """Return the short label of this class's scale."""
        return cls._descriptor().label

    @property
    def value(self) -> float:
        """``float``: raw native value."""
        return self._value

    @property
    def scale(self) -> TimeScale:
        """:class:`.TimeScale`: marker of this point's scale."""
        return self.SCALE

    def toCivil(self) -> CivilTime:
        """Return the UTC civil breakdown of this point.

        Raises:
            :class:`.UtcConversionError`: if the point is outside the civil range
        """
        return self._descriptor().nativeToCivil(self._value)

    def to(self, target: type[TimeT]) -> TimeT:
        """Convert this point to the scale of `target`."""
        return target(convert(self._value, self.SCALE, target.SCALE))

    def addDays(self, days: float) -> Self:
        """Return this point shifted by `days` days."""
        return type(self)(self._descriptor().addDays(self._value, days))

    def difference(self, other: Self) -> Duration:
        """Return ``self - other`` as a duration in days.

        Raises:
            TypeError: if `other` is on another scale
        """
        self._checkSameScale(other)
        return self._descriptor().differenceQuantity(self._value, other.value)

    def _checkSameScale(self, other: object) -> None:
        if type(other) is not type(self):
            name = type(self).__name__
            raise TypeError(
                f"{name}: Cannot perform operations between {name}/{type(other).__name__} objects, "
                "use conversion methods.",
            )

    def __add__(self, duration: Duration) -> Self:
        if not isinstance(duration, Duration):
            return NotImplemented
        return type(self)(self._descriptor().addQuantity(self._value, duration))

    def __sub__(self, other: Duration | Self) -> Self | Duration:
        if isinstance(other, Duration):
            return self + (-other)
        if isinstance(other, Time):
            return self.difference(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        self._checkSameScale(other)
        return self._value == other.value

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        self._checkSameScale(other)
        return self._value != other.value

    def __lt__(self, other: Self) -> bool:
        self._checkSameScale(other)
        return self._value < other.value

    def __le__(self, other: Self) -> bool:
        self._checkSameScale(other)
        return self._value <= other.value

    def __gt__(self, other: Self) -> bool:
        self._checkSameScale(other)
        return self._value > other.value

    def __ge__(self, other: Self) -> bool:
        self._checkSameScale(other)
        return self._value >= other.value

    def __hash__(self) -> int:
        return hash((self.SCALE, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return str(self._value)


class JulianDate(Time):
    """Julian Date, days since noon on 4713 BC January 1 (Julian calendar), on the TT axis."""

    SCALE = TimeScale.JD
    __slots__ = ()

    @classmethod
    def J2000(cls) -> JulianDate:  # noqa: N802
        """Return the J2000.0 epoch, JD 2451545.0."""
        return cls(api.jdJ2000())

    def julianCenturies(self) -> float:
        """Return Julian centuries elapsed since J2000.0."""
        return api.jdJulianCenturies(self._value)

    def julianCenturiesQuantity(self) -> Duration:
        """Return the time since J2000.0 as a duration in Julian centuries."""
        return Duration.fromStruct(api.jdJulianCenturiesQuantity(self._value))

    def toMJD(self) -> ModifiedJulianDate:
        """Return the same instant as a :class:`.ModifiedJulianDate`."""
        return ModifiedJulianDate(api.jdToMJD(self._value))


class ModifiedJulianDate(Time):
    """Modified Julian Date, JD - 2400000.5."""

    SCALE = TimeScale.MJD
    __slots__ = ()

    @classmethod
    def fromJulianDate(cls, julian_date: JulianDate) -> ModifiedJulianDate:
        """Build an MJD from a :class:`.JulianDate`."""
        if not isinstance(julian_date, JulianDate):
            raise TypeError(f"Expected a JulianDate, got {type(julian_date).__name__}")
        return cls(api.jdToMJD(julian_date.value))

    def toJulianDate(self) -> JulianDate:
        """Return the same instant as a :class:`.JulianDate`."""
        return JulianDate(api.mjdToJD(self._value))


class UTCTime(Time):
    """Coordinated Universal Time, stored numerically as MJD."""

    SCALE = TimeScale.UTC
    __slots__ = ()


class TerrestrialTime(Time):
    SCALE = TimeScale.TT
    __slots__ = ()


class InternationalAtomicTime(Time):
    SCALE = TimeScale.TAI
    __slots__ = ()


class BarycentricDynamicalTime(Time):
    SCALE = TimeScale.TDB
    __slots__ = ()


class GeocentricCoordinateTime(Time):
    SCALE = TimeScale.TCG
    __slots__ = ()


class BarycentricCoordinateTime(Time):
    SCALE = TimeScale.TCB
    __slots__ = ()


class GPSTime(Time):
    SCALE = TimeScale.GPS
    __slots__ = ()


class UniversalTime(Time):
    """Universal Time (UT1), as a Julian day count."""

    SCALE = TimeScale.UT1
    __slots__ = ()

    def deltaT(self) -> Duration:
        """Return ΔT = TT - UT1 at this instant, in seconds."""
        julian_date = convert(self._value, self.SCALE, TimeScale.JD)
        return Duration(api.deltaTSeconds(julian_date), TimeUnit.SECOND)


class JulianEphemerisDate(Time):
    SCALE = TimeScale.JDE
    __slots__ = ()


class UnixTime(Time):
    """POSIX seconds since 1970-01-01T00:00:00 UTC."""

    SCALE = TimeScale.UNIX
    __slots__ = ()


# Short aliases
JD = JulianDate
MJD = ModifiedJulianDate
UTC = UTCTime
TT = TerrestrialTime
TAI = InternationalAtomicTime
TDB = BarycentricDynamicalTime
TCG = GeocentricCoordinateTime
TCB = BarycentricCoordinateTime
GPS = GPSTime
UT1 = UniversalTime
JDE = JulianEphemerisDate
Unix = UnixTime

TIME_CLASSES: dict[TimeScale, type[Time]] = {
    cls.SCALE: cls
    for cls in (
        JulianDate,
        ModifiedJulianDate,
        UTCTime,
        TerrestrialTime,
        InternationalAtomicTime,
        BarycentricDynamicalTime,
        GeocentricCoordinateTime,
        BarycentricCoordinateTime,
        GPSTime,
        UniversalTime,
        JulianEphemerisDate,
        UnixTime,
    )
}
"""dict[TimeScale, type[Time]]: concrete class bound to each marker."""
