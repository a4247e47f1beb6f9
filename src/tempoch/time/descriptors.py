"""Scale descriptor table: per-scale civil conversion and arithmetic.

Julian Date and Modified Julian Date call the engine's primitives directly, UTC shares the MJD
representation, and every other scale is derived from a pair of bijections with Julian Date by
:class:`.JulianDateBackedDescriptor`.
"""

from __future__ import annotations

# Standard Library Imports
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from types import MappingProxyType

# Local Imports
from ..common.exceptions import checkStatus
from ..common.labels import TimeScale
from ..engine import api, transforms
from ..units import Duration
from .civil_time import CivilTime


def _toStruct(civil: CivilTime | None):
    return civil.toStruct() if civil is not None else None


class ScaleDescriptor(ABC):
    """Operations required to support one time scale."""

    def __init__(self, label: str):
        """Store the scale label.

        Args:
            label (``str``): short scale label, e.g. ``"MJD"``
        """
        self._label = label

    @property
    def label(self) -> str:
        """``str``: short scale label."""
        return self._label

    @abstractmethod
    def civilToNative(self, civil: CivilTime) -> float:
        """Convert a UTC civil breakdown to this scale's native value.

        Raises:
            :class:`.UtcConversionError`: if the breakdown is invalid or out of range
        """
        raise NotImplementedError

    @abstractmethod
    def nativeToCivil(self, value: float) -> CivilTime:
        """Convert a native value to a UTC civil breakdown.

        Raises:
            :class:`.UtcConversionError`: if the value has no civil representation
        """
        raise NotImplementedError

    @abstractmethod
    def addDays(self, value: float, delta_days: float) -> float:
        """Return `value` shifted by `delta_days` days."""
        raise NotImplementedError

    @abstractmethod
    def difference(self, first: float, second: float) -> float:
        """Return ``first - second`` in days."""
        raise NotImplementedError

    @abstractmethod
    def addQuantity(self, value: float, duration: Duration) -> float:
        """Return `value` shifted by a typed duration."""
        raise NotImplementedError

    @abstractmethod
    def differenceQuantity(self, first: float, second: float) -> Duration:
        """Return ``first - second`` as a duration in days."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._label!r})"


class JulianDateDescriptor(ScaleDescriptor):
    """Julian Date, the conversion hub."""

    def __init__(self):
        """Julian Date is always labelled ``"JD"``."""
        super().__init__(TimeScale.JD.value)

    def civilToNative(self, civil: CivilTime) -> float:
        status, julian_date = api.jdFromUTC(_toStruct(civil))
        checkStatus(status, "jdFromUTC")
        return julian_date

    def nativeToCivil(self, value: float) -> CivilTime:
        status, civil = api.jdToUTC(value)
        checkStatus(status, "jdToUTC")
        return CivilTime.fromStruct(civil)

    def addDays(self, value: float, delta_days: float) -> float:
        return api.jdAddDays(value, delta_days)

    def difference(self, first: float, second: float) -> float:
        return api.jdDifference(first, second)

    def addQuantity(self, value: float, duration: Duration) -> float:
        return api.jdAddQuantity(value, duration.toStruct())

    def differenceQuantity(self, first: float, second: float) -> Duration:
        return Duration.fromStruct(api.jdDifferenceQuantity(first, second))


class ModifiedJulianDateDescriptor(ScaleDescriptor):
    """Modified Julian Date, JD - 2400000.5."""

    def __init__(self, label: str = TimeScale.MJD.value):
        """Scales stored as MJD may pass their own label.

        Args:
            label (``str``, optional): scale label. Defaults to ``"MJD"``.
        """
        super().__init__(label)

    def civilToNative(self, civil: CivilTime) -> float:
        status, mjd = api.mjdFromUTC(_toStruct(civil))
        checkStatus(status, "mjdFromUTC")
        return mjd

    def nativeToCivil(self, value: float) -> CivilTime:
        status, civil = api.mjdToUTC(value)
        checkStatus(status, "mjdToUTC")
        return CivilTime.fromStruct(civil)

    def addDays(self, value: float, delta_days: float) -> float:
        return api.mjdAddDays(value, delta_days)

    def difference(self, first: float, second: float) -> float:
        return api.mjdDifference(first, second)

    def addQuantity(self, value: float, duration: Duration) -> float:
        return api.mjdAddQuantity(value, duration.toStruct())

    def differenceQuantity(self, first: float, second: float) -> Duration:
        return Duration.fromStruct(api.mjdDifferenceQuantity(first, second))


class UTCDescriptor(ModifiedJulianDateDescriptor):
    """UTC, stored numerically as MJD and sharing its primitives."""

    def __init__(self):
        """UTC is always labelled ``"UTC"``."""
        super().__init__(TimeScale.UTC.value)


class JulianDateBackedDescriptor(ScaleDescriptor):
    """Descriptor derived from a bijection with Julian Date.

    Every operation maps its inputs to Julian Date, applies the Julian Date primitive, and maps
    the result back, so day length and epoch anchoring always agree with Julian Date.
    """

    def __init__(self, label: str, to_jd: Callable[[float], float], from_jd: Callable[[float], float]):
        """Wrap a pair of pure bijections.

        Args:
            label (``str``): short scale label
            to_jd (``callable``): native value to Julian Date
            from_jd (``callable``): Julian Date to native value
        """
        super().__init__(label)
        self._to_jd = to_jd
        self._from_jd = from_jd
        self._hub = JulianDateDescriptor()

    def toJulianDate(self, value: float) -> float:
        """Map a native value to Julian Date."""
        return self._to_jd(value)

    def fromJulianDate(self, julian_date: float) -> float:
        """Map a Julian Date to the native value."""
        return self._from_jd(julian_date)

    def civilToNative(self, civil: CivilTime) -> float:
        return self._from_jd(self._hub.civilToNative(civil))

    def nativeToCivil(self, value: float) -> CivilTime:
        return self._hub.nativeToCivil(self._to_jd(value))

    def addDays(self, value: float, delta_days: float) -> float:
        return self._from_jd(self._hub.addDays(self._to_jd(value), delta_days))

    def difference(self, first: float, second: float) -> float:
        return self._hub.difference(self._to_jd(first), self._to_jd(second))

    def addQuantity(self, value: float, duration: Duration) -> float:
        return self._from_jd(self._hub.addQuantity(self._to_jd(value), duration))

    def differenceQuantity(self, first: float, second: float) -> Duration:
        return self._hub.differenceQuantity(self._to_jd(first), self._to_jd(second))


JULIAN_DATE_BIJECTIONS: dict[TimeScale, tuple[Callable[[float], float], Callable[[float], float]]] = {
    TimeScale.TT: (transforms.ttToJD, transforms.jdToTT),
    TimeScale.TAI: (transforms.taiToJD, transforms.jdToTAI),
    TimeScale.TDB: (transforms.tdbToJD, transforms.jdToTDB),
    TimeScale.TCG: (transforms.tcgToJD, transforms.jdToTCG),
    TimeScale.TCB: (transforms.tcbToJD, transforms.jdToTCB),
    TimeScale.GPS: (transforms.gpsToJD, transforms.jdToGPS),
    TimeScale.UT1: (transforms.ut1ToJD, transforms.jdToUT1),
    TimeScale.JDE: (transforms.jdeToJD, transforms.jdToJDE),
    TimeScale.UNIX: (transforms.unixToJD, transforms.jdToUnix),
}
"""dict: ``(to_jd, from_jd)`` bijection pair of every Julian-Date-backed scale."""


def _buildDescriptors() -> Mapping[TimeScale, ScaleDescriptor]:
    table: dict[TimeScale, ScaleDescriptor] = {
        TimeScale.JD: JulianDateDescriptor(),
        TimeScale.MJD: ModifiedJulianDateDescriptor(),
        TimeScale.UTC: UTCDescriptor(),
    }
    for scale, (to_jd, from_jd) in JULIAN_DATE_BIJECTIONS.items():
        table[scale] = JulianDateBackedDescriptor(scale.value, to_jd, from_jd)
    return MappingProxyType(table)


DESCRIPTORS: Mapping[TimeScale, ScaleDescriptor] = _buildDescriptors()
"""Mapping[TimeScale, ScaleDescriptor]: read-only descriptor of every supported scale."""


def getDescriptor(scale: TimeScale) -> ScaleDescriptor:
    """Return the descriptor registered for `scale`.

    Raises:
        KeyError: if `scale` isn't a supported :class:`.TimeScale`
    """
    try:
        return DESCRIPTORS[scale]
    except KeyError:
        err = f"No scale descriptor registered for {scale!r}"
        raise KeyError(err) from None
