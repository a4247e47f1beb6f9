"""Defines the inclusive :class:`.Period` and the adapters projecting its bounds to MJD.

A period stores its bounds as canonical MJD days and exposes them in the representation it was
built from. The representation is handled by a :class:`.PeriodAdapter`, looked up from the type
of the bounds:

* :class:`.Time` subclasses, routed through the conversion graph;
* ``float`` (and ``int``), read as MJD days;
* :class:`datetime.datetime`, read as UTC when naive.
"""

from __future__ import annotations

# Standard Library Imports
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Generic, TypeVar

# Local Imports
from ..common.exceptions import checkStatus
from ..common.labels import TimeScale, TimeUnit
from ..engine import api
from ..engine.layout import PeriodStruct
from ..units import Duration
from .civil_time import CivilTime
from .conversion import convert
from .descriptors import getDescriptor
from .instant import TIME_CLASSES, ModifiedJulianDate, Time

T = TypeVar("T")


class PeriodAdapter(ABC, Generic[T]):
    """Projects one bound representation to and from canonical MJD days."""

    @abstractmethod
    def toCanonical(self, value: T) -> float:
        """Return `value` as MJD days."""
        raise NotImplementedError

    @abstractmethod
    def fromCanonical(self, mjd: float) -> T:
        """Return MJD days in this adapter's representation."""
        raise NotImplementedError


class TimeAdapter(PeriodAdapter[Time]):
    """Adapter for one :class:`.Time` subclass."""

    def __init__(self, time_class: type[Time]):
        """Bind the adapter to a concrete scale.

        Args:
            time_class (``type``): :class:`.Time` subclass the bounds are expressed in

        Raises:
            TypeError: if `time_class` isn't a :class:`.Time` subclass bound to a scale
        """
        if not (isinstance(time_class, type) and issubclass(time_class, Time)) or not hasattr(time_class, "SCALE"):
            raise TypeError(f"TimeAdapter requires a concrete Time subclass, got {time_class!r}")
        self._time_class = time_class

    @property
    def time_class(self) -> type[Time]:
        """``type``: :class:`.Time` subclass this adapter produces."""
        return self._time_class

    def toCanonical(self, value: Time) -> float:
        if type(value) is not self._time_class:
            raise TypeError(f"Expected {self._time_class.__name__}, got {type(value).__name__}")
        return convert(value.value, self._time_class.SCALE, TimeScale.MJD)

    def fromCanonical(self, mjd: float) -> Time:
        return self._time_class(convert(mjd, TimeScale.MJD, self._time_class.SCALE))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeAdapter):
            return NotImplemented
        return self._time_class is other.time_class

    def __hash__(self) -> int:
        return hash((TimeAdapter, self._time_class))

    def __repr__(self) -> str:
        return f"TimeAdapter({self._time_class.__name__})"


class FloatAdapter(PeriodAdapter[float]):
    """Adapter for raw floats, read as MJD days."""

    def toCanonical(self, value: float) -> float:
        return float(value)

    def fromCanonical(self, mjd: float) -> float:
        return mjd

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FloatAdapter)

    def __hash__(self) -> int:
        return hash(FloatAdapter)


class DatetimeAdapter(PeriodAdapter[datetime]):
    """Adapter for :class:`datetime.datetime`; naive values are read as UTC.

    Bounds come back as aware UTC datetimes truncated to microseconds.
    """

    def toCanonical(self, value: datetime) -> float:
        return getDescriptor(TimeScale.MJD).civilToNative(CivilTime.fromDatetime(value))

    def fromCanonical(self, mjd: float) -> datetime:
        return getDescriptor(TimeScale.MJD).nativeToCivil(mjd).toDatetime()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DatetimeAdapter)

    def __hash__(self) -> int:
        return hash(DatetimeAdapter)


_FLOAT_ADAPTER = FloatAdapter()

_PERIOD_ADAPTERS: dict[type, PeriodAdapter] = {
    float: _FLOAT_ADAPTER,
    int: _FLOAT_ADAPTER,
    datetime: DatetimeAdapter(),
}
_PERIOD_ADAPTERS.update((time_class, TimeAdapter(time_class)) for time_class in TIME_CLASSES.values())


def registerPeriodAdapter(kind: type, adapter: PeriodAdapter) -> None:
    """Use `adapter` for period bounds of type `kind` (and its subclasses that aren't time scales).

    Raises:
        TypeError: if `adapter` isn't a :class:`.PeriodAdapter`
    """
    if not isinstance(adapter, PeriodAdapter):
        raise TypeError(f"Expected a PeriodAdapter, got {type(adapter).__name__}")
    _PERIOD_ADAPTERS[kind] = adapter


def getPeriodAdapter(kind: type) -> PeriodAdapter:
    """Return the adapter handling period bounds of type `kind`.

    The registry isn't modified; a :class:`.Time` subclass that wasn't registered gets a new
    :class:`.TimeAdapter` of its own.

    Raises:
        TypeError: if no adapter handles `kind`, or `kind` is ``bool``
    """
    if issubclass(kind, bool):
        raise TypeError("Period bounds can't be bool")

    if kind in _PERIOD_ADAPTERS:
        return _PERIOD_ADAPTERS[kind]

    if issubclass(kind, Time) and hasattr(kind, "SCALE"):
        return TimeAdapter(kind)

    for base in kind.__mro__:
        if base in _PERIOD_ADAPTERS:
            return _PERIOD_ADAPTERS[base]

    raise TypeError(f"No period adapter registered for {kind.__name__}")


class Period(Generic[T]):
    """Inclusive time period ``[start, end]`` with ``start <= end``."""

    __slots__ = ("_adapter", "_start_mjd", "_end_mjd")

    def __init__(self, start: T, end: T):
        """Validate and store two bounds of the same representation.

        Args:
            start: first instant of the period
            end: last instant of the period

        Raises:
            TypeError: if the bounds have different or unsupported representations
            :class:`.InvalidPeriodError`: if `start` is later than `end`
        """
        adapter = getPeriodAdapter(type(start))
        if getPeriodAdapter(type(end)) != adapter:
            raise TypeError(
                f"Period bounds must share a representation, got {type(start).__name__}/{type(end).__name__}",
            )

        status, struct = api.periodNew(adapter.toCanonical(start), adapter.toCanonical(end))
        checkStatus(status, "periodNew")
        self._adapter = adapter
        self._start_mjd = struct.start_mjd
        self._end_mjd = struct.end_mjd

    @classmethod
    def _fromCanonical(cls, struct: PeriodStruct, adapter: PeriodAdapter) -> Period:
        """Wrap engine output that already satisfies ``start <= end``, without re-validating."""
        period = cls.__new__(cls)
        period._adapter = adapter
        period._start_mjd = struct.start_mjd
        period._end_mjd = struct.end_mjd
        return period

    @classmethod
    def fromStruct(cls, struct: PeriodStruct, kind: type = ModifiedJulianDate) -> Period:
        """Build a validated period from the engine layout.

        Args:
            struct (:class:`.PeriodStruct`): canonical MJD bounds
            kind (``type``, optional): representation of the bounds. Defaults to
                :class:`.ModifiedJulianDate`.

        Raises:
            :class:`.InvalidPeriodError`: if the bounds are reversed or not finite
        """
        status, checked = api.periodNew(struct.start_mjd, struct.end_mjd)
        checkStatus(status, "periodNew")
        return cls._fromCanonical(checked, getPeriodAdapter(kind))

    def toStruct(self) -> PeriodStruct:
        """Return the engine layout of this period."""
        return PeriodStruct(self._start_mjd, self._end_mjd)

    @property
    def adapter(self) -> PeriodAdapter:
        """:class:`.PeriodAdapter`: representation of the bounds."""
        return self._adapter

    @property
    def start(self) -> T:
        """First instant of the period."""
        return self._adapter.fromCanonical(self._start_mjd)

    @property
    def end(self) -> T:
        """Last instant of the period."""
        return self._adapter.fromCanonical(self._end_mjd)

    @property
    def start_mjd(self) -> float:
        """``float``: canonical start, in MJD days."""
        return self._start_mjd

    @property
    def end_mjd(self) -> float:
        """``float``: canonical end, in MJD days."""
        return self._end_mjd

    def durationDays(self) -> float:
        """Return the length of the period in days."""
        return api.periodDurationDays(self.toStruct())

    def duration(self, unit: TimeUnit = TimeUnit.DAY) -> Duration:
        """Return the length of the period in `unit`."""
        return Duration(self.durationDays(), TimeUnit.DAY).to(unit)

    def intersection(self, other: Period) -> Period[T]:
        """Return the overlap of two periods, in this period's representation.

        Periods that only share an endpoint overlap in a zero-length period.

        Raises:
            :class:`.NoIntersectionError`: if the periods are disjoint
        """
        if not isinstance(other, Period):
            raise TypeError(f"Cannot intersect a Period with {type(other).__name__}")
        status, struct = api.periodIntersection(self.toStruct(), other.toStruct())
        checkStatus(status, "periodIntersection")
        return self._fromCanonical(struct, self._adapter)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return (
            self._adapter == other.adapter
            and self._start_mjd == other.start_mjd
            and self._end_mjd == other.end_mjd
        )

    def __hash__(self) -> int:
        return hash((self._adapter, self._start_mjd, self._end_mjd))

    def __repr__(self) -> str:
        return f"Period({self.start!r}, {self.end!r})"

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"
