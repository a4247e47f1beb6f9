"""Typed durations tagged with an engine unit identifier."""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass
from numbers import Real

# Local Imports
from .common.labels import TimeUnit
from .engine.api import convertQuantity
from .engine.layout import QuantityStruct


@dataclass(frozen=True)
class Duration:
    """Length of time carried as a value and a :class:`.TimeUnit`."""

    value: float
    """``float``: magnitude, expressed in :attr:`.unit`."""

    unit: TimeUnit = TimeUnit.DAY
    """:class:`.TimeUnit`: unit of :attr:`.value`."""

    def __post_init__(self):
        """Coerce the fields so equal durations compare and hash equally."""
        object.__setattr__(self, "value", float(self.value))
        object.__setattr__(self, "unit", TimeUnit(self.unit))

    def to(self, unit: TimeUnit) -> Duration:
        """Return this duration expressed in `unit`."""
        return Duration(convertQuantity(self.value, self.unit, unit), unit)

    @classmethod
    def fromStruct(cls, quantity: QuantityStruct) -> Duration:
        """Build a duration from the engine's quantity layout."""
        return cls(quantity.value, TimeUnit(quantity.unit))

    def toStruct(self) -> QuantityStruct:
        """Return the engine's quantity layout for this duration."""
        return QuantityStruct(self.value, self.unit)

    def __neg__(self) -> Duration:
        return Duration(-self.value, self.unit)

    def __abs__(self) -> Duration:
        return Duration(abs(self.value), self.unit)

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.value + other.to(self.unit).value, self.unit)

    def __sub__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.value - other.to(self.unit).value, self.unit)

    def __mul__(self, factor: float) -> Duration:
        if isinstance(factor, bool) or not isinstance(factor, Real):
            return NotImplemented
        return Duration(self.value * factor, self.unit)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"{self.value} {self.unit.symbol}"
