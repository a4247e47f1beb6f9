"""Defines the :class:`.CivilTime` UTC date-time breakdown."""

from __future__ import annotations

# Standard Library Imports
import ctypes
from dataclasses import astuple, dataclass
from datetime import datetime, timezone
from operator import index

# Local Imports
from ..engine.layout import CivilTimeStruct

_INT32_RANGE = (-(2**31), 2**31 - 1)
_UINT8_RANGE = (0, 2**8 - 1)
_UINT32_RANGE = (0, 2**32 - 1)

_FIELD_RANGES: dict[str, tuple[int, int]] = {
    "year": _INT32_RANGE,
    "month": _UINT8_RANGE,
    "day": _UINT8_RANGE,
    "hour": _UINT8_RANGE,
    "minute": _UINT8_RANGE,
    "second": _UINT8_RANGE,
    "nanosecond": _UINT32_RANGE,
}


@dataclass(frozen=True)
class CivilTime:
    """UTC civil date-time on the proleptic Gregorian calendar.

    Construction only checks that every field fits its exchange width. Calendar validity (days in
    the month, where a leap second may fall, the supported year range) is decided by the engine
    when the breakdown is converted, and reported as :class:`.UtcConversionError`.

    ``second`` may be ``60`` for the leap second inserted at 23:59:60 on days that end with one.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0

    def __post_init__(self):
        """Check the field widths of the engine's civil-time layout.

        Raises:
            ValueError: if a field doesn't fit its exchange width
            TypeError: if a field isn't an integer
        """
        for name, (lower, upper) in _FIELD_RANGES.items():
            value = index(getattr(self, name))
            if not lower <= value <= upper:
                err = f"CivilTime.{name} must be within [{lower}, {upper}], got {value}"
                raise ValueError(err)
            object.__setattr__(self, name, value)

    @classmethod
    def atJ2000(cls) -> CivilTime:
        """Return 2000-01-01 12:00:00, the civil reading of the J2000.0 epoch."""
        return cls(2000, 1, 1, 12)

    @classmethod
    def fromStruct(cls, struct: CivilTimeStruct) -> CivilTime:
        """Build a breakdown from the engine's civil-time layout."""
        return cls(
            struct.year,
            struct.month,
            struct.day,
            struct.hour,
            struct.minute,
            struct.second,
            struct.nanosecond,
        )

    def toStruct(self) -> CivilTimeStruct:
        """Return the engine's civil-time layout for this breakdown."""
        return CivilTimeStruct(*astuple(self))

    @classmethod
    def unpack(cls, data: bytes) -> CivilTime:
        """Build a breakdown from the raw bytes of a :class:`.CivilTimeStruct`.

        Raises:
            ValueError: if `data` isn't exactly one struct long
        """
        expected = ctypes.sizeof(CivilTimeStruct)
        if len(data) != expected:
            err = f"Civil time layout is {expected} bytes, got {len(data)}"
            raise ValueError(err)
        return cls.fromStruct(CivilTimeStruct.from_buffer_copy(data))

    def pack(self) -> bytes:
        """Return the raw bytes of this breakdown's :class:`.CivilTimeStruct`."""
        return bytes(self.toStruct())

    @classmethod
    def fromDatetime(cls, date_time: datetime) -> CivilTime:
        """Build a breakdown from a :class:`datetime.datetime`.

        Naive datetimes are read as UTC; aware ones are converted to UTC first.
        """
        if date_time.tzinfo is not None:
            date_time = date_time.astimezone(timezone.utc)
        return cls(
            date_time.year,
            date_time.month,
            date_time.day,
            date_time.hour,
            date_time.minute,
            date_time.second,
            date_time.microsecond * 1000,
        )

    def toDatetime(self) -> datetime:
        """Return an aware UTC :class:`datetime.datetime`, truncated to microseconds.

        Raises:
            ValueError: if the breakdown can't be held by :class:`datetime.datetime`, such as a
                leap second or a year outside 1-9999
        """
        if self.second == 60:
            raise ValueError(f"datetime cannot represent the leap second {self}")
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.nanosecond // 1000,
            tzinfo=timezone.utc,
        )

    def __str__(self) -> str:
        text = (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
        if self.nanosecond:
            text += f".{self.nanosecond:09d}"
        return text
