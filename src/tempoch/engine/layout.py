"""Fixed memory layouts exchanged across the engine boundary.

The field order and widths are part of the boundary contract and must not change.
"""

from __future__ import annotations

# Standard Library Imports
import ctypes


class CivilTimeStruct(ctypes.Structure):
    """UTC civil date-time breakdown: year, month, day, hour, minute, second, nanosecond."""

    _fields_ = [
        ("year", ctypes.c_int32),
        ("month", ctypes.c_uint8),
        ("day", ctypes.c_uint8),
        ("hour", ctypes.c_uint8),
        ("minute", ctypes.c_uint8),
        ("second", ctypes.c_uint8),
        ("nanosecond", ctypes.c_uint32),
    ]


class PeriodStruct(ctypes.Structure):
    """Inclusive period bounds as MJD days."""

    _fields_ = [
        ("start_mjd", ctypes.c_double),
        ("end_mjd", ctypes.c_double),
    ]


class QuantityStruct(ctypes.Structure):
    """A value tagged with a :class:`.TimeUnit` identifier."""

    _fields_ = [
        ("value", ctypes.c_double),
        ("unit", ctypes.c_int32),
    ]
