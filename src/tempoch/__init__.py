"""Main Module Documentation.

tempoch represents points in time on a dozen astronomical and civil time scales, converts between
them through the Julian Date hub, and builds inclusive periods over any of them. The most common
names are importable straight from the top-level package:

.. code-block:: python

    from tempoch import MJD, TDB, CivilTime, Period

    start = MJD.fromCivil(CivilTime(2026, 7, 15, 22))
    window = Period(start, start.addDays(1))
    print(window.start.to(TDB))
"""

from __future__ import annotations

__version__ = "0.1.0"

# Local Imports
from .common.exceptions import (  # noqa: E402
    InvalidPeriodError,
    NoIntersectionError,
    NullPointerError,
    TempochError,
    UnknownStatusError,
    UtcConversionError,
)
from .common.labels import TimeScale, TimeUnit  # noqa: E402
from .time.civil_time import CivilTime  # noqa: E402
from .time.instant import (  # noqa: E402
    GPS,
    JD,
    JDE,
    MJD,
    TAI,
    TCB,
    TCG,
    TDB,
    TT,
    UT1,
    UTC,
    BarycentricCoordinateTime,
    BarycentricDynamicalTime,
    GeocentricCoordinateTime,
    GPSTime,
    InternationalAtomicTime,
    JulianDate,
    JulianEphemerisDate,
    ModifiedJulianDate,
    TerrestrialTime,
    Time,
    Unix,
    UnixTime,
    UniversalTime,
    UTCTime,
)
from .time.period import Period  # noqa: E402
from .units import Duration  # noqa: E402

__all__ = [
    "BarycentricCoordinateTime",
    "BarycentricDynamicalTime",
    "CivilTime",
    "Duration",
    "GPS",
    "GPSTime",
    "GeocentricCoordinateTime",
    "InternationalAtomicTime",
    "InvalidPeriodError",
    "JD",
    "JDE",
    "JulianDate",
    "JulianEphemerisDate",
    "MJD",
    "ModifiedJulianDate",
    "NoIntersectionError",
    "NullPointerError",
    "Period",
    "TAI",
    "TCB",
    "TCG",
    "TDB",
    "TT",
    "TempochError",
    "TerrestrialTime",
    "Time",
    "TimeScale",
    "TimeUnit",
    "UT1",
    "UTC",
    "UTCTime",
    "Unix",
    "UnixTime",
    "UniversalTime",
    "UnknownStatusError",
    "UtcConversionError",
    "__version__",
]
