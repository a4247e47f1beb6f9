"""Time-keeping constants used by the reference engine.

References:
    #. :cite:t:`vallado_2013_astro`, Section 3.5
    #. IAU 2000 Resolution B1.9 (TCG/TT rate) and IAU 2006 Resolution B3 (TCB/TDB rate)
"""

from __future__ import annotations

# Local Imports
from ..common.labels import TimeUnit

# Conversion constants
DAYS2SEC = 24.0 * 3600
SEC2DAYS = 1.0 / DAYS2SEC
DAYS_PER_JULIAN_YEAR = 365.25
DAYS_PER_JULIAN_CENTURY = 36525.0

# Epochs, all as Julian dates
J2000 = 2451545.0
"""``float``: J2000.0 epoch, 2000-01-01T12:00:00 TT."""
MJD_OFFSET = 2400000.5
"""``float``: JD - MJD."""
UNIX_EPOCH_MJD = 40587.0
"""``float``: 1970-01-01T00:00:00 UTC as a (UTC) MJD."""
TCG_TCB_EPOCH_JD = 2443144.5003725
"""``float``: 1977-01-01T00:00:32.184 TT, where TT, TCG and TCB coincide."""

# Fixed offsets, in seconds
TT_MINUS_TAI = 32.184
TAI_MINUS_GPS = 19.0
TDB0 = -6.55e-5
"""``float``: TDB - TCB at the TCB epoch (IAU 2006 B3)."""

# Relativistic rates
L_G = 6.969290134e-10
L_B = 1.550519768e-8

# Civil calendar bounds (proleptic Gregorian)
MIN_CIVIL_YEAR = -262143
MAX_CIVIL_YEAR = 262142

# Solver settings for bijections without a closed-form inverse
_ATOL = 1e-9
_MAX_ITER = 50

SECONDS_PER_UNIT: dict[TimeUnit, float] = {
    TimeUnit.MILLISECOND: 1e-3,
    TimeUnit.SECOND: 1.0,
    TimeUnit.MINUTE: 60.0,
    TimeUnit.HOUR: 3600.0,
    TimeUnit.DAY: DAYS2SEC,
    TimeUnit.WEEK: 7 * DAYS2SEC,
    TimeUnit.JULIAN_YEAR: DAYS_PER_JULIAN_YEAR * DAYS2SEC,
    TimeUnit.JULIAN_CENTURY: DAYS_PER_JULIAN_CENTURY * DAYS2SEC,
}
"""dict[TimeUnit, float]: length of each engine unit in SI seconds."""
