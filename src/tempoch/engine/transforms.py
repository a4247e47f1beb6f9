"""Pure bijections between the Julian Date hub and each JD-backed scale.

The hub Julian Date is counted on the TT axis. Every scale except Unix keeps a Julian day count
on its own axis; Unix keeps POSIX seconds since 1970-01-01T00:00:00 UTC.

References:
    #. :cite:t:`vallado_2013_astro`, Section 3.5.4
    #. IERS Conventions (2010), Chapter 10
"""

from __future__ import annotations

# Standard Library Imports
from math import floor, isfinite

# Third Party Imports
from numpy import cos, deg2rad, sin
from scipy.optimize import newton

# Local Imports
from .calendar import ttToUTC, utcToTT
from .constants import (
    _ATOL,
    _MAX_ITER,
    DAYS2SEC,
    J2000,
    L_B,
    L_G,
    MJD_OFFSET,
    SEC2DAYS,
    TAI_MINUS_GPS,
    TCG_TCB_EPOCH_JD,
    TDB0,
    TT_MINUS_TAI,
    UNIX_EPOCH_MJD,
)
from .delta_t import deltaT

# TDB - TT periodic terms (seconds) and mean anomaly rate (degrees/day)
_TDB_AMPLITUDE_1 = 0.001657
_TDB_AMPLITUDE_2 = 0.000014
_EARTH_MEAN_ANOMALY_J2000 = 357.53
_EARTH_MEAN_ANOMALY_RATE = 0.98560028


def _earthMeanAnomaly(julian_date: float) -> float:
    return deg2rad(_EARTH_MEAN_ANOMALY_J2000 + _EARTH_MEAN_ANOMALY_RATE * (julian_date - J2000))


def tdbMinusTT(julian_date: float) -> float:
    """Return TDB - TT (seconds) from the two-term periodic approximation."""
    g = _earthMeanAnomaly(julian_date)
    return float(_TDB_AMPLITUDE_1 * sin(g) + _TDB_AMPLITUDE_2 * sin(2.0 * g))


def _tdbMinusTTRate(julian_date: float) -> float:
    """Derivative of :func:`.tdbMinusTT` with respect to the Julian date (seconds/day)."""
    g = _earthMeanAnomaly(julian_date)
    rate = deg2rad(_EARTH_MEAN_ANOMALY_RATE)
    return float(rate * (_TDB_AMPLITUDE_1 * cos(g) + 2.0 * _TDB_AMPLITUDE_2 * cos(2.0 * g)))


def jdToTT(julian_date: float) -> float:
    """Hub JD to TT Julian date (identity, the hub is on the TT axis)."""
    return julian_date


def ttToJD(tt_jd: float) -> float:
    """TT Julian date to hub JD (identity)."""
    return tt_jd


def jdToJDE(julian_date: float) -> float:
    """Hub JD to Julian Ephemeris Date (identity)."""
    return julian_date


def jdeToJD(jde: float) -> float:
    """Julian Ephemeris Date to hub JD (identity)."""
    return jde


def jdToTAI(julian_date: float) -> float:
    """Hub JD to TAI Julian date: TAI = TT - 32.184 s."""
    return julian_date - TT_MINUS_TAI * SEC2DAYS


def taiToJD(tai_jd: float) -> float:
    """TAI Julian date to hub JD."""
    return tai_jd + TT_MINUS_TAI * SEC2DAYS


def jdToGPS(julian_date: float) -> float:
    """Hub JD to GPS Julian date: GPS = TAI - 19 s."""
    return jdToTAI(julian_date) - TAI_MINUS_GPS * SEC2DAYS


def gpsToJD(gps_jd: float) -> float:
    """GPS Julian date to hub JD."""
    return taiToJD(gps_jd + TAI_MINUS_GPS * SEC2DAYS)


def jdToTDB(julian_date: float) -> float:
    """Hub JD to TDB Julian date."""
    return julian_date + tdbMinusTT(julian_date) * SEC2DAYS


def tdbToJD(tdb_jd: float) -> float:
    """TDB Julian date to hub JD.

    TDB - TT depends on TT, so the inverse is found with Newton's method starting from the TDB
    value, which is within two milliseconds of the root.
    """
    if not isfinite(tdb_jd):
        return tdb_jd

    def _residual(julian_date: float) -> float:
        return jdToTDB(julian_date) - tdb_jd

    def _residualRate(julian_date: float) -> float:
        return 1.0 + _tdbMinusTTRate(julian_date) * SEC2DAYS

    return float(
        newton(_residual, tdb_jd, fprime=_residualRate, tol=_ATOL, maxiter=_MAX_ITER, disp=True)
    )


def jdToTCG(julian_date: float) -> float:
    """Hub JD to TCG Julian date: TCG - TT = L_G / (1 - L_G) * (TT - T0)."""
    return TCG_TCB_EPOCH_JD + (julian_date - TCG_TCB_EPOCH_JD) / (1.0 - L_G)


def tcgToJD(tcg_jd: float) -> float:
    """TCG Julian date to hub JD."""
    return TCG_TCB_EPOCH_JD + (tcg_jd - TCG_TCB_EPOCH_JD) * (1.0 - L_G)


def jdToTCB(julian_date: float) -> float:
    """Hub JD to TCB Julian date, from TDB = TCB - L_B * (TCB - T0) + TDB0."""
    tdb_jd = jdToTDB(julian_date)
    return TCG_TCB_EPOCH_JD + (tdb_jd - TDB0 * SEC2DAYS - TCG_TCB_EPOCH_JD) / (1.0 - L_B)


def tcbToJD(tcb_jd: float) -> float:
    """TCB Julian date to hub JD."""
    tdb_jd = TCG_TCB_EPOCH_JD + (tcb_jd - TCG_TCB_EPOCH_JD) * (1.0 - L_B) + TDB0 * SEC2DAYS
    return tdbToJD(tdb_jd)


def jdToUT1(julian_date: float) -> float:
    """Hub JD to UT1 Julian date: UT1 = TT - ΔT."""
    if not isfinite(julian_date):
        return julian_date
    return julian_date - deltaT(julian_date) * SEC2DAYS


def ut1ToJD(ut1_jd: float) -> float:
    """UT1 Julian date to hub JD.

    ΔT drifts by at most a fraction of a second per day, so a unit derivative converges quickly.
    """
    if not isfinite(ut1_jd):
        return ut1_jd

    def _residual(julian_date: float) -> float:
        return jdToUT1(julian_date) - ut1_jd

    return float(
        newton(
            _residual,
            ut1_jd + deltaT(ut1_jd) * SEC2DAYS,
            fprime=lambda _: 1.0,
            tol=_ATOL,
            maxiter=_MAX_ITER,
            disp=True,
        )
    )


def jdToUnix(julian_date: float) -> float:
    """Hub JD to POSIX seconds.

    Instants inside a leap second share the POSIX seconds of the first second of the next day.
    """
    if not isfinite(julian_date):
        return julian_date
    mjd_day, seconds_of_day = ttToUTC(julian_date - MJD_OFFSET)
    return (mjd_day - UNIX_EPOCH_MJD) * DAYS2SEC + seconds_of_day


def unixToJD(unix_seconds: float) -> float:
    """POSIX seconds to hub JD."""
    if not isfinite(unix_seconds):
        return unix_seconds
    days = floor(unix_seconds / DAYS2SEC)
    seconds_of_day = unix_seconds - days * DAYS2SEC
    return utcToTT(days + int(UNIX_EPOCH_MJD), seconds_of_day) + MJD_OFFSET
