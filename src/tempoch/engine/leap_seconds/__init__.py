"""Leap second (TAI - UTC) package."""

from __future__ import annotations

# Standard Library Imports
import datetime
from dataclasses import dataclass

# Third Party Imports
from numpy import array, searchsorted


@dataclass(frozen=True)
class LeapSecond:
    """Data class describing one step of the TAI - UTC offset."""

    date: datetime.date
    """datetime.date: UTC calendar date from whose 0h the offset applies."""

    mjd: int
    """int: Modified Julian Date of :attr:`.date`."""

    tai_minus_utc: float
    """float: TAI - UTC in effect from :attr:`.date` on (seconds)."""


class MissingLeapSecondData(Exception):  # noqa: N818
    """Error thrown when no TAI - UTC offset is tabulated for a date."""


class LeapSecondTable:
    """Sorted, immutable TAI - UTC step table with vectorized lookup."""

    def __init__(self, entries: list[LeapSecond]):
        """Build the lookup arrays.

        Args:
            entries (list[LeapSecond]): table rows, in any order

        Raises:
            ValueError: if `entries` is empty or two rows share a date
        """
        if not entries:
            raise ValueError("A leap second table needs at least one entry")

        ordered = sorted(entries, key=lambda entry: entry.mjd)
        mjds = [entry.mjd for entry in ordered]
        if len(set(mjds)) != len(mjds):
            raise ValueError("Leap second table has duplicate dates")

        self._entries = tuple(ordered)
        self._mjd = array(mjds, dtype=float)
        self._offset = array([entry.tai_minus_utc for entry in ordered], dtype=float)

    @property
    def entries(self) -> tuple[LeapSecond, ...]:
        """tuple[LeapSecond, ...]: table rows sorted by date."""
        return self._entries

    @property
    def firstMJD(self) -> int:
        """int: first UTC MJD covered by the table."""
        return self._entries[0].mjd

    @property
    def lastMJD(self) -> int:
        """int: UTC MJD of the most recent tabulated step."""
        return self._entries[-1].mjd

    def covers(self, mjd_utc: float) -> bool:
        """Return whether `mjd_utc` falls on or after the first tabulated step."""
        return mjd_utc >= self._mjd[0]

    def taiMinusUTC(self, mjd_utc: float) -> float:
        """Return TAI - UTC (seconds) in effect at `mjd_utc`.

        Dates after the last step keep the last offset.

        Raises:
            MissingLeapSecondData: if `mjd_utc` precedes the table
        """
        index = int(searchsorted(self._mjd, mjd_utc, side="right")) - 1
        if index < 0:
            err = f"No TAI-UTC offset tabulated for MJD {mjd_utc}"
            raise MissingLeapSecondData(err)
        return float(self._offset[index])

    def leapSecondsInDay(self, mjd_day: int) -> float:
        """Return the length change (seconds) of the UTC day starting at integer `mjd_day`.

        ``1.0`` means the day ends with 23:59:60; days outside the table return ``0.0``.
        """
        if not self.covers(mjd_day):
            return 0.0
        return self.taiMinusUTC(mjd_day + 1) - self.taiMinusUTC(mjd_day)


# Local Imports
# forward-facing API import
from .getter import getLeapSecondTable  # noqa: E402, F401
