"""Module defining the infrastructure used to load TAI - UTC tables from various sources."""

from __future__ import annotations

# Standard Library Imports
import datetime
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path

# Local Imports
from ...common.logger import tempochLogInfo
from ...common.utilities import loadDatFile
from . import LeapSecond, LeapSecondTable


class LeapSecondLoader(ABC):
    """Abstract class defining how a leap second table should be loaded."""

    def __init__(self, location: str):
        """Initializes the loader.

        Args:
            location (str): Specifies where the table content to load is located.
        """
        self._location: str = location
        self._table: LeapSecondTable | None = None

    @property
    def location(self) -> str:
        """str: where this loader reads its table from."""
        return self._location

    def getTable(self) -> LeapSecondTable:
        """Return the loaded :class:`.LeapSecondTable`, loading it on first use."""
        if self._table is None:
            self.load()
        return self._table

    @abstractmethod
    def load(self):
        """Load the table content into local memory.

        A concrete implementation of this method should set :attr:`._table`.
        """
        raise NotImplementedError


class DotDatLeapSecondLoader(LeapSecondLoader, ABC):
    """Abstract interface defining how to properly load a '.dat' leap second file.

    Each row holds ``year month day mjd tai_utc``.
    """

    def _parseDatData(self, raw_data: list[list[float]]):
        """Loads the specified `raw_data` into local memory.

        Args:
            raw_data (list[list[float]]): file contents parsed using :meth:`.loadDatFile()`.

        Raises:
            ValueError: if a row's MJD doesn't match its calendar date
        """
        entries = []
        for row in raw_data:
            row_date = datetime.date(int(row[0]), int(row[1]), int(row[2]))
            mjd = int(row[3])
            # MJD 51544 is 2000-01-01
            if mjd - 51544 != (row_date - datetime.date(2000, 1, 1)).days:
                err = f"Leap second row for {row_date} has mismatched MJD {mjd}"
                raise ValueError(err)
            entries.append(LeapSecond(date=row_date, mjd=mjd, tai_minus_utc=row[4]))

        self._table = LeapSecondTable(entries)
        tempochLogInfo(
            f"Loaded {len(entries)} leap second entries from {self._location!r}, "
            f"last step on {entries[-1].date}",
        )


class ModuleDotDatLeapSecondLoader(DotDatLeapSecondLoader):
    """Concrete class loading the leap second table bundled as a package resource."""

    DATA_MODULE: str = "tempoch.engine.data"
    """``str``: defines the data module location."""

    def load(self) -> None:
        """Loads the bundled table."""
        res = resources.files(self.DATA_MODULE).joinpath(self._location)
        with resources.as_file(res) as file_resource:
            raw_data = loadDatFile(file_resource)
        self._parseDatData(raw_data)


class LocalDotDatLeapSecondLoader(DotDatLeapSecondLoader):
    """Concrete class loading a leap second table from a local '.dat' file."""

    def __init__(self, location: str) -> None:
        """Initializes the loader.

        Args:
            location (str): path of the '.dat' file.
        """
        super().__init__(location)
        self._path = Path(self._location)

    def load(self) -> None:
        """Loads the table from :attr:`._path`."""
        raw_data = loadDatFile(self._path)
        self._parseDatData(raw_data)
