"""Various helper functions that are used across multiple modules."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from .logger import tempochLogError

if TYPE_CHECKING:
    # Standard Library Imports
    from pathlib import Path


def loadDatFile(file_name: str | Path, delim: str | None = None) -> list[list[float]]:
    """Load the rows of a whitespace (or `delim`) separated data file.

    Note:
        Assumes all data is representable by ``float``. Blank lines and lines starting with
        ``#`` are skipped.

    Args:
        file_name (``str``): name of dat file to load
        delim (``str``, optional): delimiter character to separate data on same line. Defaults to
            ``None``, which removes all whitespace between values.

    Raises:
        ``FileNotFoundError``: helps with debugging bad filenames
        ``ValueError``: error parsing dat file, likely because values aren't convertible to ``float``
        ``OSError``: valid dat file is empty

    Returns:
        ``list``: nested list of float values of each row
    """
    try:
        with open(file_name, encoding="utf-8") as data_file:
            data = [
                [float(x) for x in line.split(sep=delim)]
                for line in data_file
                if line.strip() and not line.lstrip().startswith("#")
            ]
    except FileNotFoundError as err:
        msg = f"Could not find DAT file: {file_name}"
        tempochLogError(msg)
        raise err
    except ValueError as err:
        msg = f"Parsing error reading DAT file: {file_name}"
        tempochLogError(msg)
        raise ValueError(msg) from err

    if not data:
        msg = f"Empty DAT file: {file_name}"
        tempochLogError(msg)
        raise OSError(msg)

    return data
