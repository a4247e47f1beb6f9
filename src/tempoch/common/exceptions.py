"""Contains all the custom-defined exceptions used in tempoch, and the status translator."""

from __future__ import annotations

# Local Imports
from .labels import TempochStatus
from .logger import tempochLogDebug


class TempochError(Exception):
    """Base exception for every failure reported by the time engine."""


class NullPointerError(TempochError):
    """A required output could not be produced."""


class UtcConversionError(TempochError):
    """Civil fields are invalid, or the date is outside the representable range."""


class InvalidPeriodError(TempochError):
    """A period's start is later than its end."""


class NoIntersectionError(TempochError):
    """Two periods do not overlap."""


class UnknownStatusError(TempochError):
    """The engine returned a status code that tempoch does not recognize."""

    def __init__(self, message: str, status: int):
        """Keep the raw status code next to the message.

        Args:
            message (``str``): formatted error message
            status (``int``): raw status code returned by the engine
        """
        super().__init__(message)
        self.status = status


_STATUS_ERRORS: dict[TempochStatus, tuple[type[TempochError], str]] = {
    TempochStatus.NULL_POINTER: (NullPointerError, "null output pointer"),
    TempochStatus.UTC_CONVERSION_FAILED: (UtcConversionError, "UTC conversion failed"),
    TempochStatus.INVALID_PERIOD: (InvalidPeriodError, "invalid period (start > end)"),
    TempochStatus.NO_INTERSECTION: (NoIntersectionError, "periods do not intersect"),
}


def checkStatus(status: int, operation: str) -> None:
    """Raise the typed error matching an engine `status`.

    Args:
        status (``int``): status code returned by an engine call
        operation (``str``): label of the calling operation, included in the message

    Raises:
        :class:`.TempochError`: subclass matching `status`; :class:`.UnknownStatusError` for any
            code outside :class:`.TempochStatus`.
    """
    if status == TempochStatus.OK:
        return

    prefix = f"{operation} failed: "
    try:
        error_type, reason = _STATUS_ERRORS[TempochStatus(status)]
    except (ValueError, KeyError):
        msg = f"{prefix}unknown error ({int(status)})"
        tempochLogDebug(msg)
        raise UnknownStatusError(msg, int(status)) from None

    msg = prefix + reason
    tempochLogDebug(msg)
    raise error_type(msg)
