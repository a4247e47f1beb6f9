from __future__ import annotations

# Standard Library Imports
import logging

# Third Party Imports
import pytest

# TEMPOCH Imports
from tempoch.common.exceptions import (
    InvalidPeriodError,
    NoIntersectionError,
    NullPointerError,
    TempochError,
    UnknownStatusError,
    UtcConversionError,
    checkStatus,
)
from tempoch.common.labels import TempochStatus
from tempoch.common.logger import LIBRARY_LOGGER_NAME


def testOkPassesThrough():
    """Test that an OK status raises nothing."""
    assert checkStatus(TempochStatus.OK, "noop") is None
    assert checkStatus(0, "noop") is None


@pytest.mark.parametrize(
    ("status", "error_type", "reason"),
    [
        (TempochStatus.NULL_POINTER, NullPointerError, "null output pointer"),
        (TempochStatus.UTC_CONVERSION_FAILED, UtcConversionError, "UTC conversion failed"),
        (TempochStatus.INVALID_PERIOD, InvalidPeriodError, "invalid period (start > end)"),
        (TempochStatus.NO_INTERSECTION, NoIntersectionError, "periods do not intersect"),
    ],
)
def testMappedStatus(status: TempochStatus, error_type: type[TempochError], reason: str):
    """Test that each known status raises its typed error with the operation label."""
    with pytest.raises(error_type) as exc_info:
        checkStatus(status, "someOperation")

    assert str(exc_info.value) == f"someOperation failed: {reason}"
    assert isinstance(exc_info.value, TempochError)


def testRawIntegerStatus():
    """Test that raw integer codes are translated like the enum members."""
    with pytest.raises(InvalidPeriodError):
        checkStatus(3, "periodNew")


@pytest.mark.parametrize("status", [-1, 5, 99])
def testUnknownStatus(status: int):
    """Test that unrecognized codes are surfaced with the raw code, never ignored."""
    with pytest.raises(UnknownStatusError) as exc_info:
        checkStatus(status, "futureOperation")

    assert exc_info.value.status == status
    assert str(exc_info.value) == f"futureOperation failed: unknown error ({status})"
    assert isinstance(exc_info.value, TempochError)


def testFailureIsLogged(caplog: pytest.LogCaptureFixture):
    """Test that translated failures are logged at DEBUG level before raising."""
    caplog.set_level(logging.DEBUG, logger=LIBRARY_LOGGER_NAME)
    with pytest.raises(NoIntersectionError):
        checkStatus(TempochStatus.NO_INTERSECTION, "periodIntersection")

    assert (
        LIBRARY_LOGGER_NAME,
        logging.DEBUG,
        "periodIntersection failed: periods do not intersect",
    ) in caplog.record_tuples
