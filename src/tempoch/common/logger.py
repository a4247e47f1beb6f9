"""Defines the :class:`.Logger` class and the package-level logging one-liners.

The library itself only ever writes to the ``"tempoch"`` logger, which carries a
:class:`logging.NullHandler` so importing tempoch never prints anything. Applications that
want tempoch's records on stdout or in a rotating log file construct a :class:`.Logger`,
which reads its defaults from :class:`.BehavioralConfig`.
"""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Local Imports
from . import pathSafeTime
from .behavioral_config import BehavioralConfig

LIBRARY_LOGGER_NAME: str = "tempoch"
"""``str``: name of the logger every tempoch module writes to."""

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
"""``str``: record format used by handlers that :class:`.Logger` attaches."""

logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(logging.NullHandler())


class Logger:
    """Thin wrapper around a standard :class:`logging.Logger` with a configured handler.

    Attribute access falls through to the wrapped logger, so instances can be used anywhere a
    :class:`logging.Logger` is expected.
    """

    def __init__(self, name=LIBRARY_LOGGER_NAME, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``str``, optional): name of the logger instance. Defaults to the library logger.
            level (``int``, optional): minimum level of published records
            path (``str``, optional): directory for log files, or ``"stdout"``
            allow_multiple_handlers (``bool``, optional): whether another handler may be stacked
                onto a logger that already has one
        """
        log_config = BehavioralConfig.getConfig().logging
        if level is None:
            level = log_config.Level
        if path is None:
            path = log_config.OutputLocation
        if allow_multiple_handlers is None:
            allow_multiple_handlers = log_config.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        self.filename = None
        if self._hasOutputHandler() and not allow_multiple_handlers:
            return

        if path == "stdout":
            self.filename = "stdout"
            handler = logging.StreamHandler(sys.stdout)
        else:
            log_dir = Path(path)
            if not log_dir.exists():
                self.logger.info(f"Path did not exist: {path!r}. Creating path...")
                log_dir.mkdir(parents=True)

            self.filename = str(log_dir / f"{name}_{pathSafeTime()}.log")
            handler = RotatingFileHandler(
                self.filename,
                maxBytes=log_config.MaxFileSize,
                backupCount=log_config.MaxFileCount,
            )

        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.setLevel(level)
        self.logger.addHandler(handler)

    def _hasOutputHandler(self) -> bool:
        """Return whether the wrapped logger already writes somewhere."""
        return any(not isinstance(h, logging.NullHandler) for h in self.logger.handlers)

    def __getattr__(self, name):
        """Delegate to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _tempochLog(message: str, level: int):
    """Log a message to the library-level log record.

    Args:
        message (``str``): message to record in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    logging.getLogger(LIBRARY_LOGGER_NAME).log(msg=message, level=level)


def tempochLogCritical(message: str):
    """Log a CRITICAL message to the library-level log record."""
    _tempochLog(message, level=logging.CRITICAL)


def tempochLogError(message: str):
    """Log an ERROR message to the library-level log record."""
    _tempochLog(message, level=logging.ERROR)


def tempochLogWarning(message: str):
    """Log a WARNING message to the library-level log record."""
    _tempochLog(message, level=logging.WARNING)


def tempochLogInfo(message: str):
    """Log an INFO message to the library-level log record."""
    _tempochLog(message, level=logging.INFO)


def tempochLogDebug(message: str):
    """Log a DEBUG message to the library-level log record."""
    _tempochLog(message, level=logging.DEBUG)
