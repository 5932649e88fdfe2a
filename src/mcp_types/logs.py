"""Logging: severity levels and log-message payloads sent from server to client.

Level names follow syslog (RFC 5424). The client sets the threshold with the
``logging/setLevel`` notification; the server reports entries with
``notifications/message``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from mcp_types.base import WireModel


class LoggingLevel(str, Enum):
    """Log severity, ordered from ``DEBUG`` (lowest) to ``EMERGENCY``."""

    DEBUG = "debug"
    INFO = "info"
    NOTICE = "notice"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
    ALERT = "alert"
    EMERGENCY = "emergency"

    @property
    def severity(self) -> int:
        return _ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LoggingLevel):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LoggingLevel):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LoggingLevel):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LoggingLevel):
            return NotImplemented
        return self.severity >= other.severity

    def to_python_level(self) -> int:
        """The matching ``logging`` module level number."""
        return _PYTHON_LEVELS[self]

    @classmethod
    def from_python_level(cls, levelno: int) -> LoggingLevel:
        """The most severe level whose ``logging`` number does not exceed *levelno*."""
        found = cls.DEBUG
        for level in _ORDER:
            if _PYTHON_LEVELS[level] <= levelno:
                found = level
        return found


_ORDER = list(LoggingLevel)

# syslog has more levels than ``logging``; the extra ones sit between
_PYTHON_LEVELS = {
    LoggingLevel.DEBUG: logging.DEBUG,
    LoggingLevel.INFO: logging.INFO,
    LoggingLevel.NOTICE: logging.INFO + 5,
    LoggingLevel.WARNING: logging.WARNING,
    LoggingLevel.ERROR: logging.ERROR,
    LoggingLevel.CRITICAL: logging.CRITICAL,
    LoggingLevel.ALERT: logging.CRITICAL + 5,
    LoggingLevel.EMERGENCY: logging.CRITICAL + 10,
}


class LogEntry(WireModel):
    """Params of ``notifications/message``."""

    level: LoggingLevel
    data: Any
    logger: str | None = None

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> LogEntry:
        """Build an entry from a standard library log record."""
        return cls(
            level=LoggingLevel.from_python_level(record.levelno),
            data=record.getMessage(),
            logger=record.name,
        )


class SetLoggingLevelRequest(WireModel):
    """Params of the ``logging/setLevel`` notification.

    Carried as a notification: the client does not wait for a response.
    """

    level: LoggingLevel
