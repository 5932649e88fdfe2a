"""Tests for logging levels and log-message payloads."""

from __future__ import annotations

import logging

import pytest

from mcp_types.logs import LogEntry, LoggingLevel, SetLoggingLevelRequest


class TestLoggingLevel:
    def test_order(self) -> None:
        levels = list(LoggingLevel)
        assert [level.value for level in levels] == [
            "debug",
            "info",
            "notice",
            "warning",
            "error",
            "critical",
            "alert",
            "emergency",
        ]
        assert sorted(reversed(levels)) == levels

    def test_comparisons_use_severity(self) -> None:
        # lexicographically "alert" < "debug"; by severity it is the other way round
        assert LoggingLevel.DEBUG < LoggingLevel.ALERT
        assert LoggingLevel.EMERGENCY > LoggingLevel.CRITICAL
        assert LoggingLevel.WARNING >= LoggingLevel.WARNING
        assert LoggingLevel.INFO <= LoggingLevel.NOTICE

    def test_to_python_level(self) -> None:
        assert LoggingLevel.DEBUG.to_python_level() == logging.DEBUG
        assert LoggingLevel.WARNING.to_python_level() == logging.WARNING
        assert LoggingLevel.INFO.to_python_level() < LoggingLevel.NOTICE.to_python_level()

    @pytest.mark.parametrize(
        ("levelno", "expected"),
        [
            (logging.NOTSET, LoggingLevel.DEBUG),
            (logging.DEBUG, LoggingLevel.DEBUG),
            (logging.INFO, LoggingLevel.INFO),
            (logging.WARNING, LoggingLevel.WARNING),
            (logging.ERROR, LoggingLevel.ERROR),
            (logging.CRITICAL, LoggingLevel.CRITICAL),
        ],
    )
    def test_from_python_level(self, levelno: int, expected: LoggingLevel) -> None:
        assert LoggingLevel.from_python_level(levelno) is expected


class TestLogEntry:
    def test_wire_shape(self) -> None:
        entry = LogEntry(level=LoggingLevel.ERROR, data={"error": "disk full"}, logger="storage")
        assert entry.to_dict() == {
            "level": "error",
            "data": {"error": "disk full"},
            "logger": "storage",
        }

    def test_logger_optional(self) -> None:
        entry = LogEntry(level=LoggingLevel.INFO, data="started")
        assert entry.to_dict() == {"level": "info", "data": "started"}

    def test_round_trip(self) -> None:
        entry = LogEntry(level=LoggingLevel.NOTICE, data=["a", 1], logger="x")
        assert LogEntry.model_validate_json(entry.to_json()) == entry

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValueError):
            LogEntry.model_validate({"level": "verbose", "data": "x"})

    def test_from_record(self) -> None:
        record = logging.LogRecord(
            name="app.db",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg="slow query: %sms",
            args=(1200,),
            exc_info=None,
        )
        entry = LogEntry.from_record(record)
        assert entry.level is LoggingLevel.WARNING
        assert entry.data == "slow query: 1200ms"
        assert entry.logger == "app.db"


class TestSetLoggingLevelRequest:
    def test_round_trip(self) -> None:
        req = SetLoggingLevelRequest(level=LoggingLevel.WARNING)
        assert req.to_dict() == {"level": "warning"}
        assert SetLoggingLevelRequest.model_validate({"level": "warning"}) == req
