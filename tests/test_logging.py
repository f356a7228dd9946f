"""Tests for the load diagnostics log.

Every problem found while loading is recorded as a structured entry;
warnings are also echoed to standard output in the ``dotenv: ...``
format.
"""

import io

import pytest

from py_envload.logging import LogEntry, Logger, LogLevel


class TestLogLevel:
    """Verify log level ordering."""

    def test_levels_are_ordered(self) -> None:
        """DEBUG < INFO < WARNING < ERROR."""
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR


class TestLogEntry:
    """Verify log entry structure."""

    def test_entry_has_fields(self) -> None:
        """A log entry should store level, message, source, and line."""
        expected_line = 7
        entry = LogEntry(level=LogLevel.INFO, message="set A", source="dotenv", line_number=7)
        assert entry.level is LogLevel.INFO
        assert entry.message == "set A"
        assert entry.source == "dotenv"
        assert entry.line_number == expected_line

    def test_entry_str(self) -> None:
        """String form should be ``source: message``."""
        entry = LogEntry(level=LogLevel.WARNING, message="bad line", source="dotenv")
        assert str(entry) == "dotenv: bad line"


class TestLogger:
    """Verify the logger."""

    def test_log_stores_entries(self) -> None:
        """Logged entries should be retrievable in order."""
        logger = Logger(echo_level=None)
        logger.log(LogLevel.INFO, "first")
        logger.log(LogLevel.INFO, "second")
        assert [e.message for e in logger.entries] == ["first", "second"]

    def test_default_source(self) -> None:
        """Entries default to the dotenv source."""
        logger = Logger(echo_level=None)
        logger.log(LogLevel.INFO, "hello")
        assert logger.entries[0].source == "dotenv"

    def test_filter_by_level(self) -> None:
        """Filtering should return only entries at or above the level."""
        logger = Logger(echo_level=None)
        logger.log(LogLevel.DEBUG, "debug msg")
        logger.log(LogLevel.INFO, "info msg")
        logger.log(LogLevel.ERROR, "error msg")
        warnings_and_above = logger.filter(min_level=LogLevel.WARNING)
        assert len(warnings_and_above) == 1
        assert warnings_and_above[0].level is LogLevel.ERROR

    def test_filter_by_source(self) -> None:
        """Filtering by source should return matching entries."""
        logger = Logger(echo_level=None)
        logger.log(LogLevel.INFO, "ours")
        logger.log(LogLevel.INFO, "theirs", source="app")
        ours = logger.filter(source="dotenv")
        assert [e.message for e in ours] == ["ours"]

    def test_clear(self) -> None:
        """Clearing should remove all entries."""
        logger = Logger(echo_level=None)
        logger.log(LogLevel.INFO, "test")
        logger.clear()
        assert len(logger.entries) == 0


class TestEcho:
    """Verify console echo of severe entries."""

    def test_warning_echoed_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Warnings should be printed to stdout by default."""
        logger = Logger()
        logger.log(LogLevel.WARNING, "careful")
        assert capsys.readouterr().out == "dotenv: careful\n"

    def test_info_not_echoed(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Entries below the echo level stay in memory only."""
        logger = Logger()
        logger.log(LogLevel.INFO, "quiet")
        assert capsys.readouterr().out == ""
        assert len(logger.entries) == 1

    def test_custom_stream(self) -> None:
        """Echoed entries should go to the configured stream."""
        stream = io.StringIO()
        logger = Logger(echo_level=LogLevel.DEBUG, stream=stream)
        logger.log(LogLevel.DEBUG, "verbose")
        assert stream.getvalue() == "dotenv: verbose\n"

    def test_echo_disabled(self, capsys: pytest.CaptureFixture[str]) -> None:
        """echo_level=None should never print."""
        logger = Logger(echo_level=None)
        logger.log(LogLevel.ERROR, "silent")
        assert capsys.readouterr().out == ""
