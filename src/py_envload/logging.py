"""Load diagnostics — a small structured log of what a load did.

Loading a ``.env`` file must never stop a program from starting, so
problems are reported instead of raised.  Each report is a structured
entry kept in memory, and the serious ones are also echoed to standard
output in the classic one-line format::

    dotenv: Ignoring ill-formed assignment on line 3: 'oops'

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — a single structured record (level, message, source, line).
- **Logger** — an append-only log with filtering, clearing and echo.

Design choices:
    - **IntEnum for levels** so they compare naturally with ``<``.
    - **Frozen dataclass for entries** — log records should be immutable.
    - **Echo stream resolved at write time** — ``None`` means whatever
      ``sys.stdout`` is when the entry is logged.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO


class LogLevel(IntEnum):
    """Severity levels for log entries."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The component that generated the event (e.g. "dotenv").
        line_number: The 1-based line in the source file, if any.

    """

    level: LogLevel
    message: str
    source: str
    line_number: int | None = None

    def __str__(self) -> str:
        """Format as ``source: message``."""
        return f"{self.source}: {self.message}"


class Logger:
    """Append-only log buffer with filtering and console echo.

    Entries at or above *echo_level* are printed to *stream* as they
    arrive.  Pass ``echo_level=None`` to keep everything in memory only.
    """

    def __init__(
        self,
        *,
        echo_level: LogLevel | None = LogLevel.WARNING,
        stream: TextIO | None = None,
    ) -> None:
        """Create an empty logger.

        Args:
            echo_level: Minimum level printed as it is logged, or None.
            stream: Where echoed entries go (defaults to ``sys.stdout``).

        """
        self._entries: list[LogEntry] = []
        self._echo_level = echo_level
        self._stream = stream

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str = "dotenv",
        line_number: int | None = None,
    ) -> None:
        """Append a new entry to the log, echoing it if severe enough.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Component that generated the event.
            line_number: Source line the event refers to.

        """
        entry = LogEntry(level=level, message=message, source=source, line_number=line_number)
        self._entries.append(entry)
        if self._echo_level is not None and level >= self._echo_level:
            print(entry, file=self._stream, flush=True)

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.

        Returns:
            A filtered list of log entries.

        """
        result = self._entries
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if source is not None:
            result = [e for e in result if e.source == source]
        return result if result is not self._entries else list(result)

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()
