"""Sandbox audit log.

Every change made to a sandbox's mapping is written to an in-memory
audit log, so a student can replay what happened after a sequence of
operations: which strings went in, which came out, and which keys were
overwritten on the way.

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — a single structured record (level, message, source).
- **Logger** — an append-only log with a level threshold, filtering and
  clearing.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels for audit entries."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single audit record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The component that generated the event (e.g. "sandbox").

    """

    level: LogLevel
    message: str
    source: str

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Append-only audit buffer with a minimum level.

    Entries below ``min_level`` are dropped at write time, so a quiet
    sandbox can skip the DEBUG chatter about no-op removals.
    """

    def __init__(self, *, min_level: LogLevel = LogLevel.DEBUG) -> None:
        """Create an empty logger.

        Args:
            min_level: Entries below this level are not recorded.

        """
        self._min_level = min_level
        self._entries: list[LogEntry] = []

    @property
    def min_level(self) -> LogLevel:
        """Return the lowest level this logger records."""
        return self._min_level

    @property
    def entries(self) -> list[LogEntry]:
        """Return all recorded entries in chronological order."""
        return list(self._entries)

    def log(self, level: LogLevel, message: str, *, source: str) -> None:
        """Append a new entry unless it falls below the threshold.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Component that generated the event.

        """
        if level < self._min_level:
            return
        self._entries.append(LogEntry(level=level, message=message, source=source))

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
        """Remove all entries."""
        self._entries.clear()
