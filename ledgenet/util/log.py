"""Named, buffered logs and the process-wide registry that owns them."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import ClassVar, TextIO


class LogLevel(enum.IntEnum):
    """Severity of a log entry; lower values are more severe."""

    FATAL = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4


@dataclass
class LogEntry:
    """A single buffered message."""

    message: str = ""
    level: LogLevel = LogLevel.FATAL


class Log:
    """A named buffer of messages that is flushed to a stream on demand."""

    _FORMAT = "[{name} {level}] {message}"
    _LEVEL_LABEL = "info"

    def __init__(self, name: str) -> None:
        self.name = name
        self.level = LogLevel.DEBUG
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        """Messages buffered since the last write."""
        return tuple(self._entries)

    def log_message(self, message: str, level: LogLevel) -> None:
        """Buffer *message* unless *level* is less severe than the log's level."""
        if self.level >= level:
            self._entries.append(LogEntry(message, level))

    def write(self, stream: TextIO | None = None) -> None:
        """Write every buffered message to *stream* and empty the buffer."""
        if stream is None:
            stream = sys.stdout
        pending, self._entries = self._entries, []
        for entry in pending:
            stream.write(
                self._FORMAT.format(
                    name=self.name, level=self._LEVEL_LABEL, message=entry.message
                )
            )

    def set_log_level(self, level: LogLevel) -> None:
        """Set the least severe level that is still recorded."""
        self.level = level


class Logger:
    """Registry of named logs, shared through :meth:`instance`."""

    _instance: ClassVar[Logger | None] = None

    def __init__(self) -> None:
        self._logs: dict[str, Log] = {}
        self.get_log("logger_debug")

    @classmethod
    def instance(cls) -> Logger:
        """Return the shared logger, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def has_log(self, name: str) -> bool:
        """Tell whether a log called *name* exists."""
        return name in self._logs

    def get_log(self, name: str) -> Log:
        """Return the log called *name*, creating it if needed."""
        log = self._logs.get(name)
        if log is None:
            log = self._logs[name] = Log(name)
        return log

    def write_all(self, stream: TextIO | None = None) -> None:
        """Flush every log to *stream*."""
        for log in self._logs.values():
            log.write(stream)