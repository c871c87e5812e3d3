"""A small levelled logger that writes timestamped records to a stream."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, TextIO

__all__ = ["LogLevel", "FileLog", "level_name"]


class LogLevel(IntEnum):
    """Severity of a log record; higher values are more verbose."""

    NONE = 0
    ERROR = 1
    DEBUG = 2
    DEBUG2 = 3


_LABELS = {LogLevel.ERROR: "ERROR"}


def level_name(level: LogLevel) -> str:
    """Return the label printed for ``level``: ERROR or DEBUG.

    Raises ValueError if ``level`` is not a known log level.
    """
    return _LABELS.get(LogLevel(level), "DEBUG")


@dataclass
class FileLog:
    """Writes records at or below ``reporting_level`` to ``stream``."""

    stream: Optional[TextIO] = field(default_factory=lambda: sys.stderr)
    reporting_level: LogLevel = LogLevel.DEBUG

    def format_record(self, level: LogLevel, message: str, timestamp: int) -> str:
        """Build the text of one record, indented by its extra verbosity."""
        indent = "\t" * max(int(level) - int(LogLevel.DEBUG), 0)
        return f"- {timestamp} {level_name(level)}: {indent}{message}"

    def log(self, level: LogLevel, message: str) -> Optional[str]:
        """Write a record if the level is reported; return the text written."""
        if level > self.reporting_level or self.stream is None:
            return None
        record = self.format_record(level, message, int(time.time()))
        self.stream.write(record)
        self.stream.flush()
        return record