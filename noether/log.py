"""Levelled console logging with optional ANSI colouring."""

from __future__ import annotations

import sys
from enum import IntEnum

MAX_MESSAGE_LENGTH = 8191
RESET = "\x1b[0m"


class LogLevel(IntEnum):
    """Severity of a log record, most severe first."""

    FATAL = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @property
    def bit(self) -> int:
        """The single-bit mask for this level."""
        return 1 << self.value

    @property
    def label(self) -> str:
        return f"[{self.name}]"

    @property
    def color(self) -> str:
        return _COLORS[self]


_COLORS = {
    LogLevel.FATAL: "\x1b[0;31m",
    LogLevel.ERROR: "\x1b[0;31m",
    LogLevel.WARN: "\x1b[0;33m",
    LogLevel.INFO: "\x1b[0;32m",
    LogLevel.DEBUG: "\x1b[0;36m",
    LogLevel.TRACE: "\x1b[0;37m",
}


def format_log(level, message: str, file: str, line: int, color: bool = True) -> str:
    """Render one log record as the two-line text block written to the console."""
    level = LogLevel(level)
    message = str(message)[:MAX_MESSAGE_LENGTH]
    prefix = level.color if color else ""
    suffix = RESET if color else ""
    return f"{prefix}{level.label:<7}: {file} Line: {int(line)}\n{'':<9}{message}{suffix}\n"


def core_log(level, message: str, file: str, line: int, color: bool = True) -> None:
    """Write one log record to standard output."""
    sys.stdout.write(format_log(level, message, file, line, color))
    sys.stdout.flush()