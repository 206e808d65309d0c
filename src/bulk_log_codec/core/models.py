"""Core data models for log records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .timestamps import UINT64_MAX, Timestamp


class LogLevel(str, Enum):
    """Ordered severity levels, lowest first."""

    VERBOSE = "verbose"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class LogRecord:
    """Complete, immutable snapshot of a single log call."""

    level: LogLevel
    date: Timestamp
    body: str
    file: str
    function: str
    line: int
    is_active: bool

    def __post_init__(self) -> None:
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be a LogLevel")
        if not isinstance(self.date, Timestamp):
            raise TypeError("date must be a Timestamp")
        for name in ("body", "file", "function"):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"{name} must be a str")
        if isinstance(self.line, bool) or not isinstance(self.line, int):
            raise TypeError("line must be an int")
        if not 0 <= self.line <= UINT64_MAX:
            raise ValueError(f"line must be an unsigned 64-bit integer, got {self.line}")
        if not isinstance(self.is_active, bool):
            raise TypeError("is_active must be a bool")
