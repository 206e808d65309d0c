"""Errors raised by the line codec."""

from __future__ import annotations


class CodecError(ValueError):
    """Base error for this package."""


class MalformedRecord(CodecError):
    """Raised when a serialized line cannot be decoded into a LogRecord.

    All decode failures share this one type; ``reason`` is diagnostic only.
    """

    def __init__(self, reason: str, *, line: str | None = None, line_no: int | None = None) -> None:
        self.reason = reason
        self.line = line
        self.line_no = line_no
        where = f"line {line_no}: " if line_no is not None else ""
        super().__init__(f"serialized data is broken ({where}{reason})")

    def at(self, line_no: int) -> MalformedRecord:
        """Return a copy of this error tagged with a source line number."""
        return MalformedRecord(self.reason, line=self.line, line_no=line_no)
