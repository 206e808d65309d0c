"""Separator-based line codec.

One record is one line of seven fields joined by a single delimiter::

    <level><D><date bits><D><body><D><file><D><function><D><line><D><is_active>

The delimiter is never escaped. Callers must pick one that cannot appear in
``file``, ``function`` or the escaped ``body``; otherwise decode sees the wrong
number of fields or misaligned values.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

from .errors import MalformedRecord
from .escaping import escape_body, unescape_body
from .models import LogLevel, LogRecord
from .timestamps import UINT64_MAX, Timestamp

DEFAULT_SEPARATOR = "\t"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class Position(IntEnum):
    LEVEL = 0
    DATE = 1
    BODY = 2
    FILE = 3
    FUNCTION = 4
    LINE = 5
    IS_ACTIVE = 6


FIELD_COUNT = len(Position)

_LEVEL_BY_RANK: tuple[LogLevel, ...] = (
    LogLevel.VERBOSE,
    LogLevel.DEBUG,
    LogLevel.INFO,
    LogLevel.WARN,
    LogLevel.ERROR,
)
_RANK_BY_LEVEL = {level: rank for rank, level in enumerate(_LEVEL_BY_RANK)}


def level_to_rank(level: LogLevel) -> int:
    return _RANK_BY_LEVEL[level]


def level_from_rank(rank: int) -> LogLevel:
    """Map a rank back to its level; ranks outside 0-4 raise ValueError."""
    if not 0 <= rank < len(_LEVEL_BY_RANK):
        raise ValueError(f"unknown level rank: {rank}")
    return _LEVEL_BY_RANK[rank]


def _parse_signed(text: str) -> int | None:
    if _INTEGER_RE.fullmatch(text) is None:
        return None
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def _parse_unsigned(text: str) -> int | None:
    if _INTEGER_RE.fullmatch(text) is None:
        return None
    # "-0" is accepted as zero; any other negative value is rejected.
    value = int(text)
    if not 0 <= value <= UINT64_MAX:
        return None
    return value


class LogSerializer(Protocol):
    """Serializer interface: turn a LogRecord into text and back."""

    def encode(self, record: LogRecord) -> str:
        """Serialize a record."""
        ...

    def decode(self, source: str) -> LogRecord:
        """Deserialize a record, raising MalformedRecord on bad input."""
        ...


@dataclass(frozen=True, slots=True)
class SeparatorLineCodec:
    """Encode/decode LogRecords as single delimited lines."""

    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        if not isinstance(self.separator, str) or len(self.separator) != 1:
            raise ValueError(f"separator must be a single character, got {self.separator!r}")

    def encode(self, record: LogRecord) -> str:
        """Serialize a record into one line (no trailing newline)."""
        fields = [
            str(level_to_rank(record.level)),
            str(record.date.bit_pattern),
            escape_body(record.body),
            record.file,
            record.function,
            str(record.line),
            "1" if record.is_active else "0",
        ]
        return self.separator.join(fields)

    def decode(self, source: str) -> LogRecord:
        """Parse one line back into a record.

        Raises:
            MalformedRecord: if the field count is wrong or any numeric field
                does not parse. No partial record is ever returned.
        """
        # str.split keeps empty fields between adjacent separators.
        fields = source.split(self.separator)
        if len(fields) != FIELD_COUNT:
            raise MalformedRecord(
                f"expected {FIELD_COUNT} fields, got {len(fields)}", line=source
            )

        rank = _parse_signed(fields[Position.LEVEL])
        if rank is None:
            raise MalformedRecord(f"level is not an integer: {fields[Position.LEVEL]!r}", line=source)
        try:
            level = level_from_rank(rank)
        except ValueError as e:
            raise MalformedRecord(str(e), line=source) from e

        bits = _parse_unsigned(fields[Position.DATE])
        if bits is None:
            raise MalformedRecord(
                f"date is not an unsigned 64-bit integer: {fields[Position.DATE]!r}", line=source
            )

        line_no = _parse_unsigned(fields[Position.LINE])
        if line_no is None:
            raise MalformedRecord(
                f"line is not an unsigned 64-bit integer: {fields[Position.LINE]!r}", line=source
            )

        # Any integer other than 1 means inactive; only non-integers fail.
        active = _parse_signed(fields[Position.IS_ACTIVE])
        if active is None:
            raise MalformedRecord(
                f"is_active is not an integer: {fields[Position.IS_ACTIVE]!r}", line=source
            )

        return LogRecord(
            level=level,
            date=Timestamp.from_bit_pattern(bits),
            body=unescape_body(fields[Position.BODY]),
            file=fields[Position.FILE],
            function=fields[Position.FUNCTION],
            line=line_no,
            is_active=active == 1,
        )
