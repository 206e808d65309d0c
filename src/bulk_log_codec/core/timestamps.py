"""Timestamp value type measured from the reference epoch.

Timestamps are stored as float seconds since 2001-01-01T00:00:00Z. A Python
``datetime`` only keeps microseconds, so the float offset is the source of
truth and ``datetime`` conversion is a convenience view.
"""

from __future__ import annotations

import math
import struct
import time
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

REFERENCE_EPOCH = datetime(2001, 1, 1, tzinfo=UTC)
# Seconds between the Unix epoch and the reference epoch.
REFERENCE_EPOCH_UNIX = 978307200.0

UINT64_MAX = 2**64 - 1

_F64 = struct.Struct("<d")
_U64 = struct.Struct("<Q")


def float_to_bits(value: float) -> int:
    """Reinterpret an IEEE-754 binary64 value as an unsigned 64-bit integer."""
    return _U64.unpack(_F64.pack(value))[0]


def bits_to_float(bits: int) -> float:
    """Reinterpret an unsigned 64-bit integer as an IEEE-754 binary64 value."""
    if not 0 <= bits <= UINT64_MAX:
        raise ValueError(f"bit pattern out of uint64 range: {bits}")
    return _F64.unpack(_U64.pack(bits))[0]


@dataclass(frozen=True, slots=True)
class Timestamp:
    """Absolute point in time as seconds since the reference epoch."""

    since_reference: float

    def __post_init__(self) -> None:
        if isinstance(self.since_reference, bool) or not isinstance(
            self.since_reference, (int, float)
        ):
            raise TypeError("since_reference must be a float")
        object.__setattr__(self, "since_reference", float(self.since_reference))

    def __eq__(self, other: object) -> bool:
        # Compare bit patterns so -0.0/0.0 stay distinct and NaNs compare equal to themselves.
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.bit_pattern == other.bit_pattern

    def __hash__(self) -> int:
        return hash(self.bit_pattern)

    @property
    def bit_pattern(self) -> int:
        return float_to_bits(self.since_reference)

    @classmethod
    def from_bit_pattern(cls, bits: int) -> Timestamp:
        return cls(bits_to_float(bits))

    @classmethod
    def from_datetime(cls, dt: datetime) -> Timestamp:
        """Build a timestamp from a datetime (naive values are taken as UTC)."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        delta = dt.astimezone(UTC) - REFERENCE_EPOCH
        return cls(delta / timedelta(seconds=1))

    @classmethod
    def from_unix(cls, seconds: float) -> Timestamp:
        return cls(seconds - REFERENCE_EPOCH_UNIX)

    @classmethod
    def now(cls) -> Timestamp:
        return cls.from_unix(time.time())

    def to_unix(self) -> float:
        return self.since_reference + REFERENCE_EPOCH_UNIX

    def to_datetime(self) -> datetime:
        """Return an aware UTC datetime (microsecond precision)."""
        if not math.isfinite(self.since_reference):
            raise ValueError(f"timestamp is not finite: {self.since_reference!r}")
        return REFERENCE_EPOCH + timedelta(seconds=self.since_reference)
