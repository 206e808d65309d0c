"""JSON view of a LogRecord for tools and the CLI."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from .models import LogLevel, LogRecord
from .timestamps import UINT64_MAX, Timestamp

LevelName = Literal["verbose", "debug", "info", "warn", "error"]


class LogRecordModel(BaseModel):
    level: LevelName = Field(description="Severity name, lowest first: verbose..error.")
    date: datetime | None = Field(
        default=None,
        description="Record time as ISO-8601 (UTC assumed when no offset). Ignored when date_bits is set.",
    )
    date_bits: int | None = Field(
        default=None,
        ge=0,
        le=UINT64_MAX,
        description="Exact binary64 bit pattern of seconds since 2001-01-01T00:00:00Z.",
    )
    body: str = Field(default="", description="Free-text message; may contain newlines.")
    file: str = Field(default="", description="Source file.")
    function: str = Field(default="", description="Source function.")
    line: int = Field(default=0, ge=0, le=UINT64_MAX, description="Source line number.")
    is_active: bool = Field(default=True, description="Whether the record is live.")

    @model_validator(mode="after")
    def _require_date(self) -> LogRecordModel:
        if self.date is None and self.date_bits is None:
            raise ValueError("either date or date_bits is required")
        return self

    @classmethod
    def from_record(cls, record: LogRecord) -> LogRecordModel:
        try:
            dt: datetime | None = record.date.to_datetime()
        except (ValueError, OverflowError):
            dt = None
        return cls(
            level=record.level.value,
            date=dt,
            date_bits=record.date.bit_pattern,
            body=record.body,
            file=record.file,
            function=record.function,
            line=record.line,
            is_active=record.is_active,
        )

    def to_record(self) -> LogRecord:
        if self.date_bits is not None:
            ts = Timestamp.from_bit_pattern(self.date_bits)
        elif self.date is not None:
            ts = Timestamp.from_datetime(self.date)
        else:
            raise ValueError("either date or date_bits is required")
        return LogRecord(
            level=LogLevel(self.level),
            date=ts,
            body=self.body,
            file=self.file,
            function=self.function,
            line=self.line,
            is_active=self.is_active,
        )
