from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from bulk_log_codec.core.models import LogLevel, LogRecord
from bulk_log_codec.core.timestamps import Timestamp


@pytest.fixture
def make_record() -> Callable[..., LogRecord]:
    def _make(**overrides) -> LogRecord:
        fields = {
            "level": LogLevel.INFO,
            "date": Timestamp(1.0),
            "body": "hello\nworld",
            "file": "a.txt",
            "function": "f()",
            "line": 42,
            "is_active": True,
        }
        fields.update(overrides)
        return LogRecord(**fields)

    return _make


@pytest.fixture
def write_lines() -> Callable[[Path, list[str]], None]:
    def _write(path: Path, lines: list[str]) -> None:
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8", newline="")

    return _write
