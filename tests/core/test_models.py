from __future__ import annotations

import dataclasses

import pytest

from bulk_log_codec.core.escaping import escape_body, unescape_body
from bulk_log_codec.core.models import LogLevel, LogRecord
from bulk_log_codec.core.timestamps import Timestamp


def test_record_is_frozen(make_record) -> None:
    record = make_record()
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.body = "changed"  # type: ignore[misc]


def test_record_field_order() -> None:
    names = [f.name for f in dataclasses.fields(LogRecord)]
    assert names == ["level", "date", "body", "file", "function", "line", "is_active"]


@pytest.mark.parametrize(
    ("overrides", "error"),
    [
        ({"level": "info"}, TypeError),
        ({"date": 1.0}, TypeError),
        ({"body": None}, TypeError),
        ({"line": -1}, ValueError),
        ({"line": 2**64}, ValueError),
        ({"line": True}, TypeError),
        ({"is_active": 1}, TypeError),
    ],
)
def test_record_validates_fields(make_record, overrides, error) -> None:
    with pytest.raises(error):
        make_record(**overrides)


def test_level_values() -> None:
    assert [level.value for level in LogLevel] == ["verbose", "debug", "info", "warn", "error"]
    assert LogLevel("warn") is LogLevel.WARN


def test_escape_body() -> None:
    assert escape_body("a\nb\n") == "a\\nb\\n"
    assert escape_body("no newline\there") == "no newline\there"
    assert unescape_body("a\\nb") == "a\nb"


def test_literal_backslash_n_decodes_as_newline() -> None:
    # Known limitation of the format: the escape is not itself escaped.
    assert unescape_body(escape_body("C:\\new")) == "C:\new"


def test_records_compare_by_value() -> None:
    a = LogRecord(LogLevel.DEBUG, Timestamp(2.5), "b", "f", "fn", 1, False)
    b = LogRecord(LogLevel.DEBUG, Timestamp(2.5), "b", "f", "fn", 1, False)
    assert a == b
    assert hash(a) == hash(b)
