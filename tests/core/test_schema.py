from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from bulk_log_codec.core.models import LogLevel
from bulk_log_codec.core.schema import LogRecordModel
from bulk_log_codec.core.timestamps import Timestamp


def test_from_record_is_lossless(make_record) -> None:
    record = make_record(date=Timestamp(0.1 + 0.2))
    model = LogRecordModel.from_record(record)
    assert model.level == "info"
    assert model.date_bits == record.date.bit_pattern
    assert model.to_record() == record


def test_json_round_trip(make_record) -> None:
    record = make_record()
    payload = LogRecordModel.from_record(record).model_dump_json()
    assert LogRecordModel.model_validate_json(payload).to_record() == record


def test_date_without_bits() -> None:
    model = LogRecordModel.model_validate(
        {"level": "warn", "date": "2001-01-01T00:01:00Z", "body": "x"}
    )
    record = model.to_record()
    assert record.level == LogLevel.WARN
    assert record.date == Timestamp(60.0)
    assert record.date.to_datetime() == datetime(2001, 1, 1, 0, 1, tzinfo=UTC)
    assert record.is_active is True


@pytest.mark.parametrize(
    "payload",
    [
        {"level": "info"},
        {"level": "fatal", "date_bits": 0},
        {"level": "info", "date_bits": -1},
        {"level": "info", "date_bits": 0, "line": -3},
    ],
)
def test_invalid_payloads(payload) -> None:
    with pytest.raises(ValidationError):
        LogRecordModel.model_validate(payload)


def test_schema_lists_fields() -> None:
    schema = LogRecordModel.model_json_schema()
    assert set(schema["properties"]) == {
        "level",
        "date",
        "date_bits",
        "body",
        "file",
        "function",
        "line",
        "is_active",
    }


def test_to_record_without_any_date() -> None:
    model = LogRecordModel.model_construct(level="info", date=None, date_bits=None)
    with pytest.raises(ValueError, match="date"):
        model.to_record()
