from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from bulk_log_codec import cli
from bulk_log_codec.core.codec import SeparatorLineCodec

ONE_SECOND_BITS = 4607182418800017408


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    monkeypatch.delenv("BULK_LOG_SEPARATOR", raising=False)
    monkeypatch.delenv("BULK_LOG_STRICT", raising=False)


def test_cli_decode(tmp_path: Path, write_lines, make_record, capsys) -> None:
    path = tmp_path / "app.log"
    write_lines(path, [SeparatorLineCodec().encode(make_record()), "junk"])

    cli.main(["decode", str(path)])

    out, err = capsys.readouterr()
    rows = [json.loads(line) for line in out.splitlines()]
    assert len(rows) == 1
    assert rows[0]["body"] == "hello\nworld"
    assert rows[0]["date_bits"] == ONE_SECOND_BITS
    assert "Decoded 1 records." in err


def test_cli_decode_strict_exits_2(tmp_path: Path, write_lines, capsys) -> None:
    path = tmp_path / "app.log"
    write_lines(path, ["junk"])

    with pytest.raises(SystemExit) as exc:
        cli.main(["decode", str(path), "--strict"])
    assert exc.value.code == 2
    assert "serialized data is broken" in capsys.readouterr().err


def test_cli_decode_missing_file(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["decode", str(tmp_path / "missing.log")])
    assert exc.value.code == 2


def test_cli_encode_from_stdin(monkeypatch, capsys) -> None:
    payload = json.dumps({"level": "debug", "date_bits": ONE_SECOND_BITS, "body": "a\nb", "line": 3})
    monkeypatch.setattr("sys.stdin", io.StringIO(payload + "\n\n"))

    cli.main(["encode", "--separator", "pipe"])

    out = capsys.readouterr().out
    assert out == f"1|{ONE_SECOND_BITS}|a\\nb|||3|1\n"


def test_cli_encode_invalid_record(tmp_path: Path, capsys) -> None:
    path = tmp_path / "in.jsonl"
    path.write_text('{"level": "info"}\n', encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        cli.main(["encode", str(path)])
    assert exc.value.code == 2
    assert "line 1" in capsys.readouterr().err


def test_cli_bad_separator_is_usage_error() -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["decode", "x.log", "--separator", "::"])
    assert exc.value.code == 2


def test_cli_decode_output_feeds_encode(tmp_path: Path, write_lines, make_record, monkeypatch, capsys) -> None:
    line = SeparatorLineCodec().encode(make_record(body="para\u2028sep\u0085end\nnext"))
    path = tmp_path / "app.log"
    write_lines(path, [line, line])

    cli.main(["decode", str(path)])
    decoded = capsys.readouterr().out
    assert len(decoded.split("\n")) == 3

    monkeypatch.setattr("sys.stdin", io.StringIO(decoded))
    cli.main(["encode"])

    assert capsys.readouterr().out == f"{line}\n{line}\n"
