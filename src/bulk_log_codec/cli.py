from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from pydantic import ValidationError

from bulk_log_codec.core.codec import SeparatorLineCodec
from bulk_log_codec.core.config import (
    CodecConfig,
    configure_logging,
    parse_separator,
    resolve_codec_config,
)
from bulk_log_codec.core.record_io import read_records
from bulk_log_codec.core.schema import LogRecordModel

LOGGER = logging.getLogger(__name__)


def _separator_arg(s: str) -> str:
    try:
        return parse_separator(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Encode/decode separator-based log record lines.")
    sub = p.add_subparsers(dest="command", required=True)

    dec = sub.add_parser("decode", help="Decode a record file into JSON lines")
    dec.add_argument("path")
    dec.add_argument("--separator", type=_separator_arg, default=None, help="Default: BULK_LOG_SEPARATOR or tab")
    dec.add_argument("--strict", action="store_true", default=None, help="Fail on the first malformed line")

    enc = sub.add_parser("encode", help="Encode JSON-lines records into record lines")
    enc.add_argument("path", nargs="?", default="-", help="JSON-lines input (default: stdin)")
    enc.add_argument("--separator", type=_separator_arg, default=None, help="Default: BULK_LOG_SEPARATOR or tab")
    return p


def _decode(args: argparse.Namespace, cfg: CodecConfig, out: TextIO) -> int:
    codec = SeparatorLineCodec(separator=args.separator or cfg.separator)
    strict = cfg.strict if args.strict is None else args.strict
    items = asyncio.run(read_records(Path(args.path), codec=codec, strict=strict))
    for item in items:
        out.write(LogRecordModel.from_record(item.record).model_dump_json() + "\n")
    return len(items)


def _encode(args: argparse.Namespace, cfg: CodecConfig, out: TextIO) -> int:
    codec = SeparatorLineCodec(separator=args.separator or cfg.separator)
    if args.path == "-":
        text = sys.stdin.read()
    else:
        text = Path(args.path).read_text(encoding="utf-8")

    # JSON strings may hold raw U+2028/U+0085, so only "\n" ends a record.
    count = 0
    for n, raw in enumerate(text.split("\n"), start=1):
        raw = raw.rstrip("\r")
        if not raw.strip():
            continue
        try:
            model = LogRecordModel.model_validate_json(raw)
        except ValidationError as e:
            raise ValueError(f"line {n}: invalid log record: {e}") from e
        out.write(codec.encode(model.to_record()) + "\n")
        count += 1
    return count


def main(argv: Sequence[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    configure_logging()

    try:
        cfg = resolve_codec_config()
        if args.command == "decode":
            count = _decode(args, cfg, sys.stdout)
            print(f"Decoded {count} records.", file=sys.stderr)
        else:
            count = _encode(args, cfg, sys.stdout)
            LOGGER.debug("Encoded %s records", count)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)


if __name__ == "__main__":
    main()
