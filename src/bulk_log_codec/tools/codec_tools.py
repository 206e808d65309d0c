"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

import os
from contextlib import aclosing
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from bulk_log_codec.core.codec import SeparatorLineCodec
from bulk_log_codec.core.config import CodecConfig, parse_separator, resolve_codec_config
from bulk_log_codec.core.record_io import iter_records
from bulk_log_codec.core.schema import LogRecordModel

DEFAULT_LIMIT = 200
HARD_LIMIT = 5000
BASE_DIR_ENV = "BULK_LOG_BASE_DIR"


def codec_for(separator: str | None) -> SeparatorLineCodec:
    """Build a codec from an explicit separator or the environment config."""
    if separator is not None:
        return SeparatorLineCodec(separator=parse_separator(separator))
    return SeparatorLineCodec(separator=resolve_codec_config().separator)


def base_dir() -> Path:
    raw = os.getenv(BASE_DIR_ENV, os.getcwd())
    return Path(raw).resolve()


def resolve_record_path(path: str) -> Path:
    """Resolve a path under the configured base directory."""
    base = base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p


def encode_record_impl(*, record: dict[str, Any], separator: str | None = None) -> dict[str, Any]:
    """Implementation for the `encode_log_record` MCP tool."""
    try:
        model = LogRecordModel.model_validate(record)
    except ValidationError as e:
        raise ValueError(f"Invalid log record: {e}") from e
    codec = codec_for(separator)
    return {"line": codec.encode(model.to_record())}


def decode_line_impl(*, line: str, separator: str | None = None) -> dict[str, Any]:
    """Implementation for the `decode_log_line` MCP tool.

    MalformedRecord propagates to the caller.
    """
    codec = codec_for(separator)
    record = codec.decode(line.rstrip("\r\n"))
    return {"record": LogRecordModel.from_record(record).model_dump(mode="json")}


async def decode_file_impl(
    *,
    path: str,
    separator: str | None = None,
    strict: bool | None = None,
    limit: int | None = None,
) -> dict[str, Any]:
    """Implementation for the `decode_log_file` MCP tool.

    Notes
    -----
    - path is resolved under BULK_LOG_BASE_DIR (default: working directory)
    - strict falls back to BULK_LOG_STRICT when not given
    - limit defaults to DEFAULT_LIMIT and is capped at HARD_LIMIT
    """
    if limit is None:
        limit = DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    if limit > HARD_LIMIT:
        limit = HARD_LIMIT

    cfg: CodecConfig = resolve_codec_config()
    strict_eff = cfg.strict if strict is None else strict
    codec = codec_for(separator)
    resolved = resolve_record_path(path)

    out: list[dict[str, Any]] = []
    truncated = False
    async with aclosing(iter_records(resolved, codec=codec, strict=strict_eff)) as items:
        async for item in items:
            if len(out) >= limit:
                truncated = True
                break
            out.append(
                {
                    "line_no": item.line_no,
                    "record": LogRecordModel.from_record(item.record).model_dump(mode="json"),
                }
            )

    return {"count": len(out), "records": out, "truncated": truncated}
