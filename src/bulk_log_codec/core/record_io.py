"""Reading and writing newline-framed record files.

The codec only knows about a single line; this module frames lines with
``\\n`` and streams them from disk.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap

from .codec import LogSerializer, SeparatorLineCodec
from .errors import MalformedRecord
from .models import LogRecord

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DecodedLine:
    """A decoded record plus the 1-based line it came from."""

    line_no: int
    record: LogRecord


@asynccontextmanager
async def _open_text(path: Path, *, mode: str, encoding: str, errors: str):
    """Open a record file for async text I/O (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode=f"{mode}t", encoding=encoding, errors=errors, newline="\n")
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, mode=mode, encoding=encoding, errors=errors, newline="\n") as f:
            yield f


async def iter_records(
    path: str | Path,
    *,
    codec: LogSerializer | None = None,
    strict: bool = False,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> AsyncIterator[DecodedLine]:
    """Yield decoded records from a file, one per non-blank line.

    Malformed lines are logged and skipped unless ``strict`` is set, in which
    case the first one raises MalformedRecord tagged with its line number.
    """
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Record file not found: {p}")
    codec = codec or SeparatorLineCodec()

    skipped = 0
    line_no = 0
    async with _open_text(p, mode="r", encoding=encoding, errors=decode_errors) as f:
        async for raw in f:
            line_no += 1
            line = raw.rstrip("\r\n")
            if not line:
                continue
            try:
                record = codec.decode(line)
            except MalformedRecord as e:
                if strict:
                    raise e.at(line_no) from e
                skipped += 1
                LOGGER.warning("Skipping malformed record at %s:%s: %s", p, line_no, e.reason)
                continue
            yield DecodedLine(line_no=line_no, record=record)

    LOGGER.debug("Read %s lines from %s (%s skipped)", line_no, p, skipped)


async def read_records(path: str | Path, **iter_kwargs) -> list[DecodedLine]:
    """Collect iter_records into a list."""
    return [item async for item in iter_records(path, **iter_kwargs)]


async def write_records(
    path: str | Path,
    records: Iterable[LogRecord],
    *,
    codec: LogSerializer | None = None,
    append: bool = False,
    encoding: str = "utf-8",
) -> int:
    """Encode records and write them one per line. Returns the count written."""
    p = Path(path)
    codec = codec or SeparatorLineCodec()
    count = 0
    async with _open_text(p, mode="a" if append else "w", encoding=encoding, errors="strict") as f:
        for record in records:
            await f.write(codec.encode(record) + "\n")
            count += 1
    LOGGER.debug("Wrote %s records to %s", count, p)
    return count
