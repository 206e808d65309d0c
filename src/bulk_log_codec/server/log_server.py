"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: encode a record, decode a line, decode a record file
- Resources: help text, record JSON schema, sample encoded line

Run locally (stdio):
    python -m bulk_log_codec.server.log_server
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from bulk_log_codec.core.config import configure_logging
from bulk_log_codec.resources.registry import register_resources
from bulk_log_codec.tools.codec_tools import decode_file_impl, decode_line_impl, encode_record_impl

LOGGER = logging.getLogger(__name__)


mcp = FastMCP("bulk-log-codec", json_response=True)

register_resources(mcp)


@mcp.tool()
def encode_log_record(record: dict[str, Any], separator: str | None = None) -> dict[str, Any]:
    """Encode one log record into a single delimited line.

    Parameters
    ----------
    record:
        {"level": "verbose|debug|info|warn|error", "date": ISO-8601 or
        "date_bits": uint64, "body", "file", "function", "line", "is_active"}.
    separator:
        Single character (or "tab"/"\\t"). Defaults to BULK_LOG_SEPARATOR or tab.

    Returns
    -------
    dict:
        {"line": str}
    """
    return encode_record_impl(record=record, separator=separator)


@mcp.tool()
def decode_log_line(line: str, separator: str | None = None) -> dict[str, Any]:
    """Decode a single encoded line back into a record.

    Fails when the line does not hold exactly seven well-formed fields.
    """
    return decode_line_impl(line=line, separator=separator)


@mcp.tool()
async def decode_log_file(
    path: str,
    separator: str | None = None,
    strict: bool | None = None,
    limit: int | None = None,
) -> dict[str, Any]:
    """Decode a newline-framed record file (plain or .gz).

    Parameters
    ----------
    path:
        File path, relative paths resolve under BULK_LOG_BASE_DIR.
    strict:
        When true, the first malformed line fails the call; otherwise malformed
        lines are skipped. Defaults to BULK_LOG_STRICT.
    limit:
        Maximum number of records returned (hard-capped in the implementation).

    Returns
    -------
    dict:
        {"count": int, "records": list[dict], "truncated": bool}
    """
    return await decode_file_impl(path=path, separator=separator, strict=strict, limit=limit)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
