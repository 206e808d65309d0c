"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from bulk_log_codec.core.codec import FIELD_COUNT, Position
from bulk_log_codec.core.config import resolve_codec_config
from bulk_log_codec.core.models import LogLevel, LogRecord
from bulk_log_codec.core.schema import LogRecordModel
from bulk_log_codec.core.timestamps import Timestamp
from bulk_log_codec.tools.codec_tools import BASE_DIR_ENV, base_dir, codec_for


def sample_record() -> LogRecord:
    """Return a fixed record used for demos and tests."""
    return LogRecord(
        level=LogLevel.INFO,
        date=Timestamp(788918400.25),
        body="hello\nworld",
        file="a.txt",
        function="f()",
        line=42,
        is_active=True,
    )


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://bulk-log/help")
    def help_resource() -> str:
        """Describe the wire format and available resource URIs."""
        fields = ", ".join(p.name.lower() for p in Position)
        sep = resolve_codec_config().separator
        return (
            "Resources:\n"
            "- app://bulk-log/help\n"
            "- app://bulk-log/schemas/log-record\n"
            "- app://bulk-log/examples/sample-line\n"
            f"\nWire format: {FIELD_COUNT} fields ({fields}) joined by one separator.\n"
            f"Configured separator: {sep!r}\n"
            f"Files for decode_log_file are restricted to {BASE_DIR_ENV}: {base_dir()}\n"
        )

    @mcp.resource("app://bulk-log/schemas/log-record")
    def log_record_schema() -> dict[str, Any]:
        """Return the JSON schema of the record payload used by the tools."""
        return LogRecordModel.model_json_schema()

    @mcp.resource("app://bulk-log/examples/sample-line")
    def sample_line() -> str:
        """Return one encoded sample record."""
        return codec_for(None).encode(sample_record()) + "\n"
