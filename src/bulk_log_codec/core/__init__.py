"""Log record line codec.

Contains the record model, the separator-based codec and file helpers around it.
"""

from __future__ import annotations

from .codec import DEFAULT_SEPARATOR, LogSerializer, SeparatorLineCodec
from .config import CodecConfig, build_codec, resolve_codec_config
from .errors import CodecError, MalformedRecord
from .models import LogLevel, LogRecord
from .record_io import DecodedLine, iter_records, read_records, write_records
from .timestamps import REFERENCE_EPOCH, Timestamp

__all__ = [
    "DEFAULT_SEPARATOR",
    "REFERENCE_EPOCH",
    "CodecConfig",
    "CodecError",
    "DecodedLine",
    "LogLevel",
    "LogRecord",
    "LogSerializer",
    "MalformedRecord",
    "SeparatorLineCodec",
    "Timestamp",
    "build_codec",
    "iter_records",
    "read_records",
    "resolve_codec_config",
    "write_records",
]
