"""Codec configuration and environment overrides."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, replace

from .codec import DEFAULT_SEPARATOR, SeparatorLineCodec

SEPARATOR_ENV = "BULK_LOG_SEPARATOR"
STRICT_ENV = "BULK_LOG_STRICT"
LOG_LEVEL_ENV = "BULK_LOG_LOG_LEVEL"

_SEPARATOR_ALIASES = {
    "\\t": "\t",
    "tab": "\t",
    "\\x1f": "\x1f",
    "unit": "\x1f",
    "pipe": "|",
    "comma": ",",
}
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class CodecConfig:
    separator: str = DEFAULT_SEPARATOR
    # When true, readers stop at the first malformed line instead of skipping it.
    strict: bool = False


def parse_separator(value: str) -> str:
    """Resolve a separator spelling (``tab``, ``\\t``, ``|``...) to one character."""
    sep = _SEPARATOR_ALIASES.get(value.lower(), value)
    if len(sep) != 1:
        raise ValueError(
            f"separator must be a single character or one of {sorted(_SEPARATOR_ALIASES)}, "
            f"got {value!r}"
        )
    return sep


def _parse_bool(name: str, value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (1/0, true/false, yes/no, on/off)")


def resolve_codec_config(cfg: CodecConfig | None = None) -> CodecConfig:
    """Return config with optional env overrides applied."""
    if cfg is None:
        cfg = CodecConfig()

    sep_env = os.getenv(SEPARATOR_ENV)
    if sep_env:
        try:
            cfg = replace(cfg, separator=parse_separator(sep_env))
        except ValueError as exc:
            raise ValueError(f"{SEPARATOR_ENV}: {exc}") from exc

    strict_env = os.getenv(STRICT_ENV)
    if strict_env:
        cfg = replace(cfg, strict=_parse_bool(STRICT_ENV, strict_env))

    return cfg


def build_codec(cfg: CodecConfig | None = None) -> SeparatorLineCodec:
    """Create a codec from (env-resolved) configuration."""
    return SeparatorLineCodec(separator=resolve_codec_config(cfg).separator)


def log_level_name() -> str:
    return os.getenv(LOG_LEVEL_ENV, "INFO").upper()


def configure_logging() -> None:
    """Configure a reasonable default logging setup on stderr.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level = getattr(logging, log_level_name(), logging.INFO)
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
