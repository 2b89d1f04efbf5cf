"""Library-wide configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

_LOG_FORMATS = frozenset({"text", "json"})


@dataclass(frozen=True, slots=True)
class DebugConfig:
    """Immutable logging configuration."""

    log_level: str
    log_format: str
    log_file: str | None


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with library-prefixed override."""
    value = os.getenv("ADAM_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def resolve_log_format(default: str = "text") -> str:
    value = os.getenv("ADAM_LOG_FORMAT", default).strip().lower()
    if value not in _LOG_FORMATS:
        return default
    return value


def resolve_log_file() -> str | None:
    value = os.getenv("ADAM_LOG_FILE", "").strip()
    return value or None


def load_debug_config() -> DebugConfig:
    """Load immutable configuration from env vars."""
    return DebugConfig(
        log_level=resolve_log_level_name(),
        log_format=resolve_log_format(),
        log_file=resolve_log_file(),
    )


__all__ = [
    "DebugConfig",
    "load_debug_config",
    "resolve_log_file",
    "resolve_log_format",
    "resolve_log_level_name",
]
