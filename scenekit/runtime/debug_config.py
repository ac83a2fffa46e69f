"""Scenekit debug configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class DebugConfig:
    """Immutable runtime debug configuration."""

    log_level: str
    loader_trace_enabled: bool = False


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve runtime log level with scenekit-prefixed override."""
    value = os.getenv("SCENEKIT_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_debug_config() -> DebugConfig:
    """Load immutable debug configuration from env vars."""
    return DebugConfig(
        log_level=resolve_log_level_name(),
        loader_trace_enabled=_flag("SCENEKIT_DEBUG_LOADER_TRACE", False),
    )


def enabled_loader_trace() -> bool:
    return load_debug_config().loader_trace_enabled
