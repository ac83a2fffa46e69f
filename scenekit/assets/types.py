"""Value types shared by the batch loader and its consumers."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any, Protocol

from scenekit.assets.errors import AssetLoadFailure, BatchIncomplete
from scenekit.assets.paths import AssetRequest

ModelReader = Callable[[AssetRequest], Awaitable[Any]]
"""Async callable resolving one request to a loaded handle."""


class SceneSink(Protocol):
    """Scene container that loaded handles are attached to."""

    def add(self, obj: Any) -> None: ...


class BatchState(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    PARTIALLY_FAILED = "partially_failed"


@dataclass(frozen=True, slots=True)
class BatchReport:
    """Outcome of one joined batch."""

    state: BatchState
    requested: tuple[str, ...]
    loaded: tuple[str, ...]
    failures: Mapping[str, AssetLoadFailure] = field(default_factory=dict)

    @property
    def ready(self) -> bool:
        return self.state is BatchState.READY


@dataclass(frozen=True, slots=True)
class AssetLoaded:
    identifier: str
    path: Path


@dataclass(frozen=True, slots=True)
class AssetLoadFailed:
    identifier: str
    path: Path
    error: AssetLoadFailure


@dataclass(frozen=True, slots=True)
class BatchCompleted:
    identifiers: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class BatchIncompleted:
    error: BatchIncomplete
