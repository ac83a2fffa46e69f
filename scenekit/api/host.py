"""Host-driven scene module contracts."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class TimeContext:
    """Timing handed to ``SceneModule.simulate`` for one frame."""

    frame_index: int
    delta_seconds: float
    elapsed_seconds: float


@runtime_checkable
class HostControl(Protocol):
    """Host control surface exposed to scene modules."""

    def spawn(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        """Schedule a coroutine on the host loop."""

    def close(self) -> None:
        """Request host shutdown."""


@runtime_checkable
class SceneModule(Protocol):
    """Scene lifecycle and per-frame hooks invoked by the host."""

    def on_start(self, host: HostControl) -> None:
        """Build the scene and kick off background work."""

    def simulate(self, context: TimeContext) -> None:
        """Advance animation state for one frame."""

    def on_shutdown(self) -> None:
        """Release resources and finalize state."""
