"""Frame-driven host shell for one scene module."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from time import monotonic
from typing import Any

from scenekit.api.host import HostControl, SceneModule, TimeContext
from scenekit.runtime.pump import AsyncPump

_LOG = logging.getLogger("scenekit.runtime")


class SceneHost(HostControl):
    """Run module lifecycle and interleave async work with frames.

    Every ``frame`` first steps the async pump so that completed loads are
    delivered, then measures the frame delta and lets the module animate.
    The first frame has a zero delta; later deltas never go negative and are
    capped at ``max_delta_seconds`` so a stalled window does not make
    animation jump.
    """

    def __init__(
        self,
        module: SceneModule,
        *,
        time_source: Callable[[], float] | None = None,
        max_delta_seconds: float = 0.25,
        pump: AsyncPump | None = None,
    ) -> None:
        if max_delta_seconds <= 0.0:
            raise ValueError("max_delta_seconds must be > 0")
        self._module = module
        self._time_source = time_source or monotonic
        self._max_delta_seconds = max_delta_seconds
        self._pump = pump or AsyncPump()
        self._frame_index = 0
        self._last_seconds: float | None = None
        self._elapsed_seconds = 0.0
        self._started = False
        self._closed = False
        self._last_context: TimeContext | None = None

    @property
    def pump(self) -> AsyncPump:
        return self._pump

    @property
    def last_context(self) -> TimeContext | None:
        return self._last_context

    def current_frame_index(self) -> int:
        return self._frame_index

    def is_closed(self) -> bool:
        return self._closed

    def start(self) -> None:
        """Start module lifecycle."""
        if self._started:
            return
        self._started = True
        _LOG.info("host_start module=%s", type(self._module).__name__)
        self._module.on_start(self)

    def spawn(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        task = self._pump.spawn(coro)
        task.add_done_callback(_report_task_failure)
        return task

    def frame(self) -> TimeContext | None:
        """Advance one frame. Return the frame context, or None once closed."""
        if self._closed:
            return None
        if not self._started:
            self.start()
        self._pump.step()
        context = self._advance_time()
        self._module.simulate(context)
        self._frame_index += 1
        self._last_context = context
        return context

    def close(self) -> None:
        """Shut the module down and tear the async pump down."""
        if self._closed:
            return
        self._closed = True
        _LOG.info(
            "host_close frames=%d pending=%d",
            self._frame_index,
            self._pump.pending_tasks(),
        )
        try:
            self._module.on_shutdown()
        finally:
            self._pump.close()

    def _advance_time(self) -> TimeContext:
        now = self._time_source()
        if self._last_seconds is None:
            delta = 0.0
        else:
            delta = min(max(0.0, now - self._last_seconds), self._max_delta_seconds)
        self._last_seconds = now
        self._elapsed_seconds += delta
        return TimeContext(
            frame_index=self._frame_index,
            delta_seconds=delta,
            elapsed_seconds=self._elapsed_seconds,
        )


def _report_task_failure(task: asyncio.Task[Any]) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        _LOG.error("host_task_failed task=%s", task.get_name(), exc_info=exc)
