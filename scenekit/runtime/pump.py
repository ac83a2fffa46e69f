"""Cooperative asyncio loop driven one step per rendered frame."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any, TypeVar

_LOG = logging.getLogger(__name__)

TResult = TypeVar("TResult")


class AsyncPump:
    """Own a private event loop and advance it from the host frame callback.

    The render backend owns the real main loop, so the asyncio loop never
    runs on its own. Each ``step`` runs whatever callbacks are ready right
    now (task steps, executor completions) and returns without blocking.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop or asyncio.new_event_loop()
        self._closed = False

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    @property
    def closed(self) -> bool:
        return self._closed

    def spawn(self, coro: Coroutine[Any, Any, TResult]) -> asyncio.Task[TResult]:
        """Schedule a coroutine; it starts on the next step."""
        self._ensure_open()
        return self._loop.create_task(coro)

    def step(self) -> None:
        """Run one iteration of ready callbacks."""
        self._ensure_open()
        self._loop.call_soon(self._loop.stop)
        self._loop.run_forever()

    def pending_tasks(self) -> int:
        if self._closed:
            return 0
        return sum(1 for task in asyncio.all_tasks(self._loop) if not task.done())

    def close(self) -> None:
        """Cancel leftover tasks, drain them and close the loop."""
        if self._closed:
            return
        self._closed = True
        pending = [task for task in asyncio.all_tasks(self._loop) if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            _LOG.debug("async_pump_close cancelled=%d", len(pending))
            self._loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
        self._loop.run_until_complete(self._loop.shutdown_asyncgens())
        self._loop.run_until_complete(self._loop.shutdown_default_executor())
        self._loop.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("async pump is closed")
