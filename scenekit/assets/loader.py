"""Batch asset loader with a one-shot readiness gate."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from functools import partial
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from scenekit.assets.errors import (
    AssetLoadFailure,
    BatchAlreadyStarted,
    BatchIncomplete,
)
from scenekit.assets.paths import (
    DEFAULT_ASSET_ROOT,
    DEFAULT_MODEL_EXTENSION,
    AssetRequest,
    normalize_extension,
    validate_identifier,
)
from scenekit.assets.table import AssetTable
from scenekit.assets.types import (
    AssetLoaded,
    AssetLoadFailed,
    BatchCompleted,
    BatchIncompleted,
    BatchReport,
    BatchState,
    ModelReader,
    SceneSink,
)
from scenekit.runtime.debug_config import enabled_loader_trace

if TYPE_CHECKING:
    from scenekit.api.events import EventBus

_LOG = logging.getLogger(__name__)


class BatchAssetLoader:
    """Load one batch of named assets concurrently and gate on full success.

    Each identifier is fetched independently through ``reader``; a failure is
    recorded for that identifier only and never cancels its siblings. The
    readiness flag flips to true once, after every requested identifier is in
    the table, and the loaded handles are attached to ``scene`` at that point.
    """

    def __init__(
        self,
        reader: ModelReader,
        *,
        scene: SceneSink | None = None,
        asset_root: str | Path = DEFAULT_ASSET_ROOT,
        extension: str = DEFAULT_MODEL_EXTENSION,
        events: EventBus | None = None,
    ) -> None:
        self._reader = reader
        self._scene = scene
        self._asset_root = asset_root
        self._extension = normalize_extension(extension)
        self._events = events
        self._table = AssetTable()
        self._state = BatchState.IDLE
        self._ready = False
        self._requested: tuple[str, ...] = ()
        self._failures: dict[str, AssetLoadFailure] = {}
        self._in_flight: dict[str, asyncio.Future[Any]] = {}
        self._trace = enabled_loader_trace()

    @property
    def state(self) -> BatchState:
        return self._state

    @property
    def requested(self) -> tuple[str, ...]:
        return self._requested

    @property
    def failures(self) -> Mapping[str, AssetLoadFailure]:
        return MappingProxyType(self._failures)

    @property
    def table(self) -> AssetTable:
        return self._table

    def is_ready(self) -> bool:
        return self._ready

    def get(self, identifier: str) -> Any:
        """Return the loaded handle or raise AssetNotFound."""
        return self._table.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._table

    def request_for(self, identifier: str) -> AssetRequest:
        return AssetRequest.for_identifier(
            identifier, root=self._asset_root, extension=self._extension
        )

    async def load_one(self, identifier: str) -> Any:
        """Load one asset, publishing it to the table on success.

        Raises AssetLoadFailure when the reader fails. An identifier that is
        already loaded is returned without fetching again, and concurrent
        calls for the same identifier share a single fetch.
        """
        request = self.request_for(identifier)
        if identifier in self._table:
            return self._table.get(identifier)
        pending = self._in_flight.get(identifier)
        if pending is None:
            pending = asyncio.ensure_future(self._fetch(request))
            self._in_flight[identifier] = pending
            pending.add_done_callback(partial(self._forget_in_flight, identifier))
        # Shielded: a cancelled waiter must not cancel a fetch others may share.
        return await asyncio.shield(pending)

    async def load_all(self, identifiers: Sequence[str]) -> BatchReport:
        """Load every identifier concurrently and join on all of them.

        Never raises for per-asset failures; the outcome is reported through
        the returned BatchReport, the readiness flag, logs and events.
        """
        requested = tuple(identifiers)
        if not requested:
            raise ValueError("batch must name at least one asset")
        for identifier in requested:
            validate_identifier(identifier)
        duplicates = sorted(
            {identifier for identifier in requested if requested.count(identifier) > 1}
        )
        if duplicates:
            raise ValueError(f"batch identifiers must be distinct: {', '.join(duplicates)}")
        if self._state is not BatchState.IDLE:
            raise BatchAlreadyStarted(f"loader already ran a batch (state={self._state.value})")

        self._requested = requested
        self._state = BatchState.LOADING
        _LOG.info("batch_started count=%d ids=%s", len(requested), ",".join(requested))

        results = await asyncio.gather(
            *(self.load_one(identifier) for identifier in requested),
            return_exceptions=True,
        )

        loaded: list[tuple[str, Any]] = []
        failures: dict[str, AssetLoadFailure] = {}
        for identifier, result in zip(requested, results):
            if isinstance(result, AssetLoadFailure):
                failures[identifier] = result
            elif isinstance(result, Exception):
                _LOG.error("asset_load_failed id=%s", identifier, exc_info=result)
                failures[identifier] = AssetLoadFailure(identifier, result)
            elif isinstance(result, BaseException):
                raise result
            else:
                loaded.append((identifier, result))

        if failures:
            self._finish_incomplete(failures)
        else:
            self._finish_complete(loaded)
        return self.report()

    def report(self) -> BatchReport:
        """Snapshot of the current batch outcome."""
        loaded = tuple(
            identifier for identifier in self._requested if identifier in self._table
        )
        return BatchReport(
            state=self._state,
            requested=self._requested,
            loaded=loaded,
            failures=dict(self._failures),
        )

    async def _fetch(self, request: AssetRequest) -> Any:
        if self._trace:
            _LOG.debug("asset_request id=%s path=%s", request.identifier, request.path)
        try:
            handle = await self._reader(request)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            failure = AssetLoadFailure(request.identifier, exc)
            _LOG.error(
                "asset_load_failed id=%s path=%s",
                request.identifier,
                request.path,
                exc_info=True,
            )
            self._publish(AssetLoadFailed(request.identifier, request.path, failure))
            raise failure from exc
        self._table.insert(request.identifier, handle)
        _LOG.info("asset_loaded id=%s path=%s", request.identifier, request.path)
        self._publish(AssetLoaded(request.identifier, request.path))
        return handle

    def _finish_complete(self, loaded: list[tuple[str, Any]]) -> None:
        attach_failures = self._attach(loaded)
        if attach_failures:
            self._finish_incomplete(attach_failures)
            return
        self._ready = True
        self._state = BatchState.READY
        _LOG.info("batch_complete count=%d", len(self._requested))
        self._publish(BatchCompleted(self._requested))

    def _attach(self, loaded: list[tuple[str, Any]]) -> dict[str, AssetLoadFailure]:
        """Add loaded handles to the scene; a rejected handle fails only itself."""
        failures: dict[str, AssetLoadFailure] = {}
        if self._scene is None:
            return failures
        for identifier, handle in loaded:
            try:
                self._scene.add(handle)
            except Exception as exc:  # pylint: disable=broad-exception-caught
                failure = AssetLoadFailure(identifier, exc)
                failure.__cause__ = exc
                failures[identifier] = failure
                _LOG.exception("asset_attach_failed id=%s", identifier)
                self._publish(
                    AssetLoadFailed(identifier, self.request_for(identifier).path, failure)
                )
        return failures

    def _finish_incomplete(self, failures: dict[str, AssetLoadFailure]) -> None:
        self._failures = failures
        self._state = BatchState.PARTIALLY_FAILED
        error = BatchIncomplete(failures)
        _LOG.error(
            "batch_incomplete failed=%s loaded=%d/%d",
            ",".join(error.identifiers),
            len(self._requested) - len(failures),
            len(self._requested),
        )
        self._publish(BatchIncompleted(error))

    def _forget_in_flight(self, identifier: str, future: asyncio.Future[Any]) -> None:
        self._in_flight.pop(identifier, None)
        if not future.cancelled():
            # Mark the outcome as retrieved; waiters may all have gone away.
            future.exception()

    def _publish(self, event: object) -> None:
        if self._events is None:
            return
        try:
            self._events.publish(event)
        except Exception:  # pylint: disable=broad-exception-caught
            _LOG.exception("asset_event_handler_failed event=%s", type(event).__name__)
