"""In-process event bus with per-handler failure isolation."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from scenekit.api.events import Subscription

TEvent = TypeVar("TEvent")
EventHandler = Callable[[Any], None]

_LOG = logging.getLogger(__name__)


class RuntimeEventBus:
    """Deliver events to handlers subscribed to the event's class or a base class.

    Handlers run in subscription order. A handler that raises is logged and
    skipped; the rest still receive the event.
    """

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._handlers: dict[type, dict[int, EventHandler]] = {}

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        subscription = Subscription(next(self._ids), event_type)
        self._handlers.setdefault(event_type, {})[subscription.id] = handler
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        handlers = self._handlers.get(subscription.event_type)
        if handlers is None:
            return
        handlers.pop(subscription.id, None)
        if not handlers:
            del self._handlers[subscription.event_type]

    def publish(self, event: object) -> int:
        delivered = 0
        for handler_id, handler in self._matching(type(event)):
            try:
                handler(event)
            except Exception:  # pylint: disable=broad-exception-caught
                _LOG.exception(
                    "event_handler_failed event=%s subscription=%d",
                    type(event).__name__,
                    handler_id,
                )
                continue
            delivered += 1
        return delivered

    def _matching(self, event_cls: type) -> list[tuple[int, EventHandler]]:
        matched: list[tuple[int, EventHandler]] = []
        for cls in event_cls.__mro__:
            matched.extend(self._handlers.get(cls, {}).items())
        # Ids are issued in subscription order.
        matched.sort(key=lambda item: item[0])
        return matched
