"""Event bus contract for loader and scene notifications."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

TEvent = TypeVar("TEvent")


@dataclass(frozen=True, slots=True)
class Subscription:
    """Token returned by ``subscribe``; hand it back to ``unsubscribe``."""

    id: int
    event_type: type


class EventBus(Protocol):
    """Synchronous in-process publish/subscribe keyed by event class."""

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription: ...

    def unsubscribe(self, subscription: Subscription) -> None: ...

    def publish(self, event: object) -> int:
        """Deliver ``event`` and return how many handlers completed."""


def create_event_bus() -> EventBus:
    """Create the default bus."""
    from scenekit.runtime.events import RuntimeEventBus

    return RuntimeEventBus()
