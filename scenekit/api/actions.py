"""Public action-dispatch API contracts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

ActionHandler = Callable[[], bool]


class ActionDispatcher(Protocol):
    """Resolve and dispatch action IDs."""

    def register(self, action_id: str, handler: ActionHandler) -> None:
        """Register handler for one action id."""

    def dispatch(self, action_id: str) -> bool | None:
        """Dispatch action id. Return None when no handler exists."""


def create_action_dispatcher(
    *,
    handlers: dict[str, ActionHandler] | None = None,
) -> ActionDispatcher:
    """Create default dispatcher implementation."""
    from scenekit.runtime.action_dispatch import RuntimeActionDispatcher

    dispatcher = RuntimeActionDispatcher()
    for action_id, handler in (handlers or {}).items():
        dispatcher.register(action_id, handler)
    return dispatcher
