"""Named action dispatch for host-invoked buttons and key bindings."""

from __future__ import annotations

from dataclasses import dataclass, field

from scenekit.api.actions import ActionHandler


@dataclass(slots=True)
class RuntimeActionDispatcher:
    """Resolve and dispatch action ids to zero-argument handlers."""

    direct_handlers: dict[str, ActionHandler] = field(default_factory=dict)

    def register(self, action_id: str, handler: ActionHandler) -> None:
        """Register handler for one action id, replacing any previous one."""
        normalized = action_id.strip()
        if not normalized:
            raise ValueError("action_id must not be empty")
        self.direct_handlers[normalized] = handler

    def dispatch(self, action_id: str) -> bool | None:
        """Dispatch action id. Return None when no handler exists."""
        handler = self.direct_handlers.get(action_id)
        if handler is None:
            return None
        return handler()
