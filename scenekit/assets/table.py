"""Append-only table of successfully loaded assets."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from scenekit.assets.errors import AssetNotFound


class AssetTable:
    """Stores loaded asset handles keyed by identifier.

    Entries are published only after their load fully completes and are never
    replaced or removed, so readers never see a pending or partial value.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def insert(self, identifier: str, handle: Any) -> None:
        """Publish one loaded handle."""
        if identifier in self._entries:
            raise ValueError(f"asset already loaded: {identifier!r}")
        self._entries[identifier] = handle

    def get(self, identifier: str) -> Any:
        """Return loaded handle or raise AssetNotFound."""
        try:
            return self._entries[identifier]
        except KeyError:
            raise AssetNotFound(identifier) from None

    def items(self) -> tuple[tuple[str, Any], ...]:
        return tuple(self._entries.items())

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._entries))
