"""Asset loading error taxonomy."""

from __future__ import annotations

from collections.abc import Mapping


class AssetError(Exception):
    """Base class for asset loading and lookup errors."""


class AssetLoadFailure(AssetError):
    """Fetching or parsing one asset failed."""

    def __init__(self, identifier: str, cause: BaseException) -> None:
        super().__init__(f"failed to load asset {identifier!r}: {cause!r}")
        self.identifier = identifier
        self.cause = cause


class AssetNotFound(AssetError, KeyError):
    """No successfully loaded entry exists for an identifier."""

    def __init__(self, identifier: str) -> None:
        super().__init__(identifier)
        self.identifier = identifier

    def __str__(self) -> str:
        return f"asset not loaded: {self.identifier!r}"


class BatchIncomplete(AssetError):
    """A batch joined with at least one failed asset."""

    def __init__(self, failures: Mapping[str, AssetLoadFailure]) -> None:
        self.failures = dict(failures)
        super().__init__(f"batch incomplete, failed: {', '.join(self.identifiers)}")

    @property
    def identifiers(self) -> tuple[str, ...]:
        return tuple(self.failures)


class BatchAlreadyStarted(AssetError):
    """A loader was asked to run a second batch."""


__all__ = [
    "AssetError",
    "AssetLoadFailure",
    "AssetNotFound",
    "BatchAlreadyStarted",
    "BatchIncomplete",
]
