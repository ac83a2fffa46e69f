from __future__ import annotations

import asyncio
from collections.abc import Iterable
from types import SimpleNamespace

import pytest

from scenekit.assets.paths import AssetRequest


class FakeHandle:
    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        self.local = SimpleNamespace(
            position=(0.0, 0.0, 0.0), euler=(0.0, 0.0, 0.0), scale=(1.0, 1.0, 1.0)
        )

    def __repr__(self) -> str:
        return f"FakeHandle({self.identifier!r})"


class FakeReader:
    """Async reader that fails for ``missing`` ids and can hold ids behind gates."""

    def __init__(
        self,
        *,
        missing: Iterable[str] = (),
        delays: dict[str, float] | None = None,
    ) -> None:
        self.missing = set(missing)
        self.delays = dict(delays or {})
        self.gates: dict[str, asyncio.Event] = {}
        self.calls: list[str] = []
        self.handles: dict[str, FakeHandle] = {}

    def gate(self, identifier: str) -> asyncio.Event:
        event = asyncio.Event()
        self.gates[identifier] = event
        return event

    async def __call__(self, request: AssetRequest) -> FakeHandle:
        self.calls.append(request.identifier)
        gate = self.gates.get(request.identifier)
        if gate is not None:
            await gate.wait()
        await asyncio.sleep(self.delays.get(request.identifier, 0.0))
        if request.identifier in self.missing:
            raise FileNotFoundError(f"model file not found: {request.path}")
        handle = FakeHandle(request.identifier)
        self.handles[request.identifier] = handle
        return handle


class FakeScene:
    def __init__(self) -> None:
        self.added: list[object] = []

    def add(self, obj: object) -> None:
        self.added.append(obj)


@pytest.fixture
def fake_reader_factory():
    return FakeReader


@pytest.fixture
def fake_scene() -> FakeScene:
    return FakeScene()
