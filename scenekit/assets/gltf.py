"""Default model reader backed by pygfx glTF loading."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path
from typing import Any

from scenekit.assets.paths import AssetRequest

_gfx_import_error: Exception | None
try:
    import pygfx as gfx
except ImportError as exc:  # pragma: no cover - import guard for environments without graphics deps
    gfx = None
    _gfx_import_error = exc
else:
    _gfx_import_error = None


def _pygfx_load_gltf(path: Path) -> Any:
    if gfx is None:
        raise RuntimeError(
            f"pygfx dependency unavailable: {_gfx_import_error!r}. Install 'pygfx' and 'gltflib'."
        )
    return gfx.load_gltf(str(path), quiet=True)


class GltfModelReader:
    """Read ``.glb``/``.gltf`` files off the loop thread and return the root scene node."""

    def __init__(self, load: Callable[[Path], Any] | None = None) -> None:
        self._load = load or _pygfx_load_gltf

    async def __call__(self, request: AssetRequest) -> Any:
        path = request.path
        if not path.is_file():
            raise FileNotFoundError(f"model file not found: {path}")
        document = await asyncio.to_thread(self._load, path)
        scene = getattr(document, "scene", None)
        if scene is None:
            raise ValueError(f"model file has no default scene: {path}")
        return scene
