"""Public asset-loading API contracts."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from scenekit.assets.errors import (
    AssetLoadFailure,
    AssetNotFound,
    BatchAlreadyStarted,
    BatchIncomplete,
)
from scenekit.assets.paths import AssetRequest
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

if TYPE_CHECKING:
    from scenekit.api.events import EventBus
    from scenekit.assets.loader import BatchAssetLoader


def create_batch_loader(
    *,
    scene: SceneSink | None = None,
    reader: ModelReader | None = None,
    asset_root: str | Path = "assets",
    extension: str = "glb",
    events: EventBus | None = None,
) -> BatchAssetLoader:
    """Create a loader backed by the glTF reader unless one is supplied."""
    from scenekit.assets.gltf import GltfModelReader
    from scenekit.assets.loader import BatchAssetLoader

    return BatchAssetLoader(
        reader or GltfModelReader(),
        scene=scene,
        asset_root=asset_root,
        extension=extension,
        events=events,
    )


__all__ = [
    "AssetLoadFailed",
    "AssetLoadFailure",
    "AssetLoaded",
    "AssetNotFound",
    "AssetRequest",
    "BatchAlreadyStarted",
    "BatchCompleted",
    "BatchIncomplete",
    "BatchIncompleted",
    "BatchReport",
    "BatchState",
    "ModelReader",
    "SceneSink",
    "create_batch_loader",
]
