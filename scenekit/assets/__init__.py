"""Batch asset loading primitives."""

from scenekit.assets.errors import (
    AssetError,
    AssetLoadFailure,
    AssetNotFound,
    BatchAlreadyStarted,
    BatchIncomplete,
)
from scenekit.assets.gltf import GltfModelReader
from scenekit.assets.loader import BatchAssetLoader
from scenekit.assets.paths import AssetRequest, resolve_asset_path
from scenekit.assets.table import AssetTable

__all__ = [
    "AssetError",
    "AssetLoadFailure",
    "AssetNotFound",
    "AssetRequest",
    "AssetTable",
    "BatchAlreadyStarted",
    "BatchAssetLoader",
    "BatchIncomplete",
    "GltfModelReader",
    "resolve_asset_path",
]
