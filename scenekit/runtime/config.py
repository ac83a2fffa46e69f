"""Centralized runtime configuration for window, camera and asset lookup."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _text(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip() or default


@dataclass(frozen=True, slots=True)
class RuntimeWindowConfig:
    width: int
    height: int
    title: str


@dataclass(frozen=True, slots=True)
class RuntimeCameraConfig:
    fov: float
    near: float
    far: float
    z: float


@dataclass(frozen=True, slots=True)
class RuntimeAssetConfig:
    root: str
    extension: str


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    window: RuntimeWindowConfig
    camera: RuntimeCameraConfig
    assets: RuntimeAssetConfig


def load_runtime_config() -> RuntimeConfig:
    """Load immutable runtime configuration from env vars."""
    fov = _float("SCENEKIT_CAMERA_FOV", 75.0)
    near = _float("SCENEKIT_CAMERA_NEAR", 0.1)
    far = _float("SCENEKIT_CAMERA_FAR", 1000.0)
    if near <= 0.0:
        near = 0.1
    if far <= near:
        far = max(1000.0, near * 10.0)
    return RuntimeConfig(
        window=RuntimeWindowConfig(
            width=max(1, _int("SCENEKIT_WINDOW_WIDTH", 1280)),
            height=max(1, _int("SCENEKIT_WINDOW_HEIGHT", 720)),
            title=_text("SCENEKIT_WINDOW_TITLE", "scenekit"),
        ),
        camera=RuntimeCameraConfig(
            fov=fov if fov > 0.0 else 75.0,
            near=near,
            far=far,
            z=_float("SCENEKIT_CAMERA_Z", 10.0),
        ),
        assets=RuntimeAssetConfig(
            root=_text("SCENEKIT_ASSET_ROOT", "assets"),
            extension=_text("SCENEKIT_ASSET_EXTENSION", "glb").lstrip(".") or "glb",
        ),
    )
