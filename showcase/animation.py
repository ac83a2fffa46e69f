"""Pure per-frame animation state and scene placement.

Every function here takes a state plus elapsed time and returns a new state;
nothing touches scene nodes. Rates are in radians per second, chosen to match
the per-frame increments of a 60 Hz display.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

import numpy as np

Vec3 = tuple[float, float, float]

STAR_SPIN_RATE = 6.0
CUBE_SPIN_RATE = 0.6
ORBIT_RATE = 0.6
ORBIT_RADIUS = 5.0
STAR_FIELD_EXTENT = 100.0
MODEL_SCALE = 0.3
MODEL_OFFSET_RANGE = 3.0


@dataclass(frozen=True, slots=True)
class Pose:
    """Partial transform; ``None`` components leave the node unchanged."""

    position: Vec3 | None = None
    euler: Vec3 | None = None
    scale: Vec3 | None = None


@dataclass(frozen=True, slots=True)
class SpinState:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, slots=True)
class CubeSpin:
    enabled: bool = True
    spin: SpinState = field(default_factory=SpinState)


@dataclass(frozen=True, slots=True)
class OrbitState:
    time: float = 0.0


PLACEMENT_OVERRIDES: Mapping[str, Pose] = {
    "hoop": Pose(scale=(3.0, 3.0, 3.0)),
    "spaceshuttle": Pose(
        position=(0.0, 5.0, 0.0),
        euler=(0.0, 5.0, 0.0),
        scale=(0.002, 0.002, 0.002),
    ),
}


def advance_spin(state: SpinState, delta_seconds: float, rate: float) -> SpinState:
    step = rate * delta_seconds
    return SpinState(x=state.x + step, y=state.y + step)


def advance_cube(state: CubeSpin, delta_seconds: float) -> CubeSpin:
    if not state.enabled:
        return state
    return replace(state, spin=advance_spin(state.spin, delta_seconds, CUBE_SPIN_RATE))


def toggle_cube(state: CubeSpin) -> CubeSpin:
    return replace(state, enabled=not state.enabled)


def advance_orbit(state: OrbitState, delta_seconds: float, rate: float = ORBIT_RATE) -> OrbitState:
    return OrbitState(time=state.time + rate * delta_seconds)


def orbit_pose(state: OrbitState, radius: float = ORBIT_RADIUS) -> Pose:
    """Circle the origin in the xz-plane, nose along the direction of travel."""
    t = state.time
    return Pose(
        position=(math.sin(t) * radius, 0.0, math.cos(t) * radius),
        euler=(0.0, t + math.pi / 2.0, 0.0),
    )


def toggle_opacity(value: float) -> float:
    return 0.0 if value == 1.0 else 1.0


def merge_pose(base: Pose, override: Pose) -> Pose:
    return Pose(
        position=override.position if override.position is not None else base.position,
        euler=override.euler if override.euler is not None else base.euler,
        scale=override.scale if override.scale is not None else base.scale,
    )


def placement_poses(
    identifiers: Iterable[str],
    rng: np.random.Generator,
    overrides: Mapping[str, Pose] = PLACEMENT_OVERRIDES,
) -> dict[str, Pose]:
    """One-shot placement for loaded models: shared scale, random diagonal offset."""
    poses: dict[str, Pose] = {}
    for identifier in identifiers:
        offset = float(rng.uniform(-MODEL_OFFSET_RANGE, MODEL_OFFSET_RANGE))
        poses[identifier] = Pose(
            position=(offset, offset, offset),
            euler=(offset, offset, offset),
            scale=(MODEL_SCALE, MODEL_SCALE, MODEL_SCALE),
        )
    for identifier, override in overrides.items():
        if identifier in poses:
            poses[identifier] = merge_pose(poses[identifier], override)
    return poses


def scatter_positions(
    count: int,
    rng: np.random.Generator,
    extent: float = STAR_FIELD_EXTENT,
) -> np.ndarray:
    """Uniform positions in a cube of side ``extent`` centred on the origin."""
    if count < 0:
        raise ValueError("count must be >= 0")
    return (rng.random((count, 3)) - 0.5) * extent


def apply_pose(node: Any, pose: Pose) -> None:
    """Write the non-empty parts of ``pose`` onto ``node.local``."""
    local = node.local
    if pose.position is not None:
        local.position = pose.position
    if pose.euler is not None:
        local.euler = pose.euler
    if pose.scale is not None:
        local.scale = pose.scale
