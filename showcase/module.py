"""The showcase scene: procedural geometry, loaded models and two toggles."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import numpy as np

from scenekit.api.actions import ActionDispatcher
from scenekit.api.assets import BatchReport, SceneSink
from scenekit.api.host import HostControl, TimeContext
from scenekit.assets.loader import BatchAssetLoader
from showcase.animation import (
    STAR_SPIN_RATE,
    CubeSpin,
    OrbitState,
    Pose,
    SpinState,
    advance_cube,
    advance_orbit,
    advance_spin,
    apply_pose,
    orbit_pose,
    placement_poses,
    scatter_positions,
    toggle_cube,
    toggle_opacity,
)
from showcase.config import ShowcaseConfig
from showcase.factory import SceneFactory

ACTION_TOGGLE_CUBE_ROTATION = "toggle_cube_rotation"
ACTION_TOGGLE_IMPORTED_OPACITY = "toggle_imported_opacity"
ORBITING_MODEL = "spaceshuttle"

_LOG = logging.getLogger(__name__)


class ShowcaseModule:
    """Scene module driven by the host once per frame.

    Loaded models are only touched after the loader reports the whole batch
    ready; the procedural cube and stars animate from the first frame.
    """

    def __init__(
        self,
        *,
        loader: BatchAssetLoader,
        factory: SceneFactory,
        scene: SceneSink,
        config: ShowcaseConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self._loader = loader
        self._factory = factory
        self._scene = scene
        self._config = config or ShowcaseConfig()
        self._rng = rng or np.random.default_rng(self._config.seed)
        self._cube: Any = None
        self._stars: list[Any] = []
        self._star_spin = SpinState()
        self._cube_spin = CubeSpin()
        self._orbit = OrbitState()
        self._opacity = 1.0
        self._placed = False
        self._load_task: asyncio.Task[BatchReport] | None = None

    @property
    def loader(self) -> BatchAssetLoader:
        return self._loader

    @property
    def cube(self) -> Any:
        return self._cube

    @property
    def stars(self) -> tuple[Any, ...]:
        return tuple(self._stars)

    @property
    def cube_rotation_enabled(self) -> bool:
        return self._cube_spin.enabled

    @property
    def opacity(self) -> float:
        return self._opacity

    @property
    def placed(self) -> bool:
        return self._placed

    @property
    def orbit(self) -> OrbitState:
        return self._orbit

    @property
    def load_task(self) -> asyncio.Task[BatchReport] | None:
        return self._load_task

    def register_actions(self, dispatcher: ActionDispatcher) -> None:
        dispatcher.register(ACTION_TOGGLE_CUBE_ROTATION, self.toggle_cube_rotation)
        dispatcher.register(ACTION_TOGGLE_IMPORTED_OPACITY, self.toggle_imported_opacity)

    def on_start(self, host: HostControl) -> None:
        self._cube = self._factory.create_cube()
        self._scene.add(self._cube)

        for x, y, z in scatter_positions(self._config.star_count, self._rng):
            star = self._factory.create_star()
            apply_pose(star, Pose(position=(float(x), float(y), float(z))))
            self._scene.add(star)
            self._stars.append(star)

        for light in self._factory.create_lights():
            self._scene.add(light)

        _LOG.info(
            "showcase_start stars=%d models=%s",
            len(self._stars),
            ",".join(self._config.models),
        )
        if self._config.models:
            self._load_task = host.spawn(self._loader.load_all(self._config.models))

    def simulate(self, context: TimeContext) -> None:
        dt = context.delta_seconds

        self._star_spin = advance_spin(self._star_spin, dt, STAR_SPIN_RATE)
        star_pose = Pose(euler=(self._star_spin.x, self._star_spin.y, 0.0))
        for star in self._stars:
            apply_pose(star, star_pose)

        self._cube_spin = advance_cube(self._cube_spin, dt)
        if self._cube is not None:
            spin = self._cube_spin.spin
            apply_pose(self._cube, Pose(euler=(spin.x, spin.y, 0.0)))

        if not self._loader.is_ready():
            return
        self._place_models_once()
        if ORBITING_MODEL in self._loader:
            self._orbit = advance_orbit(self._orbit, dt)
            apply_pose(self._loader.get(ORBITING_MODEL), orbit_pose(self._orbit))

    def toggle_cube_rotation(self) -> bool:
        self._cube_spin = toggle_cube(self._cube_spin)
        _LOG.debug("cube_rotation enabled=%s", self._cube_spin.enabled)
        return True

    def toggle_imported_opacity(self) -> bool:
        self._opacity = toggle_opacity(self._opacity)
        touched = 0
        for _, handle in self._loader.table.items():
            touched += self._factory.set_opacity(handle, self._opacity)
        _LOG.debug("imported_opacity value=%.1f materials=%d", self._opacity, touched)
        return True

    def on_shutdown(self) -> None:
        _LOG.info(
            "showcase_shutdown state=%s loaded=%d",
            self._loader.state.value,
            len(self._loader.table),
        )

    def _place_models_once(self) -> None:
        if self._placed:
            return
        poses = placement_poses(self._loader.requested, self._rng)
        for identifier, pose in poses.items():
            apply_pose(self._loader.get(identifier), pose)
        self._placed = True
        _LOG.info("models_placed count=%d", len(poses))
