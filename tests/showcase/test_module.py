from __future__ import annotations

import numpy as np
import pytest

from scenekit.assets.loader import BatchAssetLoader
from scenekit.runtime.action_dispatch import RuntimeActionDispatcher
from scenekit.runtime.host import SceneHost
from showcase.animation import MODEL_SCALE, orbit_pose
from showcase.config import ShowcaseConfig
from showcase.module import (
    ACTION_TOGGLE_CUBE_ROTATION,
    ACTION_TOGGLE_IMPORTED_OPACITY,
    ShowcaseModule,
)

MODELS = ("basketball", "hoop", "spaceshuttle")


class _Local:
    def __init__(self) -> None:
        self.position = (0.0, 0.0, 0.0)
        self.euler = (0.0, 0.0, 0.0)
        self.scale = (1.0, 1.0, 1.0)


class _Node:
    def __init__(self, kind: str) -> None:
        self.kind = kind
        self.local = _Local()


class _Factory:
    def __init__(self) -> None:
        self.opacity_calls: list[tuple[object, float]] = []

    def create_cube(self) -> _Node:
        return _Node("cube")

    def create_star(self) -> _Node:
        return _Node("star")

    def create_lights(self) -> tuple[_Node, ...]:
        return _Node("directional"), _Node("ambient")

    def set_opacity(self, root: object, value: float) -> int:
        self.opacity_calls.append((root, value))
        return 1


def _ticks():
    now = [0.0]

    def _tick() -> float:
        value = now[0]
        now[0] += 1.0 / 60.0
        return value

    return _tick


def _build(reader, scene, *, models=MODELS, star_count=10):
    factory = _Factory()
    loader = BatchAssetLoader(reader, scene=scene)
    module = ShowcaseModule(
        loader=loader,
        factory=factory,
        scene=scene,
        config=ShowcaseConfig(models=models, star_count=star_count, seed=5),
        rng=np.random.default_rng(5),
    )
    host = SceneHost(module, time_source=_ticks())
    return module, factory, host


def _run_until_ready(host: SceneHost, module: ShowcaseModule, limit: int = 30) -> int:
    frames = 0
    while frames < limit:
        host.frame()
        frames += 1
        if module.load_task is not None and module.load_task.done():
            break
    return frames


def test_start_builds_cube_stars_and_lights(fake_reader_factory, fake_scene) -> None:
    module, _, host = _build(fake_reader_factory(), fake_scene, star_count=10)
    try:
        host.start()
        kinds = [getattr(node, "kind", None) for node in fake_scene.added]
    finally:
        host.close()

    assert kinds.count("cube") == 1
    assert kinds.count("star") == 10
    assert kinds.count("directional") == 1
    assert kinds.count("ambient") == 1
    assert len(module.stars) == 10
    positions = [star.local.position for star in module.stars]
    assert all(abs(c) <= 50.0 for position in positions for c in position)


def test_models_are_placed_once_after_batch_ready(fake_reader_factory, fake_scene) -> None:
    reader = fake_reader_factory()
    module, _, host = _build(reader, fake_scene)
    try:
        _run_until_ready(host, module)
        assert module.loader.is_ready() is True
        assert module.placed is True

        basketball = reader.handles["basketball"]
        hoop = reader.handles["hoop"]
        shuttle = reader.handles["spaceshuttle"]
        assert basketball.local.scale == (MODEL_SCALE, MODEL_SCALE, MODEL_SCALE)
        assert hoop.local.scale == (3.0, 3.0, 3.0)
        assert shuttle.local.scale == (0.002, 0.002, 0.002)
        placed_at = basketball.local.position

        host.frame()
        host.frame()
        assert basketball.local.position == placed_at
        assert [handle for handle in fake_scene.added if handle in reader.handles.values()] == [
            basketball,
            hoop,
            shuttle,
        ]
    finally:
        host.close()


def test_shuttle_follows_orbit_each_frame(fake_reader_factory, fake_scene) -> None:
    reader = fake_reader_factory()
    module, _, host = _build(reader, fake_scene)
    try:
        _run_until_ready(host, module)
        first_time = module.orbit.time
        host.frame()
        host.frame()
    finally:
        host.close()

    shuttle = reader.handles["spaceshuttle"]
    expected = orbit_pose(module.orbit)
    assert module.orbit.time > first_time
    assert shuttle.local.position == pytest.approx(expected.position)
    assert shuttle.local.euler == pytest.approx(expected.euler)


def test_missing_model_leaves_loaded_models_untouched(fake_reader_factory, fake_scene) -> None:
    reader = fake_reader_factory(missing={"hoop"})
    module, _, host = _build(reader, fake_scene)
    try:
        _run_until_ready(host, module)
        for _ in range(3):
            host.frame()
        star_euler = module.stars[0].local.euler
    finally:
        host.close()

    assert module.loader.is_ready() is False
    assert module.placed is False
    assert module.orbit.time == 0.0
    for handle in reader.handles.values():
        assert handle.local.position == (0.0, 0.0, 0.0)
        assert handle not in fake_scene.added
    assert star_euler[0] > 0.0


def test_cube_toggle_pauses_and_resumes_rotation(fake_reader_factory, fake_scene) -> None:
    module, _, host = _build(fake_reader_factory(), fake_scene, models=())
    dispatcher = RuntimeActionDispatcher()
    module.register_actions(dispatcher)
    try:
        for _ in range(3):
            host.frame()
        spinning = module.cube.local.euler
        assert spinning[0] > 0.0

        assert dispatcher.dispatch(ACTION_TOGGLE_CUBE_ROTATION) is True
        host.frame()
        host.frame()
        assert module.cube.local.euler == spinning
        assert module.cube_rotation_enabled is False

        dispatcher.dispatch(ACTION_TOGGLE_CUBE_ROTATION)
        host.frame()
        assert module.cube.local.euler[0] > spinning[0]
    finally:
        host.close()


def test_opacity_toggle_applies_to_every_loaded_model(fake_reader_factory, fake_scene) -> None:
    reader = fake_reader_factory()
    module, factory, host = _build(reader, fake_scene)
    dispatcher = RuntimeActionDispatcher()
    module.register_actions(dispatcher)
    try:
        _run_until_ready(host, module)
        assert dispatcher.dispatch(ACTION_TOGGLE_IMPORTED_OPACITY) is True
        dispatcher.dispatch(ACTION_TOGGLE_IMPORTED_OPACITY)
    finally:
        host.close()

    handles = [reader.handles[name] for name in MODELS]
    assert factory.opacity_calls == [(handle, 0.0) for handle in handles] + [
        (handle, 1.0) for handle in handles
    ]
    assert module.opacity == 1.0
    assert module.cube not in [root for root, _ in factory.opacity_calls]


def test_opacity_toggle_before_load_touches_nothing(fake_reader_factory, fake_scene) -> None:
    module, factory, host = _build(fake_reader_factory(), fake_scene)
    try:
        host.start()
        module.toggle_imported_opacity()
    finally:
        host.close()

    assert factory.opacity_calls == []
    assert module.opacity == 0.0


def test_no_models_means_no_load_task(fake_reader_factory, fake_scene) -> None:
    reader = fake_reader_factory()
    module, _, host = _build(reader, fake_scene, models=())
    try:
        host.frame()
    finally:
        host.close()

    assert module.load_task is None
    assert reader.calls == []
