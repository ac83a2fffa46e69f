"""Application entry point."""

from __future__ import annotations

import numpy as np

from scenekit.api.actions import create_action_dispatcher
from scenekit.api.assets import BatchCompleted, BatchIncompleted, create_batch_loader
from scenekit.api.events import create_event_bus
from scenekit.api.logging import get_logger
from scenekit.rendering.scene import SceneRenderer
from scenekit.runtime.config import load_runtime_config
from scenekit.runtime.host import SceneHost
from scenekit.runtime.logging import shutdown_engine_logging
from showcase.config import load_default_env_files, load_showcase_config
from showcase.factory import PygfxSceneFactory
from showcase.logging import setup_logging
from showcase.module import (
    ACTION_TOGGLE_CUBE_ROTATION,
    ACTION_TOGGLE_IMPORTED_OPACITY,
    ShowcaseModule,
)

logger = get_logger(__name__)

KEY_BINDINGS: dict[str, str] = {
    "c": ACTION_TOGGLE_CUBE_ROTATION,
    "o": ACTION_TOGGLE_IMPORTED_OPACITY,
}


def main() -> None:
    """Run the showcase scene until the window closes."""
    load_default_env_files()
    setup_logging()
    runtime_config = load_runtime_config()
    config = load_showcase_config()
    logger.info(
        "showcase_config models=%s stars=%d seed=%s asset_root=%s",
        ",".join(config.models),
        config.star_count,
        config.seed,
        runtime_config.assets.root,
    )

    renderer = SceneRenderer(
        width=runtime_config.window.width,
        height=runtime_config.window.height,
        title=runtime_config.window.title,
        fov=runtime_config.camera.fov,
        near=runtime_config.camera.near,
        far=runtime_config.camera.far,
        camera_z=runtime_config.camera.z,
    )
    events = create_event_bus()
    events.subscribe(
        BatchCompleted,
        lambda _: renderer.set_title(f"{runtime_config.window.title} - models ready"),
    )
    events.subscribe(
        BatchIncompleted,
        lambda event: renderer.set_title(
            f"{runtime_config.window.title} - missing: {', '.join(event.error.identifiers)}"
        ),
    )
    loader = create_batch_loader(
        scene=renderer,
        asset_root=runtime_config.assets.root,
        extension=runtime_config.assets.extension,
        events=events,
    )
    module = ShowcaseModule(
        loader=loader,
        factory=PygfxSceneFactory(),
        scene=renderer,
        config=config,
        rng=np.random.default_rng(config.seed),
    )
    dispatcher = create_action_dispatcher()
    module.register_actions(dispatcher)
    for key, action_id in KEY_BINDINGS.items():
        renderer.bind_key(key, action_id, dispatcher)

    host = SceneHost(module)
    host.start()

    def _draw() -> None:
        host.frame()

    try:
        renderer.run(_draw)
    finally:
        host.close()
        shutdown_engine_logging()


if __name__ == "__main__":
    main()
