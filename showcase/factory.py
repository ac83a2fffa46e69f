"""Scene-object factory seam between the showcase and pygfx."""

from __future__ import annotations

from typing import Any, Protocol

from scenekit.rendering import primitives

CUBE_COLOR = "#0077ff"
STAR_COLOR = "#ffffff"
STAR_SCALE = 0.2


class SceneFactory(Protocol):
    """Creates the procedural scene content and edits loaded models."""

    def create_cube(self) -> Any: ...

    def create_star(self) -> Any: ...

    def create_lights(self) -> tuple[Any, ...]: ...

    def set_opacity(self, root: Any, value: float) -> int: ...


class PygfxSceneFactory:
    """Default factory producing pygfx meshes and lights."""

    def create_cube(self) -> Any:
        return primitives.create_wireframe_cube(color=CUBE_COLOR)

    def create_star(self) -> Any:
        return primitives.create_star(scale=STAR_SCALE, color=STAR_COLOR)

    def create_lights(self) -> tuple[Any, ...]:
        return primitives.create_lights()

    def set_opacity(self, root: Any, value: float) -> int:
        return primitives.set_opacity(root, value)
