"""Scene graph and perspective camera setup for pygfx rendering."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from scenekit.api.actions import ActionDispatcher
from scenekit.rendering.scene_runtime import (
    extract_key,
    extract_resize_dimensions,
    get_canvas_logical_size,
    run_backend_loop,
    stop_backend_loop,
)

_gfx_import_error: Exception | None
try:
    import pygfx as gfx
except ImportError as exc:  # pragma: no cover - import guard for environments without graphics deps
    gfx = None
    _gfx_import_error = exc
else:
    _gfx_import_error = None

_canvas_import_error: Exception | None
try:
    import rendercanvas.auto as rc_auto
except ImportError as exc:  # pragma: no cover - missing GUI backend
    rc_auto = None
    _canvas_import_error = exc
else:
    _canvas_import_error = None

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SceneRenderer:
    """Window, renderer, scene and perspective camera around pygfx."""

    width: int = 1280
    height: int = 720
    title: str = "scenekit"
    fov: float = 75.0
    near: float = 0.1
    far: float = 1000.0
    camera_z: float = 10.0
    canvas: Any = field(init=False)
    renderer: Any = field(init=False)
    scene: Any = field(init=False)
    camera: Any = field(init=False)
    _key_bindings: dict[str, tuple[str, ActionDispatcher]] = field(
        init=False, default_factory=dict
    )
    _draw_callback: Callable[[], None] | None = field(init=False, default=None)
    _draw_failed: bool = field(init=False, default=False)
    _is_closed: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        if gfx is None:
            raise RuntimeError(
                f"pygfx dependency unavailable: {_gfx_import_error!r}. Install 'pygfx' and 'wgpu'."
            )
        if rc_auto is None:
            raise RuntimeError(
                "Render canvas backend unavailable. "
                "Install a desktop backend such as 'glfw'. "
                f"Original error: {_canvas_import_error!r}"
            )

        canvas_cls = getattr(rc_auto, "RenderCanvas", None)
        if canvas_cls is None:
            raise RuntimeError("rendercanvas.auto did not expose RenderCanvas.")

        self.canvas = canvas_cls(size=(self.width, self.height), title=self.title)
        self.renderer = gfx.WgpuRenderer(self.canvas)
        self.scene = gfx.Scene()
        self.camera = gfx.PerspectiveCamera(
            self.fov, self.width / self.height, depth_range=(self.near, self.far)
        )
        self.camera.local.position = (0.0, 0.0, self.camera_z)
        self._sync_size_from_canvas()
        self._bind_events()

    def add(self, obj: Any) -> None:
        """Attach an object to the scene root."""
        self.scene.add(obj)

    def bind_key(self, key: str, action_id: str, dispatcher: ActionDispatcher) -> None:
        """Invoke ``action_id`` on ``dispatcher`` when ``key`` is pressed."""
        normalized = key.strip().lower()
        if not normalized:
            raise ValueError("key must not be empty")
        self._key_bindings[normalized] = (action_id, dispatcher)

    def set_title(self, title: str) -> None:
        """Set window title when supported by backend."""
        self.title = title
        if hasattr(self.canvas, "set_title"):
            self.canvas.set_title(title)

    def _bind_events(self) -> None:
        add_handler = getattr(self.canvas, "add_event_handler", None)
        if not callable(add_handler):
            return
        add_handler(self._on_resize, "resize")
        add_handler(self._on_key_down, "key_down")

    def _on_resize(self, event: object) -> None:
        dimensions = extract_resize_dimensions(event)
        if dimensions is None:
            self._sync_size_from_canvas()
            return
        self._apply_canvas_size(*dimensions)

    def _on_key_down(self, event: object) -> None:
        key = extract_key(event)
        if key is None:
            return
        binding = self._key_bindings.get(key)
        if binding is None:
            return
        action_id, dispatcher = binding
        handled = dispatcher.dispatch(action_id)
        logger.debug("key_action key=%s action=%s handled=%s", key, action_id, handled)

    def _apply_canvas_size(self, width: float, height: float) -> bool:
        if width < 1.0 or height < 1.0:
            return False
        new_width = int(width)
        new_height = int(height)
        if new_width == self.width and new_height == self.height:
            return False
        self.width = new_width
        self.height = new_height
        self.camera.aspect = self.width / self.height
        logger.debug("resize width=%d height=%d", self.width, self.height)
        return True

    def _sync_size_from_canvas(self) -> bool:
        size = get_canvas_logical_size(self.canvas)
        if size is None:
            return False
        return self._apply_canvas_size(*size)

    def run(self, draw_callback: Callable[[], None]) -> None:
        """Start continuous draw loop; ``draw_callback`` runs before every render."""
        self._draw_callback = draw_callback

        def _draw_frame() -> None:
            if self._draw_failed or self._is_closed:
                return
            try:
                if self._draw_callback is not None:
                    self._draw_callback()
                if self._is_closed:
                    return
                self.renderer.render(self.scene, self.camera)
                self.canvas.request_draw()
            except Exception:  # pylint: disable=broad-exception-caught
                self._draw_failed = True
                logger.exception("unhandled_exception_in_draw_loop")
                self.close()

        self.canvas.request_draw(_draw_frame)
        run_backend_loop(rc_auto)

    def close(self) -> None:
        """Close canvas and stop backend loop when possible."""
        if self._is_closed:
            return
        self._is_closed = True
        if hasattr(self.canvas, "close"):
            self.canvas.close()
        stop_backend_loop(rc_auto)
