"""Runtime helpers for rendercanvas-backed scene rendering."""

from __future__ import annotations

from typing import Any


def get_canvas_logical_size(canvas: Any) -> tuple[float, float] | None:
    """Read logical canvas size from backend in a tolerant way."""
    get_logical_size = getattr(canvas, "get_logical_size", None)
    if not callable(get_logical_size):
        return None
    size = get_logical_size()
    if not (isinstance(size, (tuple, list)) and len(size) >= 2):
        return None
    width, height = size[0], size[1]
    if not isinstance(width, (int, float)) or not isinstance(height, (int, float)):
        return None
    return float(width), float(height)


def extract_resize_dimensions(event: object) -> tuple[float, float] | None:
    """Extract positive width/height from heterogeneous resize payloads."""
    if not isinstance(event, dict):
        return None
    candidates: list[object] = [(event.get("width"), event.get("height"))]
    candidates.append(event.get("size"))
    candidates.append(event.get("logical_size"))
    for candidate in candidates:
        if not (isinstance(candidate, (tuple, list)) and len(candidate) >= 2):
            continue
        width, height = candidate[0], candidate[1]
        if not isinstance(width, (int, float)) or not isinstance(height, (int, float)):
            continue
        if width <= 0 or height <= 0:
            # Minimized windows report zero sizes; keep the last good aspect.
            return None
        return float(width), float(height)
    return None


def extract_key(event: object) -> str | None:
    """Return the lower-cased key name of a key event."""
    if isinstance(event, dict):
        key = event.get("key")
    else:
        key = getattr(event, "key", None)
    if not isinstance(key, str) or not key:
        return None
    return key.lower()


def run_backend_loop(rc_auto: Any) -> None:
    """Run rendercanvas loop entrypoint."""
    loop = getattr(rc_auto, "loop", None)
    if loop is not None and hasattr(loop, "run"):
        loop.run()
        return
    run_func = getattr(rc_auto, "run", None)
    if callable(run_func):
        run_func()
        return
    raise RuntimeError("rendercanvas.auto did not expose a runnable loop.")


def stop_backend_loop(rc_auto: Any) -> None:
    """Stop rendercanvas loop when supported."""
    loop = getattr(rc_auto, "loop", None)
    if loop is not None and hasattr(loop, "stop"):
        loop.stop()
