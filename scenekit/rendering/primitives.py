"""pygfx object factories for procedural scene content."""

from __future__ import annotations

from typing import Any

_gfx_import_error: Exception | None
try:
    import pygfx as gfx
except ImportError as exc:  # pragma: no cover - import guard for environments without graphics deps
    gfx = None
    _gfx_import_error = exc
else:
    _gfx_import_error = None


def _require_gfx() -> Any:
    if gfx is None:
        raise RuntimeError(
            f"pygfx dependency unavailable: {_gfx_import_error!r}. Install 'pygfx' and 'wgpu'."
        )
    return gfx


def create_wireframe_cube(color: str = "#0077ff", size: float = 1.0) -> Any:
    """Unit cube drawn as wireframe."""
    lib = _require_gfx()
    return lib.Mesh(
        lib.box_geometry(size, size, size),
        lib.MeshBasicMaterial(color=color, wireframe=True),
    )


def create_star(scale: float = 0.2, color: str = "#ffffff") -> Any:
    """Small wireframe icosahedron used as a decorative star."""
    lib = _require_gfx()
    star = lib.Mesh(
        lib.icosahedron_geometry(radius=1.0),
        lib.MeshBasicMaterial(color=color, wireframe=True),
    )
    star.local.scale = (scale, scale, scale)
    return star


def create_lights() -> tuple[Any, ...]:
    """Directional key light plus dim ambient fill; imported models are unlit without them."""
    lib = _require_gfx()
    directional = lib.DirectionalLight("#ffffff", 1.0)
    directional.local.position = (5.0, 10.0, 7.5)
    ambient = lib.AmbientLight("#404040", 1.0)
    return directional, ambient


def set_opacity(root: Any, value: float) -> int:
    """Set material opacity on every mesh under ``root``. Return materials touched.

    Materials are switched to blending first, otherwise pygfx draws them opaque
    whatever the opacity value.
    """
    touched = 0

    def _visit(node: Any) -> None:
        nonlocal touched
        material = getattr(node, "material", None)
        if material is None or not _is_mesh(node):
            return
        _enable_blending(material)
        material.opacity = value
        touched += 1

    root.traverse(_visit)
    return touched


def _enable_blending(material: Any) -> None:
    # Newer pygfx exposes alpha_mode; older releases use the transparent flag.
    if hasattr(material, "alpha_mode"):
        material.alpha_mode = "blend"
    elif hasattr(material, "transparent"):
        material.transparent = True


def _is_mesh(node: Any) -> bool:
    if gfx is not None:
        return isinstance(node, gfx.Mesh)
    return False
