from __future__ import annotations

from scenekit.runtime.config import load_runtime_config

_ENV_NAMES = (
    "SCENEKIT_WINDOW_WIDTH",
    "SCENEKIT_WINDOW_HEIGHT",
    "SCENEKIT_WINDOW_TITLE",
    "SCENEKIT_CAMERA_FOV",
    "SCENEKIT_CAMERA_NEAR",
    "SCENEKIT_CAMERA_FAR",
    "SCENEKIT_CAMERA_Z",
    "SCENEKIT_ASSET_ROOT",
    "SCENEKIT_ASSET_EXTENSION",
)


def _clear(monkeypatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults_match_reference_scene(monkeypatch) -> None:
    _clear(monkeypatch)

    cfg = load_runtime_config()

    assert (cfg.window.width, cfg.window.height) == (1280, 720)
    assert cfg.window.title == "scenekit"
    assert (cfg.camera.fov, cfg.camera.near, cfg.camera.far, cfg.camera.z) == (
        75.0,
        0.1,
        1000.0,
        10.0,
    )
    assert (cfg.assets.root, cfg.assets.extension) == ("assets", "glb")


def test_env_overrides_are_parsed(monkeypatch) -> None:
    _clear(monkeypatch)
    monkeypatch.setenv("SCENEKIT_WINDOW_WIDTH", "800")
    monkeypatch.setenv("SCENEKIT_WINDOW_HEIGHT", "600")
    monkeypatch.setenv("SCENEKIT_WINDOW_TITLE", "demo")
    monkeypatch.setenv("SCENEKIT_CAMERA_FOV", "60")
    monkeypatch.setenv("SCENEKIT_CAMERA_Z", "20.5")
    monkeypatch.setenv("SCENEKIT_ASSET_ROOT", "models")
    monkeypatch.setenv("SCENEKIT_ASSET_EXTENSION", ".gltf")

    cfg = load_runtime_config()

    assert (cfg.window.width, cfg.window.height, cfg.window.title) == (800, 600, "demo")
    assert cfg.camera.fov == 60.0
    assert cfg.camera.z == 20.5
    assert (cfg.assets.root, cfg.assets.extension) == ("models", "gltf")


def test_invalid_values_fall_back(monkeypatch) -> None:
    _clear(monkeypatch)
    monkeypatch.setenv("SCENEKIT_WINDOW_WIDTH", "wide")
    monkeypatch.setenv("SCENEKIT_WINDOW_HEIGHT", "-5")
    monkeypatch.setenv("SCENEKIT_CAMERA_FOV", "0")
    monkeypatch.setenv("SCENEKIT_CAMERA_NEAR", "-1")
    monkeypatch.setenv("SCENEKIT_WINDOW_TITLE", "   ")

    cfg = load_runtime_config()

    assert cfg.window.width == 1280
    assert cfg.window.height == 1
    assert cfg.window.title == "scenekit"
    assert cfg.camera.fov == 75.0
    assert cfg.camera.near == 0.1


def test_far_plane_is_kept_beyond_near(monkeypatch) -> None:
    _clear(monkeypatch)
    monkeypatch.setenv("SCENEKIT_CAMERA_NEAR", "5")
    monkeypatch.setenv("SCENEKIT_CAMERA_FAR", "2")

    cfg = load_runtime_config()

    assert cfg.camera.far > cfg.camera.near


def test_dot_only_extension_falls_back_to_glb(monkeypatch) -> None:
    _clear(monkeypatch)
    monkeypatch.setenv("SCENEKIT_ASSET_EXTENSION", ".")

    assert load_runtime_config().assets.extension == "glb"
