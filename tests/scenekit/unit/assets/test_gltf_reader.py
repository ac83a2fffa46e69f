from __future__ import annotations

import asyncio
import threading
from types import SimpleNamespace

import pytest

from scenekit.assets import gltf as gltf_module
from scenekit.assets.gltf import GltfModelReader
from scenekit.assets.paths import AssetRequest


def _request(tmp_path, name: str = "hoop") -> AssetRequest:
    return AssetRequest.for_identifier(name, root=tmp_path)


def test_reader_returns_default_scene_loaded_off_loop_thread(tmp_path) -> None:
    request = _request(tmp_path)
    request.path.write_bytes(b"glTF")
    scene = object()
    seen: dict[str, object] = {}

    def _load(path):
        seen["path"] = path
        seen["thread"] = threading.get_ident()
        return SimpleNamespace(scene=scene)

    result = asyncio.run(GltfModelReader(load=_load)(request))

    assert result is scene
    assert seen["path"] == request.path
    assert seen["thread"] != threading.get_ident()


def test_missing_file_raises_before_loading(tmp_path) -> None:
    calls: list[object] = []
    reader = GltfModelReader(load=calls.append)

    with pytest.raises(FileNotFoundError):
        asyncio.run(reader(_request(tmp_path, "missing_model")))

    assert calls == []


def test_document_without_scene_is_rejected(tmp_path) -> None:
    request = _request(tmp_path)
    request.path.write_bytes(b"glTF")
    reader = GltfModelReader(load=lambda _: SimpleNamespace(scene=None))

    with pytest.raises(ValueError):
        asyncio.run(reader(request))


def test_parse_errors_propagate(tmp_path) -> None:
    request = _request(tmp_path)
    request.path.write_bytes(b"not a model")

    def _load(_path):
        raise RuntimeError("malformed glb")

    with pytest.raises(RuntimeError, match="malformed glb"):
        asyncio.run(GltfModelReader(load=_load)(request))


def test_default_loader_uses_pygfx_quietly(monkeypatch, tmp_path) -> None:
    calls: list[tuple[str, bool]] = []

    def _load_gltf(path, quiet=False):
        calls.append((path, quiet))
        return SimpleNamespace(scene="root")

    fake_gfx = SimpleNamespace(load_gltf=_load_gltf)
    monkeypatch.setattr(gltf_module, "gfx", fake_gfx)
    request = _request(tmp_path)
    request.path.write_bytes(b"glTF")

    assert asyncio.run(GltfModelReader()(request)) == "root"
    assert calls == [(str(request.path), True)]


def test_default_loader_reports_missing_pygfx(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(gltf_module, "gfx", None)
    request = _request(tmp_path)
    request.path.write_bytes(b"glTF")

    with pytest.raises(RuntimeError, match="pygfx"):
        asyncio.run(GltfModelReader()(request))
