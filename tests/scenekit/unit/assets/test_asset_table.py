from __future__ import annotations

import pytest

from scenekit.assets.errors import AssetNotFound
from scenekit.assets.table import AssetTable


def test_table_returns_inserted_handle() -> None:
    table = AssetTable()
    handle = object()

    table.insert("hoop", handle)

    assert table.get("hoop") is handle
    assert "hoop" in table
    assert len(table) == 1


def test_table_rejects_replacing_an_entry() -> None:
    table = AssetTable()
    table.insert("hoop", object())

    with pytest.raises(ValueError):
        table.insert("hoop", object())


def test_missing_lookup_raises_not_found_without_chained_key_error() -> None:
    table = AssetTable()

    with pytest.raises(AssetNotFound) as excinfo:
        table.get("hoop")

    assert excinfo.value.identifier == "hoop"
    assert excinfo.value.__cause__ is None
    assert "hoop" in str(excinfo.value)


def test_iteration_follows_insertion_order() -> None:
    table = AssetTable()
    first, second = object(), object()
    table.insert("spaceshuttle", first)
    table.insert("basketball", second)

    assert list(table) == ["spaceshuttle", "basketball"]
    assert table.items() == (("spaceshuttle", first), ("basketball", second))
