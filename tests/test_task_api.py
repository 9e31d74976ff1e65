# tests/test_task_api.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from watchlist.tasks.task_api import add_item, create_store, placeholder_items
from watchlist.tasks.task_models import Item
from watchlist.tasks.task_store import TaskListStore


def test_placeholder_items_default() -> None:
    assert placeholder_items() == [
        Item(0, "Movie #0", False),
        Item(1, "Movie #1", False),
        Item(2, "Movie #2", False),
    ]


def test_placeholder_items_negative_count_is_empty() -> None:
    assert placeholder_items(-2) == []


def test_create_store_uses_settings(settings) -> None:
    settings.seed_count = 2
    settings.seed_label = "Film {i}"

    store = create_store(settings)

    assert [it.label for it in store.list()] == ["Film 0", "Film 1"]
    assert store.add("x").id == 2


def test_create_store_without_settings() -> None:
    store = create_store(SimpleNamespace())
    assert len(store) == 3


def test_add_item_strips_label() -> None:
    store = TaskListStore()
    item = add_item(store, "  Dune  ", checked=True)
    assert item == Item(0, "Dune", True)


@pytest.mark.parametrize("label", ["", "   ", None])
def test_add_item_rejects_empty_label(label) -> None:
    store = TaskListStore()
    with pytest.raises(ValueError):
        add_item(store, label)
    assert store.list() == []
