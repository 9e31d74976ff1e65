# src/watchlist/tasks/task_api.py

from __future__ import annotations

import logging

from .task_models import Item
from .task_store import TaskListStore

logger = logging.getLogger(__name__)

DEFAULT_SEED_COUNT = 3
DEFAULT_SEED_LABEL = "Movie #{i}"


def placeholder_items(
    count: int = DEFAULT_SEED_COUNT, label_template: str = DEFAULT_SEED_LABEL
) -> list[Item]:
    """Placeholder entries a fresh watchlist starts with (ids 0..count-1)."""
    return [Item(id=i, label=label_template.format(i=i)) for i in range(max(0, int(count)))]


def create_store(settings=None) -> TaskListStore:
    """
    Build a store seeded from settings.

    Reads `seed_count` and `seed_label` when present; otherwise uses the defaults.
    """
    count = getattr(settings, "seed_count", DEFAULT_SEED_COUNT)
    template = getattr(settings, "seed_label", DEFAULT_SEED_LABEL)
    store = TaskListStore(placeholder_items(count, template))
    logger.info("Watchlist store created with %d placeholder items", len(store))
    return store


def add_item(store: TaskListStore, label: str, checked: bool = False) -> Item:
    """
    Convenience helper for UI input: trims the label and rejects empty ones.
    The store itself accepts any label.
    """
    clean = (label or "").strip()
    if not clean:
        raise ValueError("label is required")
    return store.add(clean, checked)
