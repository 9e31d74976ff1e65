# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from watchlist.core.state import AppState
from watchlist.tasks.task_api import placeholder_items
from watchlist.tasks.task_store import TaskListStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the front ends.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="watchlist-test",
        title="My WatchList",
        log_level="DEBUG",
        data_dir=tmp_path,
        log_to_file=False,
        seed_count=3,
        seed_label="Movie #{i}",
        console_enabled=True,
    )


@pytest.fixture()
def store() -> TaskListStore:
    """Store seeded with Movie #0..#2, all unchecked."""
    return TaskListStore(placeholder_items(3, "Movie #{i}"))


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskListStore) -> AppState:
    return AppState(settings=settings, store=store)
