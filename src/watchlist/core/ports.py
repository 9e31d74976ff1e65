# src/watchlist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the front ends.

Commands and connectors depend on this Protocol rather than on TaskListStore,
so a different backing store can be swapped in (and faked in tests).
"""

from collections.abc import Callable
from typing import Protocol

from ..tasks.task_models import Item, StoreChange

ChangeListener = Callable[[StoreChange], None]


class TaskListRepo(Protocol):
    # Snapshot reads
    def list(self) -> list[Item]: ...
    def get(self, item_id: int) -> Item | None: ...

    # Mutations ("not found" is reported as False)
    def add(self, label: str, checked: bool = False) -> Item: ...
    def remove(self, item_id: int) -> bool: ...
    def set_checked(self, item_id: int, checked: bool) -> bool: ...
    def toggle(self, item_id: int) -> bool: ...

    # Re-render trigger
    def subscribe(self, listener: ChangeListener) -> Callable[[], None]: ...
    def unsubscribe(self, listener: ChangeListener) -> None: ...
