# src/watchlist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ChangeKind(StrEnum):
    ADDED = "added"
    REMOVED = "removed"
    CHECKED = "checked"


@dataclass(slots=True, frozen=True)
class Item:
    """
    One checklist entry.

    Items are values: the store swaps in a copy when `checked` changes,
    so snapshots returned earlier keep their contents.
    """

    id: int
    label: str
    checked: bool = False


@dataclass(slots=True, frozen=True)
class StoreChange:
    """
    Delivered to store listeners after a mutation is applied.

    For REMOVED, `item` is the item that was dropped.
    """

    kind: ChangeKind
    item: Item
    version: int
