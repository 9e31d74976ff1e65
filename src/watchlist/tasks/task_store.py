# src/watchlist/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace

from .task_models import ChangeKind, Item, StoreChange

logger = logging.getLogger(__name__)

ChangeListener = Callable[[StoreChange], None]


class TaskListStore:
    """
    In-memory ordered checklist.

    - items keep insertion order; removal never reorders the rest
    - ids come from a monotonically increasing counter, so an id is
      never handed out twice within one store
    - listeners are called synchronously after each effective mutation

    Thread-safety:
    - none; the store is meant to be used from a single thread
    """

    def __init__(self, items: Iterable[Item] | None = None) -> None:
        self._items: list[Item] = list(items or [])
        ids = [item.id for item in self._items]
        if len(set(ids)) != len(ids):
            raise ValueError("initial items must have unique ids")

        self._next_id = max(ids) + 1 if ids else 0
        self._version = 0
        self._listeners: list[ChangeListener] = []
        logger.debug("TaskListStore ready items=%d next_id=%d", len(self._items), self._next_id)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def version(self) -> int:
        """Incremented once per effective mutation."""
        return self._version

    # ---- observers ----

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            self.unsubscribe(listener)

        return _unsubscribe

    def unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, kind: ChangeKind, item: Item) -> None:
        self._version += 1
        change = StoreChange(kind=kind, item=item, version=self._version)
        # Copy: a listener may unsubscribe itself while being called.
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                logger.exception("Store listener failed kind=%s item_id=%s", kind, item.id)

    def _index_of(self, item_id: int) -> int | None:
        for i, item in enumerate(self._items):
            if item.id == item_id:
                return i
        return None

    # ---- public API ----

    def list(self) -> list[Item]:
        """Current items in insertion order (a new list on every call)."""
        return list(self._items)

    def get(self, item_id: int) -> Item | None:
        idx = self._index_of(item_id)
        return None if idx is None else self._items[idx]

    def add(self, label: str, checked: bool = False) -> Item:
        item = Item(id=self._next_id, label=label, checked=bool(checked))
        self._next_id += 1
        self._items.append(item)
        logger.debug("Item added id=%s label=%r checked=%s", item.id, item.label, item.checked)
        self._notify(ChangeKind.ADDED, item)
        return item

    def remove(self, item_id: int) -> bool:
        """Remove the item with `item_id`. Returns False if there was none."""
        idx = self._index_of(item_id)
        if idx is None:
            logger.debug("Remove skipped, unknown id=%s", item_id)
            return False

        item = self._items.pop(idx)
        logger.debug("Item removed id=%s", item.id)
        self._notify(ChangeKind.REMOVED, item)
        return True

    def set_checked(self, item_id: int, checked: bool) -> bool:
        """
        Set the checked flag of `item_id`.

        Returns True when the item exists, even if the flag already had
        that value (in which case nothing is notified).
        """
        idx = self._index_of(item_id)
        if idx is None:
            logger.debug("set_checked skipped, unknown id=%s", item_id)
            return False

        current = self._items[idx]
        checked = bool(checked)
        if current.checked == checked:
            return True

        updated = replace(current, checked=checked)
        self._items[idx] = updated
        logger.debug("Item checked id=%s checked=%s", item_id, checked)
        self._notify(ChangeKind.CHECKED, updated)
        return True

    def toggle(self, item_id: int) -> bool:
        item = self.get(item_id)
        if item is None:
            return False
        return self.set_checked(item_id, not item.checked)
