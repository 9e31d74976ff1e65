# src/watchlist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskListRepo


@dataclass
class AppState:
    """
    Per-session state: built at startup by the composition root and
    dropped when the session ends. Nothing here outlives the process.
    """

    # Store Settings on the state for easy access in other modules.
    settings: object

    store: TaskListRepo
