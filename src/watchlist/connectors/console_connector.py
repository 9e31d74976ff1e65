# src/watchlist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import render_items
from ..core.state import AppState
from ..tasks.task_api import add_item
from ..tasks.task_models import StoreChange

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(state: AppState, *, read_line: InputFn = input) -> None:
    """
    Interactive watchlist screen.

    - "/..." lines go to the command registry
    - any other line is added as a new unchecked item
    - the list is re-rendered after every store change
    """
    title = str(getattr(state.settings, "title", "My WatchList"))

    def render() -> None:
        print(render_items(state.store.list(), title), flush=True)

    def on_change(change: StoreChange) -> None:
        logger.debug("Store changed kind=%s id=%s v=%s", change.kind, change.item.id, change.version)
        render()

    logger.info("Console connector started (items=%d).", len(state.store.list()))
    _print_ts("[CONSOLE] Type a title to add it. Use /help for commands. Use /exit to quit.\n")
    render()

    unsubscribe = state.store.subscribe(on_change)
    try:
        while True:
            try:
                user_input = read_line("> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            try:
                reply = command_registry.handle(state, user_input)
                if reply is None:
                    item = add_item(state.store, user_input)
                    reply = f"Added #{item.id}: {item.label}"
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            _print_ts(reply)
    finally:
        unsubscribe()

    logger.info("Console connector finished.")
