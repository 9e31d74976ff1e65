# src/watchlist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..core.state import AppState
from ..tasks.task_api import add_item
from ..tasks.task_models import Item

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def render_items(items: Iterable[Item], title: str | None = None) -> str:
    """Plain-text view of a snapshot: one row per item, checkbox first."""
    lines = [title] if title else []
    rows = [f"[{'x' if it.checked else ' '}] {it.id:<3} {it.label}" for it in items]
    lines.extend(rows or ["(empty)"])
    return "\n".join(lines)


def _parse_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    items = state.store.list()
    done = sum(1 for it in items if it.checked)
    version = getattr(state.store, "version", None)
    lines = [
        "Status:",
        f"  Items: {len(items)} ({done} checked)",
    ]
    if version is not None:
        lines.append(f"  Changes this session: {version}")
    return "\n".join(lines)


def cmd_list(state: AppState, args: list[str]) -> str:
    title = getattr(state.settings, "title", None)
    return render_items(state.store.list(), title)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <label>            -> add an unchecked item
    /add --checked <label>  -> add it already checked
    """
    checked = False
    if args and args[0] in ("--checked", "-c"):
        checked = True
        args = args[1:]

    try:
        item = add_item(state.store, " ".join(args), checked)
    except ValueError:
        logger.debug("Rejected /add with an empty label")
        return "Usage: /add [--checked] <label>."
    return f"Added #{item.id}: {item.label}"


def _set_checked(state: AppState, args: list[str], checked: bool, usage: str) -> str:
    item_id = _parse_id(args)
    if item_id is None:
        return usage
    if not state.store.set_checked(item_id, checked):
        return f"No item with id {item_id}."
    return f"#{item_id} {'checked' if checked else 'unchecked'}."


def cmd_check(state: AppState, args: list[str]) -> str:
    return _set_checked(state, args, True, "Usage: /check <id>.")


def cmd_uncheck(state: AppState, args: list[str]) -> str:
    return _set_checked(state, args, False, "Usage: /uncheck <id>.")


def cmd_toggle(state: AppState, args: list[str]) -> str:
    item_id = _parse_id(args)
    if item_id is None:
        return "Usage: /toggle <id>."
    if not state.store.toggle(item_id):
        return f"No item with id {item_id}."
    item = state.store.get(item_id)
    return f"#{item_id} {'checked' if item is not None and item.checked else 'unchecked'}."


def cmd_remove(state: AppState, args: list[str]) -> str:
    item_id = _parse_id(args)
    if item_id is None:
        return "Usage: /remove <id>."
    if not state.store.remove(item_id):
        return f"No item with id {item_id}."
    return f"Removed #{item_id}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show item counts.")
registry.register("list", cmd_list, help_text="Show the watchlist.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add an item: /add [--checked] <label>.")
registry.register("check", cmd_check, help_text="Mark an item as done: /check <id>.")
registry.register("uncheck", cmd_uncheck, help_text="Clear an item's checkbox: /uncheck <id>.")
registry.register("toggle", cmd_toggle, help_text="Flip an item's checkbox: /toggle <id>.")
registry.register(
    "remove", cmd_remove, help_text="Remove an item: /remove <id>.", aliases=["rm", "close"]
)
