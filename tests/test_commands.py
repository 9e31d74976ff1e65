# tests/test_commands.py

from __future__ import annotations

from watchlist.cli.commands import CommandRegistry, registry, render_items
from watchlist.tasks.task_models import Item


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    seen: list[list[str]] = []

    def handler(state, args):
        seen.append(args)
        return "ok"

    reg.register("a", handler, "a", aliases=["Alpha"])

    assert reg.handle(state, "/a x y") == "ok"
    assert reg.handle(state, "/alpha") == "ok"
    assert seen == [["x", "y"], []]
    assert "/a - a" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_command(state) -> None:
    assert registry.handle(state, "/add The Thing") == "Added #3: The Thing"
    assert registry.handle(state, "/add --checked Heat") == "Added #4: Heat"
    assert state.store.get(3) == Item(3, "The Thing", False)
    assert state.store.get(4) == Item(4, "Heat", True)


def test_add_command_requires_label(state) -> None:
    assert (registry.handle(state, "/add") or "").startswith("Usage")
    assert len(state.store.list()) == 3


def test_check_uncheck_toggle(state) -> None:
    assert registry.handle(state, "/check 2") == "#2 checked."
    assert state.store.get(2).checked is True
    assert registry.handle(state, "/uncheck 2") == "#2 unchecked."
    assert state.store.get(2).checked is False
    assert registry.handle(state, "/toggle 1") == "#1 checked."
    assert state.store.get(1).checked is True


def test_id_commands_report_bad_input(state) -> None:
    assert registry.handle(state, "/check 9") == "No item with id 9."
    assert registry.handle(state, "/toggle 9") == "No item with id 9."
    assert registry.handle(state, "/rm 9") == "No item with id 9."
    assert (registry.handle(state, "/check abc") or "").startswith("Usage")
    assert (registry.handle(state, "/remove") or "").startswith("Usage")
    assert all(not it.checked for it in state.store.list())


def test_remove_aliases(state) -> None:
    assert registry.handle(state, "/close 1") == "Removed #1."
    assert [it.id for it in state.store.list()] == [0, 2]


def test_list_and_status(state) -> None:
    state.store.set_checked(0, True)

    listing = registry.handle(state, "/ls") or ""
    assert listing.splitlines()[0] == "My WatchList"
    assert "[x] 0" in listing
    assert "[ ] 1" in listing

    status = registry.handle(state, "/status") or ""
    assert "Items: 3 (1 checked)" in status
    assert "Changes this session: 1" in status


def test_render_items_empty() -> None:
    assert render_items([]) == "(empty)"
    assert render_items([], "T") == "T\n(empty)"
    assert render_items([Item(7, "Dune", True)]) == "[x] 7   Dune"
