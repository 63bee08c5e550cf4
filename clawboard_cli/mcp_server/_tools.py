"""Board tools: status, listing, and card placement (5 tools)."""

from __future__ import annotations

from typing import Literal

from clawboard_cli.mcp_server._core import _call, _finalize_tool_result

ListKey = Literal["todo", "doing", "done"]


def board_status() -> dict:
    """Card counts for the todo, doing, and done lists.

    Provisions the board and its three lists on first use.
    """
    return _finalize_tool_result(_call("status"))


def list_cards(list_key: ListKey, limit: int = 20) -> dict:
    """List cards in one list.

    Args:
        list_key: todo, doing, or done.
        limit: Max cards (1-200).

    Returns:
        Dict with list and cards (id, name, shortUrl, due, dateLastActivity).
    """
    return _finalize_tool_result(_call("list_cards", list_key, limit=limit))


def add_card(
    title: str,
    desc: str | None = None,
    due: str | None = None,
    list_key: ListKey = "todo",
) -> dict:
    """Create a card at the top of a list.

    Args:
        title: Card title.
        desc: Optional description.
        due: Optional due date, YYYY-MM-DD (stored as 09:00 +09:00).
        list_key: Target list (default todo).
    """
    return _finalize_tool_result(_call("add_card", title, desc=desc, due=due, list_key=list_key))


def move_card(card: str, list_key: ListKey) -> dict:
    """Move a card to another list.

    Args:
        card: Card id, 8-char short link, or short URL (https://trello.com/c/<link>/...).
        list_key: Destination list.
    """
    return _finalize_tool_result(_call("move_card", card, list_key))


def mark_done(card: str) -> dict:
    """Move a card to the done list. Accepts id, short link, or short URL."""
    return _finalize_tool_result(_call("mark_done", card))


def register(mcp):
    for fn in (board_status, list_cards, add_card, move_card, mark_done):
        mcp.tool()(fn)
