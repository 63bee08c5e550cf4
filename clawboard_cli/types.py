"""Typed response definitions for ClawboardClient methods.

These TypedDicts document the shape of dicts returned by public API methods.
They are optional: runtime behavior is unchanged (plain dicts).
Remote records are partial: any field may be missing.
"""

from __future__ import annotations

from typing import TypedDict


class CardRecord(TypedDict, total=False):
    """Card as returned by Trello (only the requested fields are present)."""

    id: str
    name: str
    desc: str
    shortUrl: str
    shortLink: str
    idList: str
    due: str | None
    dateLastActivity: str


class BoardLists(TypedDict):
    todo: str
    doing: str
    done: str


class BoardConfigDict(TypedDict, total=False):
    """On-disk shape of board.json."""

    boardId: str
    boardUrl: str
    lists: BoardLists


class ListCount(TypedDict):
    count: int


class StatusResult(TypedDict):
    """Return type of ClawboardClient.status()."""

    boardId: str
    boardUrl: str | None
    lists: dict[str, ListCount]


class CardListResult(TypedDict):
    """Return type of ClawboardClient.list_cards()."""

    list: str
    cards: list[CardRecord]


class InitResult(TypedDict, total=False):
    """Return type of ClawboardClient.init()."""

    ok: bool
    board: BoardConfigDict
    credentials_path: str
