"""
ClawboardClient: public Python API for the todo/doing/done Trello board.

Single entry point for programmatic use and the MCP server.
All methods return plain dicts suitable for JSON serialization.
"""

from __future__ import annotations

from typing import Any

from clawboard_cli import config
from clawboard_cli._utils import clamp_int, to_iso_due
from clawboard_cli.api import check_credentials
from clawboard_cli.auth import maybe_load_credentials, verify_credentials
from clawboard_cli.board import ensure_board, list_id_for_key, normalize_list_key
from clawboard_cli.cards import (
    count_list_cards,
    create_card,
    get_list_cards,
    move_card,
    resolve_card_id,
)
from clawboard_cli.exceptions import SetupError, ValidationError
from clawboard_cli.models import BoardConfig, Credentials


def _as_dict(result: Any) -> dict[str, Any]:
    return result if isinstance(result, dict) else {}


class ClawboardClient:
    """Public API surface for the kanban board.

    Credentials and the board config are loaded lazily on first use and
    cached for the lifetime of the client. Raises CliError/SetupError on
    failure.
    """

    def __init__(self, *, credentials: Credentials | None = None, board_name: str | None = None):
        """Initialize the client.

        Args:
            credentials: Use these instead of reading credentials.json.
            board_name: Name for the board if one has to be provisioned.
                Falls back to CLAWBOARD_NAME, then "Clawboard".
        """
        self._creds = credentials
        self._board_name = board_name
        self._board: BoardConfig | None = None

    # -------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------

    @property
    def credentials(self) -> Credentials:
        if self._creds is None:
            self._creds = config.load_credentials()
        return self._creds

    def board(self) -> BoardConfig:
        """Return the board config, provisioning the board on first use."""
        if self._board is None:
            self._board = ensure_board(self.credentials, board_name=self._board_name)
        return self._board

    # -------------------------------------------------------------------
    # Setup
    # -------------------------------------------------------------------

    def init(self, *, key: str | None = None, token: str | None = None) -> dict[str, Any]:
        """Verify credentials (given or stored), ensure the board, then store new credentials.

        New credentials are only written once the board exists, so a token that
        can read but not create boards leaves nothing behind.

        Returns:
            dict with ok, board, and credentials_path when a file was written.
        """
        creds = self._creds or maybe_load_credentials()
        is_new = creds is None
        if is_new:
            creds, _status = verify_credentials(key, token)
        else:
            status = check_credentials(creds)
            if not status["ok"]:
                raise SetupError(f"[AUTH_FAILED] Trello auth check failed: {status['error']}")
        self._creds = creds
        result: dict[str, Any] = {"ok": True, "board": self.board().to_dict()}
        if is_new:
            result["credentials_path"] = config.save_credentials(creds)
        return result

    # -------------------------------------------------------------------
    # Read commands
    # -------------------------------------------------------------------

    def status(self) -> dict[str, Any]:
        """Count cards per list. One request per list, in board order.

        Returns:
            dict with boardId, boardUrl, and lists: {key: {count}}.
        """
        board = self.board()
        counts = {}
        for key, _name in config.BOARD_LISTS:
            list_id = list_id_for_key(board, key)
            counts[key] = {"count": count_list_cards(list_id, self.credentials)}
        return {"boardId": board.board_id, "boardUrl": board.board_url, "lists": counts}

    def list_cards(
        self, list_key: str, *, limit: Any = config.LIST_LIMIT_DEFAULT
    ) -> dict[str, Any]:
        """List cards in one list.

        Args:
            list_key: todo, doing, or done (case-insensitive; "to do"/"to-do" ok).
            limit: Max cards, clamped to [1, 200]. Non-numeric input means 1.

        Returns:
            dict with list and cards (partial card records).
        """
        key = normalize_list_key(list_key)
        n = clamp_int(limit, config.LIST_LIMIT_MIN, config.LIST_LIMIT_MAX)
        board = self.board()
        cards = get_list_cards(list_id_for_key(board, key), self.credentials)
        return {"list": list_key, "cards": cards[:n]}

    # -------------------------------------------------------------------
    # Mutation commands
    # -------------------------------------------------------------------

    def add_card(
        self,
        title: str,
        *,
        desc: str | None = None,
        due: str | None = None,
        list_key: str = "todo",
    ) -> dict[str, Any]:
        """Create a card at the top of a list.

        Args:
            title: Card title.
            desc: Optional description.
            due: Optional YYYY-MM-DD; stored as 09:00 at +09:00 that day.
            list_key: Target list (default todo).

        Returns:
            The created card as returned by Trello.
        """
        if not title or not title.strip():
            raise ValidationError("[ERROR] Card title must not be empty.")
        key = normalize_list_key(list_key)
        iso_due = to_iso_due(due) if due else None
        board = self.board()
        card = create_card(
            list_id_for_key(board, key), title, self.credentials, desc=desc, due=iso_due
        )
        return _as_dict(card)

    def move_card(self, card_ref: str, list_key: str) -> dict[str, Any]:
        """Move a card (short link, short URL, or id) to another list.

        Returns:
            The updated card as returned by Trello.
        """
        key = normalize_list_key(list_key)
        board = self.board()
        card_id = resolve_card_id(card_ref, self.credentials)
        return _as_dict(move_card(card_id, list_id_for_key(board, key), self.credentials))

    def mark_done(self, card_ref: str) -> dict[str, Any]:
        """Move a card to the done list."""
        return self.move_card(card_ref, "done")
