"""
Typed models for stored credentials and the provisioned board config.
"""

from dataclasses import dataclass

from clawboard_cli.exceptions import SetupError

LIST_KEYS = ("todo", "doing", "done")


@dataclass(frozen=True)
class Credentials:
    """API key + token pair sent as query params on every request."""

    key: str
    token: str

    @classmethod
    def from_dict(cls, value, path):
        if not isinstance(value, dict):
            raise SetupError(f"[SETUP_NEEDED] Invalid Trello credentials file: {path}")
        key = str(value.get("key") or "").strip()
        token = str(value.get("token") or "").strip()
        if not key or not token:
            raise SetupError(f"[SETUP_NEEDED] Invalid Trello credentials file: {path}")
        return cls(key=key, token=token)

    def to_dict(self):
        return {"key": self.key, "token": self.token}


@dataclass(frozen=True)
class BoardConfig:
    """Board id plus the three list ids created at provisioning time.

    The list ids are never re-derived from list names once stored.
    """

    board_id: str
    lists: dict[str, str]
    board_url: str | None = None

    @classmethod
    def from_dict(cls, value, path):
        if not isinstance(value, dict):
            raise SetupError(f"[SETUP_NEEDED] Invalid board config file: {path}")
        board_id = value.get("boardId")
        lists = value.get("lists")
        if not board_id or not isinstance(lists, dict):
            raise SetupError(f"[SETUP_NEEDED] Invalid board config file: {path}")
        missing = [k for k in LIST_KEYS if not lists.get(k)]
        if missing:
            raise SetupError(
                f"[SETUP_NEEDED] Board config {path} is missing list ids for: {', '.join(missing)}"
            )
        board_url = value.get("boardUrl")
        return cls(
            board_id=str(board_id),
            lists={k: str(lists[k]) for k in LIST_KEYS},
            board_url=str(board_url) if board_url else None,
        )

    def to_dict(self):
        out = {"boardId": self.board_id}
        if self.board_url:
            out["boardUrl"] = self.board_url
        out["lists"] = {k: self.lists[k] for k in LIST_KEYS}
        return out
