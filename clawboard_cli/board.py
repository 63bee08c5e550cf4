"""
Board provisioning and list-key routing for clawboard-cli.

The first command that needs a board creates one with three lists and
stores their ids in board.json. Later runs read that file back verbatim.
"""

import sys

from clawboard_cli import config
from clawboard_cli.api import trello_request
from clawboard_cli.exceptions import CliError, ValidationError
from clawboard_cli.models import BoardConfig

_LIST_KEY_ALIASES = {
    "todo": "todo",
    "to do": "todo",
    "to-do": "todo",
    "doing": "doing",
    "done": "done",
}


def resolve_board_name(name=None):
    """Pick the board name: explicit argument, then CLAWBOARD_NAME, then the default."""
    for candidate in (name, config.BOARD_NAME):
        if candidate and candidate.strip():
            return candidate.strip()
    return config.DEFAULT_BOARD_NAME


def normalize_list_key(key):
    """Map a user-supplied list key to todo/doing/done (case-insensitive)."""
    canonical = _LIST_KEY_ALIASES.get(str(key).lower())
    if canonical is None:
        raise ValidationError(f"[ERROR] Unknown list key: {key} (expected todo|doing|done)")
    return canonical


def list_id_for_key(board, key):
    return board.lists[normalize_list_key(key)]


def _create_list(board_id, name, creds):
    lst = trello_request(
        "POST", "/lists", creds, {"name": name, "idBoard": board_id, "pos": "bottom"}
    )
    list_id = lst.get("id") if isinstance(lst, dict) else None
    if not list_id:
        raise CliError(f"[ERROR] Trello did not return an id for new list '{name}'.")
    return str(list_id)


def provision_board(creds, board_name):
    """Create a board without default lists, then To do / Doing / Done in order."""
    board = trello_request(
        "POST", "/boards", creds, {"name": board_name, "defaultLists": False}
    )
    if not isinstance(board, dict) or not board.get("id"):
        raise CliError("[ERROR] Trello did not return an id for the new board.")
    board_id = str(board["id"])
    lists = {}
    for key, list_name in config.BOARD_LISTS:
        lists[key] = _create_list(board_id, list_name, creds)
    return BoardConfig(
        board_id=board_id,
        lists=lists,
        board_url=str(board["url"]) if board.get("url") else None,
    )


def ensure_board(creds, board_name=None):
    """Return the stored BoardConfig, provisioning and saving one if absent.

    Nothing is written until the board and all three lists exist remotely.
    Two processes racing on the first run can both create a board."""
    board = config.load_board_config()
    if board is not None:
        return board
    name = resolve_board_name(board_name)
    if config.RUNTIME_VERBOSE:
        print(f"[clawboard] No board config; creating board '{name}'", file=sys.stderr)
    board = provision_board(creds, name)
    path = config.save_board_config(board)
    if config.RUNTIME_VERBOSE:
        print(f"[clawboard] Wrote board config: {path}", file=sys.stderr)
    return board
