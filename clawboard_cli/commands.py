"""
Command implementations for clawboard-cli.
Each cmd_*() function receives an argparse.Namespace and handles one CLI command.

Business logic lives in client.py (ClawboardClient). These thin wrappers
handle argparse → keyword args, format selection, and formatter dispatch.
"""

import sys

from clawboard_cli.client import ClawboardClient
from clawboard_cli.formatters import (
    format_card_created,
    format_card_done,
    format_card_moved,
    format_init,
    format_list,
    format_status,
    output,
)


def _get_client(board_name=None):
    return ClawboardClient(board_name=board_name)


def _out(ns, data, formatter):
    output(data, formatter, ns.format, pretty=getattr(ns, "pretty", False))


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------


def cmd_init(ns):
    result = _get_client(board_name=ns.name).init(key=ns.key, token=ns.token)
    if result.get("credentials_path") and ns.format != "json":
        print(f"[clawboard] Wrote credentials: {result['credentials_path']}", file=sys.stderr)
    _out(ns, result, format_init)


# ---------------------------------------------------------------------------
# Read commands
# ---------------------------------------------------------------------------


def cmd_status(ns):
    _out(ns, _get_client().status(), format_status)


def cmd_list(ns):
    _out(ns, _get_client().list_cards(ns.list_key, limit=ns.limit), format_list)


# ---------------------------------------------------------------------------
# Mutation commands
# ---------------------------------------------------------------------------


def cmd_add(ns):
    card = _get_client().add_card(ns.title, desc=ns.desc, due=ns.due, list_key=ns.list)
    _out(ns, card, lambda c: format_card_created(c, title=ns.title))


def cmd_move(ns):
    card = _get_client().move_card(ns.card_ref, ns.list_key)
    _out(ns, card, lambda c: format_card_moved(c, ns.list_key))


def cmd_done(ns):
    _out(ns, _get_client().mark_done(ns.card_ref), format_card_done)
