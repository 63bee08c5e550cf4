"""
clawboard-cli: manage a todo/doing/done Trello board from the terminal
"""

import argparse
import json
import sys

from clawboard_cli import config
from clawboard_cli.commands import (
    cmd_add,
    cmd_done,
    cmd_init,
    cmd_list,
    cmd_move,
    cmd_status,
)
from clawboard_cli.exceptions import CliError

HELP_TEXT = """\
Usage: clawboard <command> [args...]

Global flags:
  --json                  Output raw JSON instead of markdown
  --pretty                Pretty-print JSON (only with --json)
  --verbose, -v           Enable HTTP request logging on stderr
  --version               Show version number

Commands:
  init                    - Store credentials (if missing) and create the board (if missing)
    --key <key>             Trello API key
    --token <token>         Trello API token
    --name <board name>     Board name (default: CLAWBOARD_NAME or Clawboard)
  status                  - Card counts per list
  list <todo|doing|done>  - List cards in a list
    --limit <n>             Max cards, 1-200 (default: 20)
  add <title>             - Add a card
    --desc <text>           Description
    --due <YYYY-MM-DD>      Due date (stored as 09:00 +09:00 that day)
    --list <todo|doing|done> Target list (default: todo)
  move <card> <list>      - Move a card (id, short link, or short URL) to a list
  done <card>             - Move a card to Done
"""


# ---------------------------------------------------------------------------
# Global flag extraction (before argparse, so --json works after subcommand)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (format_str, pretty, verbose, remaining_argv).
    Handles --version directly.
    """
    fmt = "markdown"
    pretty = False
    verbose = False
    remaining = []
    for arg in argv:
        if arg == "--version":
            print(f"clawboard-cli {config.VERSION}")
            sys.exit(0)
        elif arg == "--json":
            fmt = "json"
        elif arg == "--pretty":
            pretty = True
        elif arg in ("--verbose", "-v"):
            verbose = True
        else:
            remaining.append(arg)
    return fmt, pretty, verbose, remaining


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _SubcommandParser(argparse.ArgumentParser):
    """Subparser that raises CliError instead of printing full help text."""

    def error(self, message):
        raise CliError(f"[ERROR] {message}")


def build_parser():
    parser = _SubcommandParser(
        prog="clawboard",
        description="Manage a todo/doing/done Trello board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    sub = parser.add_subparsers(dest="command", parser_class=_SubcommandParser)

    # --- init ---
    p = sub.add_parser("init")
    p.add_argument("--key")
    p.add_argument("--token")
    p.add_argument("--name")
    p.set_defaults(func=cmd_init)

    # --- status ---
    sub.add_parser("status").set_defaults(func=cmd_status)

    # --- list ---
    p = sub.add_parser("list")
    p.add_argument("list_key", metavar="todo|doing|done")
    # Kept as a string; the client clamps it (non-numeric means 1).
    p.add_argument("--limit", default=str(config.LIST_LIMIT_DEFAULT))
    p.set_defaults(func=cmd_list)

    # --- add ---
    p = sub.add_parser("add")
    p.add_argument("title")
    p.add_argument("--desc")
    p.add_argument("--due", metavar="YYYY-MM-DD")
    p.add_argument("--list", default="todo", metavar="todo|doing|done")
    p.set_defaults(func=cmd_add)

    # --- move ---
    p = sub.add_parser("move")
    p.add_argument("card_ref", metavar="card")
    p.add_argument("list_key", metavar="todo|doing|done")
    p.set_defaults(func=cmd_move)

    # --- done ---
    p = sub.add_parser("done")
    p.add_argument("card_ref", metavar="card")
    p.set_defaults(func=cmd_done)

    # --- version (bare word) ---
    sub.add_parser("version").set_defaults(func=None)

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


def _error_type_from_message(message):
    if message.startswith("[AUTH_FAILED]"):
        return "auth_failed"
    if message.startswith("[SETUP_NEEDED]"):
        return "setup_needed"
    if message.startswith("[ERROR]"):
        return "error"
    return "cli_error"


def _emit_cli_error(err, fmt):
    msg = str(err)
    if fmt == "json":
        error = {
            "type": _error_type_from_message(msg),
            "message": msg,
            "exit_code": getattr(err, "exit_code", 1),
        }
        status = getattr(err, "status", None)
        if status is not None:
            error["status"] = status
            error["body"] = getattr(err, "body", None)
        payload = {
            "ok": False,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "error": error,
        }
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        return
    print(msg, file=sys.stderr)


def main():
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    if len(sys.argv) < 2:
        print(HELP_TEXT)
        sys.exit(0)

    # Extract global flags from anywhere in argv
    fmt, pretty, verbose, remaining_argv = _extract_global_flags(sys.argv[1:])
    config.RUNTIME_VERBOSE = verbose
    if verbose:
        config.HTTP_LOG_ENABLED = True

    if not remaining_argv:
        print(HELP_TEXT)
        sys.exit(0)

    try:
        parser = build_parser()
        ns = parser.parse_args(remaining_argv)
        ns.format = fmt  # inject global format flags
        ns.pretty = pretty

        if ns.show_help or not ns.command:
            print(HELP_TEXT)
            sys.exit(0)

        if ns.command == "version":
            print(f"clawboard-cli {config.VERSION}")
            sys.exit(0)

        handler = getattr(ns, "func", None)
        if handler:
            handler(ns)
        else:
            raise CliError(f"[ERROR] Unknown command: {ns.command}")

    except CliError as e:
        _emit_cli_error(e, fmt)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
