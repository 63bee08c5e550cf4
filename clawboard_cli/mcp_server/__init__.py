"""MCP server exposing ClawboardClient methods as tools.

Package structure:
  __init__.py  FastMCP init, register() call, re-exports
  __main__.py  ``python -m clawboard_cli.mcp_server`` entry point
  _core.py     Client caching, _call dispatcher, response contract
  _tools.py    status / list / add / move / done tools

Run: python -m clawboard_cli.mcp_server
Requires: pip install .[mcp]
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from clawboard_cli.mcp_server import _tools

mcp = FastMCP(
    "clawboard",
    instructions=(
        "Trello kanban with three lists: todo, doing, done. "
        "Cards can be referenced by full id, 8-char short link, or short URL. "
        "Due dates are YYYY-MM-DD."
    ),
)

_tools.register(mcp)

from clawboard_cli.mcp_server._core import (  # noqa: E402, F401
    _call,
    _client,
    _contract_error,
    _finalize_tool_result,
    _get_client,
)
from clawboard_cli.mcp_server._tools import (  # noqa: E402, F401
    add_card,
    board_status,
    list_cards,
    mark_done,
    move_card,
)


def main():
    """Run the MCP server (stdio transport)."""
    mcp.run()
