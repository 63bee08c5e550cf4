"""Core helpers: client caching, _call dispatcher, response contract."""

from __future__ import annotations

from clawboard_cli import CliError, ClawboardClient, SetupError
from clawboard_cli.config import CONTRACT_SCHEMA_VERSION, MCP_RESPONSE_MODE

_client: ClawboardClient | None = None


def _get_client() -> ClawboardClient:
    """Return a cached ClawboardClient, creating one on first use."""
    global _client
    if _client is None:
        _client = ClawboardClient()
    return _client


def _contract_error(message: str, error_type: str = "error") -> dict:
    """Return a stable MCP error envelope."""
    return {
        "ok": False,
        "schema_version": CONTRACT_SCHEMA_VERSION,
        "error": message,
        "error_detail": {
            "type": error_type,
            "message": message,
        },
    }


def _finalize_tool_result(result):
    """Finalize tool response based on configured MCP response mode.

    Modes:
        - legacy (default): dicts gain ok/schema_version, shapes preserved.
        - envelope: always return {"ok", "schema_version", "data"} for success.
    """
    if isinstance(result, dict) and result.get("ok") is False:
        return result
    if MCP_RESPONSE_MODE == "envelope":
        data = dict(result) if isinstance(result, dict) else result
        if isinstance(data, dict):
            data.pop("ok", None)
        return {"ok": True, "schema_version": CONTRACT_SCHEMA_VERSION, "data": data}
    if isinstance(result, dict):
        out = dict(result)
        out.setdefault("ok", True)
        out.setdefault("schema_version", CONTRACT_SCHEMA_VERSION)
        return out
    return result


_ALLOWED_METHODS = {
    "status",
    "list_cards",
    "add_card",
    "move_card",
    "mark_done",
}


def _call(method_name: str, *args, **kwargs):
    """Call a ClawboardClient method, converting exceptions to error dicts."""
    if method_name not in _ALLOWED_METHODS:
        return _contract_error(f"Unknown method: {method_name}", "error")
    try:
        client = _get_client()
        return getattr(client, method_name)(*args, **kwargs)
    except SetupError as e:
        return _contract_error(str(e), "setup")
    except CliError as e:
        return _contract_error(str(e), "error")
    except Exception as e:
        return _contract_error(f"Unexpected error: {e}", "error")
