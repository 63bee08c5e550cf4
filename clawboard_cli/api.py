"""
HTTP request layer, security helpers, and credential checks for clawboard-cli.
"""

import json
import re
import sys
import time
import urllib.error
import urllib.parse
import urllib.request

from clawboard_cli import config
from clawboard_cli.exceptions import ApiError, AuthError, CliError, HTTPError

_AUTH_HTTP_CODES = frozenset({401, 403})
_SECRET_PARAMS = frozenset({"key", "token"})


# ---------------------------------------------------------------------------
# Security helpers
# ---------------------------------------------------------------------------


def _mask_token(token):
    """Show only first 6 chars of a token for safe logging."""
    return token[:6] + "..." if len(token) > 6 else token


def _sanitize_error(body, max_len=500):
    """Truncate and clean error body for safe display."""
    if not body:
        return ""
    cleaned = re.sub(r"<[^>]+>", "", body)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    if len(cleaned) > max_len:
        return cleaned[:max_len] + "... [truncated]"
    return cleaned


def _sanitize_url_for_log(url):
    """Mask credential query params in URLs before logging or display."""
    parsed = urllib.parse.urlsplit(url)
    if not parsed.query:
        return url
    pairs = urllib.parse.parse_qsl(parsed.query, keep_blank_values=True)
    masked = []
    for key, value in pairs:
        if key.lower() in _SECRET_PARAMS:
            masked.append((key, "***"))
        else:
            masked.append((key, value))
    safe_query = urllib.parse.urlencode(masked, doseq=True)
    return urllib.parse.urlunsplit(
        (parsed.scheme, parsed.netloc, parsed.path, safe_query, parsed.fragment)
    )


def _log_http_event(**fields):
    """Emit structured HTTP logs to stderr when enabled."""
    if not config.HTTP_LOG_ENABLED:
        return
    print("[HTTP] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _error_envelope(message, status=None, detail=None, tag="ERROR"):
    """Build a consistent CLI-safe HTTP error message."""
    suffix = f" (status={status})" if status is not None else ""
    body = f"[{tag}] {message}{suffix}"
    if detail:
        body += f"\n{detail}"
    return body


def _parse_body(text):
    """JSON-decode a response body, falling back to the raw text."""
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


# ---------------------------------------------------------------------------
# HTTP request layer
# ---------------------------------------------------------------------------


def _http_request(url, data=None, headers=None, method="GET"):
    """Make a single HTTP request.
    Returns the parsed body (JSON, or raw text when it is not JSON).
    Raises HTTPError for HTTP errors (caller maps them to ApiError).
    Raises CliError on network/timeout errors. Never retries."""
    body = json.dumps(data).encode("utf-8") if data is not None else None
    safe_url = _sanitize_url_for_log(url)
    timeout = max(1, config.HTTP_TIMEOUT_SECONDS)
    start = time.perf_counter()
    req = urllib.request.Request(url, data=body, headers=headers or {}, method=method)
    _log_http_event(phase="request", method=method, url=safe_url, timeout_seconds=timeout)
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            raw = resp.read(config.HTTP_MAX_RESPONSE_BYTES + 1)
            if len(raw) > config.HTTP_MAX_RESPONSE_BYTES:
                raise CliError(
                    "[ERROR] Response too large from Trello API "
                    f"(>{config.HTTP_MAX_RESPONSE_BYTES} bytes)."
                )
            _log_http_event(
                phase="response",
                method=method,
                url=safe_url,
                status=getattr(resp, "status", 200),
                bytes=len(raw),
                latency_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            return _parse_body(raw.decode("utf-8", errors="replace"))
    except urllib.error.HTTPError as e:
        error_body = (
            e.read(config.HTTP_MAX_RESPONSE_BYTES).decode("utf-8", errors="replace")
            if e.fp
            else ""
        )
        _log_http_event(
            phase="response",
            method=method,
            url=safe_url,
            status=e.code,
            latency_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        raise HTTPError(e.code, e.reason, error_body, headers=e.headers) from e
    except TimeoutError as e:
        _log_http_event(phase="network_error", method=method, url=safe_url, error="timeout")
        raise CliError(
            _error_envelope(f"Request timed out after {timeout} seconds. Is Trello reachable?")
        ) from e
    except urllib.error.URLError as e:
        _log_http_event(
            phase="network_error", method=method, url=safe_url, error=f"url_error: {e.reason}"
        )
        raise CliError(_error_envelope(f"Connection failed: {e.reason}")) from e


def _query_value(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_url(path, creds, params=None):
    """Absolute API URL with credentials and non-None params in the query string."""
    pairs = [("key", creds.key), ("token", creds.token)]
    for name, value in (params or {}).items():
        if value is None:
            continue
        pairs.append((name, _query_value(value)))
    return f"{config.API_BASE}/{path.lstrip('/')}?{urllib.parse.urlencode(pairs)}"


def trello_request(method, path, creds, params=None, body=None):
    """Make an authenticated request against the Trello REST API.

    Credentials travel as ``key``/``token`` query params on every call.
    Returns whatever the service sent back, parsed as JSON when possible;
    callers treat every field as optional."""
    url = build_url(path, creds, params)
    headers = {"Accept": "application/json"}
    if body is not None:
        headers["Content-Type"] = "application/json"
    try:
        return _http_request(url, body, headers, method)
    except HTTPError as e:
        safe_url = _sanitize_url_for_log(url)
        parsed = _parse_body(e.body)
        detail = _sanitize_error(e.body)
        if e.code in _AUTH_HTTP_CODES:
            raise AuthError(
                _error_envelope(
                    f"HTTP {e.code} {e.reason} for {safe_url}",
                    detail=detail,
                    tag="AUTH_FAILED",
                ),
                status=e.code,
                body=parsed,
                url=safe_url,
            ) from e
        raise ApiError(
            _error_envelope(f"HTTP {e.code} {e.reason} for {safe_url}", detail=detail),
            status=e.code,
            body=parsed,
            url=safe_url,
        ) from e


# ---------------------------------------------------------------------------
# Credential validation
# ---------------------------------------------------------------------------


def check_credentials(creds):
    """Ask the service who we are. Returns {ok, member} or {ok: False, error}."""
    try:
        me = trello_request("GET", "/members/me", creds, {"fields": "id,username,fullName"})
    except CliError as e:
        return {"ok": False, "error": str(e)}
    if not isinstance(me, dict):
        me = {}
    return {
        "ok": True,
        "member": {
            "id": me.get("id"),
            "username": me.get("username"),
            "fullName": me.get("fullName"),
        },
    }
