"""Low-level markdown rendering helpers (stdlib only)."""

import re
from datetime import timezone

from clawboard_cli._utils import _parse_iso_timestamp

_CONTROL_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def _trunc(s, maxlen):
    """Truncate string with ellipsis indicator."""
    if not s:
        return ""
    return s[: maxlen - 1] + "…" if len(s) > maxlen else s


def _sanitize_str(s):
    """Strip ANSI escape sequences and control chars from output.
    Preserves newlines (\\n) and tabs (\\t)."""
    if not s:
        return s
    return _CONTROL_RE.sub("", str(s))


def md_escape(s):
    """Make text safe for a single markdown table cell or inline span."""
    if s is None:
        return ""
    text = _sanitize_str(str(s)) or ""
    text = re.sub(r"\s*\n\s*", " ", text)
    return text.replace("\\", "\\\\").replace("|", "\\|").replace("`", "\\`")


def fmt_num(n):
    try:
        return f"{int(n):,}"
    except (TypeError, ValueError):
        return "-"


def fmt_date(ts):
    """Render an API timestamp as 'YYYY-MM-DD HH:MM' UTC, or '-'."""
    dt = _parse_iso_timestamp(ts)
    if dt is None:
        return "-"
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%d %H:%M")


def md_table(columns, rows):
    """Build a markdown table.
    columns: list of (name, align) where align is "left" or "right".
    rows: list of tuples of already-escaped cell strings."""
    header = "| " + " | ".join(name for name, _ in columns) + " |"
    sep = "|" + "|".join("---:" if align == "right" else "---" for _, align in columns) + "|"
    lines = [header, sep]
    for row in rows:
        lines.append("| " + " | ".join(str(v) for v in row) + " |")
    return lines
