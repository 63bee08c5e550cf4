"""
Shared pure-utility functions for clawboard-cli.

These helpers have no business logic and no side effects.
They are used across board.py, client.py, and formatters.
"""

import re
from datetime import datetime

from clawboard_cli import config
from clawboard_cli.exceptions import ValidationError

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_YMD_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def clamp_int(value, lo, hi):
    """Parse the leading integer of *value* and clamp it to [lo, hi].
    Unparseable input falls back to *lo*."""
    if isinstance(value, bool):
        return lo
    if isinstance(value, int):
        n = value
    else:
        m = _LEADING_INT_RE.match(str(value))
        if not m:
            return lo
        n = int(m.group(1))
    return max(lo, min(hi, n))


def to_iso_due(date_ymd):
    """Turn a zero-padded YYYY-MM-DD date into the ISO due timestamp the API takes.
    Always 09:00 at +09:00; the local timezone is not consulted."""
    date_ymd = (date_ymd or "").strip()
    if not _YMD_RE.fullmatch(date_ymd):
        raise ValidationError(f"[ERROR] Invalid due date (expected YYYY-MM-DD): {date_ymd}")
    try:
        datetime.strptime(date_ymd, "%Y-%m-%d")
    except ValueError as e:
        raise ValidationError(f"[ERROR] Invalid due date '{date_ymd}': {e}") from e
    return f"{date_ymd}{config.DUE_TIME_SUFFIX}"


def _parse_iso_timestamp(ts):
    """Parse an ISO timestamp from the API into a datetime."""
    if not ts:
        return None
    try:
        # Handle both "2026-01-15T10:30:00Z" and "2026-01-15T10:30:00.000Z"
        clean = str(ts).replace("Z", "+00:00")
        return datetime.fromisoformat(clean)
    except (ValueError, TypeError):
        return None
