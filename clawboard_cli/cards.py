"""
Card-level API calls and card-reference resolution for clawboard-cli.

Users paste short codes, short URLs and full ids interchangeably; every card
command goes through resolve_card_id() before touching the API.
"""

import re
import urllib.parse

from clawboard_cli.api import trello_request
from clawboard_cli.exceptions import ResolutionError

_SHORT_LINK_RE = re.compile(r"[a-zA-Z0-9]{8}", re.ASCII)
_OBJECT_ID_RE = re.compile(r"[a-f0-9]{24}", re.ASCII)
_UUID_LIKE_RE = re.compile(r"[0-9a-fA-F-]{36}", re.ASCII)

LIST_CARD_FIELDS = "id,name,shortUrl,due,dateLastActivity"


# ---------------------------------------------------------------------------
# Reference resolution
# ---------------------------------------------------------------------------


def extract_short_link(ref):
    """Return the 8-char short link in *ref*, or None.

    Accepts a bare short link (``yuQBBlHs``) or a card URL such as
    ``https://trello.com/c/yuQBBlHs/1-title``.
    """
    s = (ref or "").strip()
    if _SHORT_LINK_RE.fullmatch(s):
        return s
    try:
        parsed = urllib.parse.urlsplit(s)
    except ValueError:
        return None
    if not parsed.scheme or not parsed.netloc:
        return None
    parts = [p for p in parsed.path.split("/") if p]
    if "c" in parts:
        idx = parts.index("c")
        if idx + 1 < len(parts) and _SHORT_LINK_RE.fullmatch(parts[idx + 1]):
            return parts[idx + 1]
    return None


def is_canonical_id(ref):
    s = (ref or "").strip()
    return bool(_OBJECT_ID_RE.fullmatch(s) or _UUID_LIKE_RE.fullmatch(s))


def resolve_card_id(ref, creds):
    """Resolve a short link, short URL, or full card id to the canonical id.

    Short links cost one GET (``/cards/{shortLink}`` accepts them directly).
    Full ids are returned as-is without a round trip."""
    short_link = extract_short_link(ref)
    if short_link:
        card = trello_request(
            "GET", f"/cards/{urllib.parse.quote(short_link, safe='')}", creds, {"fields": "id"}
        )
        if isinstance(card, dict) and card.get("id"):
            return str(card["id"])
    if is_canonical_id(ref):
        return ref.strip()
    raise ResolutionError(ref)


# ---------------------------------------------------------------------------
# Card operations
# ---------------------------------------------------------------------------


def _as_list(result):
    return result if isinstance(result, list) else []


def count_list_cards(list_id, creds):
    return len(_as_list(trello_request("GET", f"/lists/{list_id}/cards", creds, {"fields": "id"})))


def get_list_cards(list_id, creds, fields=LIST_CARD_FIELDS):
    return _as_list(trello_request("GET", f"/lists/{list_id}/cards", creds, {"fields": fields}))


def create_card(list_id, title, creds, desc=None, due=None):
    """POST a new card at the top of *list_id*. *due* must already be ISO."""
    return trello_request(
        "POST",
        "/cards",
        creds,
        {
            "idList": list_id,
            "name": title,
            "desc": desc or "",
            "due": due,
            "pos": "top",
        },
    )


def move_card(card_id, list_id, creds):
    return trello_request(
        "PUT", f"/cards/{urllib.parse.quote(card_id, safe='')}", creds, {"idList": list_id}
    )
