"""Board and card formatters (markdown)."""

from clawboard_cli import config
from clawboard_cli.formatters._markdown import _trunc, fmt_date, fmt_num, md_escape, md_table


def _join(lines):
    return "\n".join(lines)


def format_init(result):
    board = result.get("board") or {}
    lines = ["# Clawboard init", ""]
    if result.get("credentials_path"):
        lines.append(f"- credentials: {result['credentials_path']}")
    if board.get("boardUrl"):
        lines.append(f"- board: {board['boardUrl']}")
    lines.append(f"- boardId: `{md_escape(board.get('boardId', '-'))}`")
    lines.append("- lists: todo/doing/done ready")
    return _join(lines)


def format_status(result):
    lists = result.get("lists") or {}
    lines = ["# Clawboard status", ""]
    if result.get("boardUrl"):
        lines.append(f"- board: {result['boardUrl']}")
        lines.append("")
    rows = [
        (md_escape(title), fmt_num((lists.get(key) or {}).get("count", 0)))
        for key, title in config.BOARD_LISTS
    ]
    lines.extend(md_table([("list", "left"), ("count", "right")], rows))
    return _join(lines)


def format_list(result):
    cards = result.get("cards") or []
    lines = [f"# Clawboard list: {md_escape(result.get('list', ''))}", ""]
    rows = []
    for i, card in enumerate(cards, start=1):
        card = card if isinstance(card, dict) else {}
        title = md_escape(_trunc(str(card.get("name") or ""), 80)) or "-"
        rows.append(
            (
                str(i),
                title,
                md_escape(card.get("shortUrl") or "-"),
                md_escape(fmt_date(card.get("due"))),
                md_escape(fmt_date(card.get("dateLastActivity"))),
            )
        )
    lines.extend(
        md_table(
            [
                ("#", "right"),
                ("title", "left"),
                ("shortUrl", "left"),
                ("due", "left"),
                ("lastActivity", "left"),
            ],
            rows,
        )
    )
    return _join(lines)


def _card_lines(card):
    lines = []
    if card.get("name"):
        lines.append(f"- title: {md_escape(card['name'])}")
    if card.get("shortUrl"):
        lines.append(f"- url: {card['shortUrl']}")
    return lines


def format_card_created(card, title=None):
    lines = ["# Card created", ""]
    lines.append(f"- title: **{md_escape(card.get('name') or title or '-')}**")
    if card.get("shortUrl"):
        lines.append(f"- url: {card['shortUrl']}")
    if card.get("id"):
        lines.append(f"- id: `{md_escape(card['id'])}`")
    return _join(lines)


def format_card_moved(card, list_key):
    lines = ["# Card moved", "", f"- to: **{md_escape(list_key)}**"]
    lines.extend(_card_lines(card))
    return _join(lines)


def format_card_done(card):
    lines = ["# Card moved to Done", ""]
    lines.extend(_card_lines(card))
    return _join(lines)
