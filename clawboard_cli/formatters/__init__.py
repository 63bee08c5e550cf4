"""Output formatting package for clawboard-cli.

Re-exports all public names so consumers can do:
    from clawboard_cli.formatters import format_status
"""

from clawboard_cli.formatters._board import (
    format_card_created,
    format_card_done,
    format_card_moved,
    format_init,
    format_list,
    format_status,
)
from clawboard_cli.formatters._core import output, pretty_print
from clawboard_cli.formatters._markdown import (
    _CONTROL_RE,
    _sanitize_str,
    _trunc,
    fmt_date,
    fmt_num,
    md_escape,
    md_table,
)

__all__ = [
    "_CONTROL_RE",
    "_sanitize_str",
    "_trunc",
    "fmt_date",
    "fmt_num",
    "format_card_created",
    "format_card_done",
    "format_card_moved",
    "format_init",
    "format_list",
    "format_status",
    "md_escape",
    "md_table",
    "output",
    "pretty_print",
]
