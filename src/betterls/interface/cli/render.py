from __future__ import annotations

"""
Listing Presentation.

Renders entry records as a rounded-border table or as a JSON array, and
prints attention notices. Rendering never touches the filesystem.
"""

import json
import sys
from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from betterls.domain.listing_models import EntryRecord
from betterls.utils.i18n import i18n

NOTICE_STYLE = "red"
UNBOUNDED_WIDTH = 1_000_000


def make_console() -> Console:
    """
    Build the output console.

    Redirected or captured output gets a wide console without styling so
    that columns are not wrapped and no ANSI codes leak into files.
    """
    if sys.stdout.isatty():
        return Console()
    return Console(width=200, force_terminal=False, no_color=True, highlight=False, soft_wrap=False)


def build_table(records: Sequence[EntryRecord]) -> Table:
    """Table with Name, Type, Size and Last Modified columns."""
    table = Table(box=box.ROUNDED, show_lines=False)
    table.add_column(i18n.t("cli.table.name"), overflow="fold")
    table.add_column(i18n.t("cli.table.type"), no_wrap=True)
    table.add_column(i18n.t("cli.table.size"), no_wrap=True)
    table.add_column(i18n.t("cli.table.modified"), no_wrap=True)

    for r in records:
        # Text cells: file names are literal, never console markup
        table.add_row(Text(r.name), Text(str(r.kind)), Text(r.size), Text(r.modified))

    return table


def render_table(records: Sequence[EntryRecord], console: Optional[Console] = None) -> None:
    """
    Print records as a table.

    On a terminal, long names fold inside their cell. Redirected output
    is widened to the table's natural width so every row stays on one line.
    """
    console = console or make_console()
    table = build_table(records)
    if not console.is_terminal:
        natural = console.measure(table, options=console.options.update_width(UNBOUNDED_WIDTH))
        console.width = max(console.width, natural.maximum)
    console.print(table)


def render_json(records: Sequence[EntryRecord], indent: Optional[int] = None) -> str:
    """
    Serialize records to a JSON array.

    Args:
        records: Records to serialize.
        indent: Spaces per level; None produces compact output.

    Returns:
        str: JSON text with name/ftype/size/modified objects.
    """
    payload = [r.to_dict() for r in records]
    if indent is None:
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(payload, ensure_ascii=False, indent=indent)


def print_notice(message: str, console: Optional[Console] = None) -> None:
    """Print a user-facing message in the attention color."""
    (console or make_console()).print(Text(message, style=NOTICE_STYLE))
