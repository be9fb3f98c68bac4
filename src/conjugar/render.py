from __future__ import annotations

from io import StringIO
from typing import Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import COLUMN_HEADERS, TableRow

STYLES = ("grid", "plain")
# Wide enough that rich never wraps or squeezes a column.
CONSOLE_WIDTH = 10_000


def build_table(rows: Sequence[TableRow], style: str = "grid") -> Table:
    if style == "grid":
        table = Table(box=box.ASCII2, show_header=True)
    elif style == "plain":
        table = Table(box=None, show_header=True, pad_edge=False)
    else:
        raise ValueError(f"Unknown table style {style!r}; expected one of {', '.join(STYLES)}")
    for header in COLUMN_HEADERS:
        table.add_column(Text(header), no_wrap=True, overflow="ignore")
    for row in rows:
        # Text keeps cells verbatim; plain strings would be parsed as markup.
        table.add_row(*(Text(cell) for cell in row.cells()))
    return table


def render(rows: Sequence[TableRow], style: str = "grid") -> str:
    """Format rows as a table headed by tense and the six pronouns.

    Rows keep the order given; nothing is sorted, truncated or wrapped.
    """
    table = build_table(rows, style)
    buffer = StringIO()
    console = Console(
        file=buffer,
        width=CONSOLE_WIDTH,
        color_system=None,
        force_terminal=False,
        highlight=False,
    )
    console.print(table)
    return "\n".join(line.rstrip() for line in buffer.getvalue().splitlines()) + "\n"
