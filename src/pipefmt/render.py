"""Canonical text rendering of a completed pipe table.

Every column is as wide as its widest cell (at least one column), cells get
exactly one leading space and are right-padded to the column width plus one
trailing space:

    | Name | Qty |
    |:-----|----:|
    | tea  | 2   |

Alignment only shows up in the separator row; cell text is never moved.
"""

from __future__ import annotations

from collections.abc import Sequence

from pipefmt.errors import FormatError
from pipefmt.table import Column, Table
from pipefmt.width import display_width


def column_width(column: Column) -> int:
    """Display width of the widest cell, with a floor of 1."""
    return max([1, *(display_width(cell.strip()) for cell in column.cells)])


def pad_cell(content: str, width: int) -> str:
    """Render cell content as ``" " + content`` padded to ``width + 2`` columns."""
    content = content.strip()
    return f" {content}{' ' * (width + 1 - display_width(content))}"


def render_row(cells: Sequence[str], widths: Sequence[int], newline: str = "\n") -> str:
    """Render one header or body row."""
    parts = ["|"]
    for cell, width in zip(cells, widths):
        parts.append(pad_cell(cell, width))
        parts.append("|")
    parts.append(newline)
    return "".join(parts)


def render_separator(table: Table, widths: Sequence[int], newline: str = "\n") -> str:
    """Render the separator row with each column's alignment markers."""
    parts = ["|"]
    for column, width in zip(table.columns, widths):
        align = column.alignment
        parts.append(f"{align.left_marker}{'-' * width}{align.right_marker}|")
    parts.append(newline)
    return "".join(parts)


def render_table(table: Table, newline: str = "\n") -> str:
    """Render ``table`` as aligned pipe-table text.

    Args:
        table: Table with at least the header row
        newline: Line ending appended to every row

    Returns:
        Header row, separator row, then body rows, each ending in ``newline``
    """
    if not table.columns:
        raise FormatError("cannot render a table without columns")

    widths = [column_width(column) for column in table.columns]
    rows = table.rows()

    lines = [render_row(next(rows), widths, newline), render_separator(table, widths, newline)]
    lines.extend(render_row(row, widths, newline) for row in rows)
    return "".join(lines)
