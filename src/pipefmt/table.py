"""In-memory model of a pipe table under construction.

A table is a list of columns. Column ``i`` holds the header cell at index 0
followed by one cell per body row, so all columns grow together.

Example:
    >>> table = Table.from_header(["A", "B"], (Alignment.NONE, Alignment.RIGHT))
    >>> table.append_row(["1", "2"])
    >>> table.row_count
    2
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

from pipefmt.errors import FormatError


class Alignment(Enum):
    """Column alignment encoded by the separator row.

    NONE renders like LEFT but keeps plain dash borders.

    """

    NONE = "none"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @property
    def left_marker(self) -> str:
        """Border character on the left of a separator cell."""
        return ":" if self in (Alignment.LEFT, Alignment.CENTER) else "-"

    @property
    def right_marker(self) -> str:
        """Border character on the right of a separator cell."""
        return ":" if self in (Alignment.RIGHT, Alignment.CENTER) else "-"


@dataclass(slots=True)
class Column:
    """One pipe-delimited field of a table.

    Attributes:
        alignment: Alignment parsed from the separator cell
        cells: Header cell followed by body cells in document order

    """

    alignment: Alignment
    cells: list[str] = field(default_factory=list)


@dataclass(slots=True)
class Table:
    """Columns of a table whose header and separator rows are confirmed."""

    columns: list[Column]

    @classmethod
    def from_header(
        cls, headers: Sequence[str], alignments: Sequence[Alignment]
    ) -> Table:
        """Build a table with one column per header field."""
        if len(headers) != len(alignments):
            raise FormatError(
                f"{len(headers)} header cells but {len(alignments)} alignments"
            )
        return cls([Column(align, [header]) for header, align in zip(headers, alignments)])

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def row_count(self) -> int:
        """Number of rows including the header."""
        return len(self.columns[0].cells) if self.columns else 0

    def append_row(self, cells: Sequence[str]) -> None:
        """Append one body row, one cell to every column.

        Raises:
            FormatError: If the row width differs from the column count.
        """
        if len(cells) != len(self.columns):
            raise FormatError(
                f"row has {len(cells)} cells, table has {len(self.columns)} columns"
            )
        for column, cell in zip(self.columns, cells):
            column.cells.append(cell)

    def with_row(self, cells: Sequence[str]) -> Table:
        """Return a copy of the table with one more body row.

        Raises:
            FormatError: If the row width differs from the column count.
        """
        table = Table([Column(column.alignment, list(column.cells)) for column in self.columns])
        table.append_row(cells)
        return table

    def rows(self) -> Iterator[list[str]]:
        """Yield rows (header first) as lists of cells."""
        for index in range(self.row_count):
            yield [column.cells[index] for column in self.columns]
