"""Tests for the table model."""

import pytest

from pipefmt.errors import FormatError
from pipefmt.table import Alignment, Column, Table


class TestAlignment:
    @pytest.mark.parametrize(
        ("alignment", "left", "right"),
        [
            (Alignment.NONE, "-", "-"),
            (Alignment.LEFT, ":", "-"),
            (Alignment.CENTER, ":", ":"),
            (Alignment.RIGHT, "-", ":"),
        ],
    )
    def test_markers(self, alignment: Alignment, left: str, right: str) -> None:
        assert alignment.left_marker == left
        assert alignment.right_marker == right


class TestTable:
    def test_from_header(self) -> None:
        table = Table.from_header(["A", "B"], (Alignment.LEFT, Alignment.NONE))

        assert table.columns == [
            Column(Alignment.LEFT, ["A"]),
            Column(Alignment.NONE, ["B"]),
        ]
        assert table.column_count == 2
        assert table.row_count == 1

    def test_from_header_length_mismatch(self) -> None:
        with pytest.raises(FormatError):
            Table.from_header(["A", "B"], (Alignment.NONE,))

    def test_append_row_grows_every_column(self) -> None:
        table = Table.from_header(["A", "B"], (Alignment.NONE, Alignment.NONE))
        table.append_row(["1", "2"])
        table.append_row(["3", "4"])

        assert [len(column.cells) for column in table.columns] == [3, 3]
        assert list(table.rows()) == [["A", "B"], ["1", "2"], ["3", "4"]]

    def test_append_row_wrong_width_is_rejected(self) -> None:
        table = Table.from_header(["A", "B"], (Alignment.NONE, Alignment.NONE))

        with pytest.raises(FormatError, match="3 cells"):
            table.append_row(["1", "2", "3"])
        assert table.row_count == 1

    def test_with_row_copies(self) -> None:
        table = Table.from_header(["A"], (Alignment.CENTER,))
        grown = table.with_row(["1"])

        assert list(grown.rows()) == [["A"], ["1"]]
        assert grown.columns[0].alignment is Alignment.CENTER
        assert list(table.rows()) == [["A"]]

    def test_with_row_wrong_width_is_rejected(self) -> None:
        table = Table.from_header(["A"], (Alignment.NONE,))
        with pytest.raises(FormatError):
            table.with_row(["1", "2"])

    def test_empty_table(self) -> None:
        table = Table([])
        assert table.row_count == 0
        assert list(table.rows()) == []
