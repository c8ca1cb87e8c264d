"""Line-by-line state machine that finds and formats pipe tables.

The parser is always in exactly one of three states:

- RegularText: outside any candidate table
- CheckingHeader: a pipe row was seen; the next line must be a separator
- ReadingTable: header and separator confirmed; rows accumulate until a
  line ends the table

Each call to ``advance`` is a pure step from (state, line) to a Transition.
Lines are passed with their line ending attached, so text emitted verbatim
keeps its original bytes.

ReadingTable owns a speculative buffer of the raw lines consumed so far.
A line that ends the table commits it (the table is rendered); a row with
the wrong number of cells discards it (the buffer is emitted unchanged).
In both cases, and when a header is not followed by a separator, the
transition asks for the same line to be processed again in RegularText so
that it can start a new table.

Example:
    >>> state = RegularText()
    >>> for line in ["| a |\\n", "|---|\\n"]:
    ...     state = advance(state, line).state
    >>> "".join(finish(state))
    '| a |\\n|---|\\n'
"""

from __future__ import annotations

from dataclasses import dataclass

from pipefmt.classify import parse_separator, split_row
from pipefmt.errors import FormatError
from pipefmt.render import render_table
from pipefmt.table import Table


@dataclass(frozen=True, slots=True)
class RegularText:
    """Not inside any candidate table."""


@dataclass(frozen=True, slots=True)
class CheckingHeader:
    """A pipe row is waiting to be confirmed by a separator row.

    Attributes:
        source_header: Raw header line, line ending included
        headers: Trimmed header fields

    """

    source_header: str
    headers: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ReadingTable:
    """Header and separator confirmed; body rows accumulate.

    Each accepted row produces a new ReadingTable; earlier states stay valid.

    Attributes:
        table: Columns parsed so far
        source_lines: Raw lines consumed so far (header, separator, rows)
        newline: Line ending used when the table is rendered

    """

    table: Table
    source_lines: tuple[str, ...]
    newline: str = "\n"


ParseState = RegularText | CheckingHeader | ReadingTable


@dataclass(frozen=True, slots=True)
class Transition:
    """Result of feeding one line to the state machine.

    Attributes:
        state: State after the step
        emitted: Text chunks to append to the output, in order
        reprocess: Feed the same line again, in ``state``
        broken: A table was abandoned because a row had the wrong width

    """

    state: ParseState
    emitted: tuple[str, ...] = ()
    reprocess: bool = False
    broken: bool = False


def line_ending(line: str) -> str:
    """Return the line ending of ``line``, defaulting to ``"\\n"``."""
    return "\r\n" if line.endswith("\r\n") else "\n"


def advance(state: ParseState, line: str, *, newline: str | None = None) -> Transition:
    """Feed one line to the state machine.

    Args:
        state: Current parser state
        line: Raw line, line ending included
        newline: Line ending for tables confirmed by this step; None keeps
            the header line's own ending

    Returns:
        Transition describing the new state and any emitted text
    """
    match state:
        case RegularText():
            return _regular_text(line)
        case CheckingHeader():
            return _checking_header(state, line, newline)
        case ReadingTable():
            return _reading_table(state, line)
        case _:
            raise FormatError(f"unknown parser state {state!r}")


def finish(state: ParseState) -> tuple[str, ...]:
    """Flush whatever ``state`` still holds at the end of the text."""
    match state:
        case RegularText():
            return ()
        case CheckingHeader(source_header=source_header):
            return (source_header,)
        case ReadingTable(table=table, newline=newline):
            return (render_table(table, newline),)
        case _:
            raise FormatError(f"unknown parser state {state!r}")


def _regular_text(line: str) -> Transition:
    headers = split_row(line)
    if headers is None:
        return Transition(RegularText(), (line,))
    return Transition(CheckingHeader(line, tuple(headers)))


def _checking_header(state: CheckingHeader, line: str, newline: str | None) -> Transition:
    alignments = parse_separator(line, len(state.headers))
    if alignments is None:
        return Transition(RegularText(), (state.source_header,), reprocess=True)

    table = Table.from_header(state.headers, alignments)
    return Transition(
        ReadingTable(
            table,
            (state.source_header, line),
            newline or line_ending(state.source_header),
        )
    )


def _reading_table(state: ReadingTable, line: str) -> Transition:
    cells = split_row(line)
    if cells is None:
        return Transition(
            RegularText(), (render_table(state.table, state.newline),), reprocess=True
        )

    if len(cells) != state.table.column_count:
        return Transition(
            RegularText(), state.source_lines, reprocess=True, broken=True
        )

    return Transition(
        ReadingTable(state.table.with_row(cells), (*state.source_lines, line), state.newline)
    )
