"""Line classification for pipe tables.

A pipe-row candidate is a line whose trimmed form is bounded by ``|``.
A separator row confirms the candidate above it as a header and encodes
each column's alignment:

    | Left | Center | Right | Plain |
    |:-----|:------:|------:|-------|

"""

from __future__ import annotations

from pipefmt.table import Alignment

# Shortest valid separator cell, e.g. "---" or ":-:"
MIN_SEPARATOR_LENGTH = 3


def split_row(line: str) -> list[str] | None:
    """Split a pipe-row candidate into trimmed fields.

    Returns None when the line is not bounded by pipes or yields no fields.

    Example:
        >>> split_row("| a |b| ")
        ['a', 'b']
        >>> split_row("||")
        ['']
        >>> split_row("a | b") is None
        True
    """
    clean = line.strip()
    if not clean.startswith("|") or not clean.endswith("|"):
        return None

    # The final pipe leaves one empty trailing field; drop it.
    fields = clean[1:].split("|")[:-1]
    if not fields:
        return None
    return [f.strip() for f in fields]


def parse_alignment(cell: str) -> Alignment | None:
    """Resolve a separator cell to its alignment, or None if invalid.

    Example:
        >>> parse_alignment(":-:")
        <Alignment.CENTER: 'center'>
        >>> parse_alignment("--") is None
        True
    """
    cell = cell.strip()
    if len(cell) < MIN_SEPARATOR_LENGTH:
        return None

    left = cell.startswith(":")
    right = cell.endswith(":")
    inner = cell[1 if left else 0 : len(cell) - 1 if right else len(cell)]
    if not inner or inner.strip("-"):
        return None

    if left and right:
        return Alignment.CENTER
    if left:
        return Alignment.LEFT
    if right:
        return Alignment.RIGHT
    return Alignment.NONE


def parse_separator(line: str, expected: int) -> tuple[Alignment, ...] | None:
    """Parse a separator row with exactly ``expected`` cells.

    Returns one alignment per column, or None if the line is not a valid
    separator row for a header of that width.
    """
    cells = split_row(line)
    if cells is None or len(cells) != expected:
        return None

    alignments: list[Alignment] = []
    for cell in cells:
        alignment = parse_alignment(cell)
        if alignment is None:
            return None
        alignments.append(alignment)
    return tuple(alignments)
