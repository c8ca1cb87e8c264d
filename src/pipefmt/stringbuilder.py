"""Output accumulation for formatted documents.

Appends to a list and joins once at the end: O(n) total instead of O(n²)
for repeated string concatenation. Newlines are counted as text is appended
so the current output line is known at any point.

Thread Safety:
OutputBuffer instances are local to each format call.

"""

from __future__ import annotations

from collections.abc import Iterable


class OutputBuffer:
    """String accumulator that tracks how many lines it holds.

    Usage:
            >>> out = OutputBuffer()
            >>> out.append("intro\\n").line_number
            2
            >>> out.extend(["| a |\\n", "|---|\\n"]).build()
            'intro\\n| a |\\n|---|\\n'

    """

    __slots__ = ("_parts", "_newlines")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._newlines = 0

    def append(self, s: str) -> OutputBuffer:
        """Append a string (empty strings are skipped)."""
        if s:
            self._parts.append(s)
            self._newlines += s.count("\n")
        return self

    def extend(self, strings: Iterable[str]) -> OutputBuffer:
        """Append several strings in order."""
        for s in strings:
            self.append(s)
        return self

    @property
    def line_number(self) -> int:
        """1-based number of the line the next appended text starts on."""
        return self._newlines + 1

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)
