"""Split a document into prose and fenced-code spans.

Spans alternate on every literal triple backtick, starting with prose.
Code spans keep their fence markers, so joining all spans reproduces the
document exactly, including an unterminated final fence.

Example:
    >>> [s.text for s in split_fences("a\\n```\\n|x|\\n```\\nb")]
    ['a\\n', '```\\n|x|\\n```', '\\nb']
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

FENCE = "```"


@dataclass(frozen=True, slots=True)
class Span:
    """A run of document text.

    Attributes:
        text: Exact source text of the span
        is_code: True for fenced code, fence markers included

    """

    text: str
    is_code: bool = False


def split_fences(source: str) -> Iterator[Span]:
    """Yield alternating prose and code spans of ``source``.

    Prose spans may be empty; code spans always start with a fence.
    """
    parts = source.split(FENCE)
    last = len(parts) - 1
    for index, part in enumerate(parts):
        if index % 2 == 0:
            yield Span(part)
        elif index < last:
            yield Span(f"{FENCE}{part}{FENCE}", is_code=True)
        else:
            yield Span(f"{FENCE}{part}", is_code=True)


def iter_lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text`` with their ``\\n`` endings attached.

    Only ``\\n`` separates lines; a ``\\r`` before it stays part of the line.
    The last line has no ending when the text does not end with a newline.
    """
    start = 0
    while start < len(text):
        end = text.find("\n", start)
        if end == -1:
            yield text[start:]
            return
        yield text[start : end + 1]
        start = end + 1
