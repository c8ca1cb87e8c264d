"""Display width of text in fixed-width terminal columns.

East Asian wide and full-width characters occupy two columns, combining
marks occupy none.

Example:
    >>> display_width("abc")
    3
    >>> display_width("日本")
    4
"""

from __future__ import annotations

from wcwidth import wcswidth


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies.

    wcswidth returns -1 when the text holds non-printable characters; the
    character count is used instead so the result stays stable.
    """
    width = wcswidth(text)
    return width if width >= 0 else len(text)
