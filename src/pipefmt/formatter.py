"""Document-level formatting: fences, state machine and flushing.

Example:
    >>> print(format_document("|a|bb|\\n|-|:--:|\\n"), end="")
    |a|bb|
    |-|:--:|
    >>> print(format_document("|a|bb|\\n|---|:--:|\\n|1|2|\\n"), end="")
    | a | bb |
    |---|:--:|
    | 1 | 2  |
"""

from __future__ import annotations

from dataclasses import dataclass

from pipefmt.config import get_format_config
from pipefmt.fences import iter_lines, split_fences
from pipefmt.machine import ParseState, ReadingTable, RegularText, advance, finish
from pipefmt.stringbuilder import OutputBuffer
from pipefmt.utils.logger import get_logger

logger = get_logger(__name__)

BROKEN_TABLE_MESSAGE = "The table at line {lineno} appears broken, it will not be formatted"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Advisory notice about a table that was left unformatted.

    Attributes:
        lineno: 1-based output line where the table starts
        message: Human readable description
        source_file: Path of the formatted file (optional)

    """

    lineno: int
    message: str
    source_file: str | None = None

    def __str__(self) -> str:
        """Format as ``file:line: message`` or ``line: message``."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}: {self.message}"
        return f"{self.lineno}: {self.message}"


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Formatted text plus any strict-mode diagnostics."""

    text: str
    diagnostics: tuple[Diagnostic, ...] = ()


def format_with_diagnostics(
    source: str,
    *,
    strict: bool | None = None,
    source_file: str | None = None,
) -> FormatResult:
    """Format every pipe table in ``source``.

    Fenced code is copied unchanged. Tables that turn out malformed are
    copied unchanged as well; with ``strict`` each one is reported as a
    Diagnostic. Diagnostics never change the formatted text.

    Args:
        source: Document text
        strict: Collect broken-table diagnostics (None = active FormatConfig)
        source_file: File name used in diagnostics (optional)

    Returns:
        FormatResult with the formatted text and diagnostics
    """
    config = get_format_config()
    if strict is None:
        strict = config.strict

    out = OutputBuffer()
    diagnostics: list[Diagnostic] = []

    for span in split_fences(source):
        if span.is_code:
            out.append(span.text)
            continue

        state: ParseState = RegularText()
        for line in iter_lines(span.text):
            while True:
                step = advance(state, line, newline=config.newline)
                if step.broken:
                    diagnostic = Diagnostic(
                        out.line_number,
                        BROKEN_TABLE_MESSAGE.format(lineno=out.line_number),
                        source_file,
                    )
                    logger.debug("Leaving broken table at line %d unformatted", diagnostic.lineno)
                    if strict:
                        diagnostics.append(diagnostic)
                elif step.reprocess and isinstance(state, ReadingTable):
                    logger.debug(
                        "Formatted %d-row table at line %d", state.table.row_count, out.line_number
                    )
                out.extend(step.emitted)
                state = step.state
                if not step.reprocess:
                    break
        # Tables never continue past a fence.
        out.extend(finish(state))

    return FormatResult(out.build(), tuple(diagnostics))


def format_document(source: str, *, strict: bool | None = None) -> str:
    """Format every pipe table in ``source`` and return the new text."""
    return format_with_diagnostics(source, strict=strict).text
