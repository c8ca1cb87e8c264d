"""
pipefmt — align the pipe tables of a Markdown document.

Every well-formed pipe table is rewritten with consistent column widths and
its alignment markers preserved. All other text, fenced code included, is
left exactly as it was. Malformed tables are never an error: they are copied
unchanged.

Quick Start:
    >>> from pipefmt import format_document
    >>> print(format_document("| Name | Qty |\\n|:--|--:|\\n| tea | 2 |\\n"), end="")
    | Name | Qty |
    |:-----|----:|
    | tea  | 2   |

    >>> # Report tables that could not be formatted
    >>> from pipefmt import format_with_diagnostics
    >>> result = format_with_diagnostics(source, strict=True)
    >>> for diagnostic in result.diagnostics:
    ...     print(diagnostic)

Installation:
    pip install pipefmt
"""

import logging

from pipefmt.classify import parse_alignment, parse_separator, split_row
from pipefmt.config import (
    FormatConfig,
    format_config_context,
    get_format_config,
    reset_format_config,
    set_format_config,
)
from pipefmt.errors import FormatError, PipefmtError, UsageError
from pipefmt.fences import Span, iter_lines, split_fences
from pipefmt.formatter import (
    Diagnostic,
    FormatResult,
    format_document,
    format_with_diagnostics,
)
from pipefmt.machine import (
    CheckingHeader,
    ParseState,
    ReadingTable,
    RegularText,
    Transition,
    advance,
    finish,
)
from pipefmt.render import render_table
from pipefmt.table import Alignment, Column, Table
from pipefmt.width import display_width

__version__ = "0.1.0"

logging.getLogger("pipefmt").addHandler(logging.NullHandler())

__all__ = [
    # Formatting
    "format_document",
    "format_with_diagnostics",
    "FormatResult",
    "Diagnostic",
    # Configuration
    "FormatConfig",
    "get_format_config",
    "set_format_config",
    "reset_format_config",
    "format_config_context",
    # Building blocks
    "split_fences",
    "iter_lines",
    "Span",
    "split_row",
    "parse_alignment",
    "parse_separator",
    "advance",
    "finish",
    "ParseState",
    "RegularText",
    "CheckingHeader",
    "ReadingTable",
    "Transition",
    "render_table",
    "display_width",
    "Alignment",
    "Column",
    "Table",
    # Errors
    "PipefmtError",
    "FormatError",
    "UsageError",
    "__version__",
]
