"""Exception classes for pipefmt.

Malformed tables are never errors: they fall back to verbatim output.
These exceptions cover internal faults and command line misuse.
"""

from __future__ import annotations


class PipefmtError(Exception):
    """Base exception for all pipefmt errors."""

    pass


class FormatError(PipefmtError):
    """Internal fault while formatting a document.

    Raised when a table model invariant is violated. Not expected for
    any textual input.
    """

    pass


class UsageError(PipefmtError):
    """Conflicting command line options.

    Raised by the CLI before any file is read.
    """

    pass
