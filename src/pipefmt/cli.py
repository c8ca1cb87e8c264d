"""Command line front end.

Usage:
    pipefmt [--in-place] [--strict] [--verbose] [SOURCE] [DESTINATION]

SOURCE defaults to standard input (also spelled ``-``). The result goes to
DESTINATION, back into SOURCE with ``--in-place``, or to standard output.
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from collections.abc import Sequence

from pipefmt import __version__
from pipefmt.config import FormatConfig, format_config_context
from pipefmt.errors import UsageError
from pipefmt.formatter import format_with_diagnostics

STDIN = "-"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pipefmt", description="Align the pipe tables of a Markdown document"
    )
    parser.add_argument(
        "source", nargs="?", default=STDIN, help="File to format ('-' for stdin)"
    )
    parser.add_argument("destination", nargs="?", help="Output file (if not in place)")
    parser.add_argument(
        "-i", "--in-place", action="store_true", help="Modify the source file in place"
    )
    parser.add_argument(
        "--strict", action="store_true", help="Report tables that cannot be formatted"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def check_arguments(args: argparse.Namespace) -> None:
    """Reject option combinations before any file is touched.

    Raises:
        UsageError: On in-place with a destination or with stdin
    """
    if args.in_place and args.destination is not None:
        raise UsageError("Cannot be both in place and have a destination.")
    if args.in_place and args.source == STDIN:
        raise UsageError("Cannot format standard input in place.")


def read_source(path: str) -> str:
    """Read ``path`` without translating its line endings."""
    if path == STDIN:
        stream = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", newline="")
        try:
            return stream.read()
        finally:
            stream.detach()
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_output(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        check_arguments(args)
    except UsageError as e:
        print(e, file=sys.stderr)
        return 1

    from_stdin = args.source == STDIN
    try:
        source = read_source(args.source)
    except OSError as e:
        print(f"pipefmt: cannot read {args.source}: {e}", file=sys.stderr)
        return 1

    with format_config_context(FormatConfig(strict=args.strict)):
        result = format_with_diagnostics(
            source, source_file="<stdin>" if from_stdin else args.source
        )

    for diagnostic in result.diagnostics:
        print(diagnostic, file=sys.stderr)

    destination = args.source if args.in_place else args.destination
    if destination is None:
        sys.stdout.write(result.text)
        return 0

    try:
        write_output(destination, result.text)
    except OSError as e:
        print(f"pipefmt: cannot write {destination}: {e}", file=sys.stderr)
        return 1
    return 0
