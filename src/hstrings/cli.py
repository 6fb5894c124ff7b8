"""Command-line interface for hstrings."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import BinaryIO

import hstrings
from hstrings._utils import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH
from hstrings.pipeline import PROGRAM_NAME, ScanContext, format_summary

#: Exit status when at least one string was cut at the length cap.
EXIT_TRUNCATED = 1
#: Exit status when an input file could not be opened.
EXIT_OPEN_FAILED = 2


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number < 1:
        msg = f"expected a positive integer, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return number


def _emit(
    stream: BinaryIO, min_length: int, max_length: int, context: ScanContext
) -> None:
    for result in hstrings.scan(stream, min_length, max_length, context):
        print(result.format())


def main(argv: list[str] | None = None) -> int:
    """Run the ``hstrings`` command-line tool.

    Prints one ``(<score>): <text>`` line per string, then a summary.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    :returns: The process exit status.
    """
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description=(
            "Print the printable strings in binary data, each prefixed with a "
            "score of how much it resembles English text. Pipe through sort."
        ),
    )
    parser.add_argument(
        "files", nargs="*", help="Files to scan (standard input if omitted)"
    )
    parser.add_argument(
        "-n",
        "--min-length",
        type=_positive_int,
        default=DEFAULT_MIN_LENGTH,
        help=f"Shortest string to print (default: {DEFAULT_MIN_LENGTH})",
    )
    parser.add_argument(
        "-m",
        "--max-length",
        type=_positive_int,
        default=DEFAULT_MAX_LENGTH,
        help=f"Longest string before it is cut (default: {DEFAULT_MAX_LENGTH})",
    )
    parser.add_argument(
        "--version", action="version", version=f"hstrings {hstrings.__version__}"
    )

    args = parser.parse_args(argv)

    context = ScanContext()
    open_failed = False
    if args.files:
        for filepath in args.files:
            try:
                f = Path(filepath).open("rb")
            except OSError as e:
                print(f"{PROGRAM_NAME}: {filepath}: {e}", file=sys.stderr)
                open_failed = True
                continue
            with f:
                _emit(f, args.min_length, args.max_length, context)
    else:
        _emit(sys.stdin.buffer, args.min_length, args.max_length, context)

    for line in format_summary(context):
        print(line)

    if open_failed:
        return EXIT_OPEN_FAILED
    if context.truncated:
        return EXIT_TRUNCATED
    return 0


if __name__ == "__main__":
    sys.exit(main())
