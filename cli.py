"""
csv2json - Command-line front end.

    csv2json [file] [-c COLS]... [-s] [-o OUT] [--indent N] [-v]... [--log-json]

Reads CSV from the named file (or stdin), writes a JSON array to stdout
(or --output).  Exit status is 0 on success and 1 on any error that
was not skipped.
"""

from __future__ import annotations

import argparse
import contextlib
import io
import sys
from typing import IO, Optional, Sequence

import config
from converter import ConversionError, ConversionOptions, InputUnavailable, convert
from converter.columns import split_columns
from converter.errors import SerializationError
from converter.logs import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csv2json",
        description="Converts CSV input to JSON output",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="The CSV file to convert. If omitted (or '-'), input is read from stdin.",
    )
    parser.add_argument(
        "-c", "--force-columns",
        action="append",
        default=[],
        metavar="COLS",
        help="Column names, comma-delimited; may be repeated. Must equal the number "
             "of CSV fields if given. When set, the first line of CSV data is treated "
             "as a data row instead of column names.",
    )
    parser.add_argument(
        "-s", "--skip-errors",
        action="store_true",
        help="Skip CSV lines that cause parsing errors. By default, errors abort "
             "conversion completely.",
    )
    parser.add_argument(
        "-o", "--output",
        help="Write JSON to this file instead of stdout",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print JSON with this many spaces",
    )
    parser.add_argument(
        "-v", "--verbosity",
        action="count",
        default=config.LOG_VERBOSITY,
        help="Verbosity level for logging (default is error-only)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=config.LOG_JSON,
        help="Output logs as JSON",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {config.VERSION}",
    )
    return parser


def run(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[IO] = None,
    stdout: Optional[IO] = None,
    stderr: Optional[IO[str]] = None,
) -> int:
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    args = build_parser().parse_args(argv)
    configure_logging(args.verbosity, args.log_json, stderr)

    options = ConversionOptions(
        columns=split_columns(args.force_columns),
        skip_errors=args.skip_errors,
        indent=args.indent,
    )

    try:
        with _open_input(args.file, stdin) as source:
            if args.output:
                buffer = io.StringIO()
                convert(source, buffer, options)
                _write_file(args.output, buffer.getvalue())
            else:
                convert(source, stdout, options)
    except ConversionError as exc:
        print(f"csv2json: error: {exc}", file=stderr)
        return 1
    return 0


def main():
    sys.exit(run())


# ── Private helpers ────────────────────────────────────────────────────

def _open_input(path: str, stdin: Optional[IO]):
    """Open the named file in binary mode; '-' means stdin (left open)."""
    if path == "-":
        return contextlib.nullcontext(stdin if stdin is not None else sys.stdin.buffer)
    try:
        return open(path, "rb")
    except OSError as exc:
        raise InputUnavailable(f"open {path}: {exc.strerror or exc}") from exc


def _write_file(path: str, text: str):
    try:
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as exc:
        raise SerializationError(f"write {path}: {exc.strerror or exc}") from exc


if __name__ == "__main__":
    main()
