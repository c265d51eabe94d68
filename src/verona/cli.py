"""CLI entry point — ``verona [ classFile | jarArchive | jarsDir ]+``."""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from verona import __version__
from verona.classfile.errors import DirectoryNotFoundError
from verona.config import Settings
from verona.logging_config import setup_logging
from verona.report import ReportSink
from verona.scanning import scan_paths

USAGE_LINES = (
    "This tool identifies potentially problematic code "
    "from JDK9 migration point of view.",
    "Usage: verona [ classFile | jarArchive | jarsDir ]+",
)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"verona {__version__}")
        return

    if not args.paths:
        for line in USAGE_LINES:
            print(line)
        return

    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        sys.exit(1)

    setup_logging("DEBUG" if args.verbose else settings.log_level)

    sink = ReportSink()
    try:
        scan_paths(args.paths, settings, on_match=sink.emit)
    except DirectoryNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="verona",
        description=(
            "Report compiled classes that read JDK version "
            "system properties affected by JEP 223."
        ),
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Class files, jar archives or directories to scan",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every skipped candidate (debug level)",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    return parser


if __name__ == "__main__":
    main()
