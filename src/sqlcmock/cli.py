"""Command-line interface for sqlcmock."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from sqlcmock.config import Opts, with_project_defaults
from sqlcmock.errors import SqlcmockError
from sqlcmock.pipeline import run

logger = logging.getLogger("sqlcmock")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sqlcmock",
        description="Generate a mock implementation of a sqlc Querier interface.",
    )
    parser.add_argument(
        "input_file",
        type=Path,
        help="Go file declaring the Querier interface (e.g. db/querier.go)",
    )
    parser.add_argument(
        "--template",
        default="",
        help="Template file (default: built-in mock template)",
    )
    parser.add_argument(
        "--output",
        default="",
        help="Output file",
    )
    parser.add_argument(
        "--package",
        default=None,
        help="Output package (default: name of the output file's directory)",
    )
    parser.add_argument(
        "--format",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Format output with gofmt (default: on)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    opts = Opts(
        input_file=args.input_file,
        output_file=Path(args.output) if args.output else None,
        template_file=Path(args.template) if args.template else None,
        output_package=args.package or None,
        format=args.format,
    )
    try:
        run(with_project_defaults(opts))
    except SqlcmockError as e:
        logger.error("sqlcmock: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
