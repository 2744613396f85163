"""
Command Line Entry Point
========================
Builds a Box from command line arguments and prints it.

Usage:
    $ python -m boxsize 1200 800 450 --unit mm --format cm
    120.0 cm × 80.0 cm × 45.0 cm
"""
import argparse
import logging
import sys
from typing import List, Optional

from boxsize.config import DEFAULT_FORMAT, DEFAULT_UNIT
from boxsize.exceptions import BoxError
from boxsize.logging_config import setup_logging
from boxsize.model import Box, UnitOfMeasure

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boxsize",
        description="Validate box dimensions and print them in a chosen unit"
    )
    parser.add_argument(
        "dimensions",
        nargs="+",
        type=float,
        help="One to three box dimensions (missing ones use the unit filler value)"
    )
    parser.add_argument(
        "--unit",
        choices=[u.value for u in UnitOfMeasure],
        default=DEFAULT_UNIT,
        help=f"Unit of the given dimensions (default: {DEFAULT_UNIT})"
    )
    parser.add_argument(
        "--format",
        dest="fmt",
        default=DEFAULT_FORMAT,
        help=f"Output format, one of {', '.join(u.value for u in UnitOfMeasure)} (default: {DEFAULT_FORMAT})"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--log-file",
        help="Also write log messages to this file"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the boxsize command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.dimensions) > 3:
        parser.error("at most 3 dimensions can be given")

    if args.verbose or args.log_file:
        setup_logging(
            level=logging.DEBUG if args.verbose else logging.INFO,
            log_file=args.log_file
        )

    try:
        box = Box(*args.dimensions, unit=args.unit)
        text = box.to_string(args.fmt)
    except BoxError as e:
        logger.debug(f"Command failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
