"""
Command-line interface for Bodyfile Timeline.

This module contains the argument parser and the entry point
for the CLI application.
"""

import argparse
import sys

from .bodyfile import BodyFile
from .constants import FILTER_FORMAT_MESSAGE
from .models import DateFilter
from .utils import parse_date_filter


def date_filter_type(value: str) -> DateFilter:
    """argparse type for ``--filter``."""
    try:
        return parse_date_filter(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bodyfile-timeline",
        description="Build a MACB timeline (CSV) from a bodyfile",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Timeline of a bodyfile to stdout
  %(prog)s -b body.txt

  # Sorted timeline written to a file
  %(prog)s -b body.txt -s -o timeline.csv

  # Only events from January 2020
  %(prog)s -b body.txt -s -f 2020-01-01..2020-01-31

All dates are UTC.
""",
    )

    parser.add_argument(
        "-b", "--bodyfile",
        required=True,
        help="Bodyfile to read (no header row)",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="CSV output to file (stdout if not specified)",
    )
    parser.add_argument(
        "-f", "--filter",
        type=date_filter_type,
        default=None,
        help=FILTER_FORMAT_MESSAGE,
    )
    parser.add_argument(
        "-s", "--sort",
        action="store_true",
        help="Sort timeline by datetime",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        bodyfile = BodyFile.build(
            args.bodyfile,
            date_filter=args.filter,
            sort=args.sort,
            verbose=args.verbose,
        )
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(
        f"Number of file records read from {args.bodyfile}: {bodyfile.file_len()}",
        file=sys.stderr,
    )
    print(
        f"Number of datetime records read from {args.bodyfile}: {bodyfile.datetime_len()}",
        file=sys.stderr,
    )

    if args.output is not None:
        print(f"Writing CSV to {args.output}", file=sys.stderr)

    try:
        bodyfile.generate_csv(args.output)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
