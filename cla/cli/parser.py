"""Command-line argument parsing for cla.

This module builds the argument parser for the ``month`` and ``year``
commands and recognizes help requests, including abbreviations such as
``-h``, ``-help`` or ``--he``.
"""

import argparse
import logging
import re
import sys
from collections.abc import Sequence
from typing import NoReturn

from .. import __version__

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_USAGE = 1

LOG_LEVELS = ["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Negative numbers and ranges such as "-2..0" or "-5.." are values, not options
RANGE_VALUE_PATTERN = re.compile(r"^-\d+$|^-\d*\.\d+$|^-\d*\.\.-?\d*$")


class ClaArgumentParser(argparse.ArgumentParser):
    """Argument parser that accepts negative ranges and exits 1 on usage errors."""

    def __init__(self, *args, **kwargs) -> None:  # type: ignore[no-untyped-def]
        kwargs.setdefault("add_help", False)
        super().__init__(*args, **kwargs)
        self._negative_number_matcher = RANGE_VALUE_PATTERN

    def error(self, message: str) -> NoReturn:
        """Print usage and the error to stderr, then exit with the usage code."""
        logger.debug(f"Argument error: {message}")
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def is_help_request(argv: Sequence[str]) -> bool:
    """Check if any token asks for help.

    A token is a help request when, with leading dashes removed, it is a
    non-empty prefix of "help" (``-h``, ``--he``, ``-help``, ``help``).

    Example:
        >>> is_help_request(["month", "-h"])
        True
        >>> is_help_request(["month", "-2..0"])
        False
    """
    for token in argv:
        stripped = token.lstrip("-").lower()
        if stripped and "help".startswith(stripped):
            return True
    return False


def create_parser() -> ClaArgumentParser:
    """Create command line argument parser.

    Returns:
        Parser with ``month`` and ``year`` subcommands; ``args.command`` is None
        when no command is given

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["month", "-2..0"])
        >>> args.command, args.range
        ('month', '-2..0')
    """
    parser = ClaArgumentParser(
        prog="cla",
        description="Terminal calendar - show months side by side in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Ranges:
  N          just the entry N away from the current one (0 = current)
  START..END every entry from START to END, either side may be omitted

Examples:
  %(prog)s                     # Current month
  %(prog)s month -2..0         # Two months ago up to this month
  %(prog)s month 1             # Next month
  %(prog)s month -a jan..mar   # January to March of this year
  %(prog)s year                # Every month of this year
  %(prog)s year 0..1           # This year and next year
        """,
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument(
        "--columns",
        type=int,
        metavar="N",
        help="Months per row (default: as many as fit the terminal, at most 4)",
    )

    logging_group = parser.add_argument_group("logging", "Logging options (logs go to stderr)")

    logging_group.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    logging_group.add_argument(
        "--quiet", "-q", action="store_true", help="Only log errors"
    )
    logging_group.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Set console and file log levels",
    )
    logging_group.add_argument(
        "--no-log-colors", action="store_true", help="Disable colored log output"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    month_parser = subparsers.add_parser(
        "month", help="Show a range of months relative to the current month"
    )
    month_parser.add_argument(
        "range",
        nargs="?",
        default=None,
        metavar="RANGE",
        help="Relative month range, e.g. -2..0 or 3 (default: 0)",
    )
    month_parser.add_argument(
        "--absolute",
        "-a",
        metavar="RANGE",
        help="Months of the current year by number or name, e.g. jan..mar",
    )

    year_parser = subparsers.add_parser(
        "year", help="Show every month of a range of years relative to the current year"
    )
    year_parser.add_argument(
        "range",
        nargs="?",
        default=None,
        metavar="RANGE",
        help="Relative year range, e.g. 0..1 or -1 (default: 0)",
    )

    return parser


__all__ = [
    "EXIT_SUCCESS",
    "EXIT_USAGE",
    "ClaArgumentParser",
    "create_parser",
    "is_help_request",
]
