"""CLI module for cla.

This module provides the command-line interface: argument parsing, help
handling and dispatch to the calendar commands.
"""

import logging
import sys
from collections.abc import Sequence
from typing import Optional

from ..config.settings import ClaSettings, get_settings
from ..display.terminal import Terminal
from ..utils.clock import Clock
from ..utils.logging import apply_command_line_overrides, setup_logging
from .commands import run_current_month, run_month_command, run_year_command
from .parser import EXIT_SUCCESS, EXIT_USAGE, create_parser, is_help_request

logger = logging.getLogger(__name__)


def main_entry(
    argv: Optional[Sequence[str]] = None,
    settings: Optional[ClaSettings] = None,
    clock: Optional[Clock] = None,
    terminal: Optional[Terminal] = None,
) -> int:
    """Main entry point with argument parsing and command dispatch.

    Args:
        argv: Command-line arguments, defaults to sys.argv[1:]
        settings: Application settings, defaults to the global settings
        clock: Source of the current date, defaults to the system clock
        terminal: Output terminal, defaults to stdout

    Returns:
        Exit code (0 for success, 1 for help and usage errors)
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = create_parser()

    if is_help_request(argv):
        parser.print_help(sys.stdout)
        return EXIT_USAGE

    args = parser.parse_args(argv)

    settings = apply_command_line_overrides(settings or get_settings(), args)
    setup_logging(settings)
    logger.debug(f"Running command {args.command!r} with arguments {argv}")

    if args.command == "month":
        return run_month_command(args, settings, clock=clock, terminal=terminal)
    if args.command == "year":
        return run_year_command(args, settings, clock=clock, terminal=terminal)
    return run_current_month(settings, clock=clock, terminal=terminal)


__all__ = [
    "EXIT_SUCCESS",
    "EXIT_USAGE",
    "create_parser",
    "is_help_request",
    "main_entry",
    "run_current_month",
    "run_month_command",
    "run_year_command",
]
