"""Command handlers for the cla CLI.

Each handler resolves its range into months, then renders them inside a
raw-mode guard so the terminal is restored on every exit path.
"""

import logging
from typing import Any, Optional

from ..calendar.ranges import (
    resolve_absolute_months,
    resolve_relative_months,
    resolve_relative_years,
    year_months,
)
from ..config.settings import ClaSettings
from ..display.calendar_renderer import CalendarRenderer
from ..display.terminal import Terminal, raw_mode
from ..utils.clock import Clock, SystemClock
from .parser import EXIT_SUCCESS

logger = logging.getLogger(__name__)


def _renderer(settings: ClaSettings, terminal: Optional[Terminal]) -> CalendarRenderer:
    return CalendarRenderer(settings.display, terminal=terminal)


def run_current_month(
    settings: ClaSettings, clock: Optional[Clock] = None, terminal: Optional[Terminal] = None
) -> int:
    """Render the current month without the year in its title.

    Returns:
        Exit code
    """
    clock = clock or SystemClock()
    months = resolve_relative_months(None, clock)

    with raw_mode():
        _renderer(settings, terminal).render(months, include_year=False)
    return EXIT_SUCCESS


def run_month_command(
    args: Any,
    settings: ClaSettings,
    clock: Optional[Clock] = None,
    terminal: Optional[Terminal] = None,
) -> int:
    """Render a relative or absolute range of months, titled with their year.

    Args:
        args: Parsed arguments with ``range`` and ``absolute``
        settings: Application settings
        clock: Source of the current date
        terminal: Output terminal

    Returns:
        Exit code
    """
    clock = clock or SystemClock()
    absolute = getattr(args, "absolute", None)
    if absolute:
        months = resolve_absolute_months(absolute, clock)
    else:
        months = resolve_relative_months(getattr(args, "range", None), clock)

    logger.info(f"Showing {len(months)} months")

    with raw_mode():
        _renderer(settings, terminal).render(months, include_year=True)
    return EXIT_SUCCESS


def run_year_command(
    args: Any,
    settings: ClaSettings,
    clock: Optional[Clock] = None,
    terminal: Optional[Terminal] = None,
) -> int:
    """Render every month of a relative range of years under a year header.

    Args:
        args: Parsed arguments with ``range``
        settings: Application settings
        clock: Source of the current date
        terminal: Output terminal

    Returns:
        Exit code
    """
    clock = clock or SystemClock()
    years = resolve_relative_years(getattr(args, "range", None), clock)
    logger.info(f"Showing years {years}")

    renderer = _renderer(settings, terminal)
    with raw_mode():
        for year in years:
            renderer.render_year_header(year)
            renderer.render(year_months(year, clock), include_year=False)
    return EXIT_SUCCESS


__all__ = [
    "run_current_month",
    "run_month_command",
    "run_year_command",
]
