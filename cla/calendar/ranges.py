"""Range string parsing and resolution into months to display.

Range strings use ``start..end`` syntax where either side may be omitted, or a
single value meaning just that one entry. Parsing is permissive: anything that
cannot be understood falls back to a default instead of failing.
"""

import logging
from typing import Optional

from ..utils.clock import Clock
from ..utils.exceptions import RangeError
from .grid import MONTH_NAMES
from .models import MonthSpec

logger = logging.getLogger(__name__)

RANGE_SEPARATOR = ".."
DEFAULT_RELATIVE_RANGE = (0, 0)


def _parse_offset(token: str) -> int:
    """Parse one side of a relative range, defaulting to 0."""
    try:
        return int(token.strip())
    except ValueError:
        if token.strip():
            logger.debug(f"Non-numeric range bound {token!r}, using 0")
        return 0


def parse_relative_range_bounds(range_str: str) -> tuple[int, int]:
    """Parse a relative range string into inclusive ``(start, end)`` offsets.

    Args:
        range_str: Range such as ``"-2..5"``, ``"..5"``, ``"-5.."`` or ``"4"``

    Returns:
        Tuple of start and end offsets

    Example:
        >>> parse_relative_range_bounds("1..5")
        (1, 5)
        >>> parse_relative_range_bounds("4")
        (4, 4)
        >>> parse_relative_range_bounds("..5")
        (0, 5)
    """
    parts = range_str.split(RANGE_SEPARATOR)
    if len(parts) > 2:
        logger.warning(f"Malformed range {range_str!r}, using default range")
        return DEFAULT_RELATIVE_RANGE

    start = _parse_offset(parts[0])
    end = _parse_offset(parts[1]) if len(parts) == 2 else start
    return start, end


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Move a month by ``offset`` months, rolling the year over as needed.

    Args:
        year: Calendar year
        month: Month number, 1 = January
        offset: Number of months to move, negative for earlier months

    Returns:
        Tuple of the resulting year and month

    Raises:
        RangeError: If month is outside 1..12
    """
    if not 1 <= month <= 12:
        raise RangeError(f"Month must be in 1..12, got {month}")
    year_delta, month_index = divmod(month - 1 + offset, 12)
    return year + year_delta, month_index + 1


def resolve_relative_months(range_str: Optional[str], clock: Clock) -> list[MonthSpec]:
    """Resolve a relative month range against the current date.

    The month at offset 0 highlights today.

    Args:
        range_str: Relative range string, None for the current month only
        clock: Source of the current date

    Returns:
        Months to display, in order
    """
    year, month, day = clock.now()
    start, end = parse_relative_range_bounds(range_str or "")

    months = []
    for offset in range(start, end + 1):
        y, m = shift_month(year, month, offset)
        months.append(MonthSpec(year=y, month=m, highlight_day=day if offset == 0 else 0))

    logger.debug(f"Resolved relative month range {range_str!r} to {len(months)} months")
    return months


def resolve_relative_years(range_str: Optional[str], clock: Clock) -> list[int]:
    """Resolve a relative year range into absolute years."""
    year, _, _ = clock.now()
    start, end = parse_relative_range_bounds(range_str or "")
    return [year + offset for offset in range(start, end + 1)]


def year_months(year: int, clock: Clock) -> list[MonthSpec]:
    """Return the twelve months of a year, highlighting today if it falls in it."""
    today_year, today_month, today_day = clock.now()
    return [
        MonthSpec(
            year=year,
            month=m,
            highlight_day=today_day if (year, m) == (today_year, today_month) else 0,
        )
        for m in range(1, 13)
    ]


def month_number(token: str) -> Optional[int]:
    """Match a month number or a prefix of a month name.

    Args:
        token: Number such as ``"3"`` or name prefix such as ``"decem"``

    Returns:
        Month number 1..12, or None when nothing matches

    Example:
        >>> month_number("decem")
        12
        >>> month_number("Mar")
        3
    """
    token = token.strip().lower()
    if not token:
        return None
    if token.isdigit():
        number = int(token)
        return number if 1 <= number <= 12 else None
    for index, name in enumerate(MONTH_NAMES):
        if name.lower().startswith(token):
            return index + 1
    return None


def resolve_absolute_months(range_str: str, clock: Clock) -> list[MonthSpec]:
    """Resolve an absolute month range of the current year.

    Missing start means January; missing end means the start month, or
    December when the range is open-ended (``"oct.."``). Unknown names fall
    back to the current month.

    Args:
        range_str: Range such as ``"jan..mar"``, ``"3..5"`` or ``"oct"``
        clock: Source of the current date

    Returns:
        Months to display, in order
    """
    year, month, day = clock.now()
    parts = range_str.split(RANGE_SEPARATOR)
    if len(parts) > 2:
        logger.warning(f"Malformed month range {range_str!r}, showing current month")
        parts = [str(month)]

    def _bound(token: str, default: int) -> int:
        if not token.strip():
            return default
        number = month_number(token)
        if number is None:
            logger.warning(f"Unknown month {token!r}, using current month")
            return month
        return number

    start = _bound(parts[0], 1)
    if len(parts) == 2:
        end = _bound(parts[1], 12)
    else:
        end = start
    if end < start:
        end = start

    return [
        MonthSpec(year=year, month=m, highlight_day=day if m == month else 0)
        for m in range(start, end + 1)
    ]
