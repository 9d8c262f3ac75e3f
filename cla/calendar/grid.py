"""Pure calendar geometry: month lengths, weekday offsets and week grids."""

from datetime import date, timedelta

from .models import Cell, MonthGrid

DAYS_PER_WEEK = 7

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


def month_name(month: int) -> str:
    """Return the English name of a month, 1 = January."""
    return MONTH_NAMES[month - 1]


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month.

    Takes day 1 of the following month and steps back one day, so February
    follows the proleptic Gregorian leap-year rule of ``datetime.date``.

    Args:
        year: Calendar year
        month: Month number, 1 = January

    Returns:
        Number of days in the month (28-31)
    """
    if month == 12:
        first_of_next = date(year + 1, 1, 1)
    else:
        first_of_next = date(year, month + 1, 1)
    return (first_of_next - timedelta(days=1)).day


def weekday_offset(year: int, month: int) -> int:
    """Return the weekday of day 1 of the month, Sunday = 0."""
    # date.weekday() has Monday = 0
    return (date(year, month, 1).weekday() + 1) % DAYS_PER_WEEK


def row_count(year: int, month: int) -> int:
    """Return the number of week rows needed to lay out the month."""
    remaining = days_in_month(year, month) - (DAYS_PER_WEEK - weekday_offset(year, month))
    return 1 + -(-remaining // DAYS_PER_WEEK)


def build_grid(year: int, month: int, include_year: bool = False) -> MonthGrid:
    """Build the week grid of a month.

    Day 1 sits in row 0 at its weekday column; days then fill the rows left to
    right, top to bottom. Cells before day 1 and after the last day are None.

    Args:
        year: Calendar year
        month: Month number, 1 = January
        include_year: Append the year to the title

    Returns:
        MonthGrid with ``row_count(year, month)`` rows of seven cells
    """
    total_days = days_in_month(year, month)
    offset = weekday_offset(year, month)

    weeks: list[list[Cell]] = []
    day = 0
    for _ in range(row_count(year, month)):
        week: list[Cell] = []
        for column in range(DAYS_PER_WEEK):
            if (day == 0 and column < offset) or day == total_days:
                week.append(None)
            else:
                day += 1
                week.append(day)
        weeks.append(week)

    title = month_name(month)
    if include_year:
        title = f"{title} {year}"
    return MonthGrid(title=title, weeks=weeks)
