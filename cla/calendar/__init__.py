"""Calendar geometry and range resolution."""

from .grid import build_grid, days_in_month, month_name, row_count, weekday_offset
from .models import Cell, MonthGrid, MonthSpec
from .ranges import (
    month_number,
    parse_relative_range_bounds,
    resolve_absolute_months,
    resolve_relative_months,
    resolve_relative_years,
    shift_month,
    year_months,
)

__all__ = [
    "Cell",
    "MonthGrid",
    "MonthSpec",
    "build_grid",
    "days_in_month",
    "month_name",
    "month_number",
    "parse_relative_range_bounds",
    "resolve_absolute_months",
    "resolve_relative_months",
    "resolve_relative_years",
    "row_count",
    "shift_month",
    "weekday_offset",
    "year_months",
]
