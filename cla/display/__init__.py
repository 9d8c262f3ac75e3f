"""Terminal display: month layout renderer and terminal control."""

from .calendar_renderer import (
    CAL_HEADER_SIZE,
    CAL_PADDING,
    CAL_WIDTH,
    MAX_COLUMNS,
    CalendarRenderer,
    LayoutState,
    columns_per_row,
)
from .terminal import Terminal, raw_mode, terminal_width

__all__ = [
    "CAL_HEADER_SIZE",
    "CAL_PADDING",
    "CAL_WIDTH",
    "MAX_COLUMNS",
    "CalendarRenderer",
    "LayoutState",
    "Terminal",
    "columns_per_row",
    "raw_mode",
    "terminal_width",
]
