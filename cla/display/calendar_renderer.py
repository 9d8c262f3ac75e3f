"""Multi-column month calendar renderer for the terminal.

Months are drawn side by side using only sequential writes and cursor moves:
each month is printed at a horizontal offset, then the cursor moves back up to
the top of the block so the next month lands to its right. After the last
month of a row the cursor drops below the block to start the next row.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from ..calendar.grid import build_grid
from ..calendar.models import MonthSpec
from ..config.settings import DisplaySettings
from ..utils.exceptions import TerminalError
from .terminal import Terminal, terminal_width

logger = logging.getLogger(__name__)

CAL_WIDTH = 20  # Width of "Su Mo Tu We Th Fr Sa"
CAL_PADDING = 4
MAX_COLUMNS = 4
CAL_HEADER_SIZE = 2  # Title and weekday header lines
WEEKDAY_HEADER = "Su Mo Tu We Th Fr Sa"


def columns_per_row(
    width: int, cal_padding: int = CAL_PADDING, max_columns: int = MAX_COLUMNS
) -> int:
    """Return how many months fit side by side in ``width`` characters.

    Args:
        width: Terminal width in characters
        cal_padding: Blank columns between two months
        max_columns: Upper bound on months per row

    Returns:
        Months per row, clamped to 1..max_columns
    """
    return max(1, min(width // (CAL_WIDTH + cal_padding), max_columns))


@dataclass
class LayoutState:
    """Position of the render pass within the current row of months."""

    columns: int
    column: int = 0
    tallest: int = 0

    def is_row_end(self) -> bool:
        return self.column == self.columns - 1


class CalendarRenderer:
    """Renders month grids to the terminal in a responsive multi-column layout."""

    def __init__(
        self,
        settings: Optional[DisplaySettings] = None,
        terminal: Optional[Terminal] = None,
        width: Optional[int] = None,
    ) -> None:
        """Initialize calendar renderer.

        Args:
            settings: Display settings, defaults apply when omitted
            terminal: Terminal writer, defaults to stdout
            width: Terminal width override; queried from the terminal when None
        """
        self.settings = settings or DisplaySettings()
        self.terminal = terminal or Terminal()
        self._width = width

        logger.debug("Calendar renderer initialized")

    @property
    def stride(self) -> int:
        """Horizontal distance between the left edges of two adjacent months."""
        return CAL_WIDTH + self.settings.cal_padding

    def columns(self) -> int:
        """Resolve months per row from settings or the terminal width.

        Falls back to the configured maximum when the terminal size is unknown.
        """
        max_columns = self.settings.max_columns
        if self.settings.columns:
            return max(1, min(self.settings.columns, max_columns))

        width = self._width
        if width is None:
            try:
                width = terminal_width()
            except TerminalError as e:
                logger.debug(f"{e}; using {max_columns} columns")
                return max_columns

        return columns_per_row(width, self.settings.cal_padding, max_columns)

    def render(self, months: Sequence[MonthSpec], include_year: bool = False) -> None:
        """Render months left to right, wrapping into new rows.

        Args:
            months: Months to display, in placement order
            include_year: Append the year to each month title

        Raises:
            OSError: If writing to the terminal fails
        """
        state = LayoutState(columns=self.columns())
        logger.debug(f"Rendering {len(months)} months, {state.columns} per row")

        for index, spec in enumerate(months):
            state.column = index % state.columns
            rows = self._render_month(spec, state.column * self.stride, include_year)
            state.tallest = max(state.tallest, rows)

            if index != len(months) - 1 and not state.is_row_end():
                self.terminal.move_up(rows + CAL_HEADER_SIZE)
            else:
                # Drop below the tallest month of the row, then one blank line
                self.terminal.newline(state.tallest - rows + 1)
                state.tallest = 0

        self.terminal.flush()

    def render_year_header(self, year: int) -> None:
        """Print the year centered over a full row of months."""
        row_width = self.columns() * self.stride - self.settings.cal_padding
        self.terminal.newline()
        self.terminal.bold()
        self.terminal.write(f"{year:^{row_width}}")
        self.terminal.reset_attributes()
        self.terminal.newline(2)

    def _render_month(self, spec: MonthSpec, offset: int, include_year: bool) -> int:
        """Print one month at a horizontal offset.

        Args:
            spec: Month to print
            offset: Columns to move right before each line
            include_year: Append the year to the title

        Returns:
            Number of week rows printed
        """
        grid = build_grid(spec.year, spec.month, include_year=include_year)
        highlight = spec.highlight_day if self.settings.highlight_today else 0
        term = self.terminal

        term.move_right(offset)
        term.bold()
        term.write(f"{grid.title:^{CAL_WIDTH}}")
        term.reset_attributes()
        term.newline()

        term.move_right(offset)
        term.write(WEEKDAY_HEADER)
        term.newline()

        for week in grid.weeks:
            term.move_right(offset)
            for cell in week:
                text = f"{cell if cell is not None else '':>2}"
                if highlight and cell == highlight:
                    term.invert_colors()
                    term.write(text)
                    term.reset_color()
                else:
                    term.write(text)
                term.write(" ")
            term.newline()

        return grid.rows
