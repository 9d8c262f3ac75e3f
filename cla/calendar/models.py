"""Data models for calendar month rendering."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# A grid cell is a day number or None for an empty slot
Cell = Optional[int]


class MonthSpec(BaseModel):
    """A month to display and the day to highlight in it (0 for none)."""

    year: int = Field(..., description="Calendar year")
    month: int = Field(..., ge=1, le=12, description="Month number, 1 = January")
    highlight_day: int = Field(
        default=0, ge=0, le=31, description="Day of month to highlight, 0 for none"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def has_highlight(self) -> bool:
        """Check if a day of this month should be highlighted."""
        return self.highlight_day != 0


class MonthGrid(BaseModel):
    """Week rows of a month, seven cells each, Sunday first."""

    title: str
    weeks: list[list[Cell]] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def rows(self) -> int:
        """Number of week rows in the grid."""
        return len(self.weeks)

    def days(self) -> list[int]:
        """Day numbers of the grid in row-major order."""
        return [cell for week in self.weeks for cell in week if cell is not None]
