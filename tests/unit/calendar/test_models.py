"""Unit tests for cla.calendar.models."""

import pytest
from pydantic import ValidationError

from cla.calendar.models import MonthGrid, MonthSpec


class TestMonthSpec:
    """Test MonthSpec validation and immutability."""

    def test_defaults_to_no_highlight(self):
        """Test highlight_day defaults to 0."""
        spec = MonthSpec(year=2024, month=5)
        assert spec.highlight_day == 0
        assert spec.has_highlight is False

    def test_highlight(self):
        """Test a highlighted day is reported."""
        assert MonthSpec(year=2024, month=5, highlight_day=3).has_highlight is True

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month(self, month):
        """Test months outside 1..12 are rejected."""
        with pytest.raises(ValidationError):
            MonthSpec(year=2024, month=month)

    def test_invalid_highlight(self):
        """Test highlight days outside 0..31 are rejected."""
        with pytest.raises(ValidationError):
            MonthSpec(year=2024, month=1, highlight_day=32)

    def test_frozen(self):
        """Test specs cannot be modified after construction."""
        spec = MonthSpec(year=2024, month=1)
        with pytest.raises(ValidationError):
            spec.month = 2


class TestMonthGrid:
    """Test MonthGrid helpers."""

    def test_rows_and_days(self):
        """Test row count and row-major day listing."""
        grid = MonthGrid(
            title="Test",
            weeks=[[None, None, 1, 2, 3, 4, 5], [6, 7, None, None, None, None, None]],
        )
        assert grid.rows == 2
        assert grid.days() == [1, 2, 3, 4, 5, 6, 7]
