"""Clock abstraction for reading the current local date."""

from datetime import date
from typing import Protocol


class Clock(Protocol):
    """Capability returning the current date as ``(year, month, day)``."""

    def now(self) -> tuple[int, int, int]: ...


class SystemClock:
    """Clock backed by the local system date, read at call time."""

    def now(self) -> tuple[int, int, int]:
        today = date.today()
        return today.year, today.month, today.day


class FixedClock:
    """Clock frozen at a given date, used for deterministic rendering."""

    def __init__(self, year: int, month: int, day: int) -> None:
        # Validates the date eagerly
        self._today = date(year, month, day)

    def now(self) -> tuple[int, int, int]:
        return self._today.year, self._today.month, self._today.day

    def __repr__(self) -> str:
        return f"FixedClock({self._today.isoformat()})"
