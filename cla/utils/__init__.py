"""Utility helpers: clock, exceptions and logging setup."""

from .clock import Clock, FixedClock, SystemClock
from .exceptions import ClaError, RangeError, TerminalError

__all__ = [
    "ClaError",
    "Clock",
    "FixedClock",
    "RangeError",
    "SystemClock",
    "TerminalError",
]
