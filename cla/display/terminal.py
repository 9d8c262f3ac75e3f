"""Terminal control: ANSI escape output, size query and raw mode."""

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Optional, TextIO

from ..utils.exceptions import TerminalError

logger = logging.getLogger(__name__)

CSI = "\x1b["
NEWLINE = "\r\n"  # Raw mode disables output post-processing


class Terminal:
    """Writes text and ANSI control sequences to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        """Initialize terminal writer.

        Args:
            stream: Output stream, defaults to sys.stdout at write time
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)

    def newline(self, count: int = 1) -> None:
        self.write(NEWLINE * count)

    def move_right(self, columns: int) -> None:
        """Move the cursor right; zero is a no-op."""
        if columns > 0:
            self.write(f"{CSI}{columns}C")

    def move_up(self, lines: int) -> None:
        """Move the cursor up; zero is a no-op."""
        if lines > 0:
            self.write(f"{CSI}{lines}A")

    def bold(self) -> None:
        self.write(f"{CSI}1m")

    def reset_attributes(self) -> None:
        self.write(f"{CSI}0m")

    def invert_colors(self) -> None:
        """Black text on a white background."""
        self.write(f"{CSI}47m{CSI}30m")

    def reset_color(self) -> None:
        self.write(f"{CSI}39;49m")

    def flush(self) -> None:
        self.stream.flush()


def terminal_width() -> int:
    """Return the terminal width in character columns.

    Raises:
        TerminalError: If the terminal size cannot be queried
    """
    try:
        return os.get_terminal_size().columns
    except OSError as e:
        raise TerminalError(f"Could not query terminal size: {e}", operation="size") from e


def _is_tty(stream: Any) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False


@contextmanager
def raw_mode(stream: Optional[TextIO] = None) -> Iterator[bool]:
    """Hold the terminal in raw mode for the duration of the block.

    The previous terminal settings are restored on every exit path. When the
    stream is not a TTY, or on Windows, nothing is changed.

    Args:
        stream: Terminal input stream, defaults to sys.stdin

    Yields:
        True if raw mode was enabled, False if the guard was a no-op

    Raises:
        TerminalError: If the TTY could not be switched to raw mode
    """
    stream = stream if stream is not None else sys.stdin
    if sys.platform == "win32" or not _is_tty(stream):
        logger.debug("Raw mode skipped: not a POSIX terminal")
        yield False
        return

    import termios  # noqa: PLC0415

    fd = stream.fileno()
    try:
        old_settings = termios.tcgetattr(fd)
        new_settings = termios.tcgetattr(fd)
        new_settings[1] &= ~termios.OPOST  # No output post-processing
        new_settings[3] &= ~(
            termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG
        )  # Disable echo, canonical mode and signal keys
        termios.tcsetattr(fd, termios.TCSAFLUSH, new_settings)
    except termios.error as e:
        raise TerminalError(f"Could not enable raw mode: {e}", operation="raw_mode") from e

    logger.debug("Terminal set to raw mode")
    try:
        yield True
    finally:
        try:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
            logger.debug("Terminal settings restored")
        except termios.error as e:
            logger.warning(f"Could not restore terminal settings: {e}")
