"""Unit tests for cla.display.terminal."""

import io
import os
from unittest.mock import MagicMock, patch

import pytest

from cla.display.terminal import Terminal, raw_mode, terminal_width
from cla.utils.exceptions import TerminalError


class TestTerminal:
    """Test ANSI sequence output."""

    def test_cursor_moves(self, terminal, output):
        """Test cursor movement sequences."""
        terminal.move_right(24)
        terminal.move_up(7)
        assert output.getvalue() == "\x1b[24C\x1b[7A"

    def test_zero_moves_write_nothing(self, terminal, output):
        """Test zero-length moves are skipped."""
        terminal.move_right(0)
        terminal.move_up(0)
        assert output.getvalue() == ""

    def test_styles(self, terminal, output):
        """Test bold, inversion and resets."""
        terminal.bold()
        terminal.reset_attributes()
        terminal.invert_colors()
        terminal.reset_color()
        assert output.getvalue() == "\x1b[1m\x1b[0m\x1b[47m\x1b[30m\x1b[39;49m"

    def test_newline_is_crlf(self, terminal, output):
        """Test newlines carry a carriage return for raw mode."""
        terminal.newline(2)
        assert output.getvalue() == "\r\n\r\n"

    def test_defaults_to_stdout(self, capsys):
        """Test output goes to stdout without an explicit stream."""
        Terminal().write("hello")
        assert capsys.readouterr().out == "hello"


class TestTerminalWidth:
    """Test terminal size query."""

    def test_width(self):
        """Test the column count is returned."""
        with patch(
            "cla.display.terminal.os.get_terminal_size",
            return_value=os.terminal_size((132, 40)),
        ):
            assert terminal_width() == 132

    def test_unavailable(self):
        """Test a failed query raises TerminalError."""
        with patch("cla.display.terminal.os.get_terminal_size", side_effect=OSError("not a tty")):
            with pytest.raises(TerminalError) as exc_info:
                terminal_width()
        assert exc_info.value.operation == "size"


class _TermiosError(Exception):
    pass


@pytest.fixture
def mock_termios():
    """Stand-in termios module with realistic attribute lists."""
    termios = MagicMock()
    termios.error = _TermiosError
    termios.OPOST = 0x1
    termios.ECHO = 0x8
    termios.ICANON = 0x2
    termios.IEXTEN = 0x8000
    termios.ISIG = 0x1
    termios.tcgetattr.side_effect = lambda fd: [0, 0xFFFF, 0, 0xFFFF, 0, 0, []]
    with patch.dict("sys.modules", {"termios": termios}):
        yield termios


@pytest.fixture
def tty_stream():
    stream = MagicMock()
    stream.isatty.return_value = True
    stream.fileno.return_value = 7
    return stream


class TestRawMode:
    """Test the raw-mode guard."""

    def test_non_tty_is_noop(self):
        """Test pipes and buffers are left alone."""
        with raw_mode(io.StringIO()) as enabled:
            assert enabled is False

    @patch("sys.platform", "linux")
    def test_enables_and_restores(self, mock_termios, tty_stream):
        """Test raw mode is entered and the saved settings restored."""
        with raw_mode(tty_stream) as enabled:
            assert enabled is True
            new_settings = mock_termios.tcsetattr.call_args_list[0][0][2]
            assert not new_settings[1] & mock_termios.OPOST
            assert not new_settings[3] & (mock_termios.ECHO | mock_termios.ICANON)

        assert mock_termios.tcsetattr.call_count == 2
        restore_call = mock_termios.tcsetattr.call_args_list[1][0]
        assert restore_call[0] == 7
        assert restore_call[2] == [0, 0xFFFF, 0, 0xFFFF, 0, 0, []]

    @patch("sys.platform", "linux")
    def test_restores_on_error(self, mock_termios, tty_stream):
        """Test settings are restored when the block raises."""
        with pytest.raises(RuntimeError):
            with raw_mode(tty_stream):
                raise RuntimeError("render failed")

        assert mock_termios.tcsetattr.call_count == 2

    @patch("sys.platform", "linux")
    def test_enable_failure(self, mock_termios, tty_stream):
        """Test failing to enter raw mode raises TerminalError."""
        mock_termios.tcsetattr.side_effect = _TermiosError("bad fd")
        with pytest.raises(TerminalError) as exc_info:
            with raw_mode(tty_stream):
                pytest.fail("block must not run")
        assert exc_info.value.operation == "raw_mode"

    @patch("sys.platform", "win32")
    def test_windows_is_noop(self, tty_stream):
        """Test Windows consoles are left alone."""
        with raw_mode(tty_stream) as enabled:
            assert enabled is False
