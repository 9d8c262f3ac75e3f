"""Application-specific exceptions."""


class ClaError(Exception):
    """Base exception for all cla errors."""


class TerminalError(ClaError):
    """Exception raised when the terminal cannot be queried or configured."""

    def __init__(self, message: str, operation: str = "") -> None:
        """Initialize TerminalError.

        Args:
            message: Error message
            operation: Terminal operation that failed (e.g. "size", "raw_mode")
        """
        super().__init__(message)
        self.operation = operation


class RangeError(ClaError):
    """Exception raised when month arithmetic receives an out-of-range month."""
