"""Exception classes for Listo.

The classification and transform functions are total and never raise.
These exceptions cover the two places where input can be invalid:
building a configuration and applying a directive to a buffer.
"""

from __future__ import annotations


class ListoError(Exception):
    """Base exception for all Listo errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(ListoError):
    """Invalid list configuration.

    Raised by ListConfig when a field fails validation.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending config field (e.g., "markers")
            message: Description of the problem
        """
        self.field = field
        self.message = message
        super().__init__(f"Config field '{field}': {message}")


class LineRangeError(ListoError):
    """A directive addressed a line outside the buffer.

    Raised by the buffer adapter, never by the transform engine.
    """

    def __init__(self, lineno: int, line_count: int) -> None:
        """Initialize line range error.

        Args:
            lineno: Requested line number (1-indexed)
            line_count: Number of lines in the buffer
        """
        self.lineno = lineno
        self.line_count = line_count
        super().__init__(f"Line {lineno} is outside the buffer (1..{line_count})")
