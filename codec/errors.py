"""Errors raised by the line-format reader."""

from typing import Optional


class FormatError(ValueError):
    """A line did not match the grammar, or input ended too early.

    Attributes:
        line_number: 1-based number of the offending line, or None when the
            input ended before the expected token arrived.
        line: Text of the offending line, or None at end of input.
    """

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.message = message
        self.line_number = line_number
        self.line = line
        if line_number is None:
            super().__init__(message)
        else:
            super().__init__(f"line {line_number}: {message}")
