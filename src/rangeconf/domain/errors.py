"""Exceptions raised by rangeconf"""

from typing import Optional


class RangeConfError(Exception):
    """Base class for rangeconf errors."""

    pass


class UseAfterConsumedError(RangeConfError):
    """Raised when a single-use builder is built a second time."""

    pass


class SourceFormatError(RangeConfError):
    """A source line does not follow the ``field:value`` format."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number
