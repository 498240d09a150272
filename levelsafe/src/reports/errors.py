"""Error taxonomy for report construction and validation."""
from __future__ import annotations


class ReportsError(Exception):
    """Base class for report errors."""


class InvalidReportsLengthError(ReportsError):
    """A report was built with a disallowed number of levels.

    Reserved: construction currently accepts reports of any length, so no code
    path raises this yet.
    """

    def __init__(self, length: int):
        self.length = int(length)
        super().__init__(f"Length of reports invalid: {self.length}")
