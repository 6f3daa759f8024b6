"""Exceptions raised while validating grouping specs and inserting separators."""

from __future__ import annotations


class GroupingError(Exception):
    """Base class for every error raised by the grouping engine."""


class InvalidDigitSequence(GroupingError, ValueError):
    """The input contains something other than the ASCII digits ``0``-``9``."""

    def __init__(self, position: int, char: str):
        self.position = position
        self.char = char
        super().__init__(
            f"Invalid digit sequence: character {char!r} at position {position} "
            "is not an ASCII decimal digit"
        )


class InvalidGroupingSpec(GroupingError, ValueError):
    """A grouping spec cannot be used to separate digits."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid grouping spec: {reason}")


class BufferAccountingError(GroupingError, RuntimeError):
    """The output buffer did not hold the number of characters the pass produced.

    Always a defect in the sizing formula or the copy loop, never bad input.
    """

    def __init__(self, expected: int, actual: int, detail: str = ""):
        self.expected = expected
        self.actual = actual
        message = (
            f"Buffer accounting error: expected {expected} output characters, "
            f"got {actual}"
        )
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
