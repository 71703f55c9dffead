"""Domain error types.

The domain raises; the service layer converts these into
:class:`~timefield.services.result.ServiceResult` errors so that bad user
input never escapes as an exception past the service boundary.
"""

from __future__ import annotations


class TimefieldError(ValueError):
    """Base class for recoverable input errors."""

    code = "INVALID_INPUT"


class InvalidDateTimeFormat(TimefieldError):
    """One side of an interval is not a recognised date/time."""

    code = "INVALID_DATETIME"


class InvalidInterval(TimefieldError):
    """Interval text matches no form, or yields an out-of-order/out-of-range span."""

    code = "INVALID_INTERVAL"


class InvalidDuration(TimefieldError):
    """Duration text is not ``H[:M[:S]]`` with non-negative integers."""

    code = "INVALID_DURATION"


class TaskIndexError(IndexError):
    """A 1-based task index does not refer to an existing task."""

    code = "INVALID_TASK"

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"No task #{index} (have {size})")
