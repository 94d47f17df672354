"""Error taxonomy for the calendar engine.

Everything here is fail-fast: the engine performs no I/O, so there is no
transient failure class and nothing is ever retried.
"""

from __future__ import annotations

from typing import Any


class CalendarError(Exception):
    """Base class for every error raised by conway_calendar."""


class RangeError(CalendarError, ValueError):
    """Raised when a year or date falls outside the supported window.

    ``value`` is the caller's own input; ``low`` and ``high`` are inclusive.
    """

    def __init__(self, value: Any, low: Any, high: Any, kind: str = "Gregorian year") -> None:
        self.value = value
        self.low = low
        self.high = high
        self.kind = kind
        super().__init__(f"{kind} {value} is outside the supported window {low} to {high}.")


class ConsistencyError(CalendarError):
    """A computed value broke one of the algorithm's invariants.

    This is never caused by bad input; it means the arithmetic itself is off
    for the given year. ``fields`` holds the offending computed values.
    """

    def __init__(self, message: str, **fields: Any) -> None:
        self.fields = dict(fields)
        details = ", ".join(f"{k}={v!r}" for k, v in sorted(self.fields.items()))
        super().__init__(f"{message} ({details})" if details else message)


class InvalidEnumError(CalendarError, ValueError):
    """A month value outside the recognized set reached a lookup table."""

    def __init__(self, value: Any, kind: str = "month") -> None:
        self.value = value
        self.kind = kind
        super().__init__(f"Invalid {kind}: {value!r}")


class InvalidDateError(CalendarError, ValueError):
    """A date whose components do not exist in its calendar."""
