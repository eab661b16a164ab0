"""Exception hierarchy for recurrence generation.

Every validation failure has its own exception type so callers can decide
whether to surface the message to a user or abort silently.
"""


class RecurrenceError(Exception):
    """Base exception for all repeatcal errors."""


class RecurrenceValidationError(RecurrenceError, ValueError):
    """A recurrence request failed input validation.

    Raised before any occurrence is generated; no partial output exists.
    """


class InvalidDateFormatError(RecurrenceValidationError):
    """Start or end date is not a real ``YYYY-MM-DD`` calendar date.

    Raised when:
    - The value is not a string or ``date``
    - The string does not match ``YYYY-MM-DD``
    - The triple names a day that does not exist (e.g. 2025-02-30)
    """


class EndBeforeStartError(RecurrenceValidationError):
    """End date precedes start date."""


class IntervalTooSmallError(RecurrenceValidationError):
    """Repeat interval is below 1 or not an integer."""


class EndDateOutOfRangeError(RecurrenceValidationError):
    """End date is later than the supported horizon."""
