"""repeatcal - recurrence date generation for repeating calendar events.

Given an anchor date, a cadence, an interval and an end date, produces the
ordered occurrence dates, clamping monthly repeats to short month ends and
skipping February 29 in non-leap years for yearly repeats.
"""

__version__ = "0.1.0"

from .calendar_math import is_leap_year, last_day_of_month
from .event_builder import build_event_series
from .exceptions import (
    EndBeforeStartError,
    EndDateOutOfRangeError,
    IntervalTooSmallError,
    InvalidDateFormatError,
    RecurrenceError,
    RecurrenceValidationError,
)
from .models import Event, EventForm, RepeatInfo, RepeatType
from .recurrence import (
    RecurrenceConfig,
    RecurrenceRequest,
    generate_occurrences,
    generate_repeat_dates,
    is_valid_repeat_date,
    iter_occurrences,
)
from .series import detach_occurrence, is_recurring_occurrence, repeat_indicator_glyph

__all__ = [
    "EndBeforeStartError",
    "EndDateOutOfRangeError",
    "Event",
    "EventForm",
    "IntervalTooSmallError",
    "InvalidDateFormatError",
    "RecurrenceConfig",
    "RecurrenceError",
    "RecurrenceRequest",
    "RecurrenceValidationError",
    "RepeatInfo",
    "RepeatType",
    "build_event_series",
    "detach_occurrence",
    "generate_occurrences",
    "generate_repeat_dates",
    "is_leap_year",
    "is_recurring_occurrence",
    "is_valid_repeat_date",
    "iter_occurrences",
    "last_day_of_month",
    "repeat_indicator_glyph",
]
