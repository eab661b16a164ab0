"""Recurrence date generation for repeating calendar events."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Optional, Union, assert_never

from dateutil.rrule import rrule, rrulestr

from .calendar_math import is_leap_year, last_day_of_month
from .date_utils import DateLike, format_calendar_date, parse_calendar_date
from .exceptions import (
    EndBeforeStartError,
    EndDateOutOfRangeError,
    IntervalTooSmallError,
)
from .models import RepeatType

logger = logging.getLogger(__name__)

DEFAULT_MAX_END_DATE = date(2025, 12, 31)


@dataclass(frozen=True)
class RecurrenceConfig:
    """Configuration for recurrence generation.

    max_end_date is the horizon cap: the latest end date a request may use.
    """

    max_end_date: date = DEFAULT_MAX_END_DATE

    @classmethod
    def from_settings(cls, settings: Any) -> "RecurrenceConfig":
        """Extract recurrence configuration from a settings object.

        Args:
            settings: Any object with an optional ``max_end_date`` attribute

        Returns:
            RecurrenceConfig with values from settings or defaults
        """
        raw = getattr(settings, "max_end_date", None)
        if raw is None:
            return cls()
        return cls(max_end_date=parse_calendar_date(raw))


@dataclass(frozen=True)
class RecurrenceRequest:
    """Input to the generator. Dates are validated by the generator, not here."""

    start_date: DateLike
    cadence: RepeatType
    interval: int
    end_date: DateLike

    def __post_init__(self) -> None:
        # Unknown cadence strings raise ValueError from the enum
        object.__setattr__(self, "cadence", RepeatType(self.cadence))


@dataclass(frozen=True)
class _ValidatedRequest:
    start: date
    end: date
    cadence: RepeatType
    interval: int


def _validate(request: RecurrenceRequest, config: RecurrenceConfig) -> _ValidatedRequest:
    start = parse_calendar_date(request.start_date)
    end = parse_calendar_date(request.end_date)

    if end < start:
        logger.debug("Rejected request: end %s before start %s", end, start)
        raise EndBeforeStartError(
            f"End date {format_calendar_date(end)} is before start date {format_calendar_date(start)}"
        )

    interval = request.interval
    if request.cadence != RepeatType.NONE:
        if isinstance(interval, bool) or not isinstance(interval, int):
            logger.debug("Rejected request: non-integer interval %r", interval)
            raise IntervalTooSmallError(f"Repeat interval must be an integer, got {interval!r}")
        if interval < 1:
            logger.debug("Rejected request: interval %r", interval)
            raise IntervalTooSmallError(f"Repeat interval must be 1 or greater, got {interval!r}")

    if end > config.max_end_date:
        logger.debug("Rejected request: end %s past horizon %s", end, config.max_end_date)
        raise EndDateOutOfRangeError(
            f"End date must be on or before {format_calendar_date(config.max_end_date)}, "
            f"got {format_calendar_date(end)}"
        )

    return _ValidatedRequest(start=start, end=end, cadence=request.cadence, interval=interval)


def is_valid_repeat_date(target: date, anchor: date, cadence: RepeatType) -> bool:
    """Check whether a computed occurrence should be emitted.

    Only yearly repeats anchored on February 29 can produce invalid targets:
    those landing in non-leap years are skipped. Monthly repeats clamp to the
    month end instead, so they are always valid.
    """
    if cadence == RepeatType.YEARLY and anchor.month == 2 and anchor.day == 29:
        return is_leap_year(target.year)
    return True


def _add_months(anchor: date, months: int) -> date:
    month_index = anchor.month - 1 + months
    year = anchor.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, min(anchor.day, last_day_of_month(year, month)))


def _iter_validated(req: _ValidatedRequest) -> Iterator[date]:
    start, end, cadence, interval = req.start, req.end, req.cadence, req.interval

    if cadence is RepeatType.NONE:
        yield start
        return

    k = 0
    while True:
        step = k * interval
        k += 1

        # A candidate past date.max is necessarily past the end date
        try:
            if cadence is RepeatType.DAILY:
                current = start + timedelta(days=step)
            elif cadence is RepeatType.WEEKLY:
                current = start + timedelta(weeks=step)
            elif cadence is RepeatType.MONTHLY:
                current = _add_months(start, step)
            elif cadence is RepeatType.YEARLY:
                year = start.year + step
                if start.month == 2 and start.day == 29 and not is_leap_year(year):
                    if year > end.year:
                        return
                    continue
                current = start.replace(year=year)
            else:
                assert_never(cadence)
        except (OverflowError, ValueError):
            logger.debug("Stopped %s expansion at calendar limit after %s", cadence.value, start)
            return

        if current > end:
            return

        if is_valid_repeat_date(current, start, cadence):
            yield current


def iter_occurrences(
    request: RecurrenceRequest, config: Optional[RecurrenceConfig] = None
) -> Iterator[date]:
    """Validate a request, then lazily yield its occurrence dates.

    Validation runs before this function returns, so errors surface at the
    call site rather than on first iteration.

    Raises:
        RecurrenceValidationError: If the request is invalid
    """
    validated = _validate(request, config or RecurrenceConfig())
    return _iter_validated(validated)


def generate_occurrences(
    request: RecurrenceRequest, config: Optional[RecurrenceConfig] = None
) -> list[date]:
    """Generate the ordered occurrence dates for a recurrence request.

    Args:
        request: Start date, cadence, interval and end date
        config: Optional configuration (horizon cap); defaults apply when omitted

    Returns:
        Strictly ascending list of dates within [start, end]

    Raises:
        InvalidDateFormatError: Start or end is not a real calendar date
        EndBeforeStartError: End precedes start
        IntervalTooSmallError: Interval is below 1
        EndDateOutOfRangeError: End is past the horizon cap
    """
    occurrences = list(iter_occurrences(request, config))
    logger.debug(
        "Generated %d %s occurrences (interval=%r) from %s to %s",
        len(occurrences),
        request.cadence.value,
        request.interval,
        request.start_date,
        request.end_date,
    )
    return occurrences


def generate_repeat_dates(
    start_date: DateLike,
    repeat_type: Union[RepeatType, str],
    interval: int,
    end_date: DateLike,
    config: Optional[RecurrenceConfig] = None,
) -> list[str]:
    """String form of generate_occurrences: returns ``YYYY-MM-DD`` strings."""
    request = RecurrenceRequest(
        start_date=start_date,
        cadence=RepeatType(repeat_type),
        interval=interval,
        end_date=end_date,
    )
    return [format_calendar_date(d) for d in generate_occurrences(request, config)]


_RRULE_FREQ = {
    RepeatType.DAILY: "DAILY",
    RepeatType.WEEKLY: "WEEKLY",
    RepeatType.MONTHLY: "MONTHLY",
    RepeatType.YEARLY: "YEARLY",
}


def build_rrule_string(
    request: RecurrenceRequest, config: Optional[RecurrenceConfig] = None
) -> str:
    """Express a request as an RFC 5545 RRULE with the same occurrence set.

    Monthly anchors after the 28th are written as ``BYMONTHDAY=28,...,d;BYSETPOS=-1``
    so short months clamp to their last day instead of being skipped.

    Raises:
        RecurrenceValidationError: If the request is invalid
        ValueError: If the cadence is ``none``
    """
    req = _validate(request, config or RecurrenceConfig())
    if req.cadence == RepeatType.NONE:
        raise ValueError("Non-repeating requests have no RRULE")

    parts = [f"FREQ={_RRULE_FREQ[req.cadence]}", f"INTERVAL={req.interval}"]
    if req.cadence == RepeatType.MONTHLY and req.start.day > 28:
        days = ",".join(str(d) for d in range(28, req.start.day + 1))
        parts.append(f"BYMONTHDAY={days}")
        parts.append("BYSETPOS=-1")
    parts.append(f"UNTIL={req.end.strftime('%Y%m%d')}")
    return ";".join(parts)


def as_rrule(request: RecurrenceRequest, config: Optional[RecurrenceConfig] = None) -> rrule:
    """Build a dateutil rrule equivalent to the request, anchored at midnight."""
    rule_string = build_rrule_string(request, config)
    start = parse_calendar_date(request.start_date)
    parsed = rrulestr(rule_string, dtstart=datetime(start.year, start.month, start.day))
    logger.debug("Built rrule %s from %s", rule_string, start)
    return parsed
