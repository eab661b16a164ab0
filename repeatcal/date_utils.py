"""Calendar date parsing and formatting for repeatcal.

Dates travel between layers as fixed-width ``YYYY-MM-DD`` strings; inside the
generator they are plain ``datetime.date`` values with no time component.
"""

import logging
import re
from datetime import date, datetime
from typing import Union

from .exceptions import InvalidDateFormatError

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DateLike = Union[str, date]


def parse_calendar_date(value: DateLike) -> date:
    """Parse a ``YYYY-MM-DD`` string (or pass through a ``date``).

    Args:
        value: Date string or date object

    Returns:
        The corresponding ``date``; datetimes are truncated to their date part

    Raises:
        InvalidDateFormatError: If the value is not a real calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateFormatError(f"Invalid date value: {value!r}")

    text = value.strip()
    if not _ISO_DATE_RE.match(text):
        raise InvalidDateFormatError(f"Invalid date format: {value!r} (expected YYYY-MM-DD)")

    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as e:
        logger.debug("Rejected non-existent calendar date %r: %s", value, e)
        raise InvalidDateFormatError(f"Invalid calendar date: {value!r}") from e


def format_calendar_date(value: date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
