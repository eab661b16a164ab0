"""Gregorian calendar arithmetic used by the recurrence generator."""

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def last_day_of_month(year: int, month: int) -> int:
    """Return the last day number (28-31) of ``month`` in ``year``.

    Args:
        year: Calendar year
        month: Month number, 1-12

    Returns:
        Number of days in the month, accounting for leap-year February

    Raises:
        ValueError: If month is outside 1..12
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]
