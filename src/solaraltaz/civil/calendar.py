"""Gregorian calendar arithmetic: leap years, ordinal day and weekday.

No bounds validation is performed; month/day ranges are the caller's
responsibility (the wire parser checks them before anything reaches here).
"""
from __future__ import annotations

# Days elapsed before the first of each month in a common year.
_DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

SUNDAY = 0
SATURDAY = 6


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based ordinal day (1..366) of a Gregorian date."""
    doy = _DAYS_BEFORE_MONTH[month - 1] + day
    if month > 2 and is_leap_year(year):
        doy += 1
    return doy


def days_in_month(year: int, month: int) -> int:
    if month == 12:
        return 31
    length = _DAYS_BEFORE_MONTH[month] - _DAYS_BEFORE_MONTH[month - 1]
    if month == 2 and is_leap_year(year):
        length += 1
    return length


def day_of_week(year: int, month: int, day: int) -> int:
    """Weekday by Zeller's Congruence, 0=Sunday .. 6=Saturday.

    January and February count as months 13 and 14 of the previous year.
    """
    if month < 3:
        month += 12
        year -= 1
    k = year % 100
    j = year // 100
    h = (day + (13 * (month + 1)) // 5 + k + k // 4 + j // 4 + 5 * j) % 7
    # Zeller yields 0=Saturday; shift so 0=Sunday.
    return (h + 6) % 7


__all__ = ["SUNDAY", "SATURDAY", "is_leap_year", "day_of_year", "days_in_month", "day_of_week"]
