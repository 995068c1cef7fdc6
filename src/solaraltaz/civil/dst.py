"""U.S. Daylight Saving Time rule (Energy Policy Act of 2005, effective 2007).

DST starts on the second Sunday in March at 02:00 local standard time and ends
on the first Sunday in November at 02:00 local daylight time. Earlier U.S.
rules are not modelled: for years before 2007 the result follows the 2007 rule.
"""
from __future__ import annotations

from solaraltaz.civil.calendar import SUNDAY, day_of_week
from solaraltaz.core.models import ObserverLocation

TRANSITION_HOUR = 2
DST_RULE_FIRST_YEAR = 2007


def _first_sunday(year: int, month: int) -> int:
    return 1 + (SUNDAY - day_of_week(year, month, 1)) % 7


def second_sunday_of_march(year: int) -> int:
    return _first_sunday(year, 3) + 7


def first_sunday_of_november(year: int) -> int:
    return _first_sunday(year, 11)


def is_daylight_saving(year: int, month: int, day: int, hour: int) -> bool:
    """Return True when U.S. DST is in effect at the given local time."""
    if month < 3 or month > 11:
        return False
    if 3 < month < 11:
        return True
    if month == 3:
        start = second_sunday_of_march(year)
        return day > start or (day == start and hour >= TRANSITION_HOUR)
    end = first_sunday_of_november(year)
    return day < end or (day == end and hour < TRANSITION_HOUR)


def utc_offset_hours(is_dst: bool, location: ObserverLocation) -> int:
    """Pick the observer's daylight or standard UTC offset."""
    if is_dst:
        return location.daylight_utc_offset_hours
    return location.standard_utc_offset_hours


__all__ = [
    "DST_RULE_FIRST_YEAR",
    "TRANSITION_HOUR",
    "first_sunday_of_november",
    "is_daylight_saving",
    "second_sunday_of_march",
    "utc_offset_hours",
]
