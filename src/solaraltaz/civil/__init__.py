"""Civil time helpers: Gregorian calendar, U.S. DST rule and the serial line format."""

from .calendar import day_of_week, day_of_year, is_leap_year
from .dst import is_daylight_saving, utc_offset_hours
from .wire import ParseError, ParseResult, parse_line

__all__ = [
    "day_of_week",
    "day_of_year",
    "is_leap_year",
    "is_daylight_saving",
    "utc_offset_hours",
    "ParseError",
    "ParseResult",
    "parse_line",
]
