"""NOAA simplified solar geometry: fractional year, declination, equation of time, hour angle.

The Fourier series are the Spencer (1971) fits used by the NOAA General Solar
Position Calculations sheet. They are good to roughly 0.5 degrees for
1901-2099 and keep evaluating (with less accuracy) outside that window.
All angles returned here are radians; the equation of time is in minutes.
"""
from __future__ import annotations

import math

from solaraltaz.civil.calendar import day_of_year
from solaraltaz.core.models import CivilDateTime, ObserverLocation, SolarAngles

DAYS_PER_YEAR = 365.0
MINUTES_PER_DEGREE = 4.0
VALID_YEARS = (1901, 2099)


def fractional_year_angle(doy: int, hour: int) -> float:
    """Fractional year gamma in radians; the year is taken as exactly 365 days."""
    return 2.0 * math.pi / DAYS_PER_YEAR * (doy - 1 + (hour - 12) / 24.0)


def declination(gamma: float) -> float:
    return (
        0.006918
        - 0.399912 * math.cos(gamma)
        + 0.070257 * math.sin(gamma)
        - 0.006758 * math.cos(2 * gamma)
        + 0.000907 * math.sin(2 * gamma)
        - 0.002697 * math.cos(3 * gamma)
        + 0.00148 * math.sin(3 * gamma)
    )


def equation_of_time(gamma: float) -> float:
    """Equation of time in minutes (apparent minus mean solar time)."""
    return 229.18 * (
        0.000075
        + 0.001868 * math.cos(gamma)
        - 0.032077 * math.sin(gamma)
        - 0.014615 * math.cos(2 * gamma)
        - 0.040849 * math.sin(2 * gamma)
    )


def hour_angle(
    gamma: float,
    longitude_deg: float,
    hour: int,
    minute: int,
    second: int,
    utc_offset_hours: int,
) -> float:
    """Hour angle in radians, zero at solar noon, positive in the afternoon.

    ``longitude_deg`` is negative west of Greenwich and ``utc_offset_hours`` is
    the local offset from UTC (e.g. -5 for CDT).
    """
    time_offset = equation_of_time(gamma) + MINUTES_PER_DEGREE * longitude_deg - 60.0 * utc_offset_hours
    true_solar_time = hour * 60.0 + minute + second / 60.0 + time_offset
    return math.radians(true_solar_time / MINUTES_PER_DEGREE - 180.0)


def solar_angles(location: ObserverLocation, when: CivilDateTime, utc_offset_hours: int) -> SolarAngles:
    gamma = fractional_year_angle(day_of_year(when.year, when.month, when.day), when.hour)
    return SolarAngles(
        gamma=gamma,
        declination=declination(gamma),
        hour_angle=hour_angle(
            gamma,
            location.longitude_deg,
            when.hour,
            when.minute,
            when.second,
            utc_offset_hours,
        ),
    )


__all__ = [
    "VALID_YEARS",
    "fractional_year_angle",
    "declination",
    "equation_of_time",
    "hour_angle",
    "solar_angles",
]
