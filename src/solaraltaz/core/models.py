"""Domain models for the solar position core.

Provides value types with validation for the observer, the local civil time of a
request, the intermediate solar angles and the computed result.
"""
from __future__ import annotations

import datetime as dt
import math
import numbers
from dataclasses import asdict, dataclass
from typing import Any, Dict


class ValidationError(ValueError):
    """Raised when model inputs violate constraints."""


class InvalidInputError(ValidationError):
    """Raised when an input is NaN, infinite, non-integral or physically invalid."""


def _finite_float(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(f"{name} must be a real number, got {value!r}")
    fval = float(value)
    if not math.isfinite(fval):
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    return fval


def _integral(name: str, value: Any) -> int:
    # Accept 2025 and 2025.0 but never True, NaN or 2025.5.
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real) and math.isfinite(float(value)) and float(value).is_integer():
        return int(value)
    raise InvalidInputError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class ObserverLocation:
    """Fixed observer site plus the standard/daylight UTC offset pair of its time zone."""

    latitude_deg: float
    longitude_deg: float
    standard_utc_offset_hours: int = -6
    daylight_utc_offset_hours: int = -5
    name: str = "observer"

    def __post_init__(self):
        lat = _finite_float("latitude_deg", self.latitude_deg)
        lon = _finite_float("longitude_deg", self.longitude_deg)
        if not (-90.0 <= lat <= 90.0):
            raise InvalidInputError("Latitude must be between -90 and 90 degrees")
        if not (-180.0 <= lon <= 180.0):
            raise InvalidInputError("Longitude must be between -180 and 180 degrees")
        std = _integral("standard_utc_offset_hours", self.standard_utc_offset_hours)
        dst = _integral("daylight_utc_offset_hours", self.daylight_utc_offset_hours)
        for label, offset in (("standard", std), ("daylight", dst)):
            if not (-12 <= offset <= 14):
                raise InvalidInputError(f"{label} UTC offset must be between -12 and 14 hours")
        if not self.name:
            raise InvalidInputError("Observer name is required")
        object.__setattr__(self, "latitude_deg", lat)
        object.__setattr__(self, "longitude_deg", lon)
        object.__setattr__(self, "standard_utc_offset_hours", std)
        object.__setattr__(self, "daylight_utc_offset_hours", dst)


# Carbondale, Illinois on U.S. Central Time (CST -6, CDT -5).
CARBONDALE_IL = ObserverLocation(
    latitude_deg=37.7272,
    longitude_deg=-89.2168,
    standard_utc_offset_hours=-6,
    daylight_utc_offset_hours=-5,
    name="carbondale_il",
)


@dataclass(frozen=True)
class CivilDateTime:
    """Local civil date and time at the observer.

    Fields must be integral and form a real Gregorian date and time of day;
    anything else raises :class:`InvalidInputError` before it reaches the
    calendar arithmetic.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self):
        # civil.calendar imports this module via civil.dst; import lazily.
        from solaraltaz.civil.calendar import days_in_month

        for name in ("year", "month", "day", "hour", "minute", "second"):
            object.__setattr__(self, name, _integral(name, getattr(self, name)))
        if self.year < 1:
            raise InvalidInputError(f"year must be >= 1, got {self.year}")
        for name, low, high in (("month", 1, 12), ("hour", 0, 23), ("minute", 0, 59), ("second", 0, 59)):
            value = getattr(self, name)
            if not (low <= value <= high):
                raise InvalidInputError(f"{name} must be within {low}..{high}, got {value}")
        max_day = days_in_month(self.year, self.month)
        if not (1 <= self.day <= max_day):
            raise InvalidInputError(
                f"day must be within 1..{max_day} for {self.year}-{self.month:02d}, got {self.day}"
            )

    @classmethod
    def from_datetime(cls, value: dt.datetime) -> "CivilDateTime":
        if value.tzinfo is not None:
            raise ValueError("datetime must be naive local civil time (no tzinfo)")
        return cls(value.year, value.month, value.day, value.hour, value.minute, value.second)

    def isoformat(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )


@dataclass(frozen=True)
class SolarAngles:
    gamma: float
    declination: float
    hour_angle: float


@dataclass(frozen=True)
class SolarPositionResult:
    elevation_deg: float
    azimuth_deg: float
    irradiance_wm2: float
    utc_offset_hours: int

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = [
    "ValidationError",
    "InvalidInputError",
    "ObserverLocation",
    "CARBONDALE_IL",
    "CivilDateTime",
    "SolarAngles",
    "SolarPositionResult",
]
