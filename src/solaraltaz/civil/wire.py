"""Line format ``year,month,day,hour,minute,second`` used by serial tooling.

Malformed lines produce a failed :class:`ParseResult` carrying the reason;
they are never turned into zero-filled timestamps.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from solaraltaz.civil.calendar import days_in_month
from solaraltaz.core.models import CivilDateTime

FIELDS = ("year", "month", "day", "hour", "minute", "second")

_INT_RE = re.compile(r"^[+-]?\d+$")
_RANGES = {
    "month": (1, 12),
    "hour": (0, 23),
    "minute": (0, 59),
    "second": (0, 59),
}


class ParseError(ValueError):
    """Raised when a wire line cannot be turned into a CivilDateTime."""

    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line


@dataclass(frozen=True)
class ParseResult:
    line: str
    value: Optional[CivilDateTime] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.value is not None

    def unwrap(self) -> CivilDateTime:
        if self.value is None:
            raise ParseError(self.error or "unparseable line", self.line)
        return self.value


def _fail(line: str, reason: str) -> ParseResult:
    return ParseResult(line=line, error=reason)


def parse_line(line: str) -> ParseResult:
    text = line.strip()
    if not text:
        return _fail(line, "empty line")
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != len(FIELDS):
        return _fail(line, f"expected {len(FIELDS)} comma-separated fields, got {len(parts)}")

    values = {}
    for name, raw in zip(FIELDS, parts):
        if not _INT_RE.match(raw):
            return _fail(line, f"{name} is not an integer: {raw!r}")
        values[name] = int(raw)

    if values["year"] < 1:
        return _fail(line, f"year must be >= 1, got {values['year']}")
    for name, (low, high) in _RANGES.items():
        if not (low <= values[name] <= high):
            return _fail(line, f"{name} must be within {low}..{high}, got {values[name]}")
    max_day = days_in_month(values["year"], values["month"])
    if not (1 <= values["day"] <= max_day):
        return _fail(line, f"day must be within 1..{max_day} for {values['year']}-{values['month']:02d}, got {values['day']}")

    return ParseResult(line=line, value=CivilDateTime(**values))


def parse_civil_datetime(line: str) -> CivilDateTime:
    return parse_line(line).unwrap()


def format_line(when: CivilDateTime) -> str:
    return ",".join(str(getattr(when, name)) for name in FIELDS)


__all__ = ["FIELDS", "ParseError", "ParseResult", "parse_line", "parse_civil_datetime", "format_line"]
