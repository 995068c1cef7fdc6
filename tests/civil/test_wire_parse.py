import pytest

from solaraltaz.civil.wire import ParseError, format_line, parse_civil_datetime, parse_line
from solaraltaz.core.models import CivilDateTime


def test_parse_reference_line():
    res = parse_line("2025,6,13,22,14,0\n")
    assert res.ok
    assert res.error is None
    assert res.unwrap() == CivilDateTime(2025, 6, 13, 22, 14, 0)


def test_whitespace_around_fields_tolerated():
    assert parse_civil_datetime(" 2025, 1 ,15,12, 0,0 ") == CivilDateTime(2025, 1, 15, 12, 0, 0)


@pytest.mark.parametrize(
    "line,fragment",
    [
        ("", "empty"),
        ("2025,6,13,22,14", "6 comma-separated"),
        ("2025,6,13,22,14,0,0", "6 comma-separated"),
        ("2025,six,13,22,14,0", "month is not an integer"),
        ("2025,6,13,22.5,14,0", "hour is not an integer"),
        ("2025,13,1,0,0,0", "month must be within"),
        ("2025,2,29,0,0,0", "day must be within 1..28"),
        ("2025,6,13,24,0,0", "hour must be within"),
        ("2025,6,13,23,60,0", "minute must be within"),
        ("2025,6,13,23,59,60", "second must be within"),
        ("0,6,13,0,0,0", "year must be >= 1"),
    ],
)
def test_malformed_lines_rejected(line, fragment):
    res = parse_line(line)
    assert not res.ok
    assert res.value is None
    assert fragment in res.error
    with pytest.raises(ParseError) as excinfo:
        res.unwrap()
    assert excinfo.value.line == line


def test_leap_day_accepted():
    assert parse_line("2024,2,29,12,0,0").ok


def test_format_line():
    assert format_line(CivilDateTime(2025, 6, 13, 22, 14, 0)) == "2025,6,13,22,14,0"
