import datetime as dt

import pytest
import pytz

from solaraltaz.civil.dst import (
    first_sunday_of_november,
    is_daylight_saving,
    second_sunday_of_march,
    utc_offset_hours,
)
from solaraltaz.core.models import CARBONDALE_IL, ObserverLocation


def test_transition_dates_2025():
    assert second_sunday_of_march(2025) == 9
    assert first_sunday_of_november(2025) == 2


@pytest.mark.parametrize(
    "year,march,november",
    [(2007, 11, 4), (2019, 10, 3), (2024, 10, 3), (2026, 8, 1), (2030, 10, 3)],
)
def test_transition_dates_other_years(year, march, november):
    assert second_sunday_of_march(year) == march
    assert first_sunday_of_november(year) == november


def test_spring_forward_boundary_2025():
    assert not is_daylight_saving(2025, 3, 9, 1)
    assert is_daylight_saving(2025, 3, 9, 2)
    assert not is_daylight_saving(2025, 3, 8, 23)
    assert is_daylight_saving(2025, 3, 10, 0)


def test_fall_back_boundary_2025():
    assert is_daylight_saving(2025, 11, 2, 1)
    assert not is_daylight_saving(2025, 11, 2, 2)
    assert is_daylight_saving(2025, 11, 1, 23)
    assert not is_daylight_saving(2025, 11, 3, 0)


def test_inside_and_outside_window():
    assert is_daylight_saving(2025, 6, 13, 22)
    assert not is_daylight_saving(2025, 1, 15, 12)
    assert not is_daylight_saving(2025, 12, 25, 12)
    assert is_daylight_saving(2025, 10, 31, 23)


def test_matches_pytz_chicago_for_every_hour_of_2025():
    tz = pytz.timezone("America/Chicago")
    ts = dt.datetime(2025, 1, 1, 0)
    while ts.year == 2025:
        # 02:00 on the spring-forward day does not exist on the wall clock.
        if not (ts.month == 3 and ts.day == 9 and ts.hour == 2):
            expected = bool(tz.localize(ts, is_dst=True).dst())
            assert is_daylight_saving(ts.year, ts.month, ts.day, ts.hour) == expected, ts
        ts += dt.timedelta(hours=1)


def test_utc_offset_uses_observer_pair():
    assert utc_offset_hours(True, CARBONDALE_IL) == -5
    assert utc_offset_hours(False, CARBONDALE_IL) == -6
    eastern = ObserverLocation(latitude_deg=40.7, longitude_deg=-74.0, standard_utc_offset_hours=-5, daylight_utc_offset_hours=-4)
    assert utc_offset_hours(True, eastern) == -4
    assert utc_offset_hours(False, eastern) == -5
