import pandas as pd
import pytest

from solaraltaz.core.debug import ListDebugCollector
from solaraltaz.core.models import CARBONDALE_IL, CivilDateTime
from solaraltaz.solar.position import TRACK_COLUMNS, compute_solar_position, solar_track


def test_track_matches_scalar_calculator():
    times = pd.date_range("2025-06-13 00:00", periods=24, freq="1h")
    df = solar_track(CARBONDALE_IL, times)
    assert list(df.columns) == TRACK_COLUMNS
    assert df.index.equals(times)
    for ts, row in df.iterrows():
        res = compute_solar_position(CARBONDALE_IL, CivilDateTime(ts.year, ts.month, ts.day, ts.hour, ts.minute, ts.second))
        assert row["elevation_deg"] == pytest.approx(res.elevation_deg)
        assert row["azimuth_deg"] == pytest.approx(res.azimuth_deg)
        assert row["irradiance_wm2"] == pytest.approx(res.irradiance_wm2, abs=1e-9)
        assert row["utc_offset_hours"] == res.utc_offset_hours
    assert df["is_dst"].all()
    assert (df["irradiance_wm2"] >= 0).all()
    assert ((df["azimuth_deg"] >= 0) & (df["azimuth_deg"] < 360)).all()


def test_track_dst_transition_day():
    times = pd.date_range("2025-03-09 00:00", periods=4, freq="1h")
    df = solar_track(CARBONDALE_IL, times)
    assert df["utc_offset_hours"].tolist() == [-6, -6, -5, -5]
    assert df["is_dst"].tolist() == [False, False, True, True]


def test_times_must_be_naive():
    times = pd.date_range("2025-01-01", periods=2, freq="1h", tz="UTC")
    with pytest.raises(ValueError):
        solar_track(CARBONDALE_IL, times)


def test_summary_event():
    collector = ListDebugCollector()
    times = pd.date_range("2025-06-13 00:00", periods=96, freq="15min")
    df = solar_track(CARBONDALE_IL, times, debug=collector)
    summary = [e for e in collector.events if e["stage"] == "solar_track.summary"]
    assert len(summary) == 1
    payload = summary[0]["payload"]
    assert payload["samples"] == 96
    assert payload["dst_samples"] == 96
    assert payload["irradiance_max"] == pytest.approx(df["irradiance_wm2"].max())
    assert payload["insolation_wh_m2"] == pytest.approx(df["irradiance_wm2"].sum() * 0.25)
    assert payload["insolation_wh_m2"] > 0


def test_empty_index():
    collector = ListDebugCollector()
    df = solar_track(CARBONDALE_IL, pd.DatetimeIndex([]), debug=collector)
    assert df.empty
    assert list(df.columns) == TRACK_COLUMNS
    assert collector.events[0]["payload"] == {"samples": 0}


def test_track_forwards_debug_per_sample():
    collector = ListDebugCollector()
    times = pd.date_range("2025-03-09 00:00", periods=4, freq="1h")
    solar_track(CARBONDALE_IL, times, debug=collector)
    stages = [e["stage"] for e in collector.events]
    assert stages == ["dst.select", "solar_position.angles"] * 4 + ["solar_track.summary"]
    selects = [e for e in collector.events if e["stage"] == "dst.select"]
    assert [e["ts"] for e in selects] == [ts.isoformat() for ts in times]
    assert [e["payload"]["is_dst"] for e in selects] == [False, False, True, True]


def test_track_evaluates_each_sample_once(monkeypatch):
    from solaraltaz.solar import position

    calls = []
    real_is_dst = position.is_daylight_saving

    def counting_is_dst(*args):
        calls.append(args)
        return real_is_dst(*args)

    def scalar_irradiance(elevation):
        raise AssertionError("track irradiance must come from haurwitz_series")

    monkeypatch.setattr(position, "is_daylight_saving", counting_is_dst)
    monkeypatch.setattr(position, "haurwitz_irradiance", scalar_irradiance)
    times = pd.date_range("2025-06-13 00:00", periods=24, freq="1h")
    df = solar_track(CARBONDALE_IL, times)
    assert len(calls) == 24
    assert (df["irradiance_wm2"] > 0).any()
