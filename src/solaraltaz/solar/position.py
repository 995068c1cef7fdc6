"""Solar elevation, azimuth and clear-sky irradiance for an observer at local civil time."""
from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np
import pandas as pd

from solaraltaz.civil.dst import DST_RULE_FIRST_YEAR, is_daylight_saving, utc_offset_hours
from solaraltaz.core.debug import DebugCollector, NullDebugCollector
from solaraltaz.core.models import (
    CivilDateTime,
    InvalidInputError,
    ObserverLocation,
    SolarPositionResult,
)
from solaraltaz.solar.geometry import VALID_YEARS, solar_angles
from solaraltaz.solar.irradiance import haurwitz_irradiance, haurwitz_series

TRACK_COLUMNS = ["elevation_deg", "azimuth_deg", "irradiance_wm2", "utc_offset_hours", "is_dst"]


def accuracy_notes(when: CivilDateTime) -> List[str]:
    """Flags for inputs outside the windows the formulas are tuned for.

    These mark reduced confidence only; the computation still runs.
    """
    notes = []
    if not (VALID_YEARS[0] <= when.year <= VALID_YEARS[1]):
        notes.append("solar_years_1901_2099")
    if when.year < DST_RULE_FIRST_YEAR:
        notes.append("dst_rule_2007_onward")
    return notes


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


def _sun_angles_deg(
    location: ObserverLocation,
    when: CivilDateTime,
    dst: bool,
    debug: DebugCollector,
) -> Tuple[float, float, int]:
    """Elevation and azimuth in degrees plus the UTC offset chosen for ``dst``."""
    ts = when.isoformat()
    offset = utc_offset_hours(dst, location)
    debug.emit("dst.select", {"is_dst": dst, "utc_offset_hours": offset}, ts=ts, observer=location.name)

    angles = solar_angles(location, when, offset)
    lat = math.radians(location.latitude_deg)
    decl = angles.declination
    ha = angles.hour_angle

    sin_elev = math.sin(lat) * math.sin(decl) + math.cos(lat) * math.cos(decl) * math.cos(ha)
    elevation = math.degrees(math.asin(_clamp_unit(sin_elev)))

    # atan2 gives the bearing from south; +180 turns it into clockwise-from-north.
    az_from_south = math.degrees(math.atan2(math.sin(ha), math.cos(ha) * math.sin(lat) - math.tan(decl) * math.cos(lat)))
    azimuth = (az_from_south + 180.0) % 360.0

    debug.emit(
        "solar_position.angles",
        {"gamma": angles.gamma, "declination": decl, "hour_angle": ha},
        ts=ts,
        observer=location.name,
    )
    notes = accuracy_notes(when)
    if notes:
        debug.emit("solar_position.envelope", {"reduced_confidence": notes}, ts=ts, observer=location.name)
    return elevation, azimuth, offset


def compute_solar_position(
    location: ObserverLocation,
    when: CivilDateTime,
    debug: DebugCollector | None = None,
) -> SolarPositionResult:
    """Compute the sun's position and clear-sky irradiance for ``when`` at ``location``.

    Parameters
    ----------
    location: ObserverLocation
        Observer latitude/longitude and the standard/daylight UTC offset pair.
    when: CivilDateTime
        Local civil (wall clock) time at the observer.
    debug: DebugCollector | None
        Collector for per-stage debug events.

    Returns
    -------
    SolarPositionResult
        Elevation (degrees, negative below the horizon), azimuth clockwise from
        north in [0, 360), Haurwitz irradiance and the UTC offset that was used.
    """
    debug = debug or NullDebugCollector()
    ts = when.isoformat()

    dst = is_daylight_saving(when.year, when.month, when.day, when.hour)
    elevation, azimuth, offset = _sun_angles_deg(location, when, dst, debug)
    irradiance = haurwitz_irradiance(elevation)
    if not all(math.isfinite(v) for v in (elevation, azimuth, irradiance)):
        raise InvalidInputError(f"Non-finite solar position for {ts} at {location.name}")

    result = SolarPositionResult(
        elevation_deg=elevation,
        azimuth_deg=azimuth,
        irradiance_wm2=irradiance,
        utc_offset_hours=offset,
    )
    debug.emit("solar_position.result", result.as_dict(), ts=ts, observer=location.name)
    return result


def solar_track(
    location: ObserverLocation,
    times: pd.DatetimeIndex,
    debug: DebugCollector | None = None,
) -> pd.DataFrame:
    """Evaluate the position calculator over a series of local civil times.

    ``times`` must be naive: they are wall-clock times at the observer and the
    DST rule decides the UTC offset of each sample. Irradiance for the whole
    column comes from :func:`haurwitz_series`.
    """
    if times.tz is not None:
        raise ValueError("times must be naive local civil times (no tzinfo)")

    debug = debug or NullDebugCollector()

    rows = []
    for ts in times:
        when = CivilDateTime(ts.year, ts.month, ts.day, ts.hour, ts.minute, ts.second)
        dst = is_daylight_saving(when.year, when.month, when.day, when.hour)
        elevation, azimuth, offset = _sun_angles_deg(location, when, dst, debug)
        rows.append(
            {
                "elevation_deg": elevation,
                "azimuth_deg": azimuth,
                "utc_offset_hours": offset,
                "is_dst": dst,
            }
        )

    df = pd.DataFrame(rows, index=times, columns=[c for c in TRACK_COLUMNS if c != "irradiance_wm2"])
    df["irradiance_wm2"] = haurwitz_series(df["elevation_deg"]) if len(df) else pd.Series(dtype=float)
    df = df[TRACK_COLUMNS]

    numeric = df[["elevation_deg", "azimuth_deg", "irradiance_wm2"]].to_numpy(dtype=float)
    if numeric.size and not np.isfinite(numeric).all():
        raise InvalidInputError("Non-finite values in solar track")

    _emit_summary(debug, df, location.name)
    return df


def _emit_summary(debug: DebugCollector, df: pd.DataFrame, observer: str) -> None:
    if df.empty:
        debug.emit("solar_track.summary", {"samples": 0}, ts=None, observer=observer)
        return

    if len(df.index) > 1:
        deltas = df.index.to_series().diff().dt.total_seconds().dropna()
        step_seconds = float(deltas.median()) if not deltas.empty else 0.0
    else:
        step_seconds = 0.0
    insolation_wh_m2 = float((df["irradiance_wm2"] * (step_seconds / 3600.0)).sum()) if step_seconds > 0 else 0.0

    payload = {
        "samples": int(len(df)),
        "elevation_min": float(df["elevation_deg"].min()),
        "elevation_max": float(df["elevation_deg"].max()),
        "irradiance_max": float(df["irradiance_wm2"].max()),
        "insolation_wh_m2": insolation_wh_m2,
        "dst_samples": int(df["is_dst"].sum()),
    }
    debug.emit("solar_track.summary", payload, ts=df.index[0], observer=observer)


__all__ = ["TRACK_COLUMNS", "accuracy_notes", "compute_solar_position", "solar_track"]
