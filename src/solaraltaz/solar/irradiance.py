"""Haurwitz clear-sky irradiance.

Clear sky only: no cloud, humidity or aerosol correction, so values are an
upper bound on what a sensor would measure.
"""
from __future__ import annotations

import math

import pandas as pd
import pvlib

HAURWITZ_SCALE_WM2 = 1098.0
HAURWITZ_EXTINCTION = 0.059


def haurwitz_irradiance(elevation_deg: float) -> float:
    """Irradiance in W/m^2 for a solar elevation in degrees; 0 at or below the horizon."""
    if elevation_deg <= 0:
        return 0.0
    cos_zenith = math.cos(math.radians(90.0 - elevation_deg))
    return HAURWITZ_SCALE_WM2 * cos_zenith * math.exp(-HAURWITZ_EXTINCTION / cos_zenith)


def haurwitz_series(elevation_deg: pd.Series) -> pd.Series:
    """Vectorised Haurwitz model over a series of elevations via pvlib.

    pvlib's implementation zeroes samples with ``cos(zenith) <= 0``, matching
    :func:`haurwitz_irradiance`.
    """
    zenith = 90.0 - elevation_deg.astype(float)
    ghi = pvlib.clearsky.haurwitz(zenith)["ghi"]
    return pd.Series(ghi.to_numpy(dtype=float), index=elevation_deg.index, name="irradiance_wm2")


__all__ = ["haurwitz_irradiance", "haurwitz_series"]
