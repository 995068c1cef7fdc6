"""Solar elevation, azimuth and clear-sky irradiance for a fixed observer."""

from solaraltaz.core.models import (
    CARBONDALE_IL,
    CivilDateTime,
    InvalidInputError,
    ObserverLocation,
    SolarPositionResult,
)
from solaraltaz.solar.position import compute_solar_position, solar_track

__version__ = "0.1.0"

__all__ = [
    "CARBONDALE_IL",
    "CivilDateTime",
    "InvalidInputError",
    "ObserverLocation",
    "SolarPositionResult",
    "compute_solar_position",
    "solar_track",
    "__version__",
]
