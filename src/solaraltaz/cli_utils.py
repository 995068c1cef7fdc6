"""Shared CLI helpers to avoid circular imports."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import yaml

from solaraltaz.core.config import ConfigError, _load_raw, load_observer
from solaraltaz.core.models import ObserverLocation, SolarPositionResult


def observer_to_dict(location: ObserverLocation) -> dict:
    return {
        "name": location.name,
        "latitude_deg": location.latitude_deg,
        "longitude_deg": location.longitude_deg,
        "standard_utc_offset_hours": location.standard_utc_offset_hours,
        "daylight_utc_offset_hours": location.daylight_utc_offset_hours,
    }


def write_observer(path: Path, location: ObserverLocation) -> None:
    """Persist the observer while preserving any other top-level keys in the file."""

    base: dict[str, Any] = {}
    if path.exists():
        try:
            base = _load_raw(path)
        except ConfigError:
            base = {}
    base["observer"] = observer_to_dict(location)

    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml", ""}:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(base, sort_keys=False))
    elif suffix == ".json":
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(base, indent=2, sort_keys=False))
    else:
        raise ConfigError(f"Unsupported config extension: {path.suffix}")


def load_existing(path: Path) -> Optional[ObserverLocation]:
    if not path.exists():
        return None
    return load_observer(path)


def format_result(result: SolarPositionResult) -> str:
    """Human readable block in the layout the serial monitor used to print."""
    return "\n".join(
        [
            f"Elevation: {result.elevation_deg:.2f}°",
            f"Azimuth: {result.azimuth_deg:.2f}°",
            f"Irradiance: {result.irradiance_wm2:.2f} W/m²",
            f"UTC offset: {result.utc_offset_hours:+d}",
        ]
    )


__all__ = ["observer_to_dict", "write_observer", "load_existing", "format_result"]
