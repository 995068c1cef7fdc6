"""Configuration loader for the observer location.

Supports YAML and JSON files with an ``observer`` mapping. Field names are
accepted in snake_case or in the camelCase form used by existing tooling.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

try:
    import yaml
except ModuleNotFoundError as exc:  # pragma: no cover - defensive import
    raise ImportError("PyYAML is required to load YAML configs") from exc

from .models import ObserverLocation, ValidationError


class ConfigError(ValueError):
    """Raised when configuration cannot be parsed into domain models."""


_FIELD_ALIASES = {
    "latitude_deg": ("latitude_deg", "latitudeDeg", "lat"),
    "longitude_deg": ("longitude_deg", "longitudeDeg", "lon"),
    "standard_utc_offset_hours": ("standard_utc_offset_hours", "standardUtcOffsetHours"),
    "daylight_utc_offset_hours": ("daylight_utc_offset_hours", "daylightUtcOffsetHours"),
    "name": ("name", "id"),
}
_REQUIRED_FIELDS = ("latitude_deg", "longitude_deg")


def _load_raw(path: Path) -> Dict[str, Any]:
    text = path.read_text()
    suffix = path.suffix.lower()
    try:
        if suffix in {".yaml", ".yml"}:
            raw = yaml.safe_load(text) or {}
        elif suffix == ".json":
            raw = json.loads(text)
        else:
            raise ConfigError(f"Unsupported config extension: {path.suffix}")
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return raw


def _pick(raw: Dict[str, Any], field: str) -> Any:
    for key in _FIELD_ALIASES[field]:
        if key in raw:
            return raw[key]
    return None


def parse_observer(raw: Dict[str, Any]) -> ObserverLocation:
    if not isinstance(raw, dict):
        raise ConfigError("observer must be a mapping")
    missing = [f for f in _REQUIRED_FIELDS if _pick(raw, f) is None]
    if missing:
        raise ConfigError(f"Missing observer fields: {missing}")

    kwargs: Dict[str, Any] = {}
    for field in _FIELD_ALIASES:
        value = _pick(raw, field)
        if value is None:
            continue
        if field == "name":
            kwargs[field] = str(value)
            continue
        try:
            kwargs[field] = float(value) if field.endswith("_deg") else value
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"observer {field} must be numeric, got {value!r}") from exc
    try:
        return ObserverLocation(**kwargs)
    except ValidationError as exc:
        raise ConfigError(f"Invalid observer: {exc}") from exc


def load_observer(path: str | Path) -> ObserverLocation:
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    raw = _load_raw(path)
    if "observer" not in raw:
        raise ConfigError("Config must contain an 'observer' mapping")
    return parse_observer(raw["observer"])


__all__ = [
    "ConfigError",
    "load_observer",
    "parse_observer",
]
