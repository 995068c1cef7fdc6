"""Deterministic debug collectors for structured JSON events.

Every stage of the solar pipeline reports through a collector instead of the
``logging`` module so a run can be audited event by event.
"""
from __future__ import annotations

import datetime as _dt
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol


class DebugCollector(Protocol):
    def emit(self, stage: str, payload: Dict[str, Any], *, ts: Any, observer: Optional[str] = None) -> None:
        ...


def _json_safe_scalar(val: Any) -> Any:
    """Convert common non-JSON types to safe representations."""
    if isinstance(val, (_dt.datetime, _dt.date, _dt.time)) or hasattr(val, "isoformat"):
        try:
            return val.isoformat()
        except (TypeError, ValueError):
            return str(val)
    return val


def _ordered(obj: Any) -> Any:
    """Recursively order mappings for deterministic JSON dumps."""
    if isinstance(obj, dict):
        return {k: _ordered(obj[k]) for k in sorted(obj)}
    if isinstance(obj, (list, tuple)):
        return [_ordered(v) for v in obj]
    return _json_safe_scalar(obj)


def _event(stage: str, payload: Dict[str, Any], ts: Any, observer: Optional[str]) -> Dict[str, Any]:
    return {
        "stage": stage,
        "ts": _json_safe_scalar(ts),
        "observer": observer,
        "payload": _ordered(payload),
    }


class NullDebugCollector:
    def emit(self, stage: str, payload: Dict[str, Any], *, ts: Any, observer: Optional[str] = None) -> None:  # noqa: D401
        """Discard events (no-op)."""
        return


@dataclass
class ListDebugCollector:
    events: List[Dict[str, Any]] = field(default_factory=list)

    def emit(self, stage: str, payload: Dict[str, Any], *, ts: Any, observer: Optional[str] = None) -> None:
        self.events.append(_event(stage, payload, ts, observer))

    def stages(self) -> List[str]:
        return [event["stage"] for event in self.events]


class JsonlDebugWriter:
    """Append one JSON object per event to a ``.jsonl`` file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = self.path.open("a", encoding="utf-8")

    def emit(self, stage: str, payload: Dict[str, Any], *, ts: Any, observer: Optional[str] = None) -> None:
        json.dump(_event(stage, payload, ts, observer), self._fh, sort_keys=True)
        self._fh.write("\n")
        self._fh.flush()

    def close(self) -> None:
        if not self._fh.closed:
            self._fh.close()


class JsonDebugWriter:
    """Collect all events in memory then write a single JSON array.

    Used when callers pass a ``--debug`` path ending with ``.json`` so one file
    holds every stage payload of the run.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._events: List[Dict[str, Any]] = []

    def emit(self, stage: str, payload: Dict[str, Any], *, ts: Any, observer: Optional[str] = None) -> None:
        self._events.append(_event(stage, payload, ts, observer))

    def close(self) -> None:
        """Write collected events as a single JSON document."""
        self.path.write_text(json.dumps(_ordered(self._events), indent=2, sort_keys=True))


def build_debug_collector(path: str | Path | None) -> DebugCollector:
    """Factory: None → NullDebugCollector, .json → JsonDebugWriter, otherwise JsonlDebugWriter."""
    if path is None:
        return NullDebugCollector()
    if str(path).lower().endswith(".json"):
        return JsonDebugWriter(path)
    return JsonlDebugWriter(path)


def close_debug_collector(collector: DebugCollector) -> None:
    """Flush file-backed collectors; in-memory collectors have nothing to close."""
    close = getattr(collector, "close", None)
    if callable(close):
        close()


__all__ = [
    "DebugCollector",
    "NullDebugCollector",
    "ListDebugCollector",
    "JsonlDebugWriter",
    "JsonDebugWriter",
    "build_debug_collector",
    "close_debug_collector",
]
