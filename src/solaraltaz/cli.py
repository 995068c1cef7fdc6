"""Command line entrypoint for solaraltaz.

Commands:

* ``position``: compute the sun's position for one ``year,month,day,hour,minute,second`` line.
* ``stream``: read such lines from stdin (the serial monitor workflow) and answer each one.
* ``track``: tabulate a whole day at a fixed timestep.
* ``config``: prompt for observer settings and write them to YAML/JSON.
"""
from __future__ import annotations

import datetime as dt
import json
import sys
from pathlib import Path
from typing import Optional

import pandas as pd
import typer

from solaraltaz import __version__
from solaraltaz.civil.wire import parse_line
from solaraltaz.cli_utils import format_result, load_existing, write_observer
from solaraltaz.core.config import ConfigError, load_observer
from solaraltaz.core.debug import DebugCollector, build_debug_collector, close_debug_collector
from solaraltaz.core.models import CARBONDALE_IL, ObserverLocation, ValidationError
from solaraltaz.solar.position import compute_solar_position, solar_track

app = typer.Typer(add_completion=False, help="Solar elevation/azimuth/irradiance calculator")


def _exit_with_error(msg: str) -> None:
    typer.echo(f"Error: {msg}", err=True)
    raise typer.Exit(code=1)


def _state(ctx: typer.Context) -> tuple[ObserverLocation, DebugCollector]:
    obj = ctx.ensure_object(dict)
    return obj["observer"], obj["debug"]


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Observer YAML/JSON file; defaults to Carbondale, IL on U.S. Central Time",
    ),
    debug: Optional[Path] = typer.Option(None, help="Write debug events to this path (.json or .jsonl)"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
):
    if version:
        typer.echo(__version__)
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    obj = ctx.ensure_object(dict)
    # `config` edits the file itself, so a missing or broken file is not fatal there.
    if ctx.invoked_subcommand == "config":
        obj["observer"], obj["debug"] = CARBONDALE_IL, build_debug_collector(None)
        return

    observer = CARBONDALE_IL
    if config is not None:
        try:
            observer = load_observer(config)
        except ConfigError as exc:
            _exit_with_error(str(exc))

    collector = build_debug_collector(debug)
    ctx.call_on_close(lambda: close_debug_collector(collector))
    obj["observer"] = observer
    obj["debug"] = collector


def _render(result, fmt: str, line: str) -> str:
    if fmt == "json":
        return json.dumps({"input": line.strip(), **result.as_dict()}, sort_keys=True)
    return format_result(result)


@app.command()
def position(
    ctx: typer.Context,
    line: str = typer.Argument(..., help="Local time as year,month,day,hour,minute,second"),
    format: str = typer.Option("text", "--format", "-f", help="Output format: text or json"),
):
    """Compute the sun's position for a single local time."""

    observer, debug = _state(ctx)
    fmt = format.lower()
    if fmt not in {"text", "json"}:
        _exit_with_error("format must be text or json")

    parsed = parse_line(line)
    if not parsed.ok:
        debug.emit("wire.reject", {"line": line, "error": parsed.error}, ts=None, observer=observer.name)
        _exit_with_error(f"malformed input {line!r}: {parsed.error}")

    try:
        result = compute_solar_position(observer, parsed.unwrap(), debug=debug)
    except ValidationError as exc:
        _exit_with_error(str(exc))
    typer.echo(_render(result, fmt, line))


@app.command()
def stream(
    ctx: typer.Context,
    format: str = typer.Option("text", "--format", "-f", help="Output format: text or json"),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 1 if any line was rejected"),
):
    """Answer every line read from stdin; malformed lines are reported and skipped."""

    observer, debug = _state(ctx)
    fmt = format.lower()
    if fmt not in {"text", "json"}:
        _exit_with_error("format must be text or json")

    rejected = 0
    for raw in sys.stdin:
        if not raw.strip():
            continue
        parsed = parse_line(raw)
        if not parsed.ok:
            rejected += 1
            debug.emit("wire.reject", {"line": raw.strip(), "error": parsed.error}, ts=None, observer=observer.name)
            typer.echo(f"Rejected {raw.strip()!r}: {parsed.error}", err=True)
            continue
        try:
            result = compute_solar_position(observer, parsed.unwrap(), debug=debug)
        except ValidationError as exc:
            rejected += 1
            typer.echo(f"Rejected {raw.strip()!r}: {exc}", err=True)
            continue
        if fmt == "text":
            typer.echo(f"Input: {raw.strip()}")
        typer.echo(_render(result, fmt, raw))

    if strict and rejected:
        raise typer.Exit(code=1)


@app.command()
def track(
    ctx: typer.Context,
    date: str = typer.Option(..., help="Target date (YYYY-MM-DD), local civil time"),
    timestep: str = typer.Option("1h", help="Sampling step, e.g. 1h or 15m"),
    format: str = typer.Option("json", "--format", "-f", help="Output format: json or csv"),
    output: Optional[Path] = typer.Option(None, help="Output file path; prints to stdout when omitted"),
):
    """Tabulate position and irradiance across one local day."""

    observer, debug = _state(ctx)
    try:
        date_obj = dt.date.fromisoformat(date)
    except ValueError:
        _exit_with_error("date must be YYYY-MM-DD")
    try:
        # pandas deprecated the lowercase day unit; "2d" means "2D".
        step = pd.to_timedelta(timestep[:-1] + "D" if timestep.endswith("d") else timestep)
    except ValueError:
        _exit_with_error(f"invalid timestep '{timestep}'")
    if step <= pd.Timedelta(0) or step > pd.Timedelta(days=1):
        _exit_with_error("timestep must be positive and at most one day")

    fmt = format.lower()
    if fmt not in {"json", "csv"}:
        _exit_with_error("format must be json or csv")

    start = pd.Timestamp(date_obj)
    times = pd.date_range(start, start + pd.Timedelta(days=1), freq=step, inclusive="left")
    try:
        table = solar_track(observer, times, debug=debug)
    except ValidationError as exc:
        _exit_with_error(str(exc))

    table = table.rename_axis("local_time").reset_index()
    table["local_time"] = table["local_time"].dt.strftime("%Y-%m-%dT%H:%M:%S")
    if fmt == "json":
        rendered = json.dumps(table.to_dict(orient="records"), indent=2)
    else:
        rendered = table.to_csv(index=False)

    if output is None:
        typer.echo(rendered)
        return
    output.write_text(rendered)
    typer.echo(f"Wrote {len(table)} rows for {observer.name} to {output}")


@app.command()
def config(
    path: Path = typer.Argument(..., help="Path to save observer YAML/JSON"),
):
    """Interactive observer builder/editor."""

    try:
        existing = load_existing(path)
    except ConfigError as exc:
        typer.echo(f"Could not load existing config: {exc}", err=True)
        existing = None
    base = existing or CARBONDALE_IL

    name = typer.prompt("Observer name", default=base.name)
    lat = typer.prompt("Latitude deg", default=base.latitude_deg, type=float)
    lon = typer.prompt("Longitude deg", default=base.longitude_deg, type=float)
    std = typer.prompt("Standard UTC offset hours", default=base.standard_utc_offset_hours, type=int)
    dst = typer.prompt("Daylight UTC offset hours", default=base.daylight_utc_offset_hours, type=int)

    try:
        location = ObserverLocation(
            latitude_deg=lat,
            longitude_deg=lon,
            standard_utc_offset_hours=std,
            daylight_utc_offset_hours=dst,
            name=name,
        )
        write_observer(path, location)
    except (ValidationError, ConfigError) as exc:
        _exit_with_error(str(exc))
    typer.echo(f"Saved observer {location.name} to {path}")


def main() -> None:  # pragma: no cover - thin wrapper for console_script
    app()


__all__ = ["app", "main"]


if __name__ == "__main__":  # pragma: no cover
    main()
