"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from tzstamp.output.console import create_console, get_output, style_for_designator

if TYPE_CHECKING:
    from rich.console import Console

    from tzstamp.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Bare value for ``--quiet``: the timestamp, or the ISO string for ``iso``."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    if result.op == "iso":
        return str(result.data.get("iso", ""))
    if "timestamp" in result.data:
        return str(result.data["timestamp"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="tz.ok")
    op = Text(f"  {result.op}", style="tz.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    k = Text(f"  {key}: ", style="tz.key")
    console.print(k, Text(str(value), style=style), end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 10 else "dim"

    line = f"{prefix}[{style}]{duration:>8.3f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_conversion(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "timestamp", f"{data['timestamp']} {data['unit']}", style="tz.timestamp")
    _field(console, "iso", data["iso"], style="tz.iso")
    _field(console, "timezone", data["timezone"], style=style_for_designator(data["designator"]))
    if verbose:
        _field(console, "designator", data["designator"])
        if data.get("offset_minutes") is not None:
            _field(console, "offset_minutes", data["offset_minutes"])
        _render_meta(console, result)


def _render_now(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "timestamp", f"{data['timestamp']} {data['unit']}", style="tz.timestamp")
    _field(console, "iso", data["iso"], style="tz.iso")
    if verbose:
        _render_meta(console, result)


def _render_iso(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "timestamp", data["timestamp"], style="tz.timestamp")
    _field(console, "iso", data["iso"], style="tz.iso")
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tz.error")
    op = Text(f"  {result.op}", style="tz.op")
    console.print(label, op, Text(": "), Text(msg), sep="", end="")
    console.print()
    if err is not None:
        _field(console, "code", err.code)
        if verbose:
            for key, value in err.detail.items():
                _field(console, key, value)


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "convert": _render_conversion,
    "convert_record": _render_conversion,
    "now": _render_now,
    "iso": _render_iso,
}
