"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from timefield.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from timefield.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(f"{item['index']}\t{item['title']}" for item in items)
    if "display" in result.data:
        return str(result.data["display"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="tf.ok")
    op = Text(f"  {result.op}", style="tf.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="tf.key")
    if key == "index":
        v = Text(str(value), style="tf.index")
    elif key == "title":
        v = Text(str(value), style="tf.title")
    elif key in ("interval", "display", "working_interval", "previous"):
        v = Text(str(value), style="tf.interval")
    elif key == "duration":
        v = Text(str(value), style="tf.duration")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tf.error")
    op = Text(f"  {result.op}", style="tf.op")
    dash = Text(" — ")
    console.print(label, op, dash, Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Interval renderers ────────────────────────────────────────────────


def _render_interval(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render parse/change/current working-interval results."""
    d = result.data
    console.print(Text(str(d.get("display", "")), style="tf.interval"))
    if verbose:
        for key in ("begin", "end", "previous"):
            if key in d:
                _field(console, key, d[key])


# ── Task renderers ────────────────────────────────────────────────────


def _render_task_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    items: list[dict[str, Any]] = d.get("items", [])
    console.print(Text(str(d.get("working_interval", "")), style="tf.interval"))
    if not items:
        console.print(Text("  (no tasks)", style="dim"))
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", style="tf.index", justify="right", no_wrap=True)
    table.add_column("Title", style="tf.title")
    if verbose:
        table.add_column("Interval", style="tf.interval")
        table.add_column("Duration", style="tf.duration")

    for item in items:
        row = [Text(str(item.get("index", ""))), Text(str(item.get("title", "")))]
        if verbose:
            row.append(Text(str(item.get("interval", ""))))
            row.append(Text(str(item.get("duration", ""))))
        table.add_row(*row)
    console.print(table)


def _render_task(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single task: title, notes, interval, duration."""
    d = result.data
    index = Text(f"#{d.get('index')}", style="tf.index")
    console.print(index, Text(str(d.get("title", "")), style="tf.title"))
    if d.get("notes"):
        console.print(Text(f"  {d['notes']}"))
    _field(console, "interval", d.get("interval", ""))
    _field(console, "duration", d.get("duration", ""))
    if verbose:
        _field(console, "release", d.get("release", ""))
        _field(console, "due", d.get("due", ""))


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render create/delete results."""
    _status_line(console, result)
    for key in ("index", "title", "interval", "duration", "remaining"):
        if key in result.data:
            _field(console, key, result.data[key])


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Interval
    "working_interval": _render_interval,
    "parse_interval": _render_interval,
    "change_interval": _render_interval,
    # Tasks
    "list_tasks": _render_task_table,
    "show_task": _render_task,
    "create_task": _render_mutation,
    "delete_task": _render_mutation,
}
