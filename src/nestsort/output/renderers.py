"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from nestsort.core.printer import format_nested
from nestsort.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from nestsort.services.result import ServiceResult


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

    if result.op == "sort":
        return _json.dumps(result.data.get("sorted"), separators=(",", ":"))
    if result.op == "show":
        return str(result.data.get("rendering", ""))
    if result.op == "comparators":
        return "\n".join(item["name"] for item in result.data.get("items", []))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="ns.ok")
    op = Text(f"  {result.op}", style="ns.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="ns.key")
    v = Text(str(value), style="ns.name" if key == "comparator" else "")
    console.print(k, v, sep="", end="")
    console.print()


def _block(console: Console, heading: str, rendering: str) -> None:
    """Print a heading followed by a pre-rendered nested structure."""
    console.print()
    console.print(Text(f"  {heading}:", style="ns.heading"))
    for line in rendering.splitlines():
        console.print(Text(f"    {line}"), soft_wrap=True)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
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
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = Text(prefix)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {name}")
    details = {
        **(span_data.get("structure") or {}),
        **(span_data.get("stats") or {}),
        **(span_data.get("notes") or {}),
    }
    if details:
        line.append(f"  ({', '.join(f'{k}={v}' for k, v in details.items())})", style="dim")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ns.error")
    op = Text(f"  {result.op}", style="ns.op")
    dash = Text(" — ")
    console.print(label, op, dash, Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_sort(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the original and sorted structures side by side in time."""
    d = result.data
    _status_line(console, result)
    for key in ("comparator", "representation", "depth", "leaf_type"):
        if key in d:
            _field(console, key, d[key])

    options = {"indent": d.get("indent", 4), "brackets": d.get("brackets", "{}")}
    if verbose:
        _block(console, "original", format_nested(d["original"], **options))
    _block(console, "sorted", format_nested(d["sorted"], **options))

    stats = d.get("stats") or {}
    if stats:
        console.print()
        summary = Text("  ")
        for i, (key, value) in enumerate(stats.items()):
            if i:
                summary.append("  ")
            summary.append(f"{key}=", style="ns.key")
            summary.append(str(value), style="ns.count")
        console.print(summary)
    if verbose:
        _render_meta(console, result)


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a structure without sorting it."""
    d = result.data
    if verbose:
        _status_line(console, result)
        for key in ("representation", "depth", "leaf_type"):
            if key in d:
                _field(console, key, d[key])
        console.print()
    for line in str(d.get("rendering", "")).splitlines():
        console.print(Text(line), soft_wrap=True)
    if verbose:
        _render_meta(console, result)


def _render_comparators(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the comparator registry as a table."""
    default = result.data.get("default")
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="ns.name", no_wrap=True)
    table.add_column("Leaf types")
    table.add_column("Description")
    for item in result.data.get("items", []):
        name = item["name"]
        if name == default:
            name = f"{name} (default)"
        table.add_row(name, ", ".join(item.get("leaf_types", [])), item.get("description", ""))
    console.print(table)
    console.print(f"\n{result.data.get('count', 0)} comparators")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "sort": _render_sort,
    "show": _render_show,
    "comparators": _render_comparators,
}
