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

from seqfig.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from seqfig.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string via Rich.

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

    if result.op == "render":
        return str(result.data.get("output", "")).rstrip("\n")
    if result.op == "inspect":
        return "\n".join(p["name"] for p in result.data.get("participants", []))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="seq.ok")
    op = Text(f"  {result.op}", style="seq.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="seq.key")
    v = Text(str(value), style="seq.title" if key == "title" else "")
    console.print(k, v, end="")
    console.print()


def _one_line(text: str) -> str:
    return " / ".join(part.strip() for part in text.strip().splitlines())


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="seq.error")
    op = Text(f"  {result.op}", style="seq.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_figure(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Write the LaTeX verbatim, bypassing Rich markup and wrapping."""
    console.file.write(str(result.data.get("output", "")))


def _render_inspect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a parsed diagram as participant and item tables."""
    d = result.data
    _status_line(console, result)
    for key in ("source", "title", "options", "label"):
        if d.get(key) is not None:
            _field(console, key, d[key])

    participants = Table(show_header=True, pad_edge=False, expand=False)
    participants.add_column("Column", justify="right")
    participants.add_column("Participant", style="seq.participant")
    for p in d.get("participants", []):
        participants.add_row(str(p["index"]), Text(p["name"]))
    console.print()
    console.print(participants)

    items = Table(show_header=True, pad_edge=False, expand=False)
    items.add_column("#", justify="right")
    items.add_column("Kind")
    items.add_column("Span")
    items.add_column("Text")
    if verbose:
        items.add_column("Line", justify="right", style="dim")
    for index, item in enumerate(d.get("items", [])):
        kind = item["kind"]
        if kind == "group":
            span = f"{item['lines']} items" if item.get("closed") else "unclosed"
        else:
            source = item.get("source") or "(first)"
            target = item.get("target") or "(last)"
            span = f"{source} -> {target}"
        row = [
            str(index),
            Text(kind, style=style_for_kind(kind)),
            Text(span),
            Text(_one_line(item.get("text", ""))),
        ]
        if verbose:
            row.append(str(item.get("line", "")))
        items.add_row(*row)
    console.print()
    console.print(items)

    for skipped in d.get("skipped", []):
        console.print(Text(f"  % {skipped}", style="seq.warning"))


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
    "render": _render_figure,
    "inspect": _render_inspect,
}
