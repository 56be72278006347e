"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from nsidctl.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from nsidctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Failed ``check`` results render their per-input table before the
    error line.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        if result.op == "check" and result.data.get("items"):
            _render_check(result, console, verbose=verbose)
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    A successful ``check`` prints its inputs one per line so the output
    can be piped onward.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "check":
        return "\n".join(item["input"] for item in result.data.get("items", []) if item["valid"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="nsid.ok")
    op = Text(f"  {result.op}", style="nsid.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="nsid.key")
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    console.print(k, Text(str(value)), sep="", end="")
    console.print()


def _styled_segments(segments: list[str], fragment: str | None) -> Text:
    """Color an NSID by segment position: TLD, interior, name, fragment."""
    text = Text()
    last = len(segments) - 1
    for i, segment in enumerate(segments):
        if i:
            text.append(".")
        if i == 0:
            style = "nsid.tld"
        elif i == last:
            style = "nsid.name"
        else:
            style = "nsid.segment"
        text.append(segment, style=style)
    if fragment:
        text.append(fragment, style="nsid.fragment")
    return text


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="nsid.error")
    op = Text(f"  {result.op}", style="nsid.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render per-input validity as a table plus a summary line."""
    items = result.data.get("items", [])
    kind = result.data.get("kind", "")

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Input", no_wrap=True)
    table.add_column("Status")
    table.add_column("Reason", style="dim")
    for item in items:
        status = (
            Text("valid", style="nsid.ok") if item["valid"] else Text("invalid", style="nsid.error")
        )
        table.add_row(Text(item["input"]), status, item.get("reason") or "")
    console.print(table)

    console.print(
        f"\n{result.data.get('valid', 0)} valid, {result.data.get('invalid', 0)} invalid ({kind})"
    )


def _render_parse(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a parsed reference as a panel of its parts."""
    d = result.data
    kind = str(d.get("kind", ""))

    lines = Text()
    if "segments" in d:
        lines.append_text(_styled_segments(d["segments"], d.get("fragment")))
    else:
        lines.append(str(d.get("fragment", "")), style="nsid.fragment")
    lines.append("\n\nkind: ", style="nsid.key")
    lines.append(kind)
    if "segments" in d:
        for key in ("authority", "domain_authority", "name"):
            lines.append(f"\n{key}: ", style="nsid.key")
            lines.append(str(d.get(key, "")))
        lines.append("\nsegments: ", style="nsid.key")
        lines.append(str(len(d["segments"])))
    if d.get("fragment"):
        lines.append("\nfragment: ", style="nsid.key")
        lines.append(str(d.get("fragment_name")), style="nsid.fragment")

    style = style_for_kind(kind)
    console.print(Panel(lines, title="reference", border_style=style or "dim", expand=False))


def _render_resolve(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("base", "reference", "resolved"):
        _field(console, key, result.data.get(key, ""))
    if verbose:
        _field(console, "kind", result.data.get("kind", ""))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose and result.meta:
        for key, value in result.meta.items():
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "check": _render_check,
    "parse_reference": _render_parse,
    "resolve_reference": _render_resolve,
}
