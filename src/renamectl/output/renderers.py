"""Human-readable rendering of ServiceResult, one renderer per operation.

Renderers draw into a buffered console from :mod:`renamectl.output.console`
and the text is returned to the caller. Ops without a dedicated renderer
get a flat key: value listing.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from renamectl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from renamectl.services.result import ServiceResult


# --- Public API ---


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Return the Rich rendering of *result* (plain text when not on a TTY)."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One-line form used by ``--quiet``: ids for listings, the new name for commits."""
    if not result.ok:
        return f"ERROR: {result.op} {result.error_code or 'ERROR'}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("id", "")) for item in items)
    if result.op == "commit":
        return str(result.data.get("item", {}).get("name", ""))
    return f"OK: {result.op}"


# --- Helpers ---


def _headline(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="rn.ok")
    op = Text(f"  {result.op}", style="rn.op")
    console.print(label, op, end="")
    console.print()


def _kv(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="rn.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="rn.id")
    elif key == "name":
        v = Text(str(value), style="rn.name")
    elif key in ("created", "modified", "started_at", "timestamp"):
        v = Text(str(value), style="rn.time")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text(f"  warning: {warning}", style="rn.warning"))


def _render_trace(console: Console, result: ServiceResult) -> None:
    """Print the telemetry span tree (verbose only)."""
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    telemetry = result.meta.get("telemetry")
    if telemetry:
        _render_span(console, telemetry, indent=4)


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    notes = ", ".join(f"{k}={v}" for k, v in span.get("annotations", {}).items())
    line = f"{' ' * indent}{span.get('duration_ms', 0.0):>8.3f}ms  {span.get('name', '?')}"
    if notes:
        line += f"  ({notes})"
    console.print(Text(line, style="dim"))
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# --- Error renderer ---


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "no error detail"
    code = f" [{err.code}]" if err else ""
    label = Text("ERROR", style="rn.error")
    op = Text(f"  {result.op}{code}", style="rn.op")
    console.print(label, op, Text(": "), Text(msg))

    if err and err.detail.get("category") == "validation":
        still_open = not err.detail.get("session_cancelled", False)
        if result.op == "commit" and still_open:
            console.print(Text("  session still open: edit the draft or cancel", style="dim"))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# --- Session renderers ---


def _render_session(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render start_edit / update_draft / session results."""
    _headline(console, result)
    finalized = result.data.get("finalized")
    if finalized:
        _kv(console, "finalized", f"{finalized['item_id']} ({finalized['outcome']})")

    session = result.data.get("session")
    if session is None:
        _kv(console, "state", result.data.get("state", "idle"))
    else:
        body = Text()
        body.append("original: ", style="rn.key")
        body.append(session["original_name"], style="rn.name")
        body.append("\ndraft:    ", style="rn.key")
        body.append(session["draft_name"], style="rn.draft")
        if verbose:
            body.append(f"\nstarted:  {session['started_at']}", style="rn.time")
        title = Text(f"editing {session['target_id']}" + (" *" if session.get("dirty") else ""))
        console.print(Panel(body, title=title, expand=False))

    _render_warnings(console, result)
    if verbose:
        _render_trace(console, result)


def _render_commit(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _headline(console, result)
    item = result.data.get("item", {})
    record = result.data.get("record")
    if record:
        line = Text("  ")
        line.append(str(record["item_id"]), style="rn.id")
        line.append("  ")
        line.append(record["old_name"], style="rn.old")
        line.append(" → ")
        line.append(record["new_name"], style="rn.new")
        console.print(line)
    else:
        _kv(console, "id", item.get("id", ""))
        _kv(console, "name", f"{item.get('name', '')} (unchanged)")
    _render_warnings(console, result)
    if verbose:
        _render_trace(console, result)


def _render_cancel(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _headline(console, result)
    if result.data.get("cancelled"):
        _kv(console, "item_id", result.data.get("item_id"))
        _kv(console, "discarded_draft", result.data.get("discarded_draft"))
    else:
        _kv(console, "state", "idle (nothing to cancel)")
    _render_warnings(console, result)
    if verbose:
        _render_trace(console, result)


# --- Collection renderers ---


def _render_item_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_items / search results; the item being edited is highlighted."""
    items = result.data.get("items", [])
    editing_id = result.data.get("editing_id")

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="rn.id", no_wrap=True)
    table.add_column("Name", style="rn.name")
    table.add_column("Kind")
    table.add_column("Tags")
    if verbose:
        table.add_column("Modified", style="rn.time")

    for item in items:
        row = [
            str(item.get("id", "")),
            str(item.get("name", "")),
            str(item.get("kind", "")),
            ", ".join(item.get("tags", [])),
        ]
        if verbose:
            row.append(str(item.get("modified", "")))
        style = "rn.editing" if item.get("id") == editing_id else None
        table.add_row(*(Text(cell) for cell in row), style=style)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} items")
    if verbose:
        _render_trace(console, result)


def _render_item(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render get_item / add_item / copy_item / remove_item results."""
    _headline(console, result)
    for key in ("id", "name", "kind", "source_id", "editing"):
        if key in result.data:
            _kv(console, key, result.data[key])
    tags = result.data.get("tags")
    if tags:
        _kv(console, "tags", ", ".join(tags))
    if verbose:
        for key in ("created", "modified"):
            if key in result.data:
                _kv(console, key, result.data[key])
        _render_trace(console, result)
    _render_warnings(console, result)


def _render_history(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    records = result.data.get("records", [])
    if not records:
        console.print(Text("No renames yet", style="dim"))
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("When", style="rn.time", no_wrap=True)
    table.add_column("ID", style="rn.id", no_wrap=True)
    table.add_column("Old name", style="rn.old")
    table.add_column("New name", style="rn.new")
    if verbose:
        table.add_column("Kind")
    for record in records:
        row = [record["timestamp"], record["item_id"], record["old_name"], record["new_name"]]
        if verbose:
            row.append(record["item_kind"])
        table.add_row(*(Text(cell) for cell in row))
    console.print(table)
    count = result.data.get("count", len(records))
    console.print(f"\n{count} of {result.data.get('total')} renames")


def _render_check_name(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _headline(console, result)
    _kv(console, "name", result.data.get("name", ""))
    if result.data.get("trimmed"):
        _kv(console, "trimmed", "leading/trailing whitespace removed")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _headline(console, result)
    for key, value in result.data.items():
        _kv(console, key, value)
    _render_warnings(console, result)
    if verbose:
        _render_trace(console, result)


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "start_edit": _render_session,
    "update_draft": _render_session,
    "session": _render_session,
    "commit": _render_commit,
    "cancel": _render_cancel,
    "list_items": _render_item_table,
    "search": _render_item_table,
    "get_item": _render_item,
    "add_item": _render_item,
    "copy_item": _render_item,
    "remove_item": _render_item,
    "history": _render_history,
    "check_name": _render_check_name,
}
