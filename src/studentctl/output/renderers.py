"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from studentctl.output.console import create_console, get_output, style_for_gpa

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from studentctl.services.result import ServiceResult


@dataclass(frozen=True)
class _Layout:
    verbose: bool = False
    max_column_width: int = 30
    gpa_precision: int = 2


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    max_column_width: int = 30,
    gpa_precision: int = 2,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    layout = _Layout(
        verbose=verbose,
        max_column_width=max_column_width,
        gpa_precision=gpa_precision,
    )

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, layout)
    else:
        _render_error(result, console, layout)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["student_id"]) for item in items)
    if "student_id" in result.data:
        return str(result.data["student_id"])
    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


def truncate(value: str, width: int) -> str:
    """Shorten *value* to *width* characters, marking the cut with ``...``."""
    if len(value) <= width:
        return value
    return value[: width - 3] + "..."


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="st.ok")
    op = Text(f"  {result.op}", style="st.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="st.key")
    v = Text(str(value), style="st.id" if key == "id" else "")
    console.print(Text.assemble(k, v))


def _gpa_text(gpa: Any, precision: int) -> Text:
    if isinstance(gpa, (int, float)):
        return Text(f"{gpa:.{precision}f}", style=style_for_gpa(float(gpa)))
    return Text(str(gpa))


def student_table(items: list[dict[str, Any]], layout: _Layout | None = None) -> Table:
    """Build a Rich Table for a list of serialized student records."""
    layout = layout or _Layout()
    width = layout.max_column_width
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="st.id", no_wrap=True, justify="right")
    table.add_column("First Name", style="st.name", no_wrap=True)
    table.add_column("Last Name", style="st.name", no_wrap=True)
    table.add_column("Email", style="st.email", no_wrap=True)
    table.add_column("Phone", no_wrap=True)
    table.add_column("DOB", no_wrap=True)
    table.add_column("Major", no_wrap=True)
    table.add_column("GPA", justify="right", no_wrap=True)

    for item in items:
        table.add_row(
            str(item.get("student_id", "")),
            truncate(str(item.get("first_name", "")), width),
            truncate(str(item.get("last_name", "")), width),
            truncate(str(item.get("email", "")), width),
            truncate(str(item.get("phone", "")), width),
            str(item.get("date_of_birth", "")),
            truncate(str(item.get("major", "")), width),
            _gpa_text(item.get("gpa", ""), layout.gpa_precision),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, layout: _Layout) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="st.error")
    op = Text(f"  {result.op}", style="st.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if layout.verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(f"    {k}: {v}")


# ── Mutation renderer ─────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, layout: _Layout) -> None:
    """Render create/update/delete results."""
    _status_line(console, result)
    for key in ("id", "updated", "deleted"):
        if key in result.data:
            _field(console, key, result.data[key])


# ── Query renderers ───────────────────────────────────────────────────


def _render_student(result: ServiceResult, console: Console, layout: _Layout) -> None:
    """Render a single record as a panel."""
    d = result.data
    rows = [
        ("Student ID", str(d.get("student_id", ""))),
        ("Name", f"{d.get('first_name', '')} {d.get('last_name', '')}"),
        ("Email", str(d.get("email", ""))),
        ("Phone", str(d.get("phone", ""))),
        ("Date of Birth", str(d.get("date_of_birth", ""))),
        ("Major", str(d.get("major", ""))),
    ]
    body = Text()
    for label, value in rows:
        body.append(f"{label:<14}: ", style="st.key")
        body.append(f"{value}\n")
    body.append(f"{'GPA':<14}: ", style="st.key")
    body.append_text(_gpa_text(d.get("gpa", ""), layout.gpa_precision))

    title = f"{d.get('student_id', '?')} — {d.get('first_name', '')} {d.get('last_name', '')}"
    console.print(Panel(body, title=title, border_style="dim", expand=False))


def _listing_caption(result: ServiceResult, count: int) -> str:
    if result.op == "search_by_name":
        return f'{count} student(s) with name containing "{result.data.get("query", "")}"'
    if result.op == "filter_by_major":
        return f'{count} student(s) with major containing "{result.data.get("query", "")}"'
    if result.op == "filter_by_min_gpa":
        return f"{count} student(s) with GPA >= {result.data.get('min_gpa', '')}"
    return f"Total students: {count}"


def _render_student_list(result: ServiceResult, console: Console, layout: _Layout) -> None:
    """Render list/search/filter results as a table."""
    items = result.data.get("items", [])
    count = result.data.get("count", len(items))
    if not items:
        console.print(Text("No students found.", style="st.warning"))
        return
    console.print(student_table(items, layout))
    console.print(f"\n{_listing_caption(result, count)}")


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console, _Layout], None]] = {
    # Mutations
    "create_student": _render_mutation,
    "update_student": _render_mutation,
    "delete_student": _render_mutation,
    # Queries
    "get_student": _render_student,
    "list_students": _render_student_list,
    "search_by_name": _render_student_list,
    "filter_by_major": _render_student_list,
    "filter_by_min_gpa": _render_student_list,
}
