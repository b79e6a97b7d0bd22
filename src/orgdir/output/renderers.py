"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from orgdir.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from orgdir.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: identifiers for listings, a member's description, or a status line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(_extract_key(item) for item in items if _extract_key(item))

    description = result.data.get("description")
    if description:
        return str(description)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_key(item: Any) -> str:
    if isinstance(item, dict):
        for key in ("code", "employee_id", "name"):
            val = item.get(key)
            if val is not None:
                return str(val)
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="org.ok"), Text(f"  {result.op}", style="org.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="org.key")
    if key in ("id", "employee_id", "department_id"):
        v = Text(str(value), style="org.id")
    elif key in ("code", "department_code"):
        v = Text(str(value), style="org.code")
    elif key == "name":
        v = Text(str(value), style="org.name")
    elif "salary" in key:
        v = Text(str(value), style="org.salary")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text.assemble(("ERROR", "org.error"), (f"  {result.op}", "org.op"), " — ", msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Mutation renderer ─────────────────────────────────────────────────


_MUTATION_KEYS = (
    "id",
    "employee_id",
    "name",
    "code",
    "age",
    "salary",
    "old_salary",
    "new_salary",
    "department_code",
    "changed",
)


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render create/hire/raise/assign results."""
    _status_line(console, result)
    keys = result.data.keys() if verbose else _MUTATION_KEYS
    for key in keys:
        if key in result.data:
            _field(console, key, result.data[key])


# ── Query renderers ───────────────────────────────────────────────────


def _render_people(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="org.name")
    table.add_column("Age", justify="right")
    table.add_column("Employee ID", style="org.id", no_wrap=True)
    table.add_column("Salary", style="org.salary", justify="right")
    table.add_column("Department", style="org.code")
    for item in items:
        table.add_row(
            str(item.get("name", "")),
            str(item.get("age", "")),
            str(item.get("employee_id") or ""),
            str(item.get("salary") or ""),
            str(item.get("department_code") or ""),
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} people")


def _render_department(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    for key in ("id", "name", "code", "employee_count"):
        if key in d:
            _field(console, key, d[key])
    for member in d.get("members", []):
        console.print(Text(f"    - {member.get('name', '')} ({member.get('employee_id', '')})"))


def _render_structure(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the department structure as a table, one row per department."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Code", style="org.code", no_wrap=True)
    table.add_column("Department", style="org.name")
    table.add_column("Employees", justify="right")
    table.add_column("Members")
    if verbose:
        table.add_column("ID", style="org.id")
    for item in items:
        row = [
            str(item.get("code", "")),
            str(item.get("name", "")),
            str(item.get("employee_count", 0)),
            ", ".join(item.get("members", [])),
        ]
        if verbose:
            row.append(str(item.get("id", "")))
        table.add_row(*row)
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} departments")
    unassigned = result.data.get("unassigned") or []
    if unassigned:
        console.print(Text(f"unassigned: {', '.join(unassigned)}", style="org.warning"))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Mutations
    "create_person": _render_mutation,
    "hire_employee": _render_mutation,
    "give_raise": _render_mutation,
    "create_department": _render_mutation,
    "assign_employee": _render_mutation,
    "unassign_employee": _render_mutation,
    # Queries
    "find_person": _render_mutation,
    "find_employee": _render_mutation,
    "find_department": _render_department,
    "list_people": _render_people,
    "department_structure": _render_structure,
}
