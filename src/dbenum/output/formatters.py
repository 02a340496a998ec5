"""Format ServiceResult (and scaffold plans) for the terminal.

Three modes: ``--json`` dumps the result model, ``--quiet`` prints a
single status line, and the default renders styled text through Rich.
Renderers are dispatched by ``result.op``; unknown ops fall through to
a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from dbenum.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from dbenum.services.result import ServiceResult
    from dbenum.services.scaffold import ScaffoldPlan


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags derived from the global CLI options."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    *settings* wins over the bare *json_output* flag when both are given.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)


def render_quiet(result: ServiceResult) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* as styled text (plain text when not on a terminal).

    *verbose* adds the fully qualified names and cases of a scaffold and
    the detail block of an error.
    """
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def format_plan_summary(plan: ScaffoldPlan, *, display: Callable[[Any], str] = str) -> str:
    """Summary shown before asking to write a scaffold plan."""
    enum_spec, type_spec = plan.enum_spec, plan.type_spec
    console = create_console()
    console.print(Text("Summary", style="dbe.op"))
    _bullet(console, "Enum", f"{enum_spec.qualified_module}.{enum_spec.name}")
    _bullet(console, "Type", f"{type_spec.qualified_module}.{type_spec.class_name}")
    _bullet(console, "Type name", type_spec.type_name)
    _bullet(console, "Cases", ", ".join(enum_spec.cases))
    for artifact in plan.artifacts:
        _bullet(console, f"File ({artifact.kind})", display(artifact.path))
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="dbe.ok"), Text(f"  {result.op}", style="dbe.op"))


def _bullet(console: Console, key: str, value: str) -> None:
    line = Text("  * ")
    line.append(f"{key}: ", style="dbe.key")
    line.append(value)
    console.print(line, soft_wrap=True)


def _field(console: Console, key: str, value: Any) -> None:
    line = Text(f"  {key}: ", style="dbe.key")
    if isinstance(value, (dict, list)):
        line.append(_json.dumps(value, separators=(",", ":")))
    else:
        line.append(str(value))
    console.print(line, soft_wrap=True)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_make_enum(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    if data.get("cancelled"):
        console.print(Text("Cancelled: no files written.", style="dbe.warning"))
        return

    _status_line(console, result)
    for path in data.get("created", []):
        line = Text("  Created: ", style="dbe.ok")
        line.append(path, style="dbe.path")
        console.print(line, soft_wrap=True)
    _field(console, "type_name", data.get("type_name", ""))
    if verbose:
        for key in ("enum", "type", "cases"):
            if key in data:
                _field(console, key, data[key])

    usage = data.get("usage") or []
    if usage:
        console.print()
        console.print(Text("Next steps", style="dbe.op"))
        for row in usage:
            console.print(Text(f"  {row}" if row else "", style="dbe.code"), soft_wrap=True)


def _render_list_types(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for item in result.data.get("items", []):
        line = Text("  ")
        line.append(item["name"], style="dbe.name")
        line.append(f"  {item['class']}", style="dbe.path")
        console.print(line, soft_wrap=True)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    msg = result.error.message if result.error else "Unknown error"
    line = Text("ERROR", style="dbe.error")
    line.append(f"  {result.op}: {msg}")
    console.print(line, soft_wrap=True)
    if verbose and result.error and result.error.detail:
        for key, value in result.error.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "make_enum": _render_make_enum,
    "list_types": _render_list_types,
}
