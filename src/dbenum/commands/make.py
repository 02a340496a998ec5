"""Command group: code generation (``make enum``)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dbenum.commands._base import DbeGroup
from dbenum.domain.cases import parse_case, validate_enum_name
from dbenum.domain.errors import CaseValidationError, EnumNameValidationError
from dbenum.output.formatters import format_plan_summary
from dbenum.services.result import ServiceError, ServiceResult
from dbenum.services.scaffold import OP_MAKE_ENUM, ScaffoldPlan, ScaffoldService

if TYPE_CHECKING:
    from dbenum.commands._context import AppContext

_MAKE_EXAMPLES = """\
  dbenum make enum
  dbenum make enum OrderState --case NEW=new --case PAID=paid --case SHIPPED --yes"""


def _enum_name_proc(value: str) -> str:
    """Prompt value processor: re-ask until the enum name is valid."""
    try:
        return validate_enum_name(value)
    except EnumNameValidationError as exc:
        raise click.BadParameter(str(exc)) from exc


def _prompt_cases() -> list[str]:
    """Ask for case lines until a blank one; malformed lines are re-asked."""
    click.echo("Enter the enum cases. Press enter on an empty line to finish.")
    lines: list[str] = []
    seen: dict[str, str] = {}
    while True:
        raw = click.prompt(
            f"Case #{len(lines) + 1} (NAME=value, e.g. ACTIVE=active)",
            default="",
            show_default=False,
        )
        try:
            parsed = parse_case(raw)
        except CaseValidationError as exc:
            click.echo(f"ERROR: {exc}", err=True)
            continue
        if parsed is None:
            return lines
        name, value = parsed
        if name in seen:
            click.echo(f"ERROR: Duplicate case name: {name}", err=True)
            continue
        if value in seen.values():
            click.echo(f"ERROR: Duplicate case value: {value!r}", err=True)
            continue
        seen[name] = value
        lines.append(raw)


def _invalid(message: str) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=OP_MAKE_ENUM,
        error=ServiceError(code="VALIDATION_ERROR", message=message),
    )


@click.group(cls=DbeGroup, examples=_MAKE_EXAMPLES)
def make() -> None:
    """Generate enum and column type modules."""


@make.command(
    "enum",
    examples="""\
  dbenum make enum
  dbenum make enum UserStatus --case ACTIVE --case IN_PROGRESS=in-progress
  dbenum make enum Priority --case LOW --case HIGH --enum-namespace app.domain --yes
  dbenum --json --no-interact make enum OrderState --case NEW --case PAID --yes""",
)
@click.argument("name", required=False)
@click.option(
    "--case",
    "cases",
    multiple=True,
    help="Enum case as NAME=value or NAME (repeatable; value defaults to lowercase NAME).",
)
@click.option("--enum-namespace", default=None, help="Package for the enum module.")
@click.option("--type-namespace", default=None, help="Package for the column type module.")
@click.option("-y", "--yes", is_flag=True, help="Write files without asking for confirmation.")
@click.pass_obj
def enum_cmd(
    app: AppContext,
    name: str | None,
    cases: tuple[str, ...],
    enum_namespace: str | None,
    type_namespace: str | None,
    yes: bool,
) -> None:
    """Create a new enum and its SQLAlchemy column type."""
    interactive = app.interactive
    config = app.settings.scaffold
    svc = ScaffoldService(app.settings.project_root, config)

    if name is None:
        if not interactive:
            app.emit(_invalid("Enum name is required."))
            return
        name = click.prompt("Enum name (e.g. UserStatus, OrderState)", value_proc=_enum_name_proc)

    # Cases and namespaces are asked together; --case means a scripted run.
    case_lines = list(cases)
    if any(not line.strip() for line in case_lines):
        app.emit(_invalid("--case must not be empty."))
        return
    prompted = not case_lines and interactive
    if prompted:
        case_lines = _prompt_cases()
    if not case_lines:
        app.emit(svc.make_enum(name, case_lines))
        return

    if prompted:
        if enum_namespace is None:
            enum_namespace = click.prompt("Enum namespace", default=config.default_enum_namespace)
        if type_namespace is None:
            type_namespace = click.prompt("Type namespace", default=config.default_type_namespace)

    def confirm(plan: ScaffoldPlan) -> bool:
        click.echo(format_plan_summary(plan, display=svc.display), err=app.settings.json_output)
        if yes:
            return True
        if not interactive:
            return False
        return click.confirm("Create these files?", default=False, err=app.settings.json_output)

    app.emit(
        svc.make_enum(
            name,
            case_lines,
            enum_namespace=enum_namespace,
            type_namespace=type_namespace,
            confirm=confirm,
        )
    )
