"""Command: list registered column types (named types_cmd to avoid shadowing stdlib)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dbenum.commands._base import DbeCommand
from dbenum.services.types import TypeCatalogService

if TYPE_CHECKING:
    from dbenum.commands._context import AppContext

_TYPES_EXAMPLES = """\
  dbenum types
  dbenum --json types --type app.types.order_state_enum_type:OrderStateEnumType"""


@click.command("types", cls=DbeCommand, examples=_TYPES_EXAMPLES)
@click.option(
    "--type",
    "references",
    multiple=True,
    help="Column type to register first, as package.module:ClassName (repeatable).",
)
@click.pass_obj
def types_cmd(app: AppContext, references: tuple[str, ...]) -> None:
    """List enum column types by type name."""
    app.emit(TypeCatalogService().list_types(references))
