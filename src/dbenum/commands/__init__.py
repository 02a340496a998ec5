"""Subcommand modules for dbenum.

register_commands() imports lazily so ``dbenum --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``make`` group and the standalone ``types`` command."""
    from dbenum.commands.make import make
    from dbenum.commands.types_cmd import types_cmd

    cli.add_command(make)
    cli.add_command(types_cmd)
