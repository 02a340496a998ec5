"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Centralizes logging setup and result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dbenum.config.logging import configure_logging
from dbenum.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from dbenum.config.settings import DbEnumSettings
    from dbenum.services.result import ServiceResult


class AppContext:
    """State shared by every command of one invocation."""

    def __init__(self, settings: DbEnumSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    @property
    def interactive(self) -> bool:
        """Prompts fire unless ``--no-interact`` was given."""
        return not self.settings.no_interact

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; exit with status 1 when it failed.

        Warnings go to stderr in human mode so piped output stays clean.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
