"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the diagram service and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from seqfig.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from seqfig.config.settings import SeqfigSettings
    from seqfig.services.diagram import DiagramService
    from seqfig.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: SeqfigSettings) -> None:
        self.settings = settings
        self._service: DiagramService | None = None

        from seqfig.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> DiagramService:
        """The diagram service (created lazily on first use)."""
        if self._service is None:
            from seqfig.services.diagram import DiagramService

            self._service = DiagramService(self.settings)
        return self._service

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute the LaTeX.
        * Failure: writes to stderr, exits with code 1.
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
