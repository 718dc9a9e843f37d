"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzstamp.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tzstamp.config.settings import TzstampSettings
    from tzstamp.services.convert import ConvertService
    from tzstamp.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The conversion service is built on first use so ``--help`` and
    ``--version`` never load zone data.
    """

    def __init__(self, settings: TzstampSettings) -> None:
        self.settings = settings
        self._service: ConvertService | None = None

        from tzstamp.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from tzstamp.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> ConvertService:
        """The conversion service (created lazily on first access)."""
        if self._service is None:
            from tzstamp.services.convert import ConvertService

            self._service = ConvertService()
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout.  Warnings go to stderr so they don't
          pollute piped output (in JSON mode they are in the payload).
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
