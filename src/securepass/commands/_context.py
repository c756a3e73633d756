"""AppContext — settings plus centralized result emission.

Created once per invocation by the CLI entry point.  Configures logging
and telemetry, and routes results to stdout/stderr with exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from securepass.config.logging import configure_logging
from securepass.output.formatters import OutputSettings, format_result
from securepass.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from securepass.config.settings import PassSettings
    from securepass.services.result import ServiceResult


class AppContext:
    """Shared invocation context."""

    def __init__(self, settings: PassSettings) -> None:
        self.settings = settings

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            enable_telemetry()

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
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
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
