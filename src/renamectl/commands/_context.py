"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands through
``@click.pass_obj``. Builds the workspace lazily and routes results to
stdout or stderr with the right exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from renamectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from renamectl.config.settings import RenameSettings
    from renamectl.infrastructure.workspace import Workspace
    from renamectl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The workspace is created on first use so ``--help`` and ``--version``
    never load plugins.
    """

    def __init__(self, settings: RenameSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None

        from renamectl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from renamectl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def workspace(self) -> Workspace:
        """The workspace instance (created lazily on first access)."""
        if self._workspace is None:
            from renamectl.infrastructure.workspace import Workspace

            self._workspace = Workspace(self.settings)
            self._workspace.init_event_bus()
        return self._workspace

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def render(self, result: ServiceResult) -> None:
        """Write *result* without terminating, for interactive loops.

        Failures go to stderr; warnings follow the output in text mode.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        click.echo(output, err=not result.ok)
        if result.ok and not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so piped output
          stays clean.
        * Failure: writes to stderr and exits with code 1.
        """
        self.render(result)
        if not result.ok:
            raise SystemExit(1)
