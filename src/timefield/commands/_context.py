"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Holds the explicit configuration (settings and string
table), builds the Scheduler lazily, and centralizes result emission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timefield.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from timefield.config.models import StringsConfig
    from timefield.config.settings import TimefieldSettings
    from timefield.infrastructure.scheduler import Scheduler
    from timefield.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The scheduler is created on first use so ``--help`` and ``--version``
    never touch the tasks file.
    """

    def __init__(self, settings: TimefieldSettings) -> None:
        self.settings = settings
        self._scheduler: Scheduler | None = None

        from timefield.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            quiet=settings.quiet,
        )

    @property
    def strings(self) -> StringsConfig:
        return self.settings.strings

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    @property
    def scheduler(self) -> Scheduler:
        """The scheduler (created lazily, seeded with ``--working-interval``)."""
        if self._scheduler is None:
            from timefield.infrastructure.scheduler import Scheduler

            scheduler = Scheduler(self.settings)
            if self.settings.working_interval:
                from timefield.services.interval import IntervalService

                result = IntervalService(scheduler).change(self.settings.working_interval)
                if not result.ok:
                    self.emit(result)
            self._scheduler = scheduler
        return self._scheduler

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
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
