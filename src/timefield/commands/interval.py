"""Command: show or resolve a working interval."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timefield.commands._base import TfCommand

if TYPE_CHECKING:
    from timefield.commands._context import AppContext


@click.command(
    cls=TfCommand,
    examples="""\
    timefield interval
    timefield interval "next week"
    timefield interval "3/15 - 3/20"
    timefield interval "< - 3/1/2012"
    timefield -w "12/10/2011" interval "this week"
    timefield --json interval "14:00 - 16:30"
    """,
)
@click.argument("text", required=False)
@click.pass_obj
def interval(app: AppContext, text: str | None) -> None:
    """Resolve TEXT against the working interval (or show the working interval).

    \b
    Forms:
      <begin> - <end>   dates "M/D[/Y]", times "H:M", both, "<", ">", "now"
      M/D[/Y]           a single day
      today | prev|this|next day|week
    """
    from timefield.services.interval import IntervalService

    svc = IntervalService(app.scheduler)
    result = svc.current() if text is None else svc.parse(text)
    app.emit(result)
