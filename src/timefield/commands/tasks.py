"""Commands: list, new, show, and delete tasks."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from timefield.commands._base import TfCommand

if TYPE_CHECKING:
    from timefield.commands._context import AppContext


def _is_interactive(app: AppContext) -> bool:
    """Return True when interactive prompts should fire.

    Prompts require: no ``--no-interact``, no ``--json``, and stdin is a TTY.
    """
    return not app.settings.no_interact and not app.settings.json_output and sys.stdin.isatty()


@click.command(
    "list",
    cls=TfCommand,
    examples="""\
    timefield list
    timefield -w "this week" list
    timefield -v -w "< - >" list
    """,
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List tasks whose interval intersects the working interval."""
    from timefield.services.tasks import TaskService

    app.emit(TaskService(app.scheduler).list_tasks())


@click.command(
    cls=TfCommand,
    examples="""\
    timefield new "Write report" --interval "12/5 - 12/9 17:00" --duration 4:00
    timefield new "Call bank" --notes "ask about fees" --interval today --duration 0:15
    """,
)
@click.argument("title")
@click.option("--notes", default=None, help="Free-form notes.")
@click.option("--interval", "interval_text", default=None, help="Release/due interval.")
@click.option("--duration", "duration_text", default=None, help="Estimated effort, H:M.")
@click.pass_obj
def new(
    app: AppContext,
    title: str,
    notes: str | None,
    interval_text: str | None,
    duration_text: str | None,
) -> None:
    """Create a new task titled TITLE."""
    from timefield.services.tasks import TaskService

    strings = app.strings
    if _is_interactive(app):
        if notes is None:
            notes = click.prompt(strings.notes_prompt, default="", show_default=False)
        if interval_text is None:
            interval_text = click.prompt(strings.interval_prompt)
        if duration_text is None:
            duration_text = click.prompt(strings.duration_prompt)

    if interval_text is None:
        raise click.UsageError("Missing option '--interval'.")
    if duration_text is None:
        raise click.UsageError("Missing option '--duration'.")

    result = TaskService(app.scheduler).create_task(
        title,
        notes=notes or "",
        interval_text=interval_text,
        duration_text=duration_text,
    )
    app.emit(result)


@click.command(
    cls=TfCommand,
    examples="""\
    timefield show 1
    timefield --json show 3
    """,
)
@click.argument("index", type=int)
@click.pass_obj
def show(app: AppContext, index: int) -> None:
    """Print task number INDEX."""
    from timefield.services.tasks import TaskService

    app.emit(TaskService(app.scheduler).get_task(index))


@click.command(
    cls=TfCommand,
    examples="""\
    timefield delete 2
    """,
)
@click.argument("index", type=int)
@click.pass_obj
def delete(app: AppContext, index: int) -> None:
    """Delete task number INDEX (later tasks are renumbered)."""
    from timefield.services.tasks import TaskService

    app.emit(TaskService(app.scheduler).delete_task(index))
