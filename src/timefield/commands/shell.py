"""Command: the interactive, line-oriented scheduler shell.

Each prompt shows the working interval. Commands are a single letter,
optionally followed by an argument::

    l            list tasks in the working interval
    c <interval> change the working interval
    n            new task (prompts for each field)
    p <id>       print a task
    d <id>       delete a task
    h            help
    q            quit

Failures print a localized message and leave all state untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

import click

from timefield.commands._base import TfCommand
from timefield.services.interval import IntervalService
from timefield.services.tasks import TaskService

if TYPE_CHECKING:
    from timefield.commands._context import AppContext
    from timefield.config.models import StringsConfig
    from timefield.infrastructure.scheduler import Scheduler
    from timefield.services.result import ServiceResult

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
  l              list tasks in the working interval
  c <interval>   change the working interval
  n              create a new task
  p <id>         print task <id>
  d <id>         delete task <id>
  h              show this help
  q              quit

Intervals:
  <begin> - <end>    e.g. "3/15 - 3/20", "3/15 9:00 - 3/15 17:00", "< - 1/1/2012"
  M/D[/Y]            a single day
  today
  prev|this|next day|week

Each side of a range is "M/D[/Y]", "H:M", "M/D[/Y] H:M", "<", ">" or "now"."""


class Shell:
    """Read-eval-print loop over the scheduler services."""

    def __init__(
        self,
        scheduler: Scheduler,
        strings: StringsConfig,
        *,
        read_line: Callable[[str], str] | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._strings = strings
        self._intervals = IntervalService(scheduler)
        self._tasks = TaskService(scheduler)
        self._read_line = read_line or _read_line
        self._handlers: dict[str, Callable[[str], bool]] = {
            "l": self._list,
            "c": self._change,
            "n": self._new,
            "p": self._print,
            "d": self._delete,
            "h": self._help,
            "q": self._quit,
        }

    def run(self) -> None:
        """Loop until ``q`` or end of input."""
        strings = self._strings
        click.echo(strings.application_title)
        click.echo(strings.command_prompt)
        while True:
            working = self._intervals.current().data["display"]
            try:
                line = self._read_line(f"{working} ")
            except (EOFError, click.Abort):
                click.echo()
                break
            if not self.handle(line):
                break

    def handle(self, line: str) -> bool:
        """Dispatch one command line; return False to stop the loop."""
        command, argument = line[:1], line[1:]
        handler = self._handlers.get(command)
        if handler is None:
            click.echo(self._strings.invalid_command_error)
            return True
        return handler(argument)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _list(self, _argument: str) -> bool:
        for item in self._tasks.list_tasks().data["items"]:
            click.echo(f"{item['index']}\t{item['title']}")
        return True

    def _change(self, argument: str) -> bool:
        result = self._intervals.change(argument)
        if not result.ok:
            click.echo(self._strings.invalid_interval_error)
        return True

    def _new(self, _argument: str) -> bool:
        strings = self._strings
        click.echo(strings.new_task_prompt)
        title = self._prompt(strings.title_prompt)
        notes = self._prompt(strings.notes_prompt)
        interval_text = self._prompt(strings.interval_prompt)
        duration_text = self._prompt(strings.duration_prompt)

        result = self._tasks.create_task(
            title,
            notes=notes,
            interval_text=interval_text,
            duration_text=duration_text,
        )
        if not result.ok:
            click.echo(self._failure_message(result, strings.invalid_input_error))
        return True

    def _print(self, argument: str) -> bool:
        index = self._task_index(argument)
        if index is None:
            return True
        result = self._tasks.get_task(index)
        if not result.ok:
            click.echo(self._strings.invalid_task_error)
            return True
        d = result.data
        click.echo(d["title"])
        click.echo(d["notes"])
        click.echo(d["interval"])
        click.echo(d["duration"])
        return True

    def _delete(self, argument: str) -> bool:
        index = self._task_index(argument)
        if index is None:
            return True
        result = self._tasks.delete_task(index)
        if not result.ok:
            click.echo(self._failure_message(result, self._strings.invalid_task_error))
        return True

    def _help(self, _argument: str) -> bool:
        click.echo(HELP_TEXT)
        return True

    def _quit(self, _argument: str) -> bool:
        return False

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _failure_message(self, result: ServiceResult, fallback: str) -> str:
        if result.error is not None and result.error.code == "SAVE_FAILED":
            return self._strings.save_error
        return fallback

    def _prompt(self, text: str, default: str = "") -> str:
        response = self._read_line(f"{text}[{default}]: ")
        return response or default

    def _task_index(self, argument: str) -> int | None:
        try:
            return int(argument.strip())
        except ValueError:
            logger.debug("Not a task number: %r", argument)
            click.echo(self._strings.invalid_task_error)
            return None


def _read_line(prompt: str) -> str:
    return click.prompt(prompt, default="", show_default=False, prompt_suffix="")


@click.command(
    cls=TfCommand,
    examples="""\
    timefield shell
    timefield -w "this week" shell
    """,
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Start the interactive scheduler shell."""
    Shell(app.scheduler, app.strings).run()
