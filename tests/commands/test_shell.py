"""Tests for the interactive shell."""

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner

from timefield.cli import cli
from timefield.commands.shell import HELP_TEXT, Shell
from timefield.config.models import StringsConfig
from timefield.infrastructure.scheduler import Scheduler


def _scripted(lines: Iterable[str]) -> tuple[Callable[[str], str], list[str]]:
    """A read_line that replays *lines* and records each prompt."""
    pending = iter(lines)
    prompts: list[str] = []

    def read_line(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    return read_line, prompts


def _shell(scheduler: Scheduler, lines: Iterable[str] = ()) -> tuple[Shell, list[str]]:
    read_line, prompts = _scripted(lines)
    return Shell(scheduler, scheduler.settings.strings, read_line=read_line), prompts


class TestHandle:
    def test_unknown_command(self, scheduler: Scheduler, capsys: pytest.CaptureFixture[str]) -> None:
        shell, _ = _shell(scheduler)
        assert shell.handle("x") is True
        assert capsys.readouterr().out == "Invalid command.\n"

    def test_empty_line_is_invalid(
        self, scheduler: Scheduler, capsys: pytest.CaptureFixture[str]
    ) -> None:
        shell, _ = _shell(scheduler)
        assert shell.handle("") is True
        assert capsys.readouterr().out == "Invalid command.\n"

    def test_quit(self, scheduler: Scheduler) -> None:
        shell, _ = _shell(scheduler)
        assert shell.handle("q") is False

    def test_help(self, scheduler: Scheduler, capsys: pytest.CaptureFixture[str]) -> None:
        shell, _ = _shell(scheduler)
        shell.handle("h")
        assert capsys.readouterr().out == HELP_TEXT + "\n"

    def test_change_interval(self, scheduler: Scheduler) -> None:
        shell, _ = _shell(scheduler)
        shell.handle("c next week")
        assert scheduler.working_interval.begin.day == 11

    def test_change_interval_failure(
        self, scheduler: Scheduler, capsys: pytest.CaptureFixture[str]
    ) -> None:
        shell, _ = _shell(scheduler)
        before = scheduler.working_interval
        shell.handle("c whenever")
        assert capsys.readouterr().out == "Invalid interval.\n"
        assert scheduler.working_interval == before

    def test_new_and_list(self, scheduler: Scheduler, capsys: pytest.CaptureFixture[str]) -> None:
        shell, prompts = _shell(scheduler, ["Write report", "numbers", "this day", "2:00"])
        shell.handle("n")
        assert prompts == ["Title[]: ", "Notes[]: ", "Interval[]: ", "Duration (H:M)[]: "]
        assert len(scheduler.store) == 1
        capsys.readouterr()
        shell.handle("l")
        assert capsys.readouterr().out == "1\tWrite report\n"

    def test_new_invalid_input(
        self, scheduler: Scheduler, capsys: pytest.CaptureFixture[str]
    ) -> None:
        shell, _ = _shell(scheduler, ["Write report", "", "this day", "two hours"])
        shell.handle("n")
        assert capsys.readouterr().out == "New task:\nInvalid input.\n"
        assert len(scheduler.store) == 0

    def test_print(self, scheduler: Scheduler, capsys: pytest.CaptureFixture[str]) -> None:
        shell, _ = _shell(scheduler, ["Write report", "numbers", "this day", "2:00"])
        shell.handle("n")
        capsys.readouterr()
        shell.handle("p 1")
        assert capsys.readouterr().out.splitlines() == [
            "Write report",
            "numbers",
            "[10 12 2011]",
            "02:00:00",
        ]

    def test_new_duration_too_long(
        self, scheduler: Scheduler, capsys: pytest.CaptureFixture[str]
    ) -> None:
        shell, _ = _shell(scheduler, ["n", "t", "", "today", "99999999999", "q"])
        shell.run()
        assert "Invalid input." in capsys.readouterr().out
        assert len(scheduler.store) == 0

    def test_save_failure(
        self, scheduler: Scheduler, capsys: pytest.CaptureFixture[str], tmp_path: Path
    ) -> None:
        shell, _ = _shell(scheduler, ["a", "", "this day", "1"])
        shell.handle("n")
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        scheduler.store.path = blocker / "tasks.yaml"
        capsys.readouterr()
        shell.handle("d 1")
        assert capsys.readouterr().out == "Could not save tasks.\n"
        assert [t.title for t in scheduler.store] == ["a"]

    @pytest.mark.parametrize("line", ["p 7", "p x", "p", "d 7", "d one"])
    def test_invalid_task(
        self, scheduler: Scheduler, capsys: pytest.CaptureFixture[str], line: str
    ) -> None:
        shell, _ = _shell(scheduler)
        assert shell.handle(line) is True
        assert capsys.readouterr().out == "Invalid task.\n"

    def test_delete(self, scheduler: Scheduler) -> None:
        shell, _ = _shell(scheduler, ["a", "", "this day", "1", "b", "", "this day", "1"])
        shell.handle("n")
        shell.handle("n")
        shell.handle("d 1")
        assert [t.title for t in scheduler.store] == ["b"]

    def test_localized_messages(
        self, scheduler: Scheduler, capsys: pytest.CaptureFixture[str]
    ) -> None:
        strings = StringsConfig(invalid_command_error="Ungueltiger Befehl.")
        shell = Shell(scheduler, strings, read_line=lambda _prompt: "")
        shell.handle("z")
        assert capsys.readouterr().out == "Ungueltiger Befehl.\n"


class TestRun:
    def test_prompt_shows_working_interval(
        self, scheduler: Scheduler, capsys: pytest.CaptureFixture[str]
    ) -> None:
        shell, prompts = _shell(scheduler, ["c next week", "q"])
        shell.run()
        assert prompts == ["[10 12 2011] ", "[11 12 2011 - 18 12 2011] "]
        out = capsys.readouterr().out
        assert out.startswith("TimeField\nEnter a command (h for help).\n")

    def test_end_of_input_stops(self, scheduler: Scheduler) -> None:
        shell, prompts = _shell(scheduler, ["l"])
        shell.run()
        assert len(prompts) == 2


@pytest.mark.usefixtures("_isolated_data")
class TestShellCommand:
    def test_session(self, cli_runner: CliRunner) -> None:
        script = "\n".join(
            ["n", "Write report", "numbers", "1/8/2030", "1:00", "l", "p 1", "q", ""]
        )
        result = cli_runner.invoke(cli, ["-w", "1/6/2030 - 1/13/2030", "shell"], input=script)
        assert result.exit_code == 0
        assert "TimeField" in result.output
        assert "[6 1 2030 - 13 1 2030] " in result.output
        assert "1\tWrite report" in result.output
        assert "[8 1 2030]" in result.output

    def test_eof_exits_cleanly(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["shell"], input="h\n")
        assert result.exit_code == 0
        assert "Commands:" in result.output
