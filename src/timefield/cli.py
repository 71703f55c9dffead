"""Root CLI group for timefield with global flags and command registration."""

from __future__ import annotations

import click

from timefield import __version__
from timefield.commands import register_commands
from timefield.commands._base import TfGroup
from timefield.commands._context import AppContext
from timefield.config.settings import TimefieldSettings


@click.group(
    cls=TfGroup,
    invoke_without_command=True,
    examples="""\
    timefield interval "next week"
    timefield new "Write report" --interval "12/5 - 12/9 17:00" --duration 4:00
    timefield -w "this week" list
    timefield shell
    """,
)
@click.version_option(version=__version__, prog_name="timefield")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-w",
    "--working-interval",
    default=None,
    help='Initial working interval, e.g. "this week" (default: today).',
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
    working_interval: str | None,
) -> None:
    """timefield — schedule tasks inside a navigable working interval."""
    ctx.ensure_object(dict)
    settings = TimefieldSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
        working_interval=working_interval,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
