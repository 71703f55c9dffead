"""Shared pytest fixtures and test helpers for timefield tests."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from timefield.config.settings import TimefieldSettings
from timefield.infrastructure.scheduler import Scheduler

# Saturday. Weeks start on Sunday, so "this week" is 4 Dec - 11 Dec.
TODAY = date(2011, 12, 10)
NOW = datetime(2011, 12, 10, 14, 37)


@pytest.fixture(autouse=True)
def _no_ambient_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's TIMEFIELD_* environment out of the tests."""
    monkeypatch.delenv("TIMEFIELD_CONFIG", raising=False)
    monkeypatch.delenv("TIMEFIELD_WORKING_INTERVAL", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """Temporary directory that holds the tasks file."""
    return tmp_path


@pytest.fixture
def settings(data_root: Path) -> TimefieldSettings:
    return TimefieldSettings.from_cli(data_root=data_root)


@pytest.fixture
def scheduler(settings: TimefieldSettings) -> Scheduler:
    """Scheduler whose working interval starts on :data:`TODAY`."""
    return Scheduler(settings, today=TODAY)


@pytest.fixture
def _isolated_data(data_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI uses an isolated tasks file.

    Use via ``@pytest.mark.usefixtures("_isolated_data")`` on command test
    classes.
    """
    monkeypatch.chdir(data_root)
