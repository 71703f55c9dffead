"""Scheduler — owner of the task store and the working interval.

One Scheduler exists per process. The working interval starts as the
current local day and is only ever replaced wholesale; it is never saved.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from timefield.domain.datetimes import local_today
from timefield.domain.intervals import Interval
from timefield.infrastructure.storage import TaskStore

if TYPE_CHECKING:
    from timefield.config.settings import TimefieldSettings
    from timefield.domain.tasks import Task


class Scheduler:
    """Task list plus the process-wide working interval."""

    def __init__(self, settings: TimefieldSettings, *, today: date | None = None) -> None:
        self.settings = settings
        self.store = TaskStore(settings.tasks_path)
        self._working_interval = Interval.day(today or local_today())

    @property
    def working_interval(self) -> Interval:
        return self._working_interval

    @working_interval.setter
    def working_interval(self, interval: Interval) -> None:
        self._working_interval = interval

    def tasks_in_working_interval(self) -> list[tuple[int, Task]]:
        """``(index, task)`` pairs whose interval intersects the working interval."""
        current = self._working_interval
        return [
            (index, task)
            for index, task in enumerate(self.store, start=1)
            if task.interval.intersects(current)
        ]
