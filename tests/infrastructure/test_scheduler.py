"""Tests for the Scheduler: working interval and filtered listing."""

from datetime import date, datetime, timedelta

from timefield.config.settings import TimefieldSettings
from timefield.domain.intervals import Interval
from timefield.domain.tasks import Task
from timefield.infrastructure.scheduler import Scheduler

TODAY = date(2011, 12, 10)


def _task(title: str, interval: Interval) -> Task:
    return Task(title=title, notes="", interval=interval, duration=timedelta(hours=1))


class TestWorkingInterval:
    def test_starts_as_today(self, settings: TimefieldSettings) -> None:
        scheduler = Scheduler(settings, today=TODAY)
        assert scheduler.working_interval == Interval.day(TODAY)

    def test_replaced_wholesale(self, settings: TimefieldSettings) -> None:
        scheduler = Scheduler(settings, today=TODAY)
        week = Interval(datetime(2011, 12, 4), datetime(2011, 12, 11))
        scheduler.working_interval = week
        assert scheduler.working_interval == week

    def test_store_uses_settings_path(self, settings: TimefieldSettings) -> None:
        assert Scheduler(settings).store.path == settings.tasks_path


class TestTasksInWorkingInterval:
    def test_filters_by_intersection(self, settings: TimefieldSettings) -> None:
        scheduler = Scheduler(settings, today=TODAY)
        scheduler.store.add(_task("friday", Interval.day(date(2011, 12, 9))))
        scheduler.store.add(_task("saturday", Interval.day(date(2011, 12, 10))))
        scheduler.store.add(
            _task("week", Interval(datetime(2011, 12, 4), datetime(2011, 12, 11)))
        )
        scheduler.store.add(_task("sunday", Interval.day(date(2011, 12, 11))))
        listed = scheduler.tasks_in_working_interval()
        assert [(i, t.title) for i, t in listed] == [(2, "saturday"), (3, "week")]

    def test_indices_are_global(self, settings: TimefieldSettings) -> None:
        scheduler = Scheduler(settings, today=TODAY)
        scheduler.store.add(_task("old", Interval.day(date(2010, 1, 1))))
        scheduler.store.add(_task("now", Interval.day(TODAY)))
        assert [i for i, _ in scheduler.tasks_in_working_interval()] == [2]

    def test_empty_store(self, settings: TimefieldSettings) -> None:
        assert Scheduler(settings, today=TODAY).tasks_in_working_interval() == []


class TestDamagedTaskFile:
    def test_oversized_duration_starts_empty(self, settings: TimefieldSettings) -> None:
        settings.tasks_path.write_text(
            "tasks:\n"
            "- title: x\n"
            "  release-date: '2011-12-05 00:00:00'\n"
            "  due-date: '2011-12-09 00:00:00'\n"
            "  duration: '99999999999'\n",
            encoding="utf-8",
        )
        scheduler = Scheduler(settings, today=TODAY)
        assert len(scheduler.store) == 0
