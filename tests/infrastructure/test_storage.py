"""Tests for the YAML-backed task store."""

from datetime import date, datetime, timedelta
from pathlib import Path

import pytest

from timefield.domain.errors import TaskIndexError
from timefield.domain.intervals import Interval
from timefield.domain.tasks import Task
from timefield.infrastructure.storage import TaskStore


def _task(title: str, day: int = 10) -> Task:
    return Task(
        title=title,
        notes=f"notes for {title}",
        interval=Interval.day(date(2011, 12, day)),
        duration=timedelta(hours=1, minutes=30),
    )


class TestSequence:
    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        store = TaskStore(tmp_path / "tasks.yaml")
        assert len(store) == 0
        assert store.tasks() == []

    def test_add_returns_one_based_index(self, tmp_path: Path) -> None:
        store = TaskStore(tmp_path / "tasks.yaml")
        assert store.add(_task("a")) == 1
        assert store.add(_task("b")) == 2
        assert [t.title for t in store] == ["a", "b"]

    def test_get(self, tmp_path: Path) -> None:
        store = TaskStore(tmp_path / "tasks.yaml")
        store.add(_task("a"))
        store.add(_task("b"))
        assert store.get(2).title == "b"

    def test_remove_shifts_later_tasks(self, tmp_path: Path) -> None:
        store = TaskStore(tmp_path / "tasks.yaml")
        for title in ("a", "b", "c"):
            store.add(_task(title))
        assert store.remove(2).title == "b"
        assert store.get(2).title == "c"
        assert len(store) == 2

    @pytest.mark.parametrize("index", [0, -1, 3])
    def test_bad_index(self, tmp_path: Path, index: int) -> None:
        store = TaskStore(tmp_path / "tasks.yaml")
        store.add(_task("a"))
        store.add(_task("b"))
        with pytest.raises(TaskIndexError) as excinfo:
            store.get(index)
        assert excinfo.value.size == 2
        with pytest.raises(IndexError):
            store.remove(index)

    def test_tasks_returns_a_copy(self, tmp_path: Path) -> None:
        store = TaskStore(tmp_path / "tasks.yaml")
        store.add(_task("a"))
        store.tasks().clear()
        assert len(store) == 1


class TestPersistence:
    def test_nothing_written_until_save(self, tmp_path: Path) -> None:
        path = tmp_path / "tasks.yaml"
        TaskStore(path).add(_task("a"))
        assert not path.exists()

    def test_save_and_reload(self, tmp_path: Path) -> None:
        path = tmp_path / "tasks.yaml"
        store = TaskStore(path)
        store.add(_task("a", day=9))
        store.add(
            Task(
                title="meeting",
                notes="",
                interval=Interval(datetime(2011, 12, 12, 9), datetime(2011, 12, 12, 10, 30)),
                duration=timedelta(minutes=45),
            )
        )
        store.save()
        reloaded = TaskStore(path)
        assert reloaded.tasks() == store.tasks()

    def test_file_layout(self, tmp_path: Path) -> None:
        path = tmp_path / "tasks.yaml"
        store = TaskStore(path)
        store.add(_task("a"))
        store.save()
        text = path.read_text(encoding="utf-8")
        assert text.startswith("tasks:")
        assert "title: a" in text
        assert "release-date:" in text
        assert "due-date:" in text
        assert "duration:" in text

    def test_save_creates_parent_dirs(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "dir" / "tasks.yaml"
        store = TaskStore(path)
        store.add(_task("a"))
        store.save()
        assert path.is_file()

    def test_save_leaves_no_temp_files(self, tmp_path: Path) -> None:
        store = TaskStore(tmp_path / "tasks.yaml")
        store.add(_task("a"))
        store.save()
        store.save()
        assert [p.name for p in tmp_path.iterdir()] == ["tasks.yaml"]

    def test_save_empty_list(self, tmp_path: Path) -> None:
        path = tmp_path / "tasks.yaml"
        store = TaskStore(path)
        store.add(_task("a"))
        store.save()
        store.remove(1)
        store.save()
        assert len(TaskStore(path)) == 0

    def test_hand_written_file(self, tmp_path: Path) -> None:
        path = tmp_path / "tasks.yaml"
        path.write_text(
            "tasks:\n"
            "- title: Write report\n"
            "  release-date: '2011-12-05 00:00:00'\n"
            "  due-date: '2011-12-09 17:00:00'\n"
            "  duration: '04:00:00'\n",
            encoding="utf-8",
        )
        (task,) = TaskStore(path).tasks()
        assert task.title == "Write report"
        assert task.notes == ""
        assert task.interval.end == datetime(2011, 12, 9, 17)
        assert task.duration == timedelta(hours=4)

    def test_empty_file_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "tasks.yaml"
        path.write_text("", encoding="utf-8")
        assert len(TaskStore(path)) == 0

    @pytest.mark.parametrize(
        "content",
        [
            "tasks: [\n",
            "- just\n- a list\n",
            "tasks:\n- title: x\n",
            "tasks:\n- title: x\n  release-date: soon\n  due-date: later\n  duration: '1'\n",
            "tasks:\n- title: x\n  release-date: '2011-12-05 00:00:00'\n"
            "  due-date: '2011-12-09 00:00:00'\n  duration: '99999999999'\n",
        ],
    )
    def test_corrupt_file_loads_empty(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "tasks.yaml"
        path.write_text(content, encoding="utf-8")
        assert len(TaskStore(path)) == 0
