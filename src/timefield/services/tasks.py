"""TaskService — list, create, show, and delete tasks.

Mutations are written to the tasks file immediately. A failed write is
rolled back in memory and reported as ``SAVE_FAILED``.
"""

from __future__ import annotations

import logging
from typing import Any

from timefield.domain.errors import InvalidDuration, InvalidInterval, TaskIndexError
from timefield.domain.tasks import Task, format_duration, parse_duration
from timefield.services.base import BaseService
from timefield.services.result import ServiceResult

logger = logging.getLogger(__name__)


class TaskService(BaseService):
    """Task list operations scoped by the working interval."""

    def _task_data(self, index: int, task: Task) -> dict[str, Any]:
        return {
            "index": index,
            "title": task.title,
            "notes": task.notes,
            "interval": self.display(task.interval),
            "release": task.interval.begin.isoformat(),
            "due": task.interval.end.isoformat(),
            "duration": format_duration(task.duration),
        }

    def _invalid_task(self, op: str, exc: TaskIndexError) -> ServiceResult:
        return ServiceResult.failure(op, exc.code, str(exc), index=exc.index, count=exc.size)

    def _save_failure(self, op: str, exc: OSError) -> ServiceResult:
        path = self._scheduler.store.path
        logger.warning("Could not save tasks to %s: %s", path, exc)
        return ServiceResult.failure(
            op, "SAVE_FAILED", f"Could not save tasks: {exc}", path=str(path)
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_tasks(self) -> ServiceResult:
        """Tasks intersecting the working interval, numbered by store index."""
        working = self._scheduler.working_interval
        items = [
            self._task_data(index, task)
            for index, task in self._scheduler.tasks_in_working_interval()
        ]
        return ServiceResult(
            ok=True,
            op="list_tasks",
            data={
                "working_interval": self.display(working),
                "count": len(items),
                "items": items,
            },
        )

    def create_task(
        self,
        title: str,
        *,
        notes: str = "",
        interval_text: str,
        duration_text: str,
    ) -> ServiceResult:
        """Create a task; the interval is parsed against the working interval."""
        op = "create_task"
        title = title.strip()
        if not title:
            return ServiceResult.failure(op, "EMPTY_TITLE", "Task title must not be empty")

        try:
            interval = self._parse_interval(interval_text)
        except InvalidInterval as exc:
            return self._interval_failure(op, interval_text, exc)

        try:
            duration = parse_duration(duration_text)
        except InvalidDuration as exc:
            return ServiceResult.failure(op, exc.code, str(exc), input=duration_text)

        task = Task(title=title, notes=notes.strip(), interval=interval, duration=duration)
        store = self._scheduler.store
        index = store.add(task)
        try:
            store.save()
        except OSError as exc:
            store.remove(index)
            return self._save_failure(op, exc)
        logger.debug("Created task #%d %r", index, title)
        return ServiceResult(ok=True, op=op, data=self._task_data(index, task))

    def get_task(self, index: int) -> ServiceResult:
        op = "show_task"
        try:
            task = self._scheduler.store.get(index)
        except TaskIndexError as exc:
            return self._invalid_task(op, exc)
        return ServiceResult(ok=True, op=op, data=self._task_data(index, task))

    def delete_task(self, index: int) -> ServiceResult:
        """Delete the task at *index*; later tasks are renumbered."""
        op = "delete_task"
        store = self._scheduler.store
        try:
            task = store.remove(index)
        except TaskIndexError as exc:
            return self._invalid_task(op, exc)
        try:
            store.save()
        except OSError as exc:
            store.insert(index, task)
            return self._save_failure(op, exc)

        warnings: list[str] = []
        if index <= len(store):
            warnings.append(f"Tasks after #{index} have been renumbered")
        logger.debug("Deleted task #%d %r", index, task.title)
        return ServiceResult(
            ok=True,
            op=op,
            data={"index": index, "title": task.title, "remaining": len(store)},
            warnings=warnings,
        )
