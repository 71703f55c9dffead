"""YAML-backed task list.

File layout::

    tasks:
    - title: Write report
      notes: quarterly numbers
      release-date: '2011-12-05 00:00:00'
      due-date: '2011-12-09 17:00:00'
      duration: 04:00:00

Tasks are addressed by 1-based index in insertion order. A missing file is
an empty list; an unreadable file is logged and also treated as empty.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterator
from io import StringIO
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from timefield.domain.errors import TaskIndexError
from timefield.domain.tasks import Task

logger = logging.getLogger(__name__)

_ROOT_KEY = "tasks"


def _new_yaml() -> YAML:
    """Create a fresh YAML instance (ruamel's YAML object is stateful)."""
    y = YAML()
    y.default_flow_style = False
    return y


class TaskStore:
    """Ordered, file-backed sequence of :class:`Task` values."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._tasks: list[Task] = self._load()

    # ------------------------------------------------------------------
    # Sequence operations (1-based)
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def add(self, task: Task) -> int:
        """Append *task* and return its 1-based index."""
        self._tasks.append(task)
        return len(self._tasks)

    def get(self, index: int) -> Task:
        return self._tasks[self._offset(index)]

    def remove(self, index: int) -> Task:
        """Remove and return the task at *index*; later tasks shift down."""
        return self._tasks.pop(self._offset(index))

    def insert(self, index: int, task: Task) -> None:
        """Place *task* at 1-based *index*; later tasks shift up."""
        self._tasks.insert(index - 1, task)

    def _offset(self, index: int) -> int:
        if not 1 <= index <= len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))
        return index - 1

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _load(self) -> list[Task]:
        if not self.path.is_file():
            return []
        try:
            data = _new_yaml().load(self.path.read_text(encoding="utf-8"))
            records = (data or {}).get(_ROOT_KEY) or []
            return [Task.from_record(record) for record in records]
        except (
            OSError,
            UnicodeError,
            YAMLError,
            AttributeError,
            KeyError,
            TypeError,
            ValueError,
            OverflowError,
        ):
            logger.warning("Could not read tasks from %s; starting empty", self.path, exc_info=True)
            return []

    def dumps(self) -> str:
        """Serialize the current task list to YAML text."""
        buf = StringIO()
        _new_yaml().dump({_ROOT_KEY: [task.to_record() for task in self._tasks]}, buf)
        return buf.getvalue()

    def save(self) -> None:
        """Write the task list, replacing the file atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        text = self.dumps()
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Saved %d tasks to %s", len(self._tasks), self.path)
