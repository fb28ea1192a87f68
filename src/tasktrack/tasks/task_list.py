# src/tasktrack/tasks/task_list.py

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator

from ..errors import IndexOutOfRange
from .task_models import Task

# Offset between the 1-based index shown to users and the 0-based list index.
DISPLAYED_INDEX_OFFSET = 1


class TaskList:
    """
    The single owning container of the session's tasks.

    Commands and the store receive the same instance and never copy it;
    snapshot() is the only way to get an independent view.
    Not thread-safe: callers sharing it across threads must hold AppState.lock.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:
        return f"TaskList(size={len(self._tasks)})"

    def _position(self, index: int) -> int:
        if not 1 <= index <= len(self._tasks):
            raise IndexOutOfRange(index, len(self._tasks))
        return index - DISPLAYED_INDEX_OFFSET

    def append(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        """Return the task at a 1-based index."""
        return self._tasks[self._position(index)]

    def pop(self, index: int) -> Task:
        """Remove and return the task at a 1-based index; later tasks shift down."""
        return self._tasks.pop(self._position(index))

    def snapshot(self) -> tuple[Task, ...]:
        # Copies of the tasks too, so a later mark_done on the live list
        # does not leak into an already-produced listing.
        return tuple(copy.copy(t) for t in self._tasks)

    def find(self, keyword: str) -> tuple[Task, ...]:
        """Case-sensitive substring match on descriptions, in list order."""
        return tuple(copy.copy(t) for t in self._tasks if keyword in t.description)
