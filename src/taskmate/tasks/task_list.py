# src/taskmate/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..errors import TaskIndexError
from .task_models import Task


class TaskList:
    """
    Ordered in-memory task collection.

    Every public index is 1-based and always equals the task's current position,
    so deleting task i shifts tasks after it down by one.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _check_index(self, index: int) -> None:
        if index < 1 or index > len(self._tasks):
            raise TaskIndexError()

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index - 1]

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def mark(self, index: int) -> Task:
        task = self.get(index)
        task.mark()
        return task

    def unmark(self, index: int) -> Task:
        task = self.get(index)
        task.unmark()
        return task

    def delete(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks.pop(index - 1)

    def tag(self, index: int, text: str) -> Task:
        task = self.get(index)
        task.tag = f" #{text}"
        return task

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        """Case-sensitive substring search over descriptions; keeps list indices."""
        return [(i, t) for i, t in self.enumerate() if keyword in t.description]

    def enumerate(self) -> list[tuple[int, Task]]:
        return list(enumerate(self._tasks, start=1))

    def snapshot(self) -> list[Task]:
        return list(self._tasks)
