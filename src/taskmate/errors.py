# src/taskmate/errors.py

from __future__ import annotations

INDEX_HINT = "Please only input index shown in the list"


class TaskmateError(Exception):
    """Base class for errors raised by taskmate."""


class TaskIndexError(TaskmateError, IndexError):
    """A command referenced a task index outside 1..len(task list)."""

    def __init__(self, message: str = INDEX_HINT) -> None:
        super().__init__(message)


class StorageError(TaskmateError):
    """The task file could not be read or written."""
