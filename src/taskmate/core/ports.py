# src/taskmate/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage swappable and makes testing easier.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Load-all / save-all storage for the task list."""

    def load_all(self) -> list[Task]: ...

    # Overwrites prior state entirely; raises StorageError on failure.
    def save_all(self, tasks: Iterable[Task]) -> None: ...
