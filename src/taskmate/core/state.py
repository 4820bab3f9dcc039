# src/taskmate/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (real Settings or a test double with the same attributes).
    settings: object

    task_store: TaskRepo
    tasks: TaskList = field(default_factory=TaskList)

    # Set once the user has said "bye"; connectors stop reading input after that.
    exited: bool = False
