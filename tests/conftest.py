# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskmate.core.state import AppState
from taskmate.tasks.task_list import TaskList
from taskmate.tasks.task_store import TaskStore

from .fakes import FakeTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and core modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskmate",
        log_level="DEBUG",
        file_logging=False,
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.json",
        log_dir=tmp_path,
    )


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, repo: FakeTaskRepo) -> AppState:
    """AppState wired with the in-memory repo and an empty task list."""
    return AppState(settings=settings, task_store=repo, tasks=TaskList())
