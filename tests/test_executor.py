# tests/test_executor.py

from __future__ import annotations

import pytest

from taskmate.core.commands import (
    AddCommand,
    DeleteCommand,
    DontKnowCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    ShowErrorCommand,
    TagCommand,
)
from taskmate.core.executor import DONT_KNOW_REPLY, SAVE_FAILED_NOTE, execute
from taskmate.errors import TaskIndexError
from taskmate.tasks.task_list import TaskList
from taskmate.tasks.task_models import Todo

from .fakes import FakeTaskRepo


def test_add_appends_and_persists(repo: FakeTaskRepo) -> None:
    tasks = TaskList()
    result = execute(AddCommand(Todo(" walk dog")), tasks, repo)

    assert "[T][ ]  walk dog" in result.reply
    assert "Now you have 1 task in the list." in result.reply
    assert not result.is_exit
    assert len(tasks) == 1
    assert repo.saves == [["[T][ ]  walk dog"]]


def test_every_mutation_persists(repo: FakeTaskRepo) -> None:
    tasks = TaskList([Todo("a"), Todo("b")])
    execute(MarkCommand(1), tasks, repo)
    execute(TagCommand(2, "home"), tasks, repo)
    execute(DeleteCommand(1), tasks, repo)

    assert len(repo.saves) == 3
    assert repo.saves[-1] == ["[T][ ] b #home"]


def test_read_only_commands_do_not_persist(repo: FakeTaskRepo) -> None:
    tasks = TaskList([Todo("a")])
    execute(ListCommand(), tasks, repo)
    execute(FindCommand("a"), tasks, repo)
    execute(ShowErrorCommand("nope"), tasks, repo)
    execute(DontKnowCommand(), tasks, repo)
    execute(ExitCommand(), tasks, repo)
    assert repo.saves == []


def test_bounds_error_propagates_without_saving(repo: FakeTaskRepo) -> None:
    tasks = TaskList([Todo("a"), Todo("b")])
    with pytest.raises(TaskIndexError):
        execute(MarkCommand(99), tasks, repo)
    with pytest.raises(TaskIndexError):
        execute(DeleteCommand(0), tasks, repo)
    assert repo.saves == []
    assert [t.completed for t in tasks] == [False, False]


def test_delete_reports_removed_task_and_count(repo: FakeTaskRepo) -> None:
    tasks = TaskList([Todo("a"), Todo("b"), Todo("c")])
    result = execute(DeleteCommand(2), tasks, repo)
    assert "[T][ ] b" in result.reply
    assert "Now you have 2 tasks in the list." in result.reply
    assert [t.description for t in tasks] == ["a", "c"]


def test_list_numbers_tasks_from_one(repo: FakeTaskRepo) -> None:
    tasks = TaskList([Todo("a"), Todo("b")])
    reply = execute(ListCommand(), tasks, repo).reply
    assert reply.splitlines()[1:] == ["1.[T][ ] a", "2.[T][ ] b"]


def test_find_without_matches(repo: FakeTaskRepo) -> None:
    tasks = TaskList([Todo("a")])
    assert execute(FindCommand("zzz"), tasks, repo).reply == "There are no matching tasks in your list."


def test_exit_and_fallbacks(repo: FakeTaskRepo) -> None:
    tasks = TaskList()
    result = execute(ExitCommand(), tasks, repo)
    assert result.reply == "Bye"
    assert result.is_exit

    assert execute(DontKnowCommand(), tasks, repo).reply == DONT_KNOW_REPLY
    assert execute(ShowErrorCommand("hint"), tasks, repo).reply == "hint"


def test_failed_save_keeps_change_and_warns() -> None:
    repo = FakeTaskRepo(fail_on_save=True)
    tasks = TaskList()
    result = execute(AddCommand(Todo("x")), tasks, repo)
    assert len(tasks) == 1
    assert result.reply.endswith(SAVE_FAILED_NOTE)
