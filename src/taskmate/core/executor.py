# src/taskmate/core/executor.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from .commands import (
    MUTATING_KINDS,
    AddCommand,
    Command,
    CommandKind,
    DeleteCommand,
    FindCommand,
    MarkCommand,
    ShowErrorCommand,
    TagCommand,
    UnmarkCommand,
)
from .ports import TaskRepo

logger = logging.getLogger(__name__)

EXIT_REPLY = "Bye"
DONT_KNOW_REPLY = "OOPS!!! I'm sorry, but I don't know what that means :-("
NO_MATCH_REPLY = "There are no matching tasks in your list."
EMPTY_LIST_REPLY = "There are no tasks in your list yet."
SAVE_FAILED_NOTE = "(Warning: your tasks could not be saved to disk.)"


@dataclass(frozen=True, slots=True)
class CommandResult:
    reply: str
    is_exit: bool = False


def _count_line(tasks: TaskList) -> str:
    n = len(tasks)
    return f"Now you have {n} task{'' if n == 1 else 's'} in the list."


def _numbered(rows: list[tuple[int, Task]]) -> str:
    return "\n".join(f"{i}.{task}" for i, task in rows)


# ---- handlers ----
#
# Handlers may raise TaskIndexError; it is not caught here.


def _do_add(cmd: AddCommand, tasks: TaskList) -> str:
    tasks.add(cmd.task)
    return f"Got it. I've added this task:\n  {cmd.task}\n{_count_line(tasks)}"


def _do_mark(cmd: MarkCommand, tasks: TaskList) -> str:
    task = tasks.mark(cmd.index)
    return f"Nice! I've marked this task as done:\n  {task}"


def _do_unmark(cmd: UnmarkCommand, tasks: TaskList) -> str:
    task = tasks.unmark(cmd.index)
    return f"OK, I've marked this task as not done yet:\n  {task}"


def _do_delete(cmd: DeleteCommand, tasks: TaskList) -> str:
    task = tasks.delete(cmd.index)
    return f"Noted. I've removed this task:\n  {task}\n{_count_line(tasks)}"


def _do_tag(cmd: TagCommand, tasks: TaskList) -> str:
    task = tasks.tag(cmd.index, cmd.text)
    return f"Got it. I've tagged this task:\n  {task}"


def _do_find(cmd: FindCommand, tasks: TaskList) -> str:
    matches = tasks.find(cmd.keyword)
    if not matches:
        return NO_MATCH_REPLY
    return "Here are the matching tasks in your list:\n" + _numbered(matches)


def _do_list(cmd: Command, tasks: TaskList) -> str:
    if not len(tasks):
        return EMPTY_LIST_REPLY
    return "Here are the tasks in your list:\n" + _numbered(tasks.enumerate())


def _do_exit(cmd: Command, tasks: TaskList) -> str:
    return EXIT_REPLY


def _do_show_error(cmd: ShowErrorCommand, tasks: TaskList) -> str:
    return cmd.message


def _do_dont_know(cmd: Command, tasks: TaskList) -> str:
    return DONT_KNOW_REPLY


_HANDLERS: dict[CommandKind, Callable[..., str]] = {
    CommandKind.ADD: _do_add,
    CommandKind.MARK: _do_mark,
    CommandKind.UNMARK: _do_unmark,
    CommandKind.DELETE: _do_delete,
    CommandKind.TAG: _do_tag,
    CommandKind.FIND: _do_find,
    CommandKind.LIST: _do_list,
    CommandKind.EXIT: _do_exit,
    CommandKind.SHOW_ERROR: _do_show_error,
    CommandKind.DONT_KNOW: _do_dont_know,
}


def _persist(tasks: TaskList, repo: TaskRepo) -> bool:
    try:
        repo.save_all(tasks.snapshot())
    except Exception:
        logger.exception("Failed to persist task list (%d tasks).", len(tasks))
        return False
    return True


def execute(cmd: Command, tasks: TaskList, repo: TaskRepo) -> CommandResult:
    """
    Apply `cmd` to `tasks` and build the reply.

    Mutating commands save the whole list afterwards. A failed save keeps the
    in-memory change and adds a warning line to the reply.
    Raises TaskIndexError for out-of-range indices (list left untouched).
    """
    handler = _HANDLERS[cmd.kind]
    reply = handler(cmd, tasks)

    if cmd.kind in MUTATING_KINDS and not _persist(tasks, repo):
        reply = f"{reply}\n{SAVE_FAILED_NOTE}"

    return CommandResult(reply=reply, is_exit=cmd.kind is CommandKind.EXIT)
