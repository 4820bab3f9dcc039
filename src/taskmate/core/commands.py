# src/taskmate/core/commands.py

"""
Closed set of commands produced by the parser.

Each command is a small frozen dataclass carrying only its own fields,
discriminated by `kind`. The executor dispatches on `kind`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from ..tasks.task_models import Task


class CommandKind(Enum):
    ADD = "add"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    TAG = "tag"
    FIND = "find"
    LIST = "list"
    EXIT = "exit"
    SHOW_ERROR = "show_error"
    DONT_KNOW = "dont_know"


@dataclass(frozen=True, slots=True)
class AddCommand:
    kind: ClassVar[CommandKind] = CommandKind.ADD
    task: Task


@dataclass(frozen=True, slots=True)
class MarkCommand:
    kind: ClassVar[CommandKind] = CommandKind.MARK
    index: int


@dataclass(frozen=True, slots=True)
class UnmarkCommand:
    kind: ClassVar[CommandKind] = CommandKind.UNMARK
    index: int


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    kind: ClassVar[CommandKind] = CommandKind.DELETE
    index: int


@dataclass(frozen=True, slots=True)
class TagCommand:
    kind: ClassVar[CommandKind] = CommandKind.TAG
    index: int
    text: str


@dataclass(frozen=True, slots=True)
class FindCommand:
    kind: ClassVar[CommandKind] = CommandKind.FIND
    keyword: str


@dataclass(frozen=True, slots=True)
class ListCommand:
    kind: ClassVar[CommandKind] = CommandKind.LIST


@dataclass(frozen=True, slots=True)
class ExitCommand:
    kind: ClassVar[CommandKind] = CommandKind.EXIT


@dataclass(frozen=True, slots=True)
class ShowErrorCommand:
    kind: ClassVar[CommandKind] = CommandKind.SHOW_ERROR
    message: str


@dataclass(frozen=True, slots=True)
class DontKnowCommand:
    kind: ClassVar[CommandKind] = CommandKind.DONT_KNOW


Command = (
    AddCommand
    | MarkCommand
    | UnmarkCommand
    | DeleteCommand
    | TagCommand
    | FindCommand
    | ListCommand
    | ExitCommand
    | ShowErrorCommand
    | DontKnowCommand
)

# Commands after which the task list must be persisted.
MUTATING_KINDS = frozenset(
    {
        CommandKind.ADD,
        CommandKind.MARK,
        CommandKind.UNMARK,
        CommandKind.DELETE,
        CommandKind.TAG,
    }
)
