# src/taskmate/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import ClassVar

DATE_FORMAT = "%Y-%m-%d"
DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")

# A date-bearing field holds a parsed calendar date, or the raw text when parsing failed.
DateField = date | str


def parse_date(text: str) -> DateField:
    """Parse YYYY-MM-DD; anything else is kept verbatim (not an error)."""
    if not DATE_RE.fullmatch(text):
        return text
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        return text


def format_date(value: DateField) -> str:
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    return value


class TaskKind(StrEnum):
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(slots=True)
class Task:
    """
    Common task fields.

    `tag` is stored already decorated (" #urgent") and appended as-is when rendering.
    """

    kind: ClassVar[TaskKind]

    description: str
    completed: bool = False
    tag: str = ""

    def mark(self) -> None:
        self.completed = True

    def unmark(self) -> None:
        self.completed = False

    def _details(self) -> str:
        return ""

    def __str__(self) -> str:
        status = "X" if self.completed else " "
        return f"[{self.kind}][{status}] {self.description}{self._details()}{self.tag}"


@dataclass(slots=True)
class Todo(Task):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class Deadline(Task):
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    by: DateField = ""

    def _details(self) -> str:
        return f" (by: {format_date(self.by)})"


@dataclass(slots=True)
class Event(Task):
    kind: ClassVar[TaskKind] = TaskKind.EVENT

    start: DateField = ""
    end: DateField = ""

    def _details(self) -> str:
        return f" (from: {format_date(self.start)} to: {format_date(self.end)})"
