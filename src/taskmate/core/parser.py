# src/taskmate/core/parser.py

"""
Parser: one line of user text -> one Command.

parse() never raises. Malformed input becomes a ShowErrorCommand carrying a
usage hint; anything unrecognised becomes a DontKnowCommand.

Rules are tried in a fixed order and the first match wins:
add (todo/deadline/event) -> mark/unmark -> delete -> find -> tag -> bye/list.

Slice offsets are kept as explicit constants. `todo` checks a 5-character prefix
but slices from offset 4, so the description keeps its leading space; stored
task files depend on that, so it is preserved.
"""

from __future__ import annotations

import logging
import re

from ..tasks.task_models import Deadline, Event, Task, Todo, parse_date
from .commands import (
    AddCommand,
    Command,
    DeleteCommand,
    DontKnowCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    ShowErrorCommand,
    TagCommand,
    UnmarkCommand,
)

logger = logging.getLogger(__name__)

TODO_PREFIX = "todo "
TODO_SLICE = 4
DEADLINE_PREFIX = "deadline "
DEADLINE_SLICE = 8
EVENT_PREFIX = "event "
EVENT_SLICE = 5
MARK_PREFIX = "mark "
UNMARK_PREFIX = "unmark "
DELETE_PREFIX = "delete "
FIND_PREFIX = "find "
TAG_PREFIX = "tag "

BY_TOKEN = "/by"
FROM_TOKEN = "/from"
TO_TOKEN = "/to"

_INT_RE = re.compile(r"[+-]?[0-9]+")


def format_hint(usage: str) -> str:
    return f"Please follow the input format: {usage}"


def empty_description_hint(kind_name: str) -> str:
    return f"The description of a {kind_name} cannot be empty."


def _split(text: str, sep: str) -> list[str]:
    """str.split() that drops trailing empty pieces (but always keeps one)."""
    parts = text.split(sep)
    while len(parts) > 1 and parts[-1] == "":
        parts.pop()
    return parts


def _parse_int(text: str) -> int | None:
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)


def split_deadline(body: str) -> tuple[str, str]:
    """Return (description, due) from the text after `deadline`."""
    parts = _split(body, BY_TOKEN)
    if len(parts) >= 2:
        return parts[0].strip(), parts[1].strip()
    return parts[0].strip(), ""


def split_event(body: str) -> tuple[str, str, str]:
    """Return (description, start, end) from the text after `event`."""
    by_from = _split(body, FROM_TOKEN)
    if len(by_from) >= 2:
        description = by_from[0].strip()
        times = _split(by_from[1], TO_TOKEN)
        start = times[0].strip()
        end = times[1].strip() if len(times) == 2 else ""
        return description, start, end

    by_to = _split(by_from[0], TO_TOKEN)
    if len(by_to) >= 2:
        return by_to[0].strip(), "", by_to[1].strip()
    return by_to[0].strip(), "", ""


def split_tag(line: str) -> tuple[str, str] | None:
    """Return (index_text, tag_text) from a full `tag` line, or None when malformed."""
    tokens = _split(line, " ")
    if tokens[0] != "tag" or len(tokens) < 3:
        return None
    return tokens[1].strip(), tokens[2].strip()


def _add_command(kind_name: str, task: Task) -> Command:
    if not task.description.strip():
        return ShowErrorCommand(empty_description_hint(kind_name))
    return AddCommand(task)


def _parse_add(line: str) -> Command | None:
    if line.startswith(TODO_PREFIX):
        return _add_command("todo", Todo(line[TODO_SLICE:]))

    if line.startswith(DEADLINE_PREFIX):
        description, due = split_deadline(line[DEADLINE_SLICE:])
        return _add_command("deadline", Deadline(description, by=parse_date(due)))

    if line.startswith(EVENT_PREFIX):
        description, start, end = split_event(line[EVENT_SLICE:])
        return _add_command(
            "event", Event(description, start=parse_date(start), end=parse_date(end))
        )

    return None


def _parse_marking(line: str) -> Command | None:
    if line.startswith(MARK_PREFIX):
        index = _parse_int(line[len(MARK_PREFIX) :])
        if index is None:
            return ShowErrorCommand(format_hint("mark [task index]"))
        return MarkCommand(index)

    if line.startswith(UNMARK_PREFIX):
        index = _parse_int(line[len(UNMARK_PREFIX) :])
        if index is None:
            return ShowErrorCommand(format_hint("unmark [task index]"))
        return UnmarkCommand(index)

    return None


def _parse_delete(line: str) -> Command | None:
    if not line.startswith(DELETE_PREFIX):
        return None
    index = _parse_int(line[len(DELETE_PREFIX) :])
    if index is None:
        return ShowErrorCommand(format_hint("delete [task index]"))
    return DeleteCommand(index)


def _parse_find(line: str) -> Command | None:
    if not line.startswith(FIND_PREFIX):
        return None
    return FindCommand(line[len(FIND_PREFIX) :])


def _parse_tag(line: str) -> Command | None:
    if not line.startswith(TAG_PREFIX):
        return None
    parts = split_tag(line)
    index = _parse_int(parts[0]) if parts else None
    if parts is None or index is None:
        return ShowErrorCommand(format_hint("tag [task index] [tag]"))
    return TagCommand(index, parts[1])


def _parse_single_word(line: str) -> Command | None:
    if line == "bye":
        return ExitCommand()
    if line == "list":
        return ListCommand()
    return None


_RULES = (
    _parse_add,
    _parse_marking,
    _parse_delete,
    _parse_find,
    _parse_tag,
    _parse_single_word,
)


def parse(line: str) -> Command:
    for rule in _RULES:
        cmd = rule(line)
        if cmd is not None:
            logger.debug("Parsed %r as %s", line, cmd.kind.value)
            return cmd
    logger.debug("Unrecognised input %r", line)
    return DontKnowCommand()
