# src/taskmate/core/chat.py

"""
Core chat orchestration.

This module is transport-agnostic:
- connectors provide one raw input line per turn,
- the core parses it, applies it to the task list and returns one reply string,
- connectors decide how to display the reply (console, tests, ...).

Key invariants:
- get_response() never raises; every failure becomes a reply string,
- a bounds error leaves the task list untouched and does not end the session,
- only the exit command ends the session.
"""

from __future__ import annotations

import logging

from ..errors import TaskIndexError
from .executor import EXIT_REPLY, execute
from .parser import parse
from .state import AppState

logger = logging.getLogger(__name__)

INTERNAL_ERROR_REPLY = "Something went wrong while handling that. Please try again."


def welcome_message(state: AppState) -> str:
    app_name = str(getattr(state.settings, "app_name", "taskmate"))
    return f"Hello! I'm {app_name}\nWhat can I do for you?"


def is_exit_reply(reply: str) -> bool:
    return reply == EXIT_REPLY


def get_response(state: AppState, raw_line: str) -> str:
    cmd = parse(raw_line)

    try:
        result = execute(cmd, state.tasks, state.task_store)
    except TaskIndexError as e:
        logger.debug("Rejected %s: %s", cmd.kind.value, e)
        return str(e)
    except Exception:
        logger.exception("Command %s crashed on input %r.", cmd.kind.value, raw_line)
        return INTERNAL_ERROR_REPLY

    if result.is_exit:
        logger.info("Exit command received.")
        state.exited = True

    return result.reply
