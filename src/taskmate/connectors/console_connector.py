# src/taskmate/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from datetime import datetime

from ..core.chat import get_response, is_exit_reply, welcome_message
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    Best-effort: if not a TTY, leave the echo alone.
    """
    if not sys.stdout.isatty():
        return
    sys.stdout.write("\033[1A\033[2K\r")
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


def _print_reply(app_name: str, text: str) -> None:
    print(f"[{_ts_local()}] <<< {app_name}: {text}\n", flush=True)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (%d tasks loaded).", len(state.tasks))
    app_name = str(getattr(state.settings, "app_name", "taskmate"))

    _print_reply(app_name, welcome_message(state))

    while not state.exited:
        try:
            user_input = input(">>> You: ")
            _rewrite_prev_line(f"[{_ts_local()}] >>> You: {user_input}")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input.strip():
            continue

        reply = get_response(state, user_input)
        _print_reply(app_name, reply)

        if is_exit_reply(reply):
            break

    logger.info("Console connector finished.")
