# src/taskmate/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Any

from ..errors import StorageError
from .task_models import (
    DATE_FORMAT,
    DateField,
    Deadline,
    Event,
    Task,
    TaskKind,
    Todo,
    parse_date,
)

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class TaskStore:
    """
    Flat-file JSON task store.

    The whole list is written on every save (no incremental format):
    - write to a sibling .tmp file
    - os.replace() it over the real file

    Dates are stored as {"date": "YYYY-MM-DD"} and raw fallbacks as plain strings,
    so a reload keeps the parsed/raw distinction.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- encoding helpers ----

    @staticmethod
    def _date_to_json(value: DateField) -> Any:
        if isinstance(value, date):
            return {"date": value.strftime(DATE_FORMAT)}
        return value

    @staticmethod
    def _json_to_date(raw: Any) -> DateField:
        if isinstance(raw, dict):
            text = str(raw.get("date", ""))
            return parse_date(text)
        return "" if raw is None else str(raw)

    def _task_to_dict(self, task: Task) -> dict[str, Any]:
        d: dict[str, Any] = {
            "kind": str(task.kind),
            "description": task.description,
            "completed": task.completed,
            "tag": task.tag,
        }
        if isinstance(task, Deadline):
            d["by"] = self._date_to_json(task.by)
        elif isinstance(task, Event):
            d["start"] = self._date_to_json(task.start)
            d["end"] = self._date_to_json(task.end)
        return d

    def _dict_to_task(self, d: dict[str, Any]) -> Task:
        kind = TaskKind(d["kind"])
        description = str(d["description"])
        completed = d.get("completed", False)
        if not isinstance(completed, bool):
            raise ValueError(f"completed must be a boolean, got {completed!r}")
        tag = str(d.get("tag", "") or "")

        if kind is TaskKind.DEADLINE:
            return Deadline(
                description,
                completed=completed,
                tag=tag,
                by=self._json_to_date(d.get("by")),
            )
        if kind is TaskKind.EVENT:
            return Event(
                description,
                completed=completed,
                tag=tag,
                start=self._json_to_date(d.get("start")),
                end=self._json_to_date(d.get("end")),
            )
        return Todo(description, completed=completed, tag=tag)

    # ---- public API ----

    def load_all(self) -> list[Task]:
        """
        Read every task from disk.

        A missing or unreadable file is a fresh start, not an error.
        Individual records that cannot be decoded are skipped.
        """
        if not self._path.exists():
            logger.info("No task file at %s, starting fresh.", self._path)
            return []

        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.exception("Failed to read tasks from %s, starting fresh.", self._path)
            return []

        records = data.get("tasks") if isinstance(data, dict) else None
        if not isinstance(records, list):
            logger.warning("Task file %s has no task list, starting fresh.", self._path)
            return []

        out: list[Task] = []
        for i, rec in enumerate(records):
            if not isinstance(rec, dict):
                logger.warning("Skipping task record #%d: not an object.", i)
                continue
            try:
                out.append(self._dict_to_task(rec))
            except (KeyError, ValueError):
                logger.warning("Skipping malformed task record #%d: %r", i, rec)

        logger.info("Loaded %d tasks from %s", len(out), self._path)
        return out

    def save_all(self, tasks: Iterable[Task]) -> None:
        """Overwrite the task file with `tasks`. Raises StorageError on failure."""
        payload = {
            "version": FORMAT_VERSION,
            "tasks": [self._task_to_dict(t) for t in tasks],
        }
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except (OSError, ValueError) as e:
            # ValueError covers UnicodeEncodeError (e.g. lone surrogates from console input).
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageError(f"Failed to save tasks to {self._path}: {e}") from e

        logger.debug("Saved %d tasks to %s", len(payload["tasks"]), self._path)
