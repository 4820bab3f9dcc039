# tests/test_task_store.py

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from taskmate.errors import StorageError
from taskmate.tasks.task_models import Deadline, Event, Todo
from taskmate.tasks.task_store import TaskStore


def test_missing_file_is_fresh_start(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "nope" / "tasks.json")
    assert store.load_all() == []


def test_save_and_load_keeps_fields(store: TaskStore) -> None:
    done = Todo(" read")
    done.mark()
    tagged = Deadline("report", by=date(2024, 3, 1), tag=" #work")
    event = Event("camp", start="monday", end=date(2024, 5, 6))

    store.save_all([done, tagged, event])
    loaded = store.load_all()

    assert [str(t) for t in loaded] == [str(done), str(tagged), str(event)]
    assert loaded[1].by == date(2024, 3, 1)
    assert loaded[2].start == "monday"
    assert loaded[0].completed is True


def test_save_of_load_is_idempotent(store: TaskStore) -> None:
    store.save_all([Todo("a"), Deadline("b", by="tonight"), Event("c", start=date(2024, 1, 1))])
    first = store.path.read_text("utf-8")

    store.save_all(store.load_all())
    assert store.path.read_text("utf-8") == first


def test_save_overwrites_previous_state(store: TaskStore) -> None:
    store.save_all([Todo("a"), Todo("b")])
    store.save_all([Todo("c")])
    assert [t.description for t in store.load_all()] == ["c"]


def test_corrupt_file_is_fresh_start(store: TaskStore) -> None:
    store.path.write_text("{not json", "utf-8")
    assert store.load_all() == []


def test_bad_records_are_skipped(store: TaskStore) -> None:
    store.path.write_text(
        json.dumps(
            {
                "version": 1,
                "tasks": [
                    {"kind": "T", "description": "ok"},
                    {"kind": "Q", "description": "unknown kind"},
                    {"kind": "D"},
                    "not a record",
                ],
            }
        ),
        "utf-8",
    )
    loaded = store.load_all()
    assert [t.description for t in loaded] == ["ok"]


def test_unwritable_target_raises_storage_error(tmp_path: Path) -> None:
    # A directory where the file should be makes the final replace fail.
    target = tmp_path / "tasks.json"
    target.mkdir()
    store = TaskStore(target)
    with pytest.raises(StorageError):
        store.save_all([Todo("a")])


def test_unencodable_text_raises_storage_error_and_cleans_up(store: TaskStore) -> None:
    store.save_all([Todo("kept")])
    before = store.path.read_text("utf-8")

    with pytest.raises(StorageError):
        store.save_all([Todo("caf\udce9")])

    assert store.path.read_text("utf-8") == before
    assert not store.path.with_suffix(".json.tmp").exists()


@pytest.mark.parametrize("completed", ["false", 0, None])
def test_non_boolean_completed_is_skipped(store: TaskStore, completed) -> None:
    store.path.write_text(
        json.dumps(
            {
                "version": 1,
                "tasks": [
                    {"kind": "T", "description": "bad", "completed": completed},
                    {"kind": "T", "description": "good", "completed": False},
                ],
            }
        ),
        "utf-8",
    )
    assert [t.description for t in store.load_all()] == ["good"]
