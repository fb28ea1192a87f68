# tests/test_task_store.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tasktrack.errors import CorruptRecordError
from tasktrack.tasks.task_list import TaskList
from tasktrack.tasks.task_models import Deadline, Event, Todo
from tasktrack.tasks.task_store import TaskStore


def test_missing_file_loads_empty_list(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "nope" / "tasks.txt")
    tasks = store.load()
    assert len(tasks) == 0
    assert store.skipped == []


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "sub" / "tasks.txt"
    store = TaskStore(path)
    tasks = TaskList(
        [
            Todo("buy milk", is_done=True),
            Deadline("submit report", "Dec 1 2019 1800"),
            Event("meeting", "Jan 1 2020 1000", "Jan 1 2020 1200"),
        ]
    )

    store.save(tasks)

    assert path.read_text("utf-8") == (
        "T/1/buy milk\n"
        "D/0/submit report/Dec 1 2019 1800\n"
        "E/0/meeting/Jan 1 2020 1000/Jan 1 2020 1200\n"
    )
    assert not path.with_suffix(".txt.tmp").exists()
    assert list(TaskStore(path).load()) == list(tasks)


def test_lenient_load_skips_and_logs_bad_lines(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("T/0/a\nE/1/meeting/Jan 1 2020 1000\n\nT/1/b\n", "utf-8")

    store = TaskStore(path, strict=False)
    with caplog.at_level(logging.WARNING, logger="tasktrack.tasks.task_store"):
        tasks = store.load()

    assert [t.description for t in tasks] == ["a", "b"]
    assert len(store.skipped) == 1
    assert store.skipped[0].line_number == 2
    assert "Skipping corrupt record" in caplog.text


def test_strict_load_raises_with_line_number(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("T/0/a\nQ/0/b\n", "utf-8")

    with pytest.raises(CorruptRecordError) as exc:
        TaskStore(path, strict=True).load()
    assert exc.value.line_number == 2


def test_save_overwrites_previous_contents(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    store = TaskStore(path)
    store.save(TaskList([Todo("a"), Todo("b")]))
    store.save(TaskList([Todo("c")]))
    assert path.read_text("utf-8") == "T/0/c\n"


def test_form_feed_and_unicode_separators_survive_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    store = TaskStore(path)
    tasks = TaskList([Todo("pay\x0crent"), Todo("a b\x85c"), Todo("after")])

    store.save(tasks)
    loaded = store.load()

    assert list(loaded) == list(tasks)
    assert store.skipped == []


def test_invalid_utf8_line_is_skipped_when_lenient(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"T/0/a\nT/0/\xff\nT/1/b\n")

    store = TaskStore(path, strict=False)
    tasks = store.load()

    assert [t.description for t in tasks] == ["a", "b"]
    assert len(store.skipped) == 1
    assert store.skipped[0].line_number == 2
    assert "invalid UTF-8" in str(store.skipped[0])


def test_invalid_utf8_line_aborts_strict_load(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"T/0/a\nT/0/\xff\n")

    with pytest.raises(CorruptRecordError) as exc:
        TaskStore(path, strict=True).load()
    assert exc.value.line_number == 2


def test_crlf_line_endings_are_accepted(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"T/0/a\r\nT/1/b\r\n")

    assert [t.description for t in TaskStore(path, strict=True).load()] == ["a", "b"]
