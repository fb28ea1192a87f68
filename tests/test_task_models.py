# tests/test_task_models.py

from __future__ import annotations

from datetime import datetime

import pytest

from tasktrack.errors import ValidationError
from tasktrack.tasks.task_models import (
    Deadline,
    Event,
    TaskKind,
    Todo,
    format_display,
    format_stamp,
    parse_stamp,
)


def test_todo_renders_with_blank_then_x_after_mark_done() -> None:
    t = Todo("buy milk")
    assert t.kind is TaskKind.TODO
    assert t.is_done is False
    assert t.render() == "[T][ ] buy milk"

    t.mark_done()
    assert t.render() == "[T][X] buy milk"


def test_mark_done_is_idempotent() -> None:
    once = Todo("read book")
    once.mark_done()
    twice = Todo("read book")
    twice.mark_done()
    twice.mark_done()
    assert once == twice
    assert twice.is_done is True


def test_deadline_render_and_persisted_line() -> None:
    d = Deadline("submit report", "Dec 1 2019 1800")
    assert d.due_at == datetime(2019, 12, 1, 18, 0)
    assert d.render() == "[D][ ] submit report (by: Dec 1 2019 18:00)"
    assert d.to_persisted_line() == "D/0/submit report/Dec 1 2019 1800"


def test_event_render() -> None:
    e = Event("meeting", "Jan 1 2020 1000", "Jan 1 2020 1130", is_done=True)
    assert e.render() == "[E][X] meeting (from: Jan 1 2020 10:00 to: Jan 1 2020 11:30)"


def test_event_accepts_datetime_objects() -> None:
    e = Event("trip", datetime(2021, 3, 4, 9, 5, 33), datetime(2021, 3, 5, 9, 5))
    # seconds are dropped: the stamp format only keeps minutes
    assert e.starts_at == datetime(2021, 3, 4, 9, 5)


@pytest.mark.parametrize("description", ["", "   ", "a/b", "two\nlines"])
def test_bad_description_is_rejected(description: str) -> None:
    with pytest.raises(ValidationError):
        Todo(description)


@pytest.mark.parametrize(
    "stamp",
    ["2019-12-01 18:00", "Dec 01 2019 1800", "Dec 1 2019 18:00", "Dec 1 2019", "Foo 1 2019 1800"],
)
def test_deadline_rejects_other_date_formats(stamp: str) -> None:
    with pytest.raises(ValidationError):
        Deadline("submit report", stamp)


def test_event_end_before_start_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Event("meeting", "Jan 2 2020 1000", "Jan 1 2020 1000")


def test_event_may_end_when_it_starts() -> None:
    e = Event("standup", "Jan 1 2020 1000", "Jan 1 2020 1000")
    assert e.starts_at == e.ends_at


def test_stamp_helpers() -> None:
    dt = datetime(2019, 12, 1, 8, 5)
    assert format_stamp(dt) == "Dec 1 2019 0805"
    assert format_display(dt) == "Dec 1 2019 08:05"
    assert parse_stamp("Dec 1 2019 0805") == dt
    with pytest.raises(ValueError):
        parse_stamp("Dec 1 2019 805")


def test_tasks_do_not_share_state() -> None:
    a = Todo("a")
    b = Todo("b")
    a.mark_done()
    assert b.is_done is False


def test_years_below_1000_are_zero_padded() -> None:
    d = Deadline("ancient", datetime(999, 1, 1, 10, 0))
    assert d.to_persisted_line() == "D/0/ancient/Jan 1 0999 1000"
    assert d.render() == "[D][ ] ancient (by: Jan 1 0999 10:00)"
    assert parse_stamp("Jan 1 0999 1000") == datetime(999, 1, 1, 10, 0)
