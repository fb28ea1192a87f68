# src/tasktrack/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import ClassVar, assert_never

from ..errors import ValidationError

FIELD_DELIMITER = "/"

# Persisted form: "MMM d yyyy HHmm" (e.g. "Dec 1 2019 1800").
# Display form:   "MMM d yyyy HH:mm" (e.g. "Dec 1 2019 18:00").
STAMP_PARSE_FORMAT = "%b %d %Y %H%M"


def format_stamp(dt: datetime) -> str:
    return f"{dt:%b} {dt.day} {dt.year:04d} {dt:%H%M}"


def format_display(dt: datetime) -> str:
    return f"{dt:%b} {dt.day} {dt.year:04d} {dt:%H:%M}"


def parse_stamp(text: str) -> datetime:
    """
    Parse a date-time in the persisted format.

    strptime alone is lenient (zero-padded days, stray whitespace), so the
    parsed value must format back to exactly the input.
    Raises ValueError otherwise.
    """
    dt = datetime.strptime(text, STAMP_PARSE_FORMAT)
    if format_stamp(dt) != text:
        raise ValueError(f"date-time {text!r} is not in 'MMM d yyyy HHmm' form")
    return dt


def _coerce_stamp(value: datetime | str, label: str) -> datetime:
    if isinstance(value, datetime):
        # Minutes are the finest unit the persisted format keeps.
        return value.replace(second=0, microsecond=0)
    try:
        return parse_stamp(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"Invalid {label} date-time {value!r}: expected e.g. 'Dec 1 2019 1800'."
        ) from e


class TaskKind(StrEnum):
    """Display/persistence tag of a task variant."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(slots=True)
class TaskBase:
    description: str
    is_done: bool = field(default=False, kw_only=True)

    kind: ClassVar[TaskKind]

    def __post_init__(self) -> None:
        if not isinstance(self.description, str) or not self.description.strip():
            raise ValidationError("The description of a task cannot be empty.")
        if FIELD_DELIMITER in self.description:
            raise ValidationError(
                f"The description of a task cannot contain '{FIELD_DELIMITER}'."
            )
        if "\n" in self.description or "\r" in self.description:
            raise ValidationError("The description of a task must be a single line.")

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def mark_done(self) -> None:
        """Idempotent: marking a done task again changes nothing."""
        self.is_done = True

    def render(self) -> str:
        return render_task(self)  # type: ignore[arg-type]

    def to_persisted_line(self) -> str:
        from .task_codec import encode_task  # codec depends on this module

        return encode_task(self)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.render()


@dataclass(slots=True)
class Todo(TaskBase):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class Deadline(TaskBase):
    due_at: datetime

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    def __post_init__(self) -> None:
        super(Deadline, self).__post_init__()
        self.due_at = _coerce_stamp(self.due_at, "deadline")


@dataclass(slots=True)
class Event(TaskBase):
    starts_at: datetime
    ends_at: datetime

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    def __post_init__(self) -> None:
        super(Event, self).__post_init__()
        self.starts_at = _coerce_stamp(self.starts_at, "start")
        self.ends_at = _coerce_stamp(self.ends_at, "end")
        if self.ends_at < self.starts_at:
            raise ValidationError(
                f"An event cannot end ({format_display(self.ends_at)}) "
                f"before it starts ({format_display(self.starts_at)})."
            )


Task = Todo | Deadline | Event


def render_task(task: Task) -> str:
    head = f"[{task.kind}][{task.status_icon}] {task.description}"
    match task:
        case Todo():
            return head
        case Deadline(due_at=due_at):
            return f"{head} (by: {format_display(due_at)})"
        case Event(starts_at=starts_at, ends_at=ends_at):
            return f"{head} (from: {format_display(starts_at)} to: {format_display(ends_at)})"
        case _:
            assert_never(task)
