# src/tasktrack/tasks/task_codec.py

"""
Pure encode/decode between tasks and persisted text lines.

Line format ("/"-delimited, fixed field order):
    T/<done>/<description>
    D/<done>/<description>/<due_at>
    E/<done>/<description>/<starts_at>/<ends_at>

<done> is "1" or "0"; date-times use format_stamp ("Dec 1 2019 1800").
No I/O happens here: TaskStore owns the file.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import assert_never

from ..errors import CorruptRecordError, ValidationError
from .task_models import (
    FIELD_DELIMITER,
    Deadline,
    Event,
    Task,
    TaskKind,
    Todo,
    format_stamp,
    parse_stamp,
)

DONE_MARKER = "1"
NOT_DONE_MARKER = "0"

_FIELD_COUNTS: dict[TaskKind, int] = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 5,
}


def encode_task(task: Task) -> str:
    done = DONE_MARKER if task.is_done else NOT_DONE_MARKER
    match task:
        case Todo():
            fields = [task.kind, done, task.description]
        case Deadline(due_at=due_at):
            fields = [task.kind, done, task.description, format_stamp(due_at)]
        case Event(starts_at=starts_at, ends_at=ends_at):
            fields = [
                task.kind,
                done,
                task.description,
                format_stamp(starts_at),
                format_stamp(ends_at),
            ]
        case _:
            assert_never(task)
    return FIELD_DELIMITER.join(fields)


def _decode_done(raw: str, line: str) -> bool:
    if raw == DONE_MARKER:
        return True
    if raw == NOT_DONE_MARKER:
        return False
    raise CorruptRecordError(f"unrecognized done marker {raw!r}", line)


def decode_task(line: str) -> Task:
    """Strict inverse of encode_task; raises CorruptRecordError on any deviation."""
    fields = line.split(FIELD_DELIMITER)

    try:
        kind = TaskKind(fields[0])
    except ValueError:
        raise CorruptRecordError(f"unrecognized task tag {fields[0]!r}", line) from None

    expected = _FIELD_COUNTS[kind]
    if len(fields) != expected:
        raise CorruptRecordError(
            f"tag {kind.value!r} needs {expected} fields, got {len(fields)}", line
        )

    is_done = _decode_done(fields[1], line)
    description = fields[2]

    try:
        match kind:
            case TaskKind.TODO:
                task: Task = Todo(description, is_done=is_done)
            case TaskKind.DEADLINE:
                task = Deadline(description, parse_stamp(fields[3]), is_done=is_done)
            case TaskKind.EVENT:
                task = Event(
                    description,
                    parse_stamp(fields[3]),
                    parse_stamp(fields[4]),
                    is_done=is_done,
                )
            case _:
                assert_never(kind)
    except ValueError as e:
        raise CorruptRecordError(f"unparsable date-time: {e}", line) from e
    except ValidationError as e:
        raise CorruptRecordError(str(e), line) from e

    return task


def encode_list(tasks: Iterable[Task]) -> list[str]:
    return [encode_task(t) for t in tasks]


def iter_decode(lines: Iterable[str]) -> Iterator[tuple[int, Task | CorruptRecordError]]:
    """
    Yield (line_number, task-or-error) for every non-blank line.

    Errors are yielded, not raised, so the caller picks the policy
    (abort the load or skip the line).
    """
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            yield line_number, decode_task(line)
        except CorruptRecordError as e:
            yield line_number, e.at_line(line_number)


def decode_list(lines: Iterable[str]) -> list[Task]:
    """Decode all lines in order; the first bad line raises with its line number."""
    out: list[Task] = []
    for _line_number, item in iter_decode(lines):
        if isinstance(item, CorruptRecordError):
            raise item
        out.append(item)
    return out
