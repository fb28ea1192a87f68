# src/tasktrack/errors.py

from __future__ import annotations


class TaskTrackError(Exception):
    """Base class for all tasktrack errors."""


class ValidationError(TaskTrackError):
    """Bad input while constructing a task."""


class IndexOutOfRange(TaskTrackError):
    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Task index {index} is out of range (list has {size} task(s)).")


class CorruptRecordError(TaskTrackError):
    """A persisted line could not be decoded into a task."""

    def __init__(self, reason: str, line: str, line_number: int | None = None) -> None:
        self.reason = reason
        self.line = line
        self.line_number = line_number
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{where}{reason} ({line!r})")

    def at_line(self, line_number: int) -> CorruptRecordError:
        return CorruptRecordError(self.reason, self.line, line_number)


class UnrecognizedCommand(TaskTrackError):
    """Raised inside the parser; always converted into an UnknownCommand."""

    def __init__(self, message: str, usage: str | None = None) -> None:
        self.message = message
        self.usage = usage
        super().__init__(message)
