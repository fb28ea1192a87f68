# src/tasktrack/commands/commands.py

"""
Command variants and the single execution entry point.

Every command is a small frozen dataclass holding only its own parameters.
execute() dispatches over the closed Command union and never lets a
ValidationError or IndexOutOfRange escape: they become a failed
CommandResult carrying the error text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, assert_never

from ..errors import IndexOutOfRange, ValidationError
from ..messages import (
    MESSAGE_EXIT_ACKNOWLEDGMENT,
    MESSAGE_TASK_ADDED,
    MESSAGE_TASK_DELETED,
    MESSAGE_TASK_DONE,
    MESSAGE_TASKS_FOUND,
    MESSAGE_TASKS_LISTED,
)
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


class CommandKind(StrEnum):
    ADD = "add"
    DELETE = "delete"
    MARK_DONE = "mark_done"
    LIST = "list"
    FIND = "find"
    HELP = "help"
    EXIT = "exit"
    UNKNOWN = "unknown"

    @property
    def mutates(self) -> bool:
        """True for kinds whose success changes the task list (caller should persist)."""
        return self in (CommandKind.ADD, CommandKind.DELETE, CommandKind.MARK_DONE)


@dataclass(frozen=True, slots=True)
class CommandResult:
    feedback_to_user: str
    kind: CommandKind
    relevant_tasks: tuple[Task, ...] | None = None
    succeeded: bool = True

    def __post_init__(self) -> None:
        if not self.feedback_to_user:
            raise ValueError("CommandResult.feedback_to_user must not be empty")

    @property
    def is_exit(self) -> bool:
        return self.kind is CommandKind.EXIT


@dataclass(frozen=True, slots=True)
class AddCommand:
    task: Task

    kind: ClassVar[CommandKind] = CommandKind.ADD

    def execute(self, tasks: TaskList) -> CommandResult:
        return execute(self, tasks)


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    index: int

    kind: ClassVar[CommandKind] = CommandKind.DELETE

    def execute(self, tasks: TaskList) -> CommandResult:
        return execute(self, tasks)


@dataclass(frozen=True, slots=True)
class MarkDoneCommand:
    index: int

    kind: ClassVar[CommandKind] = CommandKind.MARK_DONE

    def execute(self, tasks: TaskList) -> CommandResult:
        return execute(self, tasks)


@dataclass(frozen=True, slots=True)
class ListCommand:
    kind: ClassVar[CommandKind] = CommandKind.LIST

    def execute(self, tasks: TaskList) -> CommandResult:
        return execute(self, tasks)


@dataclass(frozen=True, slots=True)
class FindCommand:
    keyword: str

    kind: ClassVar[CommandKind] = CommandKind.FIND

    def execute(self, tasks: TaskList) -> CommandResult:
        return execute(self, tasks)


@dataclass(frozen=True, slots=True)
class HelpCommand:
    usage: str

    kind: ClassVar[CommandKind] = CommandKind.HELP

    def execute(self, tasks: TaskList) -> CommandResult:
        return execute(self, tasks)


@dataclass(frozen=True, slots=True)
class ExitCommand:
    kind: ClassVar[CommandKind] = CommandKind.EXIT

    def execute(self, tasks: TaskList) -> CommandResult:
        return execute(self, tasks)


@dataclass(frozen=True, slots=True)
class UnknownCommand:
    message: str

    kind: ClassVar[CommandKind] = CommandKind.UNKNOWN

    def execute(self, tasks: TaskList) -> CommandResult:
        return execute(self, tasks)


Command = (
    AddCommand
    | DeleteCommand
    | MarkDoneCommand
    | ListCommand
    | FindCommand
    | HelpCommand
    | ExitCommand
    | UnknownCommand
)


def is_exit(command: Command) -> bool:
    """Tag check: should the run loop stop after this command?"""
    return command.kind is CommandKind.EXIT


def _run(command: Command, tasks: TaskList) -> CommandResult:
    match command:
        case AddCommand(task=task):
            tasks.append(task)
            return CommandResult(
                MESSAGE_TASK_ADDED.format(task=task.render(), size=len(tasks)), command.kind
            )
        case DeleteCommand(index=index):
            removed = tasks.pop(index)
            return CommandResult(
                MESSAGE_TASK_DELETED.format(task=removed.render(), size=len(tasks)), command.kind
            )
        case MarkDoneCommand(index=index):
            task = tasks.get(index)
            task.mark_done()
            return CommandResult(MESSAGE_TASK_DONE.format(task=task.render()), command.kind)
        case ListCommand():
            listed = tasks.snapshot()
            return CommandResult(
                MESSAGE_TASKS_LISTED.format(count=len(listed)),
                command.kind,
                relevant_tasks=listed,
            )
        case FindCommand(keyword=keyword):
            found = tasks.find(keyword)
            return CommandResult(
                MESSAGE_TASKS_FOUND.format(count=len(found)),
                command.kind,
                relevant_tasks=found,
            )
        case HelpCommand(usage=usage):
            return CommandResult(usage, command.kind)
        case ExitCommand():
            return CommandResult(MESSAGE_EXIT_ACKNOWLEDGMENT, command.kind)
        case UnknownCommand(message=message):
            return CommandResult(message, command.kind, succeeded=False)
        case _:
            assert_never(command)


def execute(command: Command, tasks: TaskList) -> CommandResult:
    try:
        return _run(command, tasks)
    except (ValidationError, IndexOutOfRange) as e:
        logger.debug("Command %s failed: %s", command.kind, e)
        return CommandResult(str(e), command.kind, succeeded=False)
