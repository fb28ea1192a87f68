# src/tasktrack/commands/parser.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..errors import UnrecognizedCommand, ValidationError
from ..messages import (
    MESSAGE_EMPTY_COMMAND,
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_INVALID_INDEX,
    MESSAGE_UNKNOWN_COMMAND,
)
from ..tasks.task_models import Deadline, Event, Todo
from .commands import (
    AddCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    MarkDoneCommand,
    UnknownCommand,
)

CommandBuilder = Callable[[str], Command]

logger = logging.getLogger(__name__)

DEADLINE_ARGS = re.compile(r"^(?P<description>.*?)\s*/by\s+(?P<by>.+?)\s*$")
EVENT_ARGS = re.compile(
    r"^(?P<description>.*?)\s*/from\s+(?P<start>.+?)\s+/to\s+(?P<end>.+?)\s*$"
)
# Command word, then everything after the single separating whitespace character.
COMMAND_LINE = re.compile(r"(?P<word>\S+)(?:\s(?P<args>.*))?", re.DOTALL)


class CommandRegistry:
    """Command-word registry: maps the first word of a line to a Command builder."""

    def __init__(self) -> None:
        self._builders: dict[str, CommandBuilder] = {}
        self._usage: dict[str, str] = {}

    def register(
        self,
        name: str,
        builder: CommandBuilder,
        usage: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._builders[key] = builder
        self._usage[key] = usage
        for alias in aliases:
            self._builders[alias.lower()] = builder

    def usage_of(self, name: str) -> str:
        return self._usage.get(name.lower(), "")

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for usage in self._usage.values():
            lines.append(f"  {usage}")
        return "\n".join(lines)

    def parse(self, line: str) -> Command:
        """
        Turn a raw input line into a Command.
        Never raises: anything unusable becomes an UnknownCommand with a message.
        """
        m = COMMAND_LINE.fullmatch(line.lstrip())
        if m is None:
            return UnknownCommand(MESSAGE_EMPTY_COMMAND)

        raw_word = m.group("word")
        word = raw_word.lower()
        args = m.group("args") or ""

        builder = self._builders.get(word)
        if builder is None:
            return UnknownCommand(MESSAGE_UNKNOWN_COMMAND.format(word=raw_word))

        try:
            return builder(args)
        except UnrecognizedCommand as e:
            logger.debug("Rejected %r: %s", word, e.message)
            if e.usage:
                return UnknownCommand(f"{e.message}\n{e.usage}")
            return UnknownCommand(e.message)
        except ValidationError as e:
            logger.debug("Rejected %r: %s", word, e)
            return UnknownCommand(str(e))


registry = CommandRegistry()


def parse_command(line: str) -> Command:
    return registry.parse(line)


def _invalid_format(name: str) -> UnrecognizedCommand:
    usage = registry.usage_of(name)
    return UnrecognizedCommand(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage))


def _parse_index(raw: str, name: str) -> int:
    raw = raw.strip()
    if not raw:
        raise _invalid_format(name)
    if not raw.isdecimal() or int(raw) < 1:
        raise UnrecognizedCommand(MESSAGE_INVALID_INDEX.format(raw=raw), registry.usage_of(name))
    return int(raw)


def build_todo(args: str) -> Command:
    if not args.strip():
        raise _invalid_format("todo")
    return AddCommand(Todo(args.strip()))


def build_deadline(args: str) -> Command:
    m = DEADLINE_ARGS.match(args)
    if not m:
        raise _invalid_format("deadline")
    return AddCommand(Deadline(m.group("description").strip(), m.group("by")))


def build_event(args: str) -> Command:
    m = EVENT_ARGS.match(args)
    if not m:
        raise _invalid_format("event")
    return AddCommand(
        Event(m.group("description").strip(), m.group("start"), m.group("end"))
    )


def build_delete(args: str) -> Command:
    return DeleteCommand(_parse_index(args, "delete"))


def build_done(args: str) -> Command:
    return MarkDoneCommand(_parse_index(args, "done"))


def build_list(args: str) -> Command:
    return ListCommand()


def build_find(args: str) -> Command:
    # Kept verbatim: leading/trailing spaces are part of the keyword.
    return FindCommand(args)


def build_help(args: str) -> Command:
    return HelpCommand(registry.build_help())


def build_exit(args: str) -> Command:
    return ExitCommand()


registry.register("todo", build_todo, usage="todo <description>")
registry.register(
    "deadline", build_deadline, usage="deadline <description> /by <Mon d yyyy HHmm>"
)
registry.register(
    "event",
    build_event,
    usage="event <description> /from <Mon d yyyy HHmm> /to <Mon d yyyy HHmm>",
)
registry.register("list", build_list, usage="list")
registry.register("done", build_done, usage="done <index>", aliases=["mark"])
registry.register("delete", build_delete, usage="delete <index>", aliases=["rm"])
registry.register("find", build_find, usage="find <keyword>")
registry.register("help", build_help, usage="help", aliases=["h", "?"])
registry.register("exit", build_exit, usage="exit (or bye)", aliases=["bye", "quit"])
