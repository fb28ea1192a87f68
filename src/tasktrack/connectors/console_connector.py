# src/tasktrack/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..commands.commands import CommandResult, is_exit
from ..commands.parser import parse_command
from ..core.state import AppState
from ..messages import MESSAGE_GOODBYE, MESSAGE_INTERNAL_ERROR, MESSAGE_WELCOME
from ..tasks.task_list import DISPLAYED_INDEX_OFFSET
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

LINE_PREFIX = "| "
PROMPT = LINE_PREFIX + "Enter command or type 'help': "
DIVIDER = "-" * 75
COMMENT_PREFIX = "#"


def should_ignore(raw_line: str) -> bool:
    """Blank, whitespace-only and '#' comment lines are silently consumed."""
    stripped = raw_line.strip()
    return not stripped or stripped.startswith(COMMENT_PREFIX)


def format_indexed_list(tasks: Iterable[Task]) -> str:
    return "\n".join(
        f"\t{i}. {task.render()}" for i, task in enumerate(tasks, start=DISPLAYED_INDEX_OFFSET)
    )


def format_result(result: CommandResult) -> list[str]:
    """Messages to show for a result: optional indexed listing, feedback, divider."""
    out: list[str] = []
    if result.relevant_tasks is not None:
        listing = format_indexed_list(result.relevant_tasks)
        if listing:
            out.append(listing)
    out.append(result.feedback_to_user)
    out.append(DIVIDER)
    return out


def show_to_user(*messages: str) -> None:
    for m in messages:
        print(LINE_PREFIX + m.replace("\n", "\n" + LINE_PREFIX))


def _save_quietly(state: AppState) -> bool:
    try:
        state.save()
        return True
    except OSError:
        logger.exception("Failed to save tasks to %s", state.store.path)
        return False


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.tasks))
    show_to_user(DIVIDER, MESSAGE_WELCOME, DIVIDER)

    try:
        while True:
            try:
                user_input = input(PROMPT)
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if should_ignore(user_input):
                continue

            command = parse_command(user_input)

            try:
                with state.lock:
                    result = command.execute(state.tasks)
                    saved = True
                    if result.succeeded and result.kind.mutates:
                        saved = _save_quietly(state)
            except Exception:
                logger.exception("Command handler crashed.")
                show_to_user(MESSAGE_INTERNAL_ERROR, DIVIDER)
                continue

            show_to_user(*format_result(result))
            if not saved:
                show_to_user(f"Warning: could not save tasks to {state.store.path}.")

            if is_exit(command):
                logger.info("Console exit command received.")
                break
    finally:
        with state.lock:
            _save_quietly(state)
        show_to_user(MESSAGE_GOODBYE, DIVIDER)

    logger.info("Console connector finished.")
