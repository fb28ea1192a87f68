# src/tasktrack/messages.py

"""User-facing message templates shared by commands and the console connector."""

from __future__ import annotations

MESSAGE_WELCOME = "Hello! I'm your task list.\nWhat can I do for you?"
MESSAGE_GOODBYE = "Bye. Hope to see you again soon!"
MESSAGE_INIT_FAILED = "Failed to initialise the task list. Exiting..."
MESSAGE_LOAD_SKIPPED = "Skipped {count} unreadable line(s) in {path}."

MESSAGE_TASK_ADDED = "Got it. I've added this task:\n  {task}\nNow you have {size} task(s) in the list."
MESSAGE_TASK_DELETED = "Noted. I've removed this task:\n  {task}\nNow you have {size} task(s) in the list."
MESSAGE_TASK_DONE = "Nice! I've marked this task as done:\n  {task}"
MESSAGE_TASKS_LISTED = "{count} task(s) listed!"
MESSAGE_TASKS_FOUND = "{count} matching task(s) found!"
MESSAGE_EXIT_ACKNOWLEDGMENT = "Exiting Task List as requested..."

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format!\n{usage}"
MESSAGE_UNKNOWN_COMMAND = "Sorry, I don't know what '{word}' means. Type 'help' to list commands."
MESSAGE_EMPTY_COMMAND = "Empty command. Type 'help' to list commands."
MESSAGE_INVALID_INDEX = "The task index must be a positive number, got {raw!r}."
MESSAGE_INTERNAL_ERROR = "Internal error while handling a command."
