# src/tasktrack/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from ..errors import CorruptRecordError
from .task_codec import decode_task, encode_list
from .task_list import TaskList
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Flat-file task store: one codec line per task, UTF-8.

    Load policy:
    - strict=True: the first corrupt line aborts the load (CorruptRecordError)
    - strict=False: corrupt lines are logged and skipped

    Writes go to a temp file first and are moved into place with os.replace.
    """

    def __init__(self, path: str | Path = "tasks.txt", *, strict: bool = False) -> None:
        self._path = Path(path)
        self._strict = strict
        self.skipped: list[CorruptRecordError] = []

    @property
    def path(self) -> Path:
        return self._path

    def _read_lines(self) -> Iterator[tuple[int, str | CorruptRecordError]]:
        """
        Split on b"\\n" only and decode each line on its own.

        str.splitlines() would also break on \\x0c, \\x85, \\u2028 and friends,
        which are legal inside a description. A line that is not valid UTF-8
        becomes a CorruptRecordError for the load policy to handle.
        """
        for line_number, raw in enumerate(self._path.read_bytes().split(b"\n"), start=1):
            raw = raw.removesuffix(b"\r")
            try:
                yield line_number, raw.decode("utf-8")
            except UnicodeDecodeError as e:
                shown = raw.decode("utf-8", errors="replace")
                yield line_number, CorruptRecordError(
                    f"invalid UTF-8: {e.reason}", shown, line_number
                )

    def load(self) -> TaskList:
        self.skipped = []
        if not self._path.exists():
            logger.info("No task file at %s, starting with an empty list.", self._path)
            return TaskList()

        tasks = TaskList()
        for line_number, line in self._read_lines():
            item: Task | CorruptRecordError
            if isinstance(line, CorruptRecordError):
                item = line
            elif not line.strip():
                continue
            else:
                try:
                    item = decode_task(line)
                except CorruptRecordError as e:
                    item = e.at_line(line_number)

            if isinstance(item, CorruptRecordError):
                if self._strict:
                    logger.error("Corrupt record in %s at line %d.", self._path, line_number)
                    raise item
                logger.warning("Skipping corrupt record in %s: %s", self._path, item)
                self.skipped.append(item)
                continue
            tasks.append(item)

        logger.info(
            "Loaded %d task(s) from %s (skipped=%d)", len(tasks), self._path, len(self.skipped)
        )
        return tasks

    def save(self, tasks: TaskList) -> None:
        lines = encode_list(tasks)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        text = "".join(f"{line}\n" for line in lines)
        tmp.write_text(text, encoding="utf-8", newline="")
        os.replace(tmp, self._path)
        logger.debug("Saved %d task(s) to %s", len(lines), self._path)
