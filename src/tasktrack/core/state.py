# src/tasktrack/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in with the same attributes).
    settings: object

    tasks: TaskList
    store: TaskStore

    # Held around execute+save by connectors; the core itself takes no locks.
    lock: threading.RLock = field(default_factory=threading.RLock)

    def save(self) -> None:
        self.store.save(self.tasks)
