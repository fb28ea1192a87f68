# tests/test_logging_setup.py

from __future__ import annotations

import logging

from tasktrack.logging_setup import _ConsoleNoiseFilter


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_passes_own_logs_and_only_errors_from_others() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("tasktrack.tasks.task_store", logging.DEBUG))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert f.filter(_record("py.warnings", logging.ERROR))
    assert not f.filter(_record("dotenv.main", logging.WARNING))
    assert f.filter(_record("dotenv.main", logging.ERROR))
