# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasktrack.cli.bootstrap import create_initial_state
from tasktrack.core.state import AppState


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="tasktrack-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        data_file=tmp_path / "data" / "tasks.txt",
        strict_load=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState backed by a real TaskStore under tmp_path (starts empty)."""
    return create_initial_state(settings=settings)
