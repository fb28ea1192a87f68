# src/tasktrack/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the task file into AppState, then runs the
console REPL until exit/EOF.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import DIVIDER, run_console_loop, show_to_user
from ..errors import CorruptRecordError
from ..logging_setup import setup_logging
from ..messages import MESSAGE_INIT_FAILED, MESSAGE_LOAD_SKIPPED

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    # Console handler never goes below WARNING; it shares the terminal with the prompt.
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)
    setup_logging(
        log_dir=settings.data_dir,
        console_level=max(file_level, logging.WARNING),
        file_level=file_level,
    )

    logger.info("Starting %s (data_file=%s)...", settings.app_name, settings.data_file)

    try:
        state = create_initial_state(settings=settings)
    except (CorruptRecordError, OSError) as e:
        logger.error("Initialisation failed: %s", e)
        show_to_user(MESSAGE_INIT_FAILED, str(e), DIVIDER)
        return 1

    if state.store.skipped:
        show_to_user(
            MESSAGE_LOAD_SKIPPED.format(count=len(state.store.skipped), path=state.store.path)
        )

    run_console_loop(state)
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
