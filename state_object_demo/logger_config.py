"""Logging setup for the application."""

import logging
import os
import sys
import tempfile
from typing import Optional

from state_object_demo.config import ENV_LOG_LEVEL


LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"
LOG_FILE_NAME = "state_object_demo.log"


def setup_logging(level: Optional[str] = None, log_to_file: bool = False) -> None:
    """
    Configure the root logger.

    Args:
        level: Level name such as "DEBUG". Falls back to the
            STATE_OBJECT_DEMO_LOG_LEVEL environment variable, then WARNING.
        log_to_file: Also write to a log file in the temp directory. Used by
            packaged builds, which have no console.
    """
    level_name = (level or os.environ.get(ENV_LOG_LEVEL) or "WARNING").upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_to_file:
        log_path = os.path.join(tempfile.gettempdir(), LOG_FILE_NAME)
        handlers.append(logging.FileHandler(log_path))

    # force=True replaces earlier handlers, so repeated calls do not stack
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
