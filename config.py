"""
Runtime settings for the terminal snake.

Game rules and sizes are fixed in domain/constants.py. Only logging is
configurable, from the environment or a local .env file.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

LOG_LEVEL = os.getenv("SNAKE_LOG_LEVEL", "INFO").strip().upper()
# stderr belongs to the curses screen, so logs only go somewhere when a file is named
LOG_FILE = os.getenv("SNAKE_LOG_FILE", "").strip() or None


def configure_logging(level: Optional[str] = None, filename: Optional[str] = None):
    """
    Set up root logging once for the process.

    Falls back to discarding records when no log file is configured.
    """
    level = (level or LOG_LEVEL).upper()
    filename = filename or LOG_FILE

    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    if filename:
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT, filename=filename)
    else:
        logging.basicConfig(level=numeric_level, handlers=[logging.NullHandler()])
