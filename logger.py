"""Logging configuration for MotivateMe.

One dated log file per day under ``LOG_DIR``, plus the console when running
in a terminal. APScheduler's own warnings (missed or failed jobs) go to the
same handlers.
"""

import logging
import sys
from datetime import datetime

from config import LOG_DIR, LOG_LEVEL

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


def _handlers() -> list[logging.Handler]:
    log_file = LOG_DIR / f"{datetime.now().strftime('%Y-%m-%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handlers = [file_handler]

    # Console only when attached to a terminal (not as a background service)
    if sys.stdout is not None and sys.stdout.isatty():
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        handlers.append(console_handler)

    return handlers


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Configure the app logger and attach the scheduler's logger to it."""
    logger = logging.getLogger("motivateme")
    logger.setLevel(level)
    logger.handlers.clear()

    handlers = _handlers()
    for handler in handlers:
        logger.addHandler(handler)

    scheduler_logger = logging.getLogger("apscheduler")
    scheduler_logger.setLevel(logging.WARNING)
    scheduler_logger.handlers.clear()
    for handler in handlers:
        scheduler_logger.addHandler(handler)

    return logger


# Global logger instance
logger = setup_logging()
