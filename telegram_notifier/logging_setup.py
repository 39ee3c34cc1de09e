"""Logging configuration for telegram_notifier."""

import os
import logging
from datetime import datetime
from typing import Optional

from telegram_notifier import __version__

LOGGER_NAME = "telegram_notifier"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def log_file_path(path: str) -> str:
    """Return a timestamped log file name inside path."""
    stamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    return os.path.join(path, f"{LOGGER_NAME}({__version__})_{stamp}.log")


def setup_logging(level: str = "INFO", path: Optional[str] = None):
    """Configure and return the telegram_notifier logger.

    Records always go to stderr. A log file is written only when a
    directory is given. Handlers installed by an earlier call are replaced,
    so calling this again never duplicates output.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR)
        path: Directory for log files, or None for stderr only

    Raises:
        OSError: If the log directory cannot be created or written.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler()]
    log_file = None
    if path:
        os.makedirs(path, exist_ok=True)
        log_file = log_file_path(path)
        handlers.append(logging.FileHandler(log_file))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if log_file:
        logger.debug(f"Log file created: {log_file}")

    return logger
