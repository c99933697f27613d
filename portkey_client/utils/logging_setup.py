"""Logging configuration for applications using the client."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(logger_name: str = "portkey_client") -> Optional[str]:
    """
    Configure console and optional rotating file output.

    Never called on import; applications opt in. Returns the log file
    path when file logging is enabled.
    """
    log_level = logging.DEBUG if settings.DEBUG_MODE else logging.INFO

    target = logging.getLogger(logger_name)
    target.setLevel(log_level)

    # Clear existing handlers
    target.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    target.addHandler(console_handler)

    if not settings.LOG_TO_FILE:
        return None

    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / settings.LOG_FILE

    # Rotating file handler: 10MB max, keep 5 backups
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    target.addHandler(file_handler)

    return str(log_file)
