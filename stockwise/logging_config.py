# stockwise/logging_config.py

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import settings


def setup_logging(
    level: Optional[str] = None, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure the package logger with a console handler and, when a log file
    is configured, a rotating file handler.

    Safe to call more than once: handlers are only attached the first time.
    """
    logger = logging.getLogger("stockwise")
    logger.setLevel(level or settings.log_level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    path = log_file or settings.log_file
    if path:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"  # 5 MB
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
