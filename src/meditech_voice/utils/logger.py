"""
Logging setup for the voice layer and the console
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from ..config.settings import get_logging_settings

PACKAGE_LOGGER = "meditech_voice"

# Speech libraries that log every HTTP request or driver call at DEBUG/INFO
NOISY_LOGGERS = ("gtts", "urllib3", "comtypes")


def setup_logger(name: Optional[str] = PACKAGE_LOGGER, level: Optional[str] = None) -> logging.Logger:
    """
    Attach console (and optional file) handlers to a logger, once.

    Args:
        name: Logger name, the package logger by default
        level: Overrides LOG_LEVEL from the environment

    Returns:
        Configured logger instance
    """
    logging_settings = get_logging_settings()
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level_name = (level or logging_settings.log_level).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    formatter = logging.Formatter(logging_settings.log_format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logging_settings.log_file:
        log_file_path = Path(logging_settings.log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logger
