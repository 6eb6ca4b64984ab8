# pushblock_core/utils/logging_utils.py

import logging
import sys
from typing import Optional

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LEVEL = logging.INFO


def setup_logger(name: str, level: int = DEFAULT_LEVEL, log_file: Optional[str] = None,
                 log_format: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    Configures and returns a logger instance.

    Args:
        name (str): Logger name; the package name ("pushblock_search") covers all its modules.
        level (int): Minimum level to output (e.g. logging.DEBUG).
        log_file (str, optional): Also append records to this file. Defaults to None.
        log_format (str, optional): Format string for records.

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(name)
    # calling twice for one name must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.setLevel(level)
    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.debug(f"Logging to console and {log_file} at {logging.getLevelName(level)}")

    return logger


def get_level_from_string(level_str: str) -> int:
    """Converts a log level string to a logging level constant."""
    return LOG_LEVELS.get(level_str.lower(), DEFAULT_LEVEL)
