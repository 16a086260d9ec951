"""
Logger Module

Provides a centralized logging system that outputs to both console and file.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Set once by configure_logging(); loggers created afterwards also write there.
_log_file: Optional[Path] = None


def configure_logging(log_file: Optional[str]) -> None:
    """Select the file every logger created by get_logger() appends to."""
    global _log_file
    _log_file = Path(log_file) if log_file else None


def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with console and (optional) file handlers.

    Args:
        name: Logger name (typically module name like "timeclock.statistics")

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT)

    # Console handler - INFO level and above
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler - DEBUG level and above
    if _log_file is not None:
        try:
            file_handler = logging.FileHandler(_log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            # If file logging fails, just log to console
            logger.warning(f"Cannot open log file {_log_file}: {e}")

    return logger
