"""Logging configuration for AMDGPU Stats."""

import logging
import time
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config import (
    APP_NAME,
    LOG_BACKUP_COUNT,
    LOG_DIR,
    LOG_FILE_NAME,
    LOG_MAX_BYTES,
    SLOW_OPERATION_MS,
)

DETAILED_FORMAT = logging.Formatter(
    '%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-28s | %(threadName)-20s | %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

_log_file: Optional[Path] = None


def setup_logging(level: int = logging.DEBUG, log_dir: Path = LOG_DIR) -> logging.Logger:
    """
    Setup application-wide logging.

    stdout and stderr belong to the report itself, so records only go to a
    size-capped rotating log file shared by all runs. When the log directory
    can't be created no handler is added, and records reach only the
    package NullHandler.

    Args:
        level: Logging level (default DEBUG for diagnostics)
        log_dir: Directory for the rotating log file

    Returns:
        Root logger for the application
    """
    global _log_file

    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        return logger

    log_file = Path(log_dir) / LOG_FILE_NAME
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8',
        )
    except OSError:
        return logger

    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(DETAILED_FORMAT)
    logger.addHandler(file_handler)
    _log_file = log_file

    logger.info(f"Logging initialized. Log file: {log_file}")

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module."""
    return logging.getLogger(f'{APP_NAME}.{name}')


def get_log_file_path() -> Optional[Path]:
    """Get current log file path, None until setup_logging succeeds."""
    return _log_file


def timed(func):
    """Decorator to log function execution time."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger('perf')
        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
            elapsed = (time.perf_counter() - start) * 1000  # ms
            if elapsed > SLOW_OPERATION_MS:
                logger.warning(f"SLOW: {func.__qualname__} took {elapsed:.2f}ms")
            else:
                logger.debug(f"{func.__qualname__} took {elapsed:.2f}ms")
            return result
        except Exception as e:
            elapsed = (time.perf_counter() - start) * 1000
            logger.error(f"{func.__qualname__} failed after {elapsed:.2f}ms: {e}")
            raise
    return wrapper


class PerfTimer:
    """Context manager for timing code blocks."""

    def __init__(self, name: str, logger: Optional[logging.Logger] = None):
        self.name = name
        self.logger = logger or get_logger('perf')
        self.start: float = 0
        self.elapsed: float = 0

    def __enter__(self):
        self.start = time.perf_counter()
        self.logger.debug(f"Starting: {self.name}")
        return self

    def __exit__(self, *args):
        self.elapsed = (time.perf_counter() - self.start) * 1000
        if self.elapsed > SLOW_OPERATION_MS:
            self.logger.warning(f"SLOW: {self.name} took {self.elapsed:.2f}ms")
        else:
            self.logger.debug(f"Completed: {self.name} in {self.elapsed:.2f}ms")
