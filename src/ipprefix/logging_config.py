"""
Logging configuration for ipprefix.

Provides console and rotating file logging, plus per-kind failure counters
for row-level prefix errors.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Any


LOGGER_NAME = "ipprefix"
LOG_FILENAME = "ipprefix.log"
DEFAULT_LOG_DIR = Path.home() / ".ipprefix" / "logs"

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-24s | %(funcName)-16s | %(lineno)-4d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str | int) -> int:
    """Map a level name such as 'info' or a numeric level to its int value.

    Raises:
        ValueError: if the name is not a registered logging level
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level '{level}'")
    return value


def setup_logging(
    level: str | int = "INFO",
    log_dir: str | None = None,
    enable_file: bool = False,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """
    Attach handlers to the package logger, replacing any from earlier calls.

    The console handler writes to stderr at the requested level. The file
    handler, when enabled, records everything down to DEBUG.

    Args:
        level: Level name or number for the logger and console
        log_dir: Directory for ipprefix.log (defaults to ~/.ipprefix/logs)
        enable_file: Also write to a rotating log file
        max_bytes: Maximum log file size before rotation
        backup_count: Number of rotated files to keep

    Returns:
        The configured 'ipprefix' logger

    Raises:
        ValueError: if level is not a known logging level
    """
    numeric_level = resolve_level(level)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))
    logger.addHandler(console_handler)

    if enable_file:
        log_path = (Path(log_dir) if log_dir else DEFAULT_LOG_DIR) / LOG_FILENAME
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
        logger.addHandler(file_handler)
        # The file sees DEBUG records even when the console is quieter
        numeric_level = logging.DEBUG

    logger.setLevel(numeric_level)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (e.g., 'ipprefix.prefix.parser')

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_logging(
    level: str | int = "WARNING",
    debug: bool = False,
    log_to_file: bool = False,
    log_dir: str | None = None,
) -> logging.Logger:
    """
    Quick logging configuration for the CLI.

    Args:
        level: Configured level name, overridden by debug
        debug: Force DEBUG level
        log_to_file: Enable file logging
        log_dir: Directory for the log file
    """
    return setup_logging(
        level="DEBUG" if debug else level,
        log_dir=log_dir,
        enable_file=log_to_file,
    )


class ErrorTracker:
    """Count row failures by error kind."""

    def __init__(self):
        self.errors: dict[str, int] = {}
        self.logger = get_logger(__name__)

    def log_error(
        self,
        error_type: str,
        message: str | None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Record a failure and log it at debug level.

        Args:
            error_type: Error kind (e.g., 'invalid_mask')
            message: User message, None when details are suppressed
            context: Additional context data such as the row index
        """
        self.errors[error_type] = self.errors.get(error_type, 0) + 1

        log_msg = error_type if message is None else f"{error_type}: {message}"
        if context:
            log_msg += f" | Context: {context}"
        self.logger.debug(log_msg)

    def get_error_counts(self) -> dict[str, int]:
        """Get error counts by type."""
        return self.errors.copy()

    def reset_counts(self) -> None:
        """Reset error counters."""
        self.errors.clear()


_error_tracker = ErrorTracker()


def track_error(
    error_type: str,
    message: str | None,
    context: dict[str, Any] | None = None,
) -> None:
    """Track an error globally."""
    _error_tracker.log_error(error_type, message, context)


def get_error_stats() -> dict[str, int]:
    """Get global error statistics."""
    return _error_tracker.get_error_counts()


def reset_error_stats() -> None:
    """Clear global error statistics."""
    _error_tracker.reset_counts()
