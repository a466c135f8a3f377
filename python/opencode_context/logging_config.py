"""
Logging configuration for opencode-context.

Loggers are silent by default. Set OPENCODE_CONTEXT_LOG_DIR to persist
diagnostics to a rotating log file, and OPENCODE_CONTEXT_LOG_LEVEL to
change verbosity.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


LOG_LEVEL_ENV = "OPENCODE_CONTEXT_LOG_LEVEL"
LOG_DIR_ENV = "OPENCODE_CONTEXT_LOG_DIR"
PRIMARY_LOG_FILENAME = "installer.log"


def get_log_level() -> int:
    """
    Get log level from environment variable or default to INFO.

    Environment variable: OPENCODE_CONTEXT_LOG_LEVEL
    Valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL

    Returns:
        int: Logging level constant from logging module
    """
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    return level_map.get(level_name, logging.INFO)


def get_log_directory() -> Optional[Path]:
    """Directory for the log file, or None when file logging is disabled."""
    log_dir_str = (os.getenv(LOG_DIR_ENV) or "").strip()
    if not log_dir_str:
        return None
    return Path(log_dir_str).expanduser()


def setup_logger(
    name: str,
    max_bytes: int = 5 * 1024 * 1024,  # 5MB
) -> logging.Logger:
    """
    Set up a logger with optional file rotation.

    Args:
        name: Logger name (e.g., 'opencode_context.installer')
        max_bytes: Maximum size of the log file before rotation (default: 5MB)

    Returns:
        logging.Logger: Configured logger instance

    Example:
        >>> logger = setup_logger('opencode_context.installer')
        >>> logger.debug("Copying %s", source)
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        # Keep logger level in sync with env var, but avoid duplicating handlers.
        logger.setLevel(get_log_level())
        return logger

    logger.setLevel(get_log_level())
    logger.propagate = False  # Don't propagate to root logger

    formatter = logging.Formatter(
        fmt="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    log_dir = get_log_directory()
    if log_dir is not None:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_dir / PRIMARY_LOG_FILENAME, maxBytes=max_bytes, backupCount=1, encoding="utf-8"
            )
            file_handler.setLevel(logging.DEBUG)  # Capture all levels to file
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            # Don't let logging setup break the installer
            print(f"Warning: Failed to set up file logging: {e}", file=sys.stderr)

    if not logger.handlers:
        # Keep records away from logging.lastResort (stderr).
        logger.addHandler(logging.NullHandler())

    return logger
