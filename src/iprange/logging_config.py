"""
Logging configuration for iprange.

Everything logs under the "iprange" logger. The CLI attaches a console
handler on stderr and, when asked, a rotating log file.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler


PACKAGE_LOGGER = "iprange"
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

CONSOLE_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
FILE_FORMAT = (
    '%(asctime)s | %(levelname)-8s | %(name)-20s | %(module)-15s | '
    '%(funcName)-20s | %(lineno)-4d | %(message)s'
)


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
    enable_console: bool = True,
) -> logging.Logger:
    """
    Configure the package logger, replacing whatever was set up before.

    Args:
        level: Logging level name, case-insensitive
        log_file: Also write DEBUG and up to this rotating file
        max_bytes: Log file size before rotation
        backup_count: Rotated files to keep
        enable_console: Log to stderr

    Returns:
        The "iprange" logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))
    _reset_handlers(logger)

    if enable_console:
        # stderr keeps command output on stdout clean
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger
