"""Logging for suntimes.

Nothing is configured at import time; the CLI calls :func:`setup_logging`
once per run. Console output goes to stderr because stdout carries the report.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, TextIO

from ..config.settings import LoggingSettings

ROOT_LOGGER = "suntimes"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    config: LoggingSettings,
    verbose: bool = False,
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the ``suntimes`` logger for a run.

    Args:
        config: Logging section of the settings
        verbose: Force DEBUG level
        log_file: Log file overriding ``config.file_path``
        stream: Console stream, stderr by default

    Returns:
        The configured ``suntimes`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.getLevelName(config.level))
    logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = log_file or config.file_path
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``suntimes`` namespace.

    Module ``__name__`` values already carry the prefix and are used as is.
    """
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
