"""Logger setup for command-line use.

Library modules only create loggers under the ``prime_toolkit`` namespace;
handlers are attached here, by the application.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "prime_toolkit"


def setup_logger(level: int = logging.WARNING, log_path: Optional[Path] = None) -> logging.Logger:
    """Set up the package logger with a console and an optional file handler."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    if log_path is not None:
        # File handler - captures everything
        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    return logger
