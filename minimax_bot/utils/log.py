"""
Engine log setup.

Drivers that own stdout (the UCI loop) log to a file instead. Library
modules only call logging.getLogger(__name__); handlers are attached here,
on the package logger.
"""

import logging
from pathlib import Path
from typing import Optional

LOGGER_NAME = "minimax_bot"
DEFAULT_LOG_FILE = Path.home() / ".minimax_bot" / "engine.log"


def setup_logger(debug: bool = True, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Setup file-based logger for engine debugging.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_file: Target file (default: ~/.minimax_bot/engine.log)

    Returns:
        Configured package logger
    """
    log_file = Path(log_file) if log_file else DEFAULT_LOG_FILE
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
