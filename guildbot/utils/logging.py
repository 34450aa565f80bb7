"""
Logging utilities for the Guild Bot.
"""

import logging
from typing import Optional

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

# Level names accepted in LOG_LEVEL mapped to logging levels
LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
}

_logger: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    """Get the application logger, initializing if needed."""
    global _logger
    if _logger is None:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        _logger = logging.getLogger("guildbot")
    return _logger


def set_log_level(level_name: str) -> int:
    """Apply a LOG_LEVEL name to the application logger.

    Raises:
        ValueError: If the name is not one of LEVELS.
    """
    try:
        level = LEVELS[level_name]
    except KeyError:
        raise ValueError(f"Unknown log level: {level_name}") from None
    get_logger().setLevel(level)
    return level


logger = get_logger()


def trace(message: str) -> None:
    """Log a message at TRACE level."""
    logger.log(TRACE, message)
