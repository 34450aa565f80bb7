"""
Utility modules for the Guild Bot.
"""

from .logging import get_logger, set_log_level, trace, TRACE

__all__ = [
    "get_logger",
    "set_log_level",
    "trace",
    "TRACE",
]
