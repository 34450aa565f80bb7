"""
Tests for logging utilities.
"""

import logging

import pytest
from unittest.mock import patch

from guildbot.utils.logging import TRACE, LEVELS, get_logger, set_log_level, trace


class TestLogLevels:
    """Tests for log level names and the TRACE level."""

    def test_level_mapping(self):
        """
        Tests LOG_LEVEL names map to logging levels:
        - trace is below debug
        - warn and fatal map to WARNING and CRITICAL
        """
        assert LEVELS["trace"] == TRACE < logging.DEBUG
        assert LEVELS["warn"] == logging.WARNING
        assert LEVELS["fatal"] == logging.CRITICAL
        assert logging.getLevelName(TRACE) == "TRACE"

    def test_set_log_level(self):
        """Tests set_log_level applies the level to the application logger."""
        logger = get_logger()
        original = logger.level
        try:
            assert set_log_level("debug") == logging.DEBUG
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(original)

    def test_set_unknown_log_level(self):
        """Tests unknown level names are rejected."""
        with pytest.raises(ValueError, match="verbose"):
            set_log_level("verbose")

    def test_trace(self):
        """Tests trace logs at the TRACE level."""
        with patch('guildbot.utils.logging.logger') as mock_logger:
            trace("details")
            mock_logger.log.assert_called_once_with(TRACE, "details")

    def test_get_logger_singleton(self):
        """Tests get_logger returns the same named logger."""
        assert get_logger() is get_logger()
        assert get_logger().name == "guildbot"
