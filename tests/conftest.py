"""
Shared fixtures for the Guild Bot tests.
"""

import pytest

from guildbot.config import validate_env


@pytest.fixture
def env():
    """A valid environment for constructing bots."""
    return validate_env({
        "NODE_ENV": "test",
        "LOG_LEVEL": "info",
        "DISCORD_TOKEN": "test_token",
        "DISCORD_CLIENT_ID": "111111111111111111",
        "DISCORD_GUILD_ID": "222222222222222222",
    })
