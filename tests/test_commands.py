"""
Tests for the built-in slash commands.
"""

from datetime import datetime, timedelta, timezone

import discord
import pytest
from unittest.mock import AsyncMock, MagicMock

from guildbot.commands.help import HelpCommand
from guildbot.commands.ping import PingCommand
from guildbot.commands.test import TestCommand
from guildbot.handlers import BaseCommand
from guildbot.registry import CommandRegistry


@pytest.fixture
def mock_interaction():
    """Create a mock Discord interaction."""
    interaction = MagicMock()
    interaction.type = discord.InteractionType.application_command
    interaction.data = {"type": 1, "name": "help"}
    interaction.response.send_message = AsyncMock()
    interaction.response.is_done = MagicMock(return_value=False)
    interaction.original_response = AsyncMock()
    interaction.edit_original_response = AsyncMock()
    return interaction


class TestPingCommand:
    """Tests for /ping."""

    def test_metadata(self):
        command = PingCommand()
        assert command.name == "ping"
        assert command.category == "Utility"
        assert command.cooldown == 5

    @pytest.mark.asyncio
    async def test_reports_latency(self, mock_interaction):
        """Tests the reply is edited with roundtrip and API latency."""
        sent_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        mock_interaction.created_at = sent_at
        mock_interaction.original_response.return_value = MagicMock(
            created_at=sent_at + timedelta(milliseconds=120)
        )
        mock_interaction.client.latency = 0.045

        await PingCommand().execute(mock_interaction)

        mock_interaction.response.send_message.assert_awaited_once_with("Pinging...")
        content = mock_interaction.edit_original_response.await_args.kwargs["content"]
        assert "**Roundtrip latency**: 120ms" in content
        assert "**API latency**: 45ms" in content


class TestTestCommand:
    """Tests for /test."""

    @pytest.mark.asyncio
    async def test_replies_ephemerally(self, mock_interaction):
        await TestCommand().execute(mock_interaction)

        mock_interaction.response.send_message.assert_awaited_once_with(
            "Bot up and running, hit me up with /help for more commands!",
            ephemeral=True
        )


class TestHelpCommand:
    """Tests for /help."""

    @pytest.fixture
    def registry(self):
        registry = CommandRegistry()
        hidden = BaseCommand(name="hidden", description="Hidden", disabled=True)
        misc = BaseCommand(name="misc", description="Uncategorized")
        for command in (PingCommand(), TestCommand(), HelpCommand(), hidden, misc):
            registry._commands[command.name] = command
        return registry

    def test_has_command_option(self):
        """Tests the optional command argument is part of the registration payload."""
        option = HelpCommand().to_dict()["options"][0]
        assert option["name"] == "command"
        assert option["required"] is False

    @pytest.mark.asyncio
    async def test_overview(self, mock_interaction, registry):
        """
        Tests the command list:
        - Commands are grouped by category
        - Disabled commands are not listed
        """
        mock_interaction.client.command_registry = registry

        await HelpCommand().execute(mock_interaction)

        content = mock_interaction.response.send_message.await_args[0][0]
        assert mock_interaction.response.send_message.await_args.kwargs["ephemeral"] is True
        assert "**Utility**" in content
        assert "**General**" in content
        assert "`/ping` - Replies with the bot latency" in content
        assert "/hidden" not in content

    @pytest.mark.asyncio
    async def test_single_command(self, mock_interaction, registry):
        """Tests details for a single command include its cooldown."""
        mock_interaction.client.command_registry = registry
        mock_interaction.data["options"] = [{"name": "command", "type": 3, "value": "ping"}]

        await HelpCommand().execute(mock_interaction)

        content = mock_interaction.response.send_message.await_args[0][0]
        assert content.startswith("**/ping**")
        assert "Checks the bot's response time" in content
        assert "Cooldown: 5s" in content

    @pytest.mark.asyncio
    async def test_unknown_or_disabled_command(self, mock_interaction, registry):
        """Tests unknown and disabled commands are reported as missing."""
        mock_interaction.client.command_registry = registry

        for name in ("nope", "hidden"):
            mock_interaction.response.send_message.reset_mock()
            mock_interaction.data["options"] = [{"name": "command", "type": 3, "value": name}]
            await HelpCommand().execute(mock_interaction)
            assert mock_interaction.response.send_message.await_args[0][0] == f"No command named `{name}`."

    def test_empty_overview(self):
        assert HelpCommand.overview([]) == "No commands are available."
