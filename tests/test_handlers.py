"""
Tests for the command and event base classes.
"""

import discord
import pytest
from unittest.mock import MagicMock

from guildbot.handlers import (
    BaseCommand,
    BaseEvent,
    CommandOption,
    get_option,
    is_chat_input_command,
    is_command,
    is_event,
)


class EchoCommand(BaseCommand):
    def __init__(self):
        super().__init__(
            name="echo",
            description="Echo a message",
            options=[
                CommandOption(name="text", description="What to say", required=True),
                CommandOption(
                    name="style",
                    description="How to say it",
                    choices=["loud", "quiet"],
                ),
            ],
        )

    async def execute(self, interaction):
        pass


class ReadyHandler(BaseEvent):
    def __init__(self):
        super().__init__("ready", once=True)


def make_interaction(interaction_type, data):
    interaction = MagicMock()
    interaction.type = interaction_type
    interaction.data = data
    return interaction


class TestBaseCommand:
    """Tests for command metadata and serialization."""

    def test_defaults(self):
        """Tests optional metadata defaults."""
        command = EchoCommand()
        assert command.cooldown is None
        assert command.category is None
        assert command.owner_only is False
        assert command.disabled is False

    def test_to_dict(self):
        """
        Tests the registration payload:
        - Name, description and chat input type are set
        - Options are serialized in order with their types
        - Choices are serialized as name/value pairs
        """
        payload = EchoCommand().to_dict()

        assert payload["name"] == "echo"
        assert payload["description"] == "Echo a message"
        assert payload["type"] == 1
        assert payload["options"][0] == {
            "name": "text",
            "description": "What to say",
            "type": discord.AppCommandOptionType.string.value,
            "required": True,
        }
        assert payload["options"][1]["choices"] == [
            {"name": "loud", "value": "loud"},
            {"name": "quiet", "value": "quiet"},
        ]

    @pytest.mark.asyncio
    async def test_base_execute_not_implemented(self):
        """Tests the base execute must be overridden."""
        command = BaseCommand(name="bare", description="bare")
        with pytest.raises(NotImplementedError):
            await command.execute(MagicMock())


class TestBaseEvent:
    """Tests for event handler construction."""

    def test_valid_event(self):
        """Tests name, once flag and binding."""
        event = ReadyHandler()
        assert event.name == "ready"
        assert event.once is True
        assert event.bot is None

        bot = MagicMock()
        event.bind(bot)
        assert event.bot is bot

    def test_unknown_event_name(self):
        """Tests event names outside the supported set are rejected."""
        with pytest.raises(ValueError, match="typing_start"):
            BaseEvent("typing_start")


class TestValidators:
    """Tests for is_command and is_event."""

    def test_is_command(self):
        assert is_command(EchoCommand())
        assert not is_command(ReadyHandler())
        assert not is_command(object())
        assert not is_command(BaseCommand(name="", description="empty"))

    def test_is_event(self):
        assert is_event(ReadyHandler())
        assert not is_event(EchoCommand())


class TestInteractionHelpers:
    """Tests for interaction inspection helpers."""

    def test_is_chat_input_command(self):
        """
        Tests chat input detection:
        - Slash commands are chat input
        - Context menu commands are not
        - Component interactions are not
        """
        app_command = discord.InteractionType.application_command
        assert is_chat_input_command(make_interaction(app_command, {"type": 1, "name": "x"}))
        assert not is_chat_input_command(make_interaction(app_command, {"type": 2, "name": "x"}))
        assert not is_chat_input_command(
            make_interaction(discord.InteractionType.component, {"custom_id": "b"})
        )

    def test_get_option(self):
        """Tests option lookup with a default for missing options."""
        interaction = make_interaction(
            discord.InteractionType.application_command,
            {"name": "help", "options": [{"name": "command", "type": 3, "value": "ping"}]},
        )
        assert get_option(interaction, "command") == "ping"
        assert get_option(interaction, "other", "fallback") == "fallback"
