"""
/test: check that the bot is up.
"""

import discord

from ..handlers import BaseCommand


class TestCommand(BaseCommand):
    """Replies with a short status message."""

    # Not a test case, despite the name
    __test__ = False

    def __init__(self) -> None:
        super().__init__(
            name="test",
            description="Test command to check bot status",
            category="Utility",
            long_description="A test command to check the bot's status",
        )

    async def execute(self, interaction: discord.Interaction) -> None:
        await interaction.response.send_message(
            "Bot up and running, hit me up with /help for more commands!",
            ephemeral=True
        )


HANDLER = TestCommand
