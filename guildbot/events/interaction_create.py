"""
Routes slash command interactions to the registered commands.
"""

import discord

from ..handlers import BaseEvent, is_chat_input_command
from ..utils.logging import logger, trace

UNKNOWN_COMMAND_MESSAGE = "This command does not exist."
DISABLED_COMMAND_MESSAGE = "This command is currently disabled."
COMMAND_ERROR_MESSAGE = "An error occurred while executing the command. Please try again later."


class InteractionCreateEvent(BaseEvent):
    """Dispatches every chat input interaction to its command."""

    def __init__(self) -> None:
        super().__init__("interaction", once=False)

    async def execute(self, interaction: discord.Interaction) -> None:
        if not is_chat_input_command(interaction):
            return

        command_name = interaction.data.get("name")
        command = interaction.client.command_registry.get(command_name)

        if command is None:
            logger.warning(f"Command {command_name} not found")
            await interaction.response.send_message(UNKNOWN_COMMAND_MESSAGE, ephemeral=True)
            return

        if command.disabled:
            await interaction.response.send_message(DISABLED_COMMAND_MESSAGE, ephemeral=True)
            return

        try:
            await command.execute(interaction)
            trace(f"Command (/{command_name}) executed by {interaction.user.id}")
        except Exception as e:
            logger.error(f"Error executing command /{command_name}: {e}", exc_info=True)
            await self._reply_with_error(interaction)

    @staticmethod
    async def _reply_with_error(interaction: discord.Interaction) -> None:
        """Tell the user the command failed, without internal details."""
        try:
            # An interaction accepts a single initial response
            if interaction.response.is_done():
                await interaction.followup.send(COMMAND_ERROR_MESSAGE, ephemeral=True)
            else:
                await interaction.response.send_message(COMMAND_ERROR_MESSAGE, ephemeral=True)
        except Exception as e:
            logger.error(f"Could not reply to interaction: {e}")


HANDLER = InteractionCreateEvent
