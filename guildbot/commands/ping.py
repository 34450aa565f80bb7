"""
/ping: report the bot's latency.
"""

import discord

from ..handlers import BaseCommand
from ..utils.logging import logger


class PingCommand(BaseCommand):
    """Replies with roundtrip and websocket latency."""

    def __init__(self) -> None:
        super().__init__(
            name="ping",
            description="Replies with the bot latency",
            category="Utility",
            long_description="Checks the bot's response time and API latency.",
            cooldown=5,
        )

    async def execute(self, interaction: discord.Interaction) -> None:
        try:
            await interaction.response.send_message("Pinging...")
            message = await interaction.original_response()
            response_time = round(
                (message.created_at - interaction.created_at).total_seconds() * 1000
            )
            api_latency = round(interaction.client.latency * 1000)

            await interaction.edit_original_response(
                content=(
                    f"🏓 Pong!\n**Roundtrip latency**: {response_time}ms\n"
                    f"**API latency**: {api_latency}ms"
                )
            )
        except discord.HTTPException as e:
            logger.error(f"Error executing ping command: {e}")
            if not interaction.response.is_done():
                await interaction.response.send_message(
                    "There was an error while executing this command!",
                    ephemeral=True
                )


HANDLER = PingCommand
