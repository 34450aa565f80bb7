"""
Logs the bot's identity once the gateway session is ready.
"""

from ..handlers import BaseEvent
from ..utils.logging import logger


class ReadyEvent(BaseEvent):
    """Runs once, when the guild cache is first available."""

    def __init__(self) -> None:
        super().__init__("ready", once=True)

    async def execute(self) -> None:
        logger.info(f"Bot is ready! Logged in as {self.bot.user}")
        logger.info(f"Serving {len(self.bot.command_registry)} command(s)")
        await self.bot.refresh_members_count()


HANDLER = ReadyEvent
