"""
Welcomes new guild members.
"""

import discord

from ..config import get_setting
from ..handlers import BaseEvent
from ..utils.logging import logger
from ._member_notice import build_member_embed, find_text_channel

WELCOME_COLOR = 0x2ECC71


class GuildMemberAddEvent(BaseEvent):
    """Posts a welcome embed and refreshes the member count."""

    def __init__(self) -> None:
        super().__init__("member_join", once=False)

    async def execute(self, member: discord.Member) -> None:
        try:
            channel = find_text_channel(member.guild, get_setting("welcome_channel"))

            if channel is not None:
                embed = build_member_embed(
                    member,
                    title="New member joined!",
                    description=f"**{member}** is one of us now!",
                    color=WELCOME_COLOR,
                )
                await channel.send(embed=embed)
                logger.info(f"New member joined: {member.name} ({member.id})")
            else:
                logger.warning(f"Could not find welcome channel for new member: {member.name}")

            await self.bot.refresh_members_count()
        except Exception as e:
            logger.error(f"Error welcoming new member {member.name}: {e}")


HANDLER = GuildMemberAddEvent
