"""
Says farewell to members leaving the guild.
"""

import discord

from ..config import get_setting
from ..handlers import BaseEvent
from ..utils.logging import logger
from ._member_notice import build_member_embed, find_text_channel

FAREWELL_COLOR = 0xE74C3C


class GuildMemberRemoveEvent(BaseEvent):
    """Posts a farewell embed and refreshes the member count."""

    def __init__(self) -> None:
        super().__init__("member_remove", once=False)

    async def execute(self, member: discord.Member) -> None:
        try:
            channel = find_text_channel(member.guild, get_setting("farewell_channel"))

            if channel is not None:
                embed = build_member_embed(
                    member,
                    title="Member left!",
                    description=f"**{member}** has left the server.",
                    color=FAREWELL_COLOR,
                )
                await channel.send(embed=embed)
                logger.info(f"Member left: {member.name} ({member.id})")
            else:
                logger.warning(f"Could not find farewell channel for member: {member.name}")

            await self.bot.refresh_members_count()
        except Exception as e:
            logger.error(f"Error saying farewell to member {member.name}: {e}")


HANDLER = GuildMemberRemoveEvent
