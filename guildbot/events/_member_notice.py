"""
Shared helpers for the member join and leave notices.
"""

from typing import Optional

import discord


def find_text_channel(guild: discord.Guild, name: str) -> Optional[discord.TextChannel]:
    """Find a text channel of the guild by name."""
    return discord.utils.get(guild.text_channels, name=name)


def build_member_embed(
    member: discord.Member,
    title: str,
    description: str,
    color: int
) -> discord.Embed:
    """Build the embed announcing a member's arrival or departure."""
    embed = discord.Embed(
        color=color,
        title=title,
        description=description,
        timestamp=discord.utils.utcnow(),
    )
    embed.set_thumbnail(url=member.display_avatar.replace(size=256).url)
    embed.add_field(
        name="Account created on",
        value=member.created_at.strftime("%m/%d/%Y"),
        inline=True,
    )
    embed.add_field(name="User ID", value=str(member.id), inline=True)
    embed.set_footer(text=f"Now there are {member.guild.member_count} members")
    return embed
