"""
/help: list the available commands or describe one of them.
"""

from collections import defaultdict
from typing import Dict, List

import discord

from ..handlers import BaseCommand, CommandOption, get_option
from ..utils.text_utils import truncate_output


class HelpCommand(BaseCommand):
    """Lists enabled commands by category, or shows details for one."""

    def __init__(self) -> None:
        super().__init__(
            name="help",
            description="Lists the available commands",
            options=[
                CommandOption(
                    name="command",
                    description="Show details for a single command",
                ),
            ],
            category="Utility",
            long_description=(
                "Without arguments, lists every enabled command grouped by category. "
                "With a command name, shows what that command does."
            ),
        )

    async def execute(self, interaction: discord.Interaction) -> None:
        registry = interaction.client.command_registry
        name = get_option(interaction, "command")

        if name:
            content = self.describe(registry.get(name), name)
        else:
            content = self.overview(registry.commands())

        await interaction.response.send_message(truncate_output(content), ephemeral=True)

    @staticmethod
    def describe(command, name: str) -> str:
        if command is None or command.disabled:
            return f"No command named `{name}`."

        lines = [f"**/{command.name}**", command.long_description or command.description]
        if command.category:
            lines.append(f"Category: {command.category}")
        if command.cooldown:
            lines.append(f"Cooldown: {command.cooldown}s")
        return "\n".join(lines)

    @staticmethod
    def overview(commands: List[BaseCommand]) -> str:
        by_category: Dict[str, List[BaseCommand]] = defaultdict(list)
        for command in commands:
            if not command.disabled:
                by_category[command.category or "General"].append(command)

        if not by_category:
            return "No commands are available."

        sections = []
        for category in sorted(by_category):
            entries = sorted(by_category[category], key=lambda c: c.name)
            sections.append(
                f"**{category}**\n"
                + "\n".join(f"`/{c.name}` - {c.description}" for c in entries)
            )
        return "\n\n".join(sections)


HANDLER = HelpCommand
