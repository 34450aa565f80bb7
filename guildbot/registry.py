"""
Command and event registries.

The command registry is the local dispatch table used by the interaction
handler, and publishes the command set to Discord. The event registry
subscribes event handlers to the bot's event bus.
"""

import asyncio
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, Iterator, List, Optional

import discord

from .handlers import BaseCommand, BaseEvent
from .utils.logging import logger

if TYPE_CHECKING:
    from .bot import GuildBot

Publisher = Callable[[List[Dict[str, Any]]], Awaitable[None]]


async def publish_guild_commands(
    token: str,
    client_id: str,
    guild_id: str,
    payload: List[Dict[str, Any]]
) -> None:
    """Replace every command of the application in a guild with payload.

    Uses a standalone HTTP client so commands can be published before the
    bot itself logs in.
    """
    http = discord.http.HTTPClient(asyncio.get_running_loop())
    try:
        await http.static_login(token)
        await http.bulk_upsert_guild_commands(int(client_id), int(guild_id), payload)
    finally:
        await http.close()


class CommandRegistry:
    """Name-keyed table of slash commands."""

    def __init__(self, publisher: Optional[Publisher] = None) -> None:
        self._commands: Dict[str, BaseCommand] = {}
        self._publisher = publisher

    def get(self, name: str) -> Optional[BaseCommand]:
        """Get a command by name."""
        return self._commands.get(name)

    def commands(self) -> List[BaseCommand]:
        """Get all registered commands."""
        return list(self._commands.values())

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[BaseCommand]:
        return iter(self.commands())

    async def register(self, commands: List[BaseCommand]) -> None:
        """Add commands to the table and publish them to the guild.

        Nothing is published when the list is empty, so that a loading
        failure cannot wipe the commands already registered on Discord.

        Raises:
            Exception: Any serialization or publishing error.
        """
        for command in commands:
            if command.name in self._commands:
                logger.warning(
                    f"Duplicate command name '{command.name}', "
                    f"{command!r} replaces {self._commands[command.name]!r}"
                )
            self._commands[command.name] = command

        if not commands:
            logger.warning("No commands were registered")
            return

        # The remote set mirrors the table, one descriptor per name
        payload = [command.to_dict() for command in self._commands.values()]
        if self._publisher is None:
            raise RuntimeError("No command publisher configured")
        await self._publisher(payload)
        logger.debug(f"Successfully registered {len(payload)} command(s)!")


class EventRegistry:
    """Subscribes event handlers to a bot's event bus."""

    def __init__(self, bot: "GuildBot") -> None:
        self.bot = bot
        self.events: List[BaseEvent] = []

    def register(self, events: List[BaseEvent]) -> int:
        """Subscribe each handler under its event name.

        Handlers with ``once`` set are removed after their first call.

        Returns:
            The number of handlers subscribed.
        """
        for event in events:
            event.bind(self.bot)
            self.bot.add_listener(event.execute, event.name, once=event.once)
            self.events.append(event)

        logger.debug(f"Successfully registered {len(events)} event(s)!")
        return len(events)
