"""
Discord bot client and startup sequence for the Guild Bot.
"""

import asyncio
import signal
import sys
from functools import partial
from typing import Any, Callable, Coroutine, Dict, List, Optional, Tuple

import discord

from .config import COMMANDS_DIR, EVENTS_DIR, Environment, get_env, get_setting, init_config
from .handlers import is_command, is_event
from .registry import CommandRegistry, EventRegistry, publish_guild_commands
from .utils.logging import logger, set_log_level
from .utils.module_loader import load_modules
from .utils.network import wait_for_internet_connection

Listener = Callable[..., Coroutine[Any, Any, Any]]


class GuildBot(discord.Client):
    """Discord client that owns the command and event registries."""

    def __init__(self, env: Environment) -> None:
        intents = discord.Intents.default()
        intents.members = True  # Required for member join/leave events and member counts
        intents.message_content = True
        super().__init__(intents=intents)
        self.env = env
        self.command_registry = CommandRegistry(
            publisher=partial(publish_guild_commands, env.token, env.client_id, env.guild_id)
        )
        self.event_registry = EventRegistry(self)
        self._event_listeners: Dict[str, List[Tuple[Listener, bool]]] = {}
        self._launch_task: Optional[asyncio.Task] = None

    def add_listener(self, func: Listener, name: str, once: bool = False) -> None:
        """Subscribe a coroutine function to a gateway event.

        Listeners of the same event are called in the order they were added.
        A ``once`` listener is removed before its first call.
        """
        self._event_listeners.setdefault(name, []).append((func, once))

    def remove_listener(self, func: Listener, name: str) -> None:
        """Unsubscribe a listener; does nothing if it is not subscribed."""
        listeners = self._event_listeners.get(name, [])
        for entry in listeners:
            if entry[0] == func:
                listeners.remove(entry)
                break

    def get_listeners(self, name: str) -> List[Listener]:
        """Get the listeners subscribed to an event."""
        return [func for func, _ in self._event_listeners.get(name, [])]

    def dispatch(self, event_name: str, /, *args: Any, **kwargs: Any) -> None:
        super().dispatch(event_name, *args, **kwargs)
        listeners = self._event_listeners.get(event_name)
        if not listeners:
            return
        for entry in list(listeners):
            func, once = entry
            if once:
                listeners.remove(entry)
            self._schedule_event(func, f"on_{event_name}", *args, **kwargs)

    async def register_commands(self) -> None:
        """Load the command modules and register them locally and on Discord."""
        logger.debug("Registering commands...")
        # Imports and directory listing block, so they run off the event loop
        commands = await asyncio.to_thread(
            load_modules,
            COMMANDS_DIR, is_command, package=f"{__package__}.commands", kind="command"
        )
        await self.command_registry.register(commands)

    async def register_events(self) -> None:
        """Load the event modules and subscribe them to the client."""
        logger.debug("Registering events...")
        events = await asyncio.to_thread(
            load_modules,
            EVENTS_DIR, is_event, package=f"{__package__}.events", kind="event"
        )
        self.event_registry.register(events)

    async def initialize(self) -> None:
        """Run the startup sequence, exiting the process if any step fails."""
        try:
            logger.info("Initializing bot...")

            await wait_for_internet_connection()
            await self.register_commands()
            await self.register_events()
            await self.login(self.env.token)

            await self.refresh_members_count()
            logger.info(f"Bot ({self.user}) is up and running!")
        except Exception as e:
            logger.error(f"Error during initialization: {e}", exc_info=True)
            sys.exit(1)

    async def refresh_members_count(self) -> None:
        """Show the guild's member count in the bot's presence.

        Does nothing while the guild is not in the cache. Errors are logged only.
        """
        try:
            guild = self.get_guild(int(self.env.guild_id))
            if guild is None:
                return

            logger.debug(f"Refreshing members count for guild: {guild.name}")
            members = [member async for member in guild.fetch_members(limit=None)]
            activity = discord.CustomActivity(
                name=get_setting("presence_template").format(count=len(members))
            )
            await self.change_presence(status=discord.Status.online, activity=activity)
        except Exception as e:
            logger.error(f"Failed to refresh members count: {e}")

    async def launch(self) -> None:
        """Initialize, then stay connected to the gateway until closed."""
        self._launch_task = asyncio.current_task()
        try:
            await self.initialize()
            await self.connect()
        finally:
            await self.cleanup()

    async def cleanup(self) -> None:
        """Cleanup resources before shutdown."""
        logger.info("Cleaning up resources...")
        # Close the Discord connection gracefully
        if not self.is_closed():
            await self.close()
        logger.info("Cleanup complete")


# Bot instance management using factory pattern
_bot_instance: Optional[GuildBot] = None


def get_bot() -> GuildBot:
    """Get or create the bot instance (singleton pattern)."""
    global _bot_instance
    if _bot_instance is None:
        _bot_instance = GuildBot(get_env())
    return _bot_instance


def create_bot(env: Optional[Environment] = None) -> GuildBot:
    """Create a new bot instance (useful for testing)."""
    return GuildBot(env if env is not None else get_env())


def reset_bot() -> None:
    """Reset the global bot instance (useful for testing)."""
    global _bot_instance
    _bot_instance = None


def setup_signal_handlers(bot: GuildBot) -> None:
    """Set up signal handlers for graceful shutdown."""
    def signal_handler(sig: int, frame) -> None:
        logger.info(f"Received signal {sig}, initiating graceful shutdown...")
        task = bot._launch_task
        if task is None or task.done():
            sys.exit(0)
        # Cancelling the launch task runs cleanup() in its finally block
        task.get_loop().call_soon_threadsafe(task.cancel)

    # Register signal handlers (SIGTERM may not exist on Windows)
    signal.signal(signal.SIGINT, signal_handler)
    if hasattr(signal, 'SIGTERM'):
        signal.signal(signal.SIGTERM, signal_handler)


def run_bot() -> None:
    """Start the Discord bot."""
    env = get_env()
    set_log_level(env.log_level)
    init_config()

    bot = get_bot()
    setup_signal_handlers(bot)

    logger.info(f"Starting Guild Bot ({env.node_env})...")
    try:
        asyncio.run(bot.launch())
    except asyncio.CancelledError:
        logger.info("Bot stopped")
