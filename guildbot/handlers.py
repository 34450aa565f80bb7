"""
Base classes for slash commands and event handlers.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import discord

if TYPE_CHECKING:
    from .bot import GuildBot


# Gateway events an event handler may subscribe to
EVENT_NAMES = frozenset({
    "ready",
    "interaction",
    "member_join",
    "member_remove",
})


@dataclass
class CommandOption:
    """An option (argument) of a slash command."""
    name: str
    description: str
    type: discord.AppCommandOptionType = discord.AppCommandOptionType.string
    required: bool = False
    choices: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a Discord application command option payload."""
        payload: Dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "type": self.type.value,
            "required": self.required,
        }
        if self.choices:
            payload["choices"] = [{"name": c, "value": c} for c in self.choices]
        return payload


class BaseCommand:
    """Base class for all slash commands.

    Subclasses call ``super().__init__`` with their metadata and implement
    ``execute``.
    """

    def __init__(
        self,
        name: str,
        description: str,
        options: Optional[List[CommandOption]] = None,
        category: Optional[str] = None,
        long_description: Optional[str] = None,
        cooldown: Optional[int] = None,
        owner_only: bool = False,
        disabled: bool = False
    ) -> None:
        self.name = name
        self.description = description
        self.options = list(options or [])
        self.category = category
        self.long_description = long_description
        self.cooldown = cooldown
        self.owner_only = owner_only
        self.disabled = disabled

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a Discord application command payload."""
        return {
            "name": self.name,
            "description": self.description,
            "type": discord.AppCommandType.chat_input.value,
            "options": [option.to_dict() for option in self.options],
        }

    async def execute(self, interaction: discord.Interaction) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"


class BaseEvent:
    """Base class for all gateway event handlers."""

    def __init__(self, name: str, once: bool = False) -> None:
        if name not in EVENT_NAMES:
            raise ValueError(f"Unknown event name: {name}")
        self.name = name
        self.once = once
        self.bot: Optional["GuildBot"] = None

    def bind(self, bot: "GuildBot") -> None:
        """Attach the bot this handler is registered on."""
        self.bot = bot

    async def execute(self, *args: Any) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} event={self.name!r} once={self.once}>"


def is_command(obj: Any) -> bool:
    """Check that an object has command metadata and an execute method."""
    return (
        isinstance(getattr(obj, "name", None), str)
        and bool(obj.name)
        and callable(getattr(obj, "to_dict", None))
        and callable(getattr(obj, "execute", None))
    )


def is_event(obj: Any) -> bool:
    """Check that an object is an event handler."""
    return isinstance(obj, BaseEvent)


def is_chat_input_command(interaction: discord.Interaction) -> bool:
    """Check whether an interaction is a slash (chat input) command."""
    if interaction.type != discord.InteractionType.application_command:
        return False
    data = interaction.data or {}
    return data.get("type", discord.AppCommandType.chat_input.value) == discord.AppCommandType.chat_input.value


def get_option(interaction: discord.Interaction, name: str, default: Any = None) -> Any:
    """Get the value of a top-level option passed to a slash command."""
    data = interaction.data or {}
    for option in data.get("options", []):
        if option.get("name") == name:
            return option.get("value", default)
    return default
