"""
Configuration settings for the Guild Bot.
"""

import sys
from pathlib import Path
from typing import Literal, Mapping, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.logging import logger

# Load environment variables (safe - just reads .env file)
load_dotenv()

# Track initialization state for config.yaml loading
_initialized = False

# Project Paths
BASE_DIR = Path(__file__).parent.parent
PACKAGE_DIR = Path(__file__).parent
COMMANDS_DIR = PACKAGE_DIR / "commands"
EVENTS_DIR = PACKAGE_DIR / "events"
CONFIG_YAML_PATH = BASE_DIR / "config.yaml"

# Connectivity gate
CONNECTIVITY_RETRY_SECONDS = 30
CONNECTIVITY_CHECK_HOST = "discord.com"

# Discord Message Configuration
MAX_MESSAGE_LENGTH = 2000

DEFAULT_SETTINGS = {
    "welcome_channel": "welcome",
    "farewell_channel": "farewell",
    "presence_template": "There are {count} members here!",
}

# Settings loaded from config.yaml, on top of DEFAULT_SETTINGS
SETTINGS: dict = dict(DEFAULT_SETTINGS)


class Environment(BaseSettings):
    """Validated process environment."""

    model_config = SettingsConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    node_env: Literal["development", "production", "test"] = Field(
        default="development", alias="NODE_ENV"
    )
    log_level: Literal["trace", "debug", "info", "warn", "error", "fatal"] = Field(
        default="info", alias="LOG_LEVEL"
    )
    token: str = Field(alias="DISCORD_TOKEN")
    client_id: str = Field(alias="DISCORD_CLIENT_ID")
    guild_id: str = Field(alias="DISCORD_GUILD_ID")


def validate_env(environ: Optional[Mapping[str, str]] = None) -> Environment:
    """Validate environment variables.

    Args:
        environ: Variables to validate. Reads the process environment when None.

    Raises:
        ValidationError: If a required variable is missing or an enumerated
            variable holds an unknown value.
    """
    if environ is None:
        return Environment()
    # model_validate checks only the given mapping, not os.environ
    return Environment.model_validate(dict(environ))


def format_validation_error(error: ValidationError) -> str:
    """Render validation errors as JSON without the offending values."""
    return error.json(indent=2, include_url=False, include_input=False)


def load_env(environ: Optional[Mapping[str, str]] = None) -> Environment:
    """Validate the environment, exiting the process if it is invalid."""
    try:
        return validate_env(environ)
    except ValidationError as e:
        logger.error(f"Invalid environment variables:\n{format_validation_error(e)}")
        sys.exit(1)
    except Exception:
        logger.error("Unknown error during environment validation")
        raise


_env: Optional[Environment] = None


def get_env() -> Environment:
    """Get the validated environment, loading it on first use."""
    global _env
    if _env is None:
        _env = load_env()
    return _env


def init_config() -> None:
    """Initialize configuration by loading config.yaml.

    This function should be called once at application startup.
    It's safe to call multiple times.
    """
    global _initialized

    if _initialized:
        return

    if CONFIG_YAML_PATH.exists():
        try:
            with open(CONFIG_YAML_PATH, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise ValueError("config.yaml must contain a mapping")
            SETTINGS.update(
                {key: value for key, value in loaded.items() if key in DEFAULT_SETTINGS}
            )
        except (OSError, yaml.YAMLError, ValueError) as e:
            logger.warning(f"Ignoring config.yaml, using defaults: {e}")

    _initialized = True


def get_setting(name: str) -> str:
    """Get a setting value by name, falling back to its default."""
    return SETTINGS.get(name, DEFAULT_SETTINGS[name])


def is_initialized() -> bool:
    """Check if configuration has been initialized."""
    return _initialized
