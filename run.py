"""
Guild Bot
A Discord bot that loads slash commands and event handlers from its
commands/ and events/ packages.

Entry point for the application.
"""

from guildbot.bot import run_bot

if __name__ == "__main__":
    # Validates the environment (exits on invalid config), then connects
    run_bot()
