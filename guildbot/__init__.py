"""
Guild Bot - a Discord bot that loads slash commands and event handlers
from its commands/ and events/ packages.
"""
