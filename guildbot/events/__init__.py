"""
Gateway event handlers for the Guild Bot.

Every module in this package is loaded at startup. A module exposes its
handler class as ``HANDLER``; the class takes no constructor arguments and
derives from ``guildbot.handlers.BaseEvent``.
"""
