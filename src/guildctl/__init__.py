"""guildctl — review and leave Discord guilds from the terminal."""

__version__ = "0.1.0"
