"""Click plumbing shared by the guildctl entry point."""
