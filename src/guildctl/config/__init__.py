"""Settings models, config file lookup, logging setup, and credential loading."""
