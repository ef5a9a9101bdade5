"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, guildctl.toml only contains overrides.
An empty (or missing) guildctl.toml talks to the public Discord API and reads
``token.txt`` from the working directory.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_API_BASE = "https://discord.com/api/v10"
DEFAULT_TOKEN_FILE = "token.txt"


class ApiConfig(BaseModel):
    """[api] section."""

    model_config = {"frozen": True}

    base_url: str = DEFAULT_API_BASE
    # Seconds. None means requests wait indefinitely.
    timeout: float | None = Field(default=None, gt=0)


class CredentialsConfig(BaseModel):
    """[credentials] section."""

    model_config = {"frozen": True}

    file: str = DEFAULT_TOKEN_FILE


class SessionConfig(BaseModel):
    """[session] section."""

    model_config = {"frozen": True}

    # Print the listed guilds as a table before the confirmation prompts.
    show_table: bool = True
