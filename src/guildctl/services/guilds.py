"""GuildService — list the account's guilds and leave them one at a time.

Neither operation raises for remote failures. Listing degrades to an empty
list, so callers cannot tell "no guilds" from "fetch failed"; leaving
degrades to ``False``.
"""

from __future__ import annotations

import logging

from guildctl.domain.models import Guild
from guildctl.infrastructure.discord import is_no_content
from guildctl.services.base import BaseService

logger = logging.getLogger(__name__)

GUILDS_PATH = "/users/@me/guilds"


class GuildService(BaseService):
    """Guild membership operations for the authenticated account."""

    def list_guilds(self) -> list[Guild]:
        """Every guild in response order; empty on any failure.

        Elements missing ``id`` or ``name`` are kept with blank fields.
        """
        logger.info("Getting guilds...")
        result = self._client.request("list_guilds", "GET", GUILDS_PATH)
        if not result.ok:
            logger.error("Failed to get guilds: %s", self._failure_reason(result))
            return []

        payload = result.payload
        if not isinstance(payload, list):
            logger.debug("Guild listing was not a JSON array: %r", payload)
            return []
        guilds = [Guild.from_payload(item) for item in payload]
        logger.info("Successfully got guilds!")
        return guilds

    def leave_guild(self, guild_id: str) -> bool:
        """Leave *guild_id*. Only HTTP 204 counts as success.

        A blank id would address the membership collection itself, so it
        fails without a request.
        """
        if not guild_id:
            logger.error("Failed to leave guild: listing returned no id")
            return False
        logger.info("Leaving guild %s...", guild_id)
        result = self._client.request(
            "leave_guild",
            "DELETE",
            f"{GUILDS_PATH}/{guild_id}",
            accept=is_no_content,
        )
        if not result.ok:
            logger.error("Failed to leave guild %s: %s", guild_id, self._failure_reason(result))
            return False
        logger.info("Successfully left guild %s!", guild_id)
        return True
