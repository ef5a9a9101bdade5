"""BaseService — shared foundation for guildctl services.

Every service receives a :class:`DiscordClient` at construction time and
issues its requests through :meth:`DiscordClient.request`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from guildctl.infrastructure.discord import DiscordClient
    from guildctl.services.result import ServiceResult


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GuildService(BaseService):
            def list_guilds(self) -> list[Guild]:
                result = self._client.request("list_guilds", "GET", "/users/@me/guilds")
                ...
    """

    def __init__(self, client: DiscordClient) -> None:
        self._client = client

    @staticmethod
    def _failure_reason(result: ServiceResult) -> str:
        """Raw body for rejected statuses, the exception text for transport errors."""
        if result.error is None:
            return ""
        body = result.error.detail.get("body")
        if body is not None:
            return repr(body)
        return result.error.message
