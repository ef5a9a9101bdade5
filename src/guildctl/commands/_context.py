"""AppContext — settings, logging, and lazily-built services for one run.

Created once by the root command.  The HTTP client is only built after a
credential has been loaded, so ``--help`` and ``--version`` never touch
the network stack.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from guildctl.config.credentials import load_credential

if TYPE_CHECKING:
    from guildctl.config.settings import GuildSettings
    from guildctl.domain.models import Identity
    from guildctl.infrastructure.discord import DiscordClient
    from guildctl.session.loop import LineIO

logger = logging.getLogger("guildctl")


class AppContext:
    """Shared state for the entry point.

    Fatal startup conditions leave through ``SystemExit(1)``.
    """

    def __init__(self, settings: GuildSettings) -> None:
        self.settings = settings
        self._client: DiscordClient | None = None

        from guildctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def client(self) -> DiscordClient:
        if self._client is None:
            raise RuntimeError("No credential loaded")
        return self._client

    def authenticate(self, token: str | None) -> Identity:
        """Load and validate the credential, exiting with status 1 on failure."""
        credential = load_credential(token, self.settings.credential_file)
        if not credential:
            logger.error(
                "No token provided! Please provide a token in %s or as an argument.",
                self.settings.credential_file,
            )
            raise SystemExit(1)

        from guildctl.infrastructure.discord import DiscordClient
        from guildctl.services.token import TokenService

        self._client = DiscordClient(
            credential,
            base_url=self.settings.api.base_url,
            timeout=self.settings.api.timeout,
        )
        valid, identity = TokenService(self._client).validate()
        if not valid or identity is None:
            logger.error("Invalid token provided! Please provide a valid token.")
            raise SystemExit(1)
        return identity

    def run_session(self, io: LineIO) -> None:
        from guildctl.services.guilds import GuildService
        from guildctl.session.loop import SessionLoop

        logger.info("Successfully initialized! Dropping to main prompt.")
        SessionLoop(
            GuildService(self.client),
            io,
            show_table=self.settings.session.show_table,
        ).run()

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
