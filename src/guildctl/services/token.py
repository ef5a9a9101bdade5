"""TokenService — check that a credential is accepted before anything else."""

from __future__ import annotations

import logging

from guildctl.domain.models import Identity
from guildctl.services.base import BaseService
from guildctl.services.result import UNEXPECTED_STATUS

logger = logging.getLogger(__name__)

IDENTITY_PATH = "/users/@me"


class TokenService(BaseService):
    """Validate the client's credential against ``GET /users/@me``."""

    def validate(self) -> tuple[bool, Identity | None]:
        """Return ``(True, identity)`` on any 2xx response, else ``(False, None)``.

        Missing ``username``/``id`` fields come back as empty strings.
        No retry.
        """
        logger.info("Checking token...")
        result = self._client.request("validate_token", "GET", IDENTITY_PATH)
        if not result.ok:
            if result.error is not None and result.error.code == UNEXPECTED_STATUS:
                logger.error("Token is invalid: %s", self._failure_reason(result))
            else:
                logger.error("Failed to check token: %s", self._failure_reason(result))
            return False, None

        identity = Identity.from_payload(result.payload)
        logger.info("Token is valid! Welcome back %s (%s)", identity.username, identity.id)
        return True, identity
