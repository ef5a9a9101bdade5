"""ServiceResult and ServiceError — outcome of one Discord API call.

INVARIANT: The request helper never raises for remote failures.
Transport problems and unexpected statuses come back as ``ok=False``
with a structured :class:`ServiceError`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

TRANSPORT_ERROR = "TRANSPORT_ERROR"
UNEXPECTED_STATUS = "UNEXPECTED_STATUS"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type of :meth:`DiscordClient.request`.

    Attributes:
        ok: Whether the status matched the caller's success predicate.
        op: Name of the operation (e.g. ``"list_guilds"``).
        data: ``status`` and the decoded JSON ``payload`` (None when the
            body is empty or not JSON).
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None

    @property
    def payload(self) -> Any:
        return self.data.get("payload")
