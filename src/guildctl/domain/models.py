"""Identity and Guild records built from Discord API payloads.

Payload extraction is best-effort: absent or oddly-typed fields become empty
strings and never raise.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


def _text(payload: dict[str, Any], key: str) -> str:
    """String field or ``""`` when absent or not a string."""
    value = payload.get(key)
    return value if isinstance(value, str) else ""


def _display(payload: dict[str, Any], key: str) -> str:
    """Like :func:`_text` but renders numbers, since ids may arrive unquoted."""
    value = payload.get(key)
    if value is None or isinstance(value, (bool, dict, list)):
        return ""
    return str(value)


class Identity(BaseModel):
    """The account a token belongs to."""

    model_config = {"frozen": True}

    username: str = ""
    id: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> Identity:
        if not isinstance(payload, dict):
            return cls()
        return cls(username=_display(payload, "username"), id=_display(payload, "id"))


class Guild(BaseModel):
    """One guild membership as returned by ``GET /users/@me/guilds``."""

    model_config = {"frozen": True}

    id: str = ""
    name: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> Guild:
        if not isinstance(payload, dict):
            return cls()
        return cls(id=_text(payload, "id"), name=_text(payload, "name"))
