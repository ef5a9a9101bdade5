"""HTTP client for the Discord REST API.

All requests go through :meth:`DiscordClient.request`, which attaches the
credential as the raw ``Authorization`` header, issues the call, and folds
the response into a :class:`~guildctl.services.result.ServiceResult`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import requests

from guildctl.config.models import DEFAULT_API_BASE
from guildctl.services.result import (
    TRANSPORT_ERROR,
    UNEXPECTED_STATUS,
    ServiceError,
    ServiceResult,
)

logger = logging.getLogger(__name__)

StatusPredicate = Callable[[int], bool]


def is_success(status: int) -> bool:
    """Any 2xx status."""
    return 200 <= status <= 299


def is_no_content(status: int) -> bool:
    """Exactly 204 No Content."""
    return status == 204


def _decode(rsp: requests.Response) -> Any:
    if not rsp.content:
        return None
    try:
        return rsp.json()
    except ValueError:
        return None


class DiscordClient:
    """Authenticated access to the Discord REST API.

    Args:
        credential: Token sent verbatim as the ``Authorization`` header.
        base_url: API root, without a trailing slash.
        timeout: Seconds per request, or None to wait indefinitely.
        session: Object with a ``requests.Session``-compatible ``request``
            method. A fresh session is created when omitted.
    """

    def __init__(
        self,
        credential: str,
        *,
        base_url: str = DEFAULT_API_BASE,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._credential = credential
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session if session is not None else requests.Session()

    def _headers(self) -> dict[str, str]:
        return {"Authorization": self._credential}

    def url_for(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def request(
        self,
        op: str,
        method: str,
        path: str,
        *,
        accept: StatusPredicate = is_success,
    ) -> ServiceResult:
        """Issue one request and report whether its status satisfies *accept*.

        Never raises for network or HTTP failures: a
        ``requests.RequestException`` becomes ``TRANSPORT_ERROR``, any
        status rejected by *accept* becomes ``UNEXPECTED_STATUS`` with the
        status code and raw body in ``error.detail``.
        """
        url = self.url_for(path)
        logger.debug("%s %s", method, url)
        try:
            rsp = self._session.request(
                method,
                url,
                headers=self._headers(),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=TRANSPORT_ERROR,
                    message=str(exc) or type(exc).__name__,
                    detail={"exception": type(exc).__name__},
                ),
            )

        logger.debug("%s %s -> %d", method, url, rsp.status_code)
        if not accept(rsp.status_code):
            return ServiceResult(
                ok=False,
                op=op,
                data={"status": rsp.status_code},
                error=ServiceError(
                    code=UNEXPECTED_STATUS,
                    message=f"HTTP {rsp.status_code}",
                    detail={"status": rsp.status_code, "body": rsp.text},
                ),
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"status": rsp.status_code, "payload": _decode(rsp)},
        )

    def close(self) -> None:
        self._session.close()
