"""Shared pytest fixtures and test helpers for guildctl tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator, Iterable
from dataclasses import dataclass, field
from typing import Any

import pytest
import requests
from click.testing import CliRunner

from guildctl.infrastructure.discord import DiscordClient

_UNSET = object()


def make_response(status: int, payload: Any = _UNSET, *, text: str | None = None) -> requests.Response:
    """Build a real ``requests.Response`` with a JSON or raw text body."""
    rsp = requests.Response()
    rsp.status_code = status
    rsp.encoding = "utf-8"
    if text is not None:
        rsp._content = text.encode("utf-8")
    elif payload is _UNSET:
        rsp._content = b""
    else:
        rsp._content = json.dumps(payload).encode("utf-8")
    return rsp


@dataclass
class RecordedCall:
    method: str
    url: str
    headers: dict[str, str]
    timeout: float | None


@dataclass
class FakeSession:
    """Stand-in for ``requests.Session`` serving queued responses in order.

    Queue items are ``requests.Response`` objects or exceptions to raise.
    """

    queue: list[Any] = field(default_factory=list)
    calls: list[RecordedCall] = field(default_factory=list)
    closed: bool = False

    def add(self, *items: Any) -> FakeSession:
        self.queue.extend(items)
        return self

    def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        **_: Any,
    ) -> requests.Response:
        self.calls.append(RecordedCall(method, url, dict(headers or {}), timeout))
        if not self.queue:
            raise AssertionError(f"Unexpected request: {method} {url}")
        item = self.queue.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def close(self) -> None:
        self.closed = True

    def methods(self) -> list[tuple[str, str]]:
        return [(c.method, c.url) for c in self.calls]


@dataclass
class ScriptedIO:
    """LineIO fake: feeds scripted lines and records everything written."""

    lines: list[str] = field(default_factory=list)
    transcript: list[str] = field(default_factory=list)

    def write(self, text: str) -> None:
        self.transcript.append(text)

    def read_line(self) -> str:
        if not self.lines:
            raise EOFError
        return self.lines.pop(0) + "\n"

    def count(self, text: str) -> int:
        return sum(1 for line in self.transcript if line == text)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root and package logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("guildctl")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(fake_session: FakeSession) -> DiscordClient:
    """DiscordClient wired to the fake session with token ``abc``."""
    return DiscordClient("abc", session=fake_session)


@pytest.fixture
def http(fake_session: FakeSession, monkeypatch: pytest.MonkeyPatch) -> FakeSession:
    """Route every ``requests.Session()`` the CLI creates to the fake session."""
    monkeypatch.setattr(requests, "Session", lambda: fake_session)
    return fake_session


@pytest.fixture
def isolated_cwd(tmp_path: Any, monkeypatch: pytest.MonkeyPatch) -> Any:
    """Empty working directory with no config or token file in reach."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GUILDCTL_CONFIG", raising=False)
    return tmp_path


def guild_payload(pairs: Iterable[tuple[str, str]]) -> list[dict[str, str]]:
    return [{"id": gid, "name": name} for gid, name in pairs]
