"""Pytest configuration and fixtures.

Network access is stubbed with ``httpx.MockTransport``: tests register
canned responses per URL on the ``routes`` fixture and every request the
client makes is recorded in ``routes.requested``.  Unregistered URLs
answer 404.
"""

import json

import httpx
import pytest


class Routes:
    """Canned responses keyed by absolute URL."""

    def __init__(self):
        self._responses: dict[str, tuple[int, dict[str, str], bytes]] = {}
        self._errors: dict[str, Exception] = {}
        self.requested: list[str] = []

    def text(
        self,
        url: str,
        body: str,
        content_type: str | None = "text/plain",
        status: int = 200,
    ) -> None:
        headers = {"content-type": content_type} if content_type else {}
        self._responses[url] = (status, headers, body.encode())

    def json(self, url: str, data, status: int = 200) -> None:
        headers = {"content-type": "application/json"}
        self._responses[url] = (status, headers, json.dumps(data).encode())

    def status(self, url: str, code: int) -> None:
        self._responses[url] = (code, {}, b"")

    def fail(self, url: str, error: Exception) -> None:
        self._errors[url] = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        if url in self._errors:
            raise self._errors[url]
        status, headers, content = self._responses.get(url, (404, {}, b""))
        return httpx.Response(status, headers=headers, content=content)


class RecordingReporter:
    """Reporter that keeps (level, message) pairs."""

    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def debug(self, message: str) -> None:
        self.messages.append(("debug", message))

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))


@pytest.fixture
def routes():
    return Routes()


@pytest.fixture
def transport(routes):
    return httpx.MockTransport(routes.handler)


@pytest.fixture
async def client(transport):
    async with httpx.AsyncClient(transport=transport) as c:
        yield c


@pytest.fixture
def reporter():
    return RecordingReporter()
