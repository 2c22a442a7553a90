"""HTTP transports used by the chat bot client."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Protocol

import httpx


class HttpTransport(Protocol):
    """Anything that can POST a body to a URL and return a result."""

    async def request(
        self,
        url: str,
        *,
        method: str,
        headers: dict[str, str],
        data: str,
    ) -> Any: ...


class HttpxTransport:
    """Default transport built on httpx.

    Non-2xx responses raise ``httpx.HTTPStatusError``.
    """

    def __init__(self, timeout_seconds: float = 10.0) -> None:
        self._timeout_seconds = timeout_seconds

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout_seconds)

    async def request(
        self,
        url: str,
        *,
        method: str,
        headers: dict[str, str],
        data: str,
    ) -> httpx.Response:
        async with self._make_client() as client:
            resp = await client.request(method, url, headers=headers, content=data.encode("utf-8"))
        resp.raise_for_status()
        return resp


@dataclass
class SentRequest:
    """A request recorded by InMemoryTransport."""

    url: str
    method: str
    headers: dict[str, str]
    data: str

    @property
    def body(self) -> dict[str, Any]:
        """The decoded JSON body."""
        decoded: dict[str, Any] = json.loads(self.data)
        return decoded


class InMemoryTransport:
    """In-memory transport for testing."""

    def __init__(self, response: Any = None) -> None:
        self._response = response
        self._sent: list[SentRequest] = []

    @property
    def sent(self) -> list[SentRequest]:
        """Get a copy of recorded requests."""
        return list(self._sent)

    async def request(
        self,
        url: str,
        *,
        method: str,
        headers: dict[str, str],
        data: str,
    ) -> Any:
        self._sent.append(SentRequest(url=url, method=method, headers=dict(headers), data=data))
        return self._response
