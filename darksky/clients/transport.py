from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

import httpx

from darksky.core.errors import TransportError

DEFAULT_USER_AGENT = "darksky-python/0.1"


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    content: bytes
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(Protocol):
    """Performs one GET. Raises TransportError on network failure or non-2xx."""

    def get(self, url: str) -> RawResponse: ...

    def close(self) -> None: ...


class AsyncTransport(Protocol):
    async def get(self, url: str) -> RawResponse: ...

    async def aclose(self) -> None: ...


def _default_headers(user_agent: str) -> dict[str, str]:
    return {
        "User-Agent": user_agent,
        "Accept": "application/json",
    }


def _to_raw(resp: httpx.Response) -> RawResponse:
    return RawResponse(
        status_code=resp.status_code,
        content=resp.content,
        url=str(resp.request.url),
        headers=dict(resp.headers),
    )


def check_status(raw: RawResponse, *, display_url: str | None = None) -> RawResponse:
    """Raise :class:`TransportError` for any non-2xx response.

    The provider answers errors with ``{"code": 400, "error": "..."}``; its
    message is used when present. The transports leave ``display_url`` unset since
    they never see the API key to redact; callers fill it in.
    """
    if raw.ok:
        return raw

    detail: str | None = None
    try:
        body = json.loads(raw.content)
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        detail = body["error"]

    message = f"Dark Sky API returned HTTP {raw.status_code}"
    if detail:
        message = f"{message}: {detail}"
    raise TransportError(message, status_code=raw.status_code, url=display_url)


class HttpxTransport:
    def __init__(
        self,
        *,
        timeout_seconds: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        client: httpx.Client | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout_seconds,
            headers=_default_headers(user_agent),
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def get(self, url: str) -> RawResponse:
        try:
            resp = self._client.get(url)
        except httpx.RequestError as e:
            raise TransportError(f"Request to Dark Sky API failed: {e}") from e
        return check_status(_to_raw(resp))


class AsyncHttpxTransport:
    def __init__(
        self,
        *,
        timeout_seconds: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout_seconds,
            headers=_default_headers(user_agent),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def get(self, url: str) -> RawResponse:
        try:
            resp = await self._client.get(url)
        except httpx.RequestError as e:
            raise TransportError(f"Request to Dark Sky API failed: {e}") from e
        return check_status(_to_raw(resp))
