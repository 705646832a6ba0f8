from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from darksky.clients.transport import RawResponse, check_status
from darksky.core.errors import TransportError

API_KEY = "0123456789abcdef"
BASE_URL = "https://api.test.example/forecast"


def json_response(
    body: Any, *, status_code: int = 200, headers: dict[str, str] | None = None
) -> RawResponse:
    return RawResponse(
        status_code=status_code,
        content=json.dumps(body).encode(),
        url="https://fake.example.com",
        headers=headers or {},
    )


@dataclass
class FakeTransport:
    responses: list[RawResponse] = field(default_factory=list)
    requested_urls: list[str] = field(default_factory=list)
    closed: bool = False

    def get(self, url: str) -> RawResponse:
        self.requested_urls.append(url)
        if not self.responses:
            raise AssertionError(f"unexpected request to {url}")
        return check_status(self.responses.pop(0))

    def close(self) -> None:
        self.closed = True


@dataclass
class FakeAsyncTransport:
    responses: list[RawResponse] = field(default_factory=list)
    requested_urls: list[str] = field(default_factory=list)
    closed: bool = False

    async def get(self, url: str) -> RawResponse:
        self.requested_urls.append(url)
        if not self.responses:
            raise AssertionError(f"unexpected request to {url}")
        return check_status(self.responses.pop(0))

    async def aclose(self) -> None:
        self.closed = True


class RefusingTransport:
    def get(self, url: str) -> RawResponse:
        raise TransportError("Request to Dark Sky API failed: [Errno 111] Connection refused")

    def close(self) -> None:
        return None
