import json
from typing import Any, Dict, List, Optional

import aiohttp
import pytest

from aiosoundcloud import SoundCloudClient


class FakeResponse:
    def __init__(self, status: int, body: bytes) -> None:
        self.status = status
        self._body = body

    async def read(self) -> bytes:
        return self._body


class _RequestContext:
    def __init__(self, session: "FakeSession") -> None:
        self.session = session

    async def __aenter__(self) -> FakeResponse:
        if self.session.error is not None:
            raise self.session.error
        return FakeResponse(self.session.status, self.session.body)

    async def __aexit__(self, *exc: Any) -> None:
        pass


class FakeSession:
    """Stands in for aiohttp.ClientSession and records every request."""

    def __init__(self, status: int = 200, body: Any = None, error: Optional[BaseException] = None) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.error = error
        self.closed = False
        self.respond(status, body if body is not None else {})

    def respond(self, status: int, body: Any) -> None:
        self.status = status
        if isinstance(body, bytes):
            self.body = body
        elif isinstance(body, str):
            self.body = body.encode("utf-8")
        else:
            self.body = json.dumps(body).encode("utf-8")

    def request(self, method: str, url: str, data: Optional[bytes] = None, headers: Optional[Dict[str, str]] = None):
        self.calls.append({"method": method, "url": url, "data": data, "headers": headers or {}})
        return _RequestContext(self)

    async def close(self) -> None:
        self.closed = True


class Recorder:
    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def __call__(self, *args: Any) -> None:
        self.calls.append(args)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> SoundCloudClient:
    return SoundCloudClient("my-id", "my-secret", "https://example.com/callback", session=session)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def connection_error() -> aiohttp.ClientError:
    return aiohttp.ClientConnectionError("connection refused")
