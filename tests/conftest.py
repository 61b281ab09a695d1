"""Shared fixtures for taskroom tests."""

import json
from unittest.mock import MagicMock

import httpx
import pytest
import pytest_asyncio

from taskroom.api import ApiClient
from taskroom.session import Session, SessionGate

BASE_URL = "http://testserver"


class FakeBackend:
    """Answers requests from a route table and records what was sent."""

    def __init__(self):
        self.routes: dict[tuple[str, str], tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, status: int = 200, json=None) -> None:
        """Register the response for a method and path."""
        self.routes[(method, path)] = (status, json)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"message": "Not found"})
        status, body = self.routes[key]
        if body is None:
            return httpx.Response(status)
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    def body(self, index: int = -1):
        """Decoded JSON body of a recorded request."""
        return json.loads(self.requests[index].content)

    def paths(self) -> list[str]:
        return [f"{r.method} {r.url.path}" for r in self.requests]


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest_asyncio.fixture
async def client(backend: FakeBackend):
    """ApiClient wired to the fake backend."""
    api = ApiClient(BASE_URL, transport=httpx.MockTransport(backend.handler))
    yield api
    await api.aclose()


@pytest.fixture
def session() -> Session:
    """An active session without a token file."""
    return Session(token="test-token")


@pytest.fixture
def on_unauthorized() -> MagicMock:
    return MagicMock()


@pytest.fixture
def gate(session: Session, on_unauthorized: MagicMock) -> SessionGate:
    return SessionGate(session, on_unauthorized)
