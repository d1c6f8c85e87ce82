"""
Pytest fixtures for Authenticator bridge tests.
"""

import json
import sys
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

# Add project root to path for package imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from authenticator_mcp.backend import AuthenticatorClient  # noqa: E402
from authenticator_mcp.tools import Router  # noqa: E402

TEST_TOKEN = "test-access-token"
TEST_BASE_URL = "http://backend.test/mcp/v1"


class FakeBackend:
    """Records requests and answers them from a path -> (status, body) table."""

    def __init__(self):
        self.routes: dict[str, tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []

    def reply(self, path: str, status: int = 200, body: Any = None) -> None:
        self.routes[path] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/mcp/v1")
        status, body = self.routes.get(path, (404, "not found"))
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, content=json.dumps(body).encode())

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def backend() -> FakeBackend:
    """A fake Authenticator App backend."""
    return FakeBackend()


@pytest.fixture
def client(backend: FakeBackend) -> AuthenticatorClient:
    """Backend client wired to the fake backend."""
    return AuthenticatorClient(TEST_TOKEN, base_url=TEST_BASE_URL, transport=backend.transport)


@pytest.fixture
def router(client: AuthenticatorClient) -> Router:
    """Router over the fake backend."""
    return Router(client)


@pytest.fixture
def failing_transport() -> Callable[[], httpx.MockTransport]:
    """Transport whose every request fails to connect."""

    def build() -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        return httpx.MockTransport(handler)

    return build
