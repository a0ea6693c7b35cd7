# ABOUTME: pytest configuration and shared fixtures for the auth client tests
# ABOUTME: Configures timeouts by test type and provides token, store, endpoint and transport doubles

import asyncio
import time
from typing import Any, Callable, Dict, List, Tuple

import httpx
import jwt
import pytest

from storefront_auth.components.auth import AuthenticatedRequestClient
from storefront_auth.implementations.memory import InMemoryTokenStore
from storefront_auth.interfaces.auth import AbstractRefreshEndpoint
from storefront_auth.interfaces.http import AbstractHttpTransport
from storefront_auth.models.auth import RefreshResult
from storefront_auth.models.http import RequestOptions

TEST_SIGNING_KEY = "storefront-test-signing-key-0123456789abcdef"
ACCESS_KEY = "authToken"
REFRESH_KEY = "refreshToken"


def pytest_configure(config):
    """Configure pytest for auth client tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "contract: Contract tests with 60-second timeout")
    config.addinivalue_line("markers", "config: Configuration tests")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        # Respect an explicit timeout marker
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif any(item.get_closest_marker(mark) for mark in ["integration", "contract"]):
            item.add_marker(pytest.mark.timeout(60))


def make_jwt(expires_in: float, now: float | None = None, **claims: Any) -> str:
    """Encode a JWT whose exp lies `expires_in` seconds after `now`."""
    issued = time.time() if now is None else now
    payload = {"sub": "user-1", "iat": int(issued), "exp": int(issued + expires_in), **claims}
    return jwt.encode(payload, TEST_SIGNING_KEY, algorithm="HS256")


class ScriptedRefreshEndpoint(AbstractRefreshEndpoint):
    """Refresh endpoint double returning scripted outcomes."""

    def __init__(self):
        self.calls: List[str] = []
        self.results: List[RefreshResult | Exception] = []
        self.default: RefreshResult | Exception = RefreshResult.failed("no scripted result")
        self.gate: asyncio.Event | None = None

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def refresh(self, refresh_token: str) -> RefreshResult:
        self.calls.append(refresh_token)
        if self.gate is not None:
            await self.gate.wait()
        outcome = self.results.pop(0) if self.results else self.default
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class RecordingTransport(AbstractHttpTransport):
    """HTTP transport double recording requests and replaying scripted responses."""

    def __init__(self):
        self.requests: List[Tuple[str, RequestOptions]] = []
        self.responses: List[httpx.Response | Exception] = []
        self.responder: Callable[[str, RequestOptions], httpx.Response] | None = None

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def authorization_headers(self) -> List[str | None]:
        return [options.headers.get("Authorization") for _, options in self.requests]

    async def request(self, url: str, options: RequestOptions) -> httpx.Response:
        self.requests.append((url, options))
        if self.responses:
            outcome = self.responses.pop(0)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome
        if self.responder is not None:
            return self.responder(url, options)
        return httpx.Response(200, json={"ok": True})


@pytest.fixture
def token_factory() -> Callable[..., str]:
    """Factory producing JWTs with a given lifetime in seconds."""
    return make_jwt


@pytest.fixture
def token_store() -> InMemoryTokenStore:
    return InMemoryTokenStore()


@pytest.fixture
def refresh_endpoint() -> ScriptedRefreshEndpoint:
    return ScriptedRefreshEndpoint()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(token_store, refresh_endpoint, transport) -> AuthenticatedRequestClient:
    return AuthenticatedRequestClient(
        token_store=token_store,
        refresh_endpoint=refresh_endpoint,
        transport=transport,
        access_token_key=ACCESS_KEY,
        refresh_token_key=REFRESH_KEY,
    )


@pytest.fixture
def seed_tokens(token_store) -> Callable[..., Dict[str, str]]:
    """Populate the token store; pass None to leave a key absent."""

    def _seed(access: str | None = None, refresh: str | None = None) -> Dict[str, str]:
        if access is not None:
            token_store._data[ACCESS_KEY] = access
        if refresh is not None:
            token_store._data[REFRESH_KEY] = refresh
        return token_store.snapshot()

    return _seed
