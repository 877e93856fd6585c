"""Shared fixtures for FTC API tests."""

from __future__ import annotations

import httpx
import pytest

from ftc_api.api import ClientConfig, FTCClient, create_token
from ftc_api.config import get_settings
from ftc_api.seasons import Season

BASE_URL = "https://ftc-api.example.com"
TOKEN = create_token("user", "secret-key")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate tests from real credentials and .env files."""
    for name in (
        "FTC_USERNAME",
        "FTC_KEY",
        "FTC_TOKEN",
        "FTC_SEASON",
        "FTC_BASE_URL",
        "FTC_API_VERSION",
        "FTC_TIMEOUT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def config() -> ClientConfig:
    """Client configuration for the 2024 season."""
    return ClientConfig(token=TOKEN, season=Season.INTO_THE_DEEP, base_url=BASE_URL)


@pytest.fixture
def forbidden_transport() -> httpx.MockTransport:
    """Transport that fails the test if any request is sent."""

    def handler(request: httpx.Request) -> httpx.Response:
        pytest.fail(f"Unexpected network call: {request.method} {request.url}")

    return httpx.MockTransport(handler)


class RecordingTransport(httpx.MockTransport):
    """Mock transport that records requests and replies with a fixed response."""

    def __init__(self, status_code: int = 200, json: object | None = None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = {"ok": True} if json is None else json
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def make_client():
    """Factory for FTCClient instances wired to a mock transport."""

    def _make(transport: httpx.AsyncBaseTransport, **kwargs) -> FTCClient:
        kwargs.setdefault("base_url", BASE_URL)
        return FTCClient(TOKEN, Season.INTO_THE_DEEP, transport=transport, **kwargs)

    return _make
