"""Pytest fixtures for vonage-client tests."""

import json
import os
from typing import Any, Callable

import httpx
import jwt
import pytest

from vonage_client.client import Client
from vonage_client.config import Config

SIGNATURE_SECRET = "test-signature-secret-0123456789abcdef"


class RecordingTransport:
    """Mock transport that records requests and replies from a handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture(autouse=True)
def clean_vonage_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep VONAGE_* variables from the real environment out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("VONAGE_"):
            monkeypatch.delenv(key)


@pytest.fixture
def config() -> Config:
    """Config with every credential populated."""
    return Config(
        api_key="abc123",
        api_secret="s3cr3t",
        token="bearer-jwt",
        signature_secret=SIGNATURE_SECRET,
    )


@pytest.fixture
def make_client(config: Config):
    """Factory: Client whose HTTP traffic goes to a RecordingTransport."""
    created: list[Client] = []

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        cfg: Config | None = None,
    ) -> tuple[Client, RecordingTransport]:
        transport = RecordingTransport(handler)
        http_client = httpx.Client(transport=httpx.MockTransport(transport))
        client = Client(cfg or config, client=http_client)
        created.append(client)
        return client, transport

    yield _make
    for client in created:
        client._client.close()


@pytest.fixture
def sample_rooms_payload() -> dict[str, Any]:
    """Meetings API list-rooms page with two rooms."""
    return {
        "page_size": 2,
        "_embedded": [
            {"id": "r1", "display_name": "Standup", "type": "instant"},
            {"id": "r2", "display_name": "Retro", "type": "long_term"},
        ],
        "_links": {
            "first": {"href": "https://api-eu.vonage.com/v1/meetings/rooms?page_size=2"},
            "self": {"href": "https://api-eu.vonage.com/v1/meetings/rooms?page_size=2"},
        },
        "total_items": 2,
    }


@pytest.fixture
def signed_token() -> str:
    """Webhook JWT signed with the configured signature secret."""
    return jwt.encode(
        {"iat": 1700000000, "jti": "a1b2", "api_key": "abc123"},
        SIGNATURE_SECRET,
        algorithm="HS256",
    )


@pytest.fixture
def signature_secret() -> str:
    """The signature secret configured on the config fixture."""
    return SIGNATURE_SECRET
