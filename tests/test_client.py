"""Tests for the Client facade."""

from unittest.mock import MagicMock

import httpx
import pytest

from vonage_client import Client, Config
from vonage_client.meetings.rooms import Rooms
from vonage_client.messaging import Messaging


class TestClient:
    """Tests for construction and namespace wiring."""

    def test_namespaces_share_http_client(self, config: Config) -> None:
        """messaging and meetings.rooms reuse one httpx.Client."""
        http_client = httpx.Client()
        client = Client(config, client=http_client)
        assert isinstance(client.messaging, Messaging)
        assert isinstance(client.meetings.rooms, Rooms)
        assert client.messaging._client is http_client
        assert client.meetings.rooms._client is http_client
        assert client.messaging is client.messaging
        http_client.close()

    def test_kwargs_build_config_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Keyword settings override VONAGE_* environment values."""
        monkeypatch.setenv("VONAGE_TOKEN", "env-token")
        monkeypatch.setenv("VONAGE_SIGNATURE_SECRET", "env-secret")
        with Client(token="kw-token") as client:
            assert client.config.token == "kw-token"
            assert client.config.signature_secret == "env-secret"

    def test_kwargs_update_explicit_config(self, config: Config) -> None:
        """Keyword settings are applied on top of an explicit config."""
        with Client(config, timeout=3) as client:
            assert client.config.timeout == 3.0
            assert client.config.token == config.token

    def test_close_only_owned_client(self, config: Config) -> None:
        """An injected httpx client is left open on close."""
        injected = MagicMock(spec=httpx.Client)
        Client(config, client=injected).close()
        injected.close.assert_not_called()

    def test_context_manager_closes_owned_client(self, config: Config) -> None:
        """The context manager closes a client it created."""
        with Client(config) as client:
            pass
        assert client._client.is_closed
