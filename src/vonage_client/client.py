"""Top-level client: one config, one HTTP connection pool, lazy namespaces."""

from functools import cached_property
from typing import Any, Optional

import httpx

from vonage_client.config import Config
from vonage_client.meetings import Meetings
from vonage_client.messaging import Messaging


class Client:
    """
    Entry point for the Vonage APIs.

        client = Client(token="...", signature_secret="...")
        client.messaging.send(to=..., from_=..., **Message.sms("Hi"))
        for room in client.meetings.rooms.list():
            ...

    Pass config=Config(...) or keyword settings; with neither, settings are
    read from VONAGE_* environment variables.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        *,
        client: Optional[httpx.Client] = None,
        **config_kwargs: Any,
    ):
        if config is None:
            config = Config(**{k: v for k, v in config_kwargs.items() if v is not None})
        elif config_kwargs:
            config = Config(**{**config.model_dump(), **config_kwargs})
        self.config = config
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=config.timeout)

    @cached_property
    def messaging(self) -> Messaging:
        return Messaging(self.config, client=self._client)

    @cached_property
    def meetings(self) -> Meetings:
        return Meetings(self.config, client=self._client)

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
