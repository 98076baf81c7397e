"""Meetings API namespaces."""

from typing import Optional

import httpx

from vonage_client.config import Config
from vonage_client.meetings.rooms import Rooms, RoomsListResponse


class Meetings:
    """Groups the Meetings API resources that share one HTTP client."""

    def __init__(self, config: Config, client: Optional[httpx.Client] = None):
        self.rooms = Rooms(config, client=client)


__all__ = ["Meetings", "Rooms", "RoomsListResponse"]
