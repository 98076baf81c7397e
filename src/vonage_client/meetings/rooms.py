"""Meetings API rooms: list, fetch, create and update meeting rooms."""

from typing import Any

from vonage_client.http.auth import BearerToken
from vonage_client.http.namespace import JSON, Namespace
from vonage_client.models.response import ListResponse, Response

ROOMS_PATH = "/v1/meetings/rooms"


class RoomsListResponse(ListResponse):
    """One page of rooms; iterate it to get each room record."""

    items_key = "rooms"


class Rooms(Namespace):
    """Meeting rooms on the Vonage Meetings API."""

    host = "vonage_host"
    authentication = BearerToken
    request_body = JSON

    def list(self, **params: Any) -> RoomsListResponse:
        """
        List rooms. Optional query params: start_id, end_id, page_size.
        """
        return self.request(ROOMS_PATH, params=params, response_class=RoomsListResponse)

    def info(self, room_id: str) -> Response:
        """Get details of one room."""
        return self.request(f"{ROOMS_PATH}/{room_id}")

    def create(self, display_name: str, **params: Any) -> Response:
        """
        Create a room. display_name is required; other fields (type,
        expires_at, recording_options, ...) are passed through.
        """
        body = {"display_name": display_name, **params}
        return self.request(ROOMS_PATH, params=body, method="POST")

    def update(self, room_id: str, **params: Any) -> Response:
        """Update an existing room; params are sent as update_details."""
        return self.request(
            f"{ROOMS_PATH}/{room_id}",
            params={"update_details": params},
            method="PATCH",
        )
