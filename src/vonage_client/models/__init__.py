"""Response entity and wrapper models."""

from vonage_client.models.entity import Entity
from vonage_client.models.response import ListResponse, Response

__all__ = ["Entity", "ListResponse", "Response"]
