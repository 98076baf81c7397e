"""Messages API: namespace and message builders."""

from vonage_client.messaging.message import Message
from vonage_client.messaging.namespace import Messaging

__all__ = ["Message", "Messaging"]
