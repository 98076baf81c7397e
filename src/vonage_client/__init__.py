"""Python client for the Vonage Messages and Meetings APIs."""

from vonage_client.client import Client
from vonage_client.config import Config
from vonage_client.errors import (
    AuthenticationError,
    ConfigurationError,
    MessageValidationError,
    ResponseFormatError,
    VonageClientError,
)
from vonage_client.messaging import Message

__version__ = "0.1.0"

__all__ = [
    "AuthenticationError",
    "Client",
    "Config",
    "ConfigurationError",
    "Message",
    "MessageValidationError",
    "ResponseFormatError",
    "VonageClientError",
    "__version__",
]
