"""Exception types raised by vonage-client.

HTTP status and transport failures are not wrapped: they surface as
httpx.HTTPStatusError / httpx.RequestError straight from the transport.
"""


class VonageClientError(Exception):
    """Base class for errors raised by this library."""


class ConfigurationError(VonageClientError):
    """A required configuration value is missing or invalid."""


class AuthenticationError(ConfigurationError):
    """The credential required by a namespace's auth strategy is not configured."""


class ResponseFormatError(VonageClientError):
    """A successful response body could not be decoded into the expected shape."""


class MessageValidationError(VonageClientError, ValueError):
    """A message builder was given an invalid type or payload."""
