"""Authentication strategies that turn config into request headers."""

import base64

from vonage_client.config import Config
from vonage_client.errors import AuthenticationError


class Authentication:
    """Base strategy: contributes no headers."""

    def headers(self, config: Config) -> dict[str, str]:
        return {}


class BearerToken(Authentication):
    """
    Attach a pre-obtained JWT as a bearer credential.
    Token generation and refresh happen outside this library.
    """

    def headers(self, config: Config) -> dict[str, str]:
        if not config.token:
            raise AuthenticationError(
                "Bearer token authentication requires a token. "
                "Pass token=... or set VONAGE_TOKEN."
            )
        return {"Authorization": f"Bearer {config.token}"}


class BasicAuth(Authentication):
    """HTTP Basic authentication with the account API key and secret."""

    def headers(self, config: Config) -> dict[str, str]:
        if not config.api_key or not config.api_secret:
            raise AuthenticationError(
                "Basic authentication requires api_key and api_secret. "
                "Set VONAGE_API_KEY and VONAGE_API_SECRET."
            )
        pair = f"{config.api_key}:{config.api_secret}".encode()
        return {"Authorization": f"Basic {base64.b64encode(pair).decode()}"}


NoAuth = Authentication
