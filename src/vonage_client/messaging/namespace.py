"""Messages API namespace: send messages and verify webhook tokens."""

import logging
from typing import Any, Optional

import jwt

from vonage_client.http.auth import BearerToken
from vonage_client.http.namespace import JSON, Namespace
from vonage_client.models.response import Response

logger = logging.getLogger(__name__)

MESSAGES_PATH = "/v1/messages"


class Messaging(Namespace):
    """Vonage Messages API (SMS, MMS, WhatsApp, Messenger, Viber)."""

    host = "api_host"
    authentication = BearerToken
    request_body = JSON

    def send(self, **params: Any) -> Response:
        """
        Send a message.
        Required: to, from_ (sent as "from"), plus a payload from Message.*:

            message = Message.sms("Hello world!")
            client.messaging.send(to="447700900000", from_="447700900001", **message)
        """
        if "from_" in params:
            params["from"] = params.pop("from_")
        return self.request(MESSAGES_PATH, params=params, method="POST")

    def verify_webhook_token(self, token: str, signature_secret: Optional[str] = None) -> bool:
        """
        Check the HS256 signature of a JWT from a Messages API webhook.
        Returns True if it verifies, False for any tampered, foreign or
        malformed token. Claims in the payload are not inspected.
        signature_secret defaults to the configured one.
        """
        secret = signature_secret or self.config.require("signature_secret")
        try:
            # JWS layer only: signature and algorithm, no JWT claim checks
            jwt.PyJWS().decode(token, secret, algorithms=["HS256"])
        except jwt.InvalidTokenError as e:
            logger.debug("Webhook token rejected: %s", e)
            return False
        return True
