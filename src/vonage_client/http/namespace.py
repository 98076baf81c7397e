"""Base class for API namespaces: builds, sends and decodes one request."""

import logging
import platform
import time
from typing import Any, Optional, Type

import httpx

from vonage_client.config import Config
from vonage_client.errors import ResponseFormatError
from vonage_client.http.auth import Authentication, NoAuth
from vonage_client.logging import redact_headers
from vonage_client.models.entity import Entity
from vonage_client.models.response import Response

logger = logging.getLogger(__name__)

# Request body encodings
JSON = "json"
FORM = "form"

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


def user_agent(config: Config) -> str:
    from vonage_client import __version__

    ua = f"vonage-client/{__version__} python/{platform.python_version()}"
    if config.app_name:
        ua += f" {config.app_name}/{config.app_version or 'unknown'}"
    return ua


class Namespace:
    """
    One area of the API (messaging, meetings rooms, ...).
    Subclasses set host, authentication and request_body, then call
    request() with a path, params and method.
    """

    host: str = "api_host"
    authentication: Type[Authentication] = NoAuth
    request_body: str = JSON

    def __init__(self, config: Config, client: Optional[httpx.Client] = None):
        self.config = config
        self._client = client or httpx.Client(timeout=config.timeout)

    @property
    def base_url(self) -> str:
        return f"https://{getattr(self.config, self.host)}"

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": user_agent(self.config),
            "Accept": "application/json",
        }
        headers.update(self.authentication().headers(self.config))
        return headers

    def _build_request(self, path: str, params: Optional[dict], method: str) -> httpx.Request:
        method = method.upper()
        url = self.base_url + path
        headers = self._headers()
        params = _drop_none(params or {})

        if method not in BODY_METHODS:
            return self._client.build_request(method, url, params=params or None, headers=headers)
        if self.request_body == FORM:
            return self._client.build_request(method, url, data=params, headers=headers)
        return self._client.build_request(method, url, json=params, headers=headers)

    def request(
        self,
        path: str,
        params: Optional[dict] = None,
        method: str = "GET",
        response_class: Type[Response] = Response,
    ) -> Response:
        """
        Send one request and decode its JSON body into response_class.
        HTTP error statuses raise httpx.HTTPStatusError; transport errors
        propagate unchanged.
        """
        request = self._build_request(path, params, method)
        logger.debug(
            "%s %s headers=%s", request.method, request.url, redact_headers(request.headers)
        )
        started = time.perf_counter()
        try:
            resp = self._client.send(request)
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", request.method, request.url, e)
            raise
        logger.debug(
            "%s %s -> %s (%.0f ms)",
            request.method,
            request.url,
            resp.status_code,
            (time.perf_counter() - started) * 1000,
        )
        if resp.is_error:
            logger.warning(
                "%s %s returned HTTP %s", request.method, request.url, resp.status_code
            )
        resp.raise_for_status()
        return response_class(self._decode(resp), resp)

    def _decode(self, resp: httpx.Response) -> Optional[Entity]:
        if resp.status_code == 204 or not resp.content:
            return None
        try:
            payload: Any = resp.json()
        except ValueError as e:
            content_type = resp.headers.get("content-type", "")
            raise ResponseFormatError(
                f"Expected JSON from {resp.request.url}, got {content_type or 'unknown content'}"
            ) from e
        if not isinstance(payload, dict):
            raise ResponseFormatError(
                f"Expected a JSON object from {resp.request.url}, got {type(payload).__name__}"
            )
        return Entity(payload)

    def close(self) -> None:
        self._client.close()


def _drop_none(params: dict) -> dict:
    return {k: v for k, v in params.items() if v is not None}
