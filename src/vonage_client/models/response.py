"""Response wrappers returned by namespace requests."""

from collections.abc import Sequence
from typing import Any, Callable, Iterator, Optional

import httpx

from vonage_client.errors import ResponseFormatError
from vonage_client.models.entity import Entity

EMBEDDED_KEY = "_embedded"


class Response:
    """Decoded response entity plus the HTTP response it came from."""

    def __init__(self, entity: Optional[Entity], http_response: Optional[httpx.Response] = None):
        self.entity = entity
        self.http_response = http_response

    @property
    def status_code(self) -> Optional[int]:
        return self.http_response.status_code if self.http_response is not None else None

    def __getattr__(self, name: str) -> Any:
        # Delegate payload fields (response.message_uuid) to the entity.
        entity = self.__dict__.get("entity")
        if entity is None:
            raise AttributeError(name)
        return getattr(entity, name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status_code}, entity={self.entity!r})"


class ListResponse(Response):
    """
    Page-shaped response whose payload embeds an ordered sequence of items.

    The sequence is located under ``_embedded``: either the list itself, or
    the list stored at ``items_key`` inside it. A missing or null sequence is
    rejected here, at decode time, so iteration never fails.
    """

    items_key: Optional[str] = None

    def __init__(self, entity: Optional[Entity], http_response: Optional[httpx.Response] = None):
        super().__init__(entity, http_response)
        self._items = self._locate_items(entity)

    def _locate_items(self, entity: Optional[Entity]) -> Sequence[Any]:
        if entity is None:
            raise ResponseFormatError("List response has no body")
        embedded = entity.raw(EMBEDDED_KEY)
        if embedded is None:
            raise ResponseFormatError(f"List response is missing '{EMBEDDED_KEY}'")
        if isinstance(embedded, list):
            return embedded
        if isinstance(embedded, dict):
            if self.items_key is not None:
                items = embedded.get(self.items_key)
            else:
                lists = [v for v in embedded.values() if isinstance(v, list)]
                items = lists[0] if len(lists) == 1 else None
            if isinstance(items, list):
                return items
            key = f"{EMBEDDED_KEY}.{self.items_key}" if self.items_key else EMBEDDED_KEY
            raise ResponseFormatError(f"List response has no item sequence at '{key}'")
        raise ResponseFormatError(
            f"'{EMBEDDED_KEY}' must be a list or object, got {type(embedded).__name__}"
        )

    def iterate(self, callback: Optional[Callable[[Any], Any]] = None) -> Optional[Iterator[Any]]:
        """
        Traverse the embedded items in order.
        Without a callback, return a new lazy generator (single-pass; call
        again for another traversal). With a callback, call it once per item
        and return None.
        """
        if callback is None:
            return self._generate()
        for item in self._items:
            callback(item)
        return None

    def _generate(self) -> Iterator[Any]:
        yield from self._items

    def __iter__(self) -> Iterator[Any]:
        return self._generate()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        # A decoded page is truthy even when it holds no items
        return True

    @property
    def page_size(self) -> Optional[int]:
        return self.entity.raw("page_size") if self.entity is not None else None

    @property
    def links(self) -> Optional[Entity]:
        if self.entity is None or self.entity.raw("_links") is None:
            return None
        return self.entity["_links"]
