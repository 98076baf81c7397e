"""Read-only view over a decoded JSON payload."""

from typing import Any, Iterator, Mapping


class Entity(Mapping[str, Any]):
    """
    Decoded response payload.
    Keys are reachable as items or attributes (entity["id"], entity.id,
    entity._embedded). Nested objects come back as Entity; lists and
    scalars are returned as decoded.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None, **kwargs: Any):
        payload = dict(data or {})
        payload.update(kwargs)
        object.__setattr__(self, "_data", payload)

    def __getitem__(self, key: str) -> Any:
        return _wrap(self._data[key])

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        if name == "_data":
            raise AttributeError(name)
        try:
            return _wrap(self._data[name])
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!s} has no attribute {name!r}"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise TypeError("Entity is immutable")

    def __setitem__(self, key: str, value: Any) -> None:
        raise TypeError("Entity is immutable")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Entity):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Entity({self._data!r})"

    def raw(self, key: str, default: Any = None) -> Any:
        """Return the decoded value for key without wrapping nested objects."""
        return self._data.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the underlying payload."""
        return dict(self._data)


def _wrap(value: Any) -> Any:
    if isinstance(value, dict):
        return Entity(value)
    return value
