"""Request-scoped attribute bag."""

from collections.abc import Iterator
from typing import Any

from reqview.core.exceptions import IllegalStateError


def _require(value: Any, what: str) -> None:
    if value is None:
        raise IllegalStateError(f"Attribute {what} must not be None")


class Attributes:
    """Mutable key/value store owned by a single request.

    Values can never be ``None``, so ``get`` returning ``None`` always means unset.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def set(self, name: str, value: Any) -> None:
        _require(name, "name")
        _require(value, "value")
        self._data[name] = value

    def has(self, name: str) -> bool:
        _require(name, "name")
        return name in self._data

    def get(self, name: str) -> Any:
        _require(name, "name")
        return self._data.get(name)

    def remove(self, name: str) -> bool:
        """Remove an attribute. Returns False if it was not set."""
        _require(name, "name")
        return self._data.pop(name, None) is not None

    def __contains__(self, name: str) -> bool:
        return name in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data.keys())

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Attributes({self._data})"

    def clear(self) -> None:
        self._data.clear()
