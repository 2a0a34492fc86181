"""Minimal incremental JSON text builders for dictionaries and arrays."""

from __future__ import annotations

import operator
from typing import Union

JSONValue = Union[str, bool, int, float, "JSONDict", "JSONArray"]


def _encode_scalar(value: object) -> str:
    """Encode a scalar value the way the serializers expect it to appear."""
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:f}"
    try:
        return str(operator.index(value))
    except TypeError:
        raise TypeError(f"cannot encode value of type {type(value).__name__}") from None


class JSONDict:
    """Builds a JSON object one named item at a time."""

    __slots__ = ("_items",)

    def __init__(self, name: str | None = None, obj: JSONDict | None = None) -> None:
        self._items: list[str] = []
        if name is not None or obj is not None:
            if name is None or obj is None:
                raise ValueError("name and obj must be given together")
            self.add_item(name, obj)

    def to_string(self) -> str:
        """Return the JSON text of this object."""
        return "{ " + ", ".join(self._items) + " }"

    def is_empty(self) -> bool:
        """Return True if no item has been added."""
        return not self._items

    def add_item(self, name: str, value: JSONValue) -> None:
        """Append ``name`` with ``value``, a scalar or a nested dict or array."""
        if isinstance(value, (JSONDict, JSONArray)):
            encoded = value.to_string()
        else:
            encoded = _encode_scalar(value)
        self._items.append(f'"{name}": {encoded}')

    def copy(self) -> JSONDict:
        """Return an independent copy of this object."""
        duplicate = JSONDict()
        duplicate._items = list(self._items)
        return duplicate

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"JSONDict({self.to_string()!r})"


class JSONArray:
    """Builds a JSON array one item at a time."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[str] = []

    def to_string(self) -> str:
        """Return the JSON text of this array."""
        return "[ " + ", ".join(self._items) + " ]"

    def add_item(self, value: Union[str, bool, int, float, JSONDict]) -> None:
        """Append ``value``, a scalar or a nested dict."""
        if isinstance(value, JSONDict):
            encoded = value.to_string()
        elif isinstance(value, JSONArray):
            raise TypeError("arrays cannot be nested directly in an array")
        else:
            encoded = _encode_scalar(value)
        self._items.append(encoded)

    def copy(self) -> JSONArray:
        """Return an independent copy of this array."""
        duplicate = JSONArray()
        duplicate._items = list(self._items)
        return duplicate

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"JSONArray({self.to_string()!r})"