"""A set of heaps referenced by a command list, kept in insertion order."""

from __future__ import annotations

from typing import Any, Iterator


class ResidencySet:
    """Collects distinct heaps that must be made resident for execution."""

    def __init__(self) -> None:
        self._ids: set[int] = set()
        self._to_make_resident: list[Any] = []

    def insert(self, heap: Any) -> None:
        """Add ``heap``; raise ValueError if it is None or already present."""
        if heap is None:
            raise ValueError("heap must not be None")
        key = id(heap)
        if key in self._ids:
            raise ValueError("heap is already in the residency set")
        self._ids.add(key)
        self._to_make_resident.append(heap)

    def reset(self) -> None:
        """Remove every heap from the set."""
        self._ids.clear()
        self._to_make_resident.clear()

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._to_make_resident))

    def __len__(self) -> int:
        return len(self._to_make_resident)

    def __contains__(self, heap: object) -> bool:
        return id(heap) in self._ids