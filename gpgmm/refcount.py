"""Thread-safe reference counting and a scoped holder for counted objects."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T", bound="RefCounted")


class RefCounted:
    """An integer reference count that is safe to change from many threads."""

    def __init__(self, initial_count: int) -> None:
        self._ref = initial_count
        self._ref_lock = threading.Lock()

    def ref(self) -> None:
        """Increment the count by one."""
        with self._ref_lock:
            self._ref += 1

    def unref(self) -> bool:
        """Decrement the count by one; return True if it reached zero."""
        with self._ref_lock:
            previous = self._ref
            self._ref -= 1
        return previous == 1

    def ref_count(self) -> int:
        """Return the current count."""
        with self._ref_lock:
            return self._ref

    def has_one_ref(self) -> bool:
        """Return True if the next unref() will reach zero."""
        return self.ref_count() == 1


class ScopedRef(Generic[T]):
    """Holds a reference on a :class:`RefCounted` object until released."""

    def __init__(self, obj: T | None = None) -> None:
        self._obj: T | None = obj
        if obj is not None:
            obj.ref()

    def get(self) -> T | None:
        """Return the held object."""
        return self._obj

    def detach(self) -> T | None:
        """Give up the held object without dropping its reference."""
        obj, self._obj = self._obj, None
        return obj

    def attach(self, obj: T | None) -> None:
        """Hold ``obj`` without adding a reference to it."""
        self._obj = obj

    @staticmethod
    def acquire(obj: T | None) -> ScopedRef[T]:
        """Wrap ``obj``, taking over a reference already held on it."""
        scoped: ScopedRef[T] = ScopedRef()
        scoped.attach(obj)
        return scoped

    def copy(self) -> ScopedRef[T]:
        """Return a new holder that adds its own reference to the object."""
        return ScopedRef(self._obj)

    def assign(self, other: ScopedRef[T]) -> None:
        """Hold ``other``'s object instead, moving the reference across."""
        if other._obj is not None:
            other._obj.ref()
        if self._obj is not None:
            self._obj.unref()
        self._obj = other._obj

    def release(self) -> bool:
        """Drop the reference; return True if the count reached zero."""
        obj, self._obj = self._obj, None
        if obj is None:
            return False
        return obj.unref()

    def __enter__(self) -> ScopedRef[T]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScopedRef):
            return NotImplemented
        return self._obj is other._obj

    def __hash__(self) -> int:
        return id(self._obj)

    def __bool__(self) -> bool:
        return self._obj is not None