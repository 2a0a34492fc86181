"""An intrusive circular doubly-linked list with O(1) removal."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T", bound="LinkNode")


class LinkNode:
    """Base for objects that live in a :class:`LinkedList`."""

    def __init__(self) -> None:
        self._previous: LinkNode | None = None
        self._next: LinkNode | None = None

    def insert_before(self, e: LinkNode) -> None:
        """Insert this node into the list, before ``e``."""
        self._check_insertable(e)
        assert e._previous is not None
        self._next = e
        self._previous = e._previous
        e._previous._next = self
        e._previous = self

    def insert_after(self, e: LinkNode) -> None:
        """Insert this node into the list, after ``e``."""
        self._check_insertable(e)
        assert e._next is not None
        self._next = e._next
        self._previous = e
        e._next._previous = self
        e._next = self

    def _check_insertable(self, e: LinkNode) -> None:
        if self.is_in_list():
            raise ValueError("node is already in a list")
        if not e.is_in_list():
            raise ValueError("reference node is not in a list")

    def is_in_list(self) -> bool:
        """Return True if this node is linked into a list."""
        assert (self._previous is None) == (self._next is None)
        return self._next is not None

    def remove_from_list(self) -> None:
        """Unlink this node from its list."""
        if not self.is_in_list():
            raise ValueError("node is not in a list")
        assert self._previous is not None and self._next is not None
        self._previous._next = self._next
        self._next._previous = self._previous
        self._next = None
        self._previous = None

    def previous(self) -> LinkNode | None:
        """Return the previous node, or None at the front or when unlinked."""
        node = self._previous
        return None if isinstance(node, _Root) else node

    def next(self) -> LinkNode | None:
        """Return the next node, or None at the back or when unlinked."""
        node = self._next
        return None if isinstance(node, _Root) else node


class _Root(LinkNode):
    """Self-referential sentinel that closes the circle."""

    def __init__(self) -> None:
        super().__init__()
        self._previous = self
        self._next = self


class LinkedList(Generic[T]):
    """Tracks the head and tail of a chain of :class:`LinkNode` objects."""

    def __init__(self) -> None:
        self._root = _Root()

    def append(self, e: T) -> None:
        """Append ``e`` to the end of the list."""
        e.insert_before(self._root)

    def head(self) -> T | None:
        """Return the first node, or None if the list is empty."""
        node = self._root._next
        return None if node is self._root else node  # type: ignore[return-value]

    def tail(self) -> T | None:
        """Return the last node, or None if the list is empty."""
        node = self._root._previous
        return None if node is self._root else node  # type: ignore[return-value]

    def empty(self) -> bool:
        """Return True if the list holds no nodes."""
        return self._root._next is self._root

    def remove_all(self) -> None:
        """Unlink every node, leaving the list empty."""
        for node in list(self):
            node.remove_from_list()
        assert self.empty()

    def __iter__(self) -> Iterator[T]:
        node = self._root._next
        while node is not self._root:
            assert node is not None
            following = node._next
            yield node  # type: ignore[misc]
            node = following

    def __reversed__(self) -> Iterator[T]:
        node = self._root._previous
        while node is not self._root:
            assert node is not None
            preceding = node._previous
            yield node  # type: ignore[misc]
            node = preceding

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return not self.empty()