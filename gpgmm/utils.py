"""Small shared helpers: string conversion, sentinel limits and copy protection."""

from __future__ import annotations

from typing import Any, NoReturn

UINT64_MAX = (1 << 64) - 1

INVALID_OFFSET = UINT64_MAX
INVALID_SIZE = UINT64_MAX
INVALID_INDEX = UINT64_MAX


def to_string(obj: Any) -> str:
    """Return the textual form of ``obj``."""
    return str(obj)


def address_of(obj: Any) -> str:
    """Return the identity of ``obj`` as a hexadecimal address string."""
    return f"0x{id(obj):x}"


class NonCopyable:
    """Base class for objects that must not be copied."""

    __slots__ = ()

    def __copy__(self) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo: dict) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be copied")