"""A value wrapper for enum flags that can be combined bitwise."""

from __future__ import annotations

import enum
from typing import Union

FlagOperand = Union["Flags", enum.Enum, int]


def _to_int(value: object) -> int | None:
    if isinstance(value, Flags):
        return value._value
    if isinstance(value, enum.Enum):
        return int(value.value)
    if isinstance(value, int):
        return int(value)
    return None


class Flags:
    """Stores enum values OR'd together as a plain integer, without casts."""

    __slots__ = ("_value",)

    def __init__(self, value: FlagOperand = 0) -> None:
        converted = _to_int(value)
        if converted is None:
            raise TypeError(f"cannot build Flags from {type(value).__name__}")
        self._value = converted

    def _binary(self, other: object, op) -> Flags:
        other_value = _to_int(other)
        if other_value is None:
            return NotImplemented
        return Flags(op(self._value, other_value))

    def __eq__(self, other: object) -> bool:
        other_value = _to_int(other)
        if other_value is None:
            return NotImplemented
        return self._value == other_value

    def __and__(self, other: FlagOperand) -> Flags:
        return self._binary(other, lambda a, b: a & b)

    def __or__(self, other: FlagOperand) -> Flags:
        return self._binary(other, lambda a, b: a | b)

    def __xor__(self, other: FlagOperand) -> Flags:
        return self._binary(other, lambda a, b: a ^ b)

    def __rand__(self, other: FlagOperand) -> Flags:
        return self.__and__(other)

    def __ror__(self, other: FlagOperand) -> Flags:
        return self.__or__(other)

    def __rxor__(self, other: FlagOperand) -> Flags:
        return self.__xor__(other)

    def __invert__(self) -> Flags:
        return Flags(~self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Flags({self._value})"

    def __hash__(self) -> int:
        return hash(self._value)