"""Bit and alignment helpers used to size and place memory blocks."""

from __future__ import annotations

UINT32_MAX = (1 << 32) - 1
UINT64_MAX = (1 << 64) - 1


def _require_unsigned(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def scan_forward(bits: int) -> int:
    """Return the index of the lowest set bit of ``bits``."""
    _require_unsigned("bits", bits)
    if bits == 0:
        raise ValueError("scan_forward is undefined for 0")
    return (bits & -bits).bit_length() - 1


def log2(number: int) -> int:
    """Return the index of the highest set bit of ``number`` (floor of log2)."""
    _require_unsigned("number", number)
    if number == 0:
        raise ValueError("log2 is undefined for 0")
    return number.bit_length() - 1


def next_power_of_two(number: int) -> int:
    """Return the smallest power of two that is greater than or equal to ``number``."""
    _require_unsigned("number", number)
    if number <= 1:
        return 1
    return 1 << (log2(number - 1) + 1)


def prev_power_of_two(number: int) -> int:
    """Return the largest power of two that is less than or equal to ``number``."""
    _require_unsigned("number", number)
    if number == 0:
        raise ValueError("prev_power_of_two is undefined for 0")
    return 1 << log2(number)


def is_power_of_two(number: int) -> bool:
    """Return True if ``number`` is a power of two; zero is not."""
    if number <= 0:
        return False
    return number & (number - 1) == 0


def is_aligned(number: int, multiple: int) -> bool:
    """Return True if ``number`` is a multiple of ``multiple``."""
    _require_unsigned("number", number)
    if multiple == 0:
        raise ValueError("multiple must be non-zero")
    if multiple < 0 or multiple > UINT32_MAX:
        raise ValueError(f"multiple must be in [1, {UINT32_MAX}], got {multiple}")
    if is_power_of_two(multiple):
        return number & (multiple - 1) == 0
    return number % multiple == 0


def align_to_power_of_two(number: int, alignment: int, bits: int = 64) -> int:
    """Round ``number`` up to a power-of-two ``alignment`` within a ``bits``-wide integer."""
    _require_unsigned("number", number)
    if alignment == 0:
        raise ValueError("alignment must be non-zero")
    if not is_power_of_two(alignment):
        raise ValueError(f"alignment must be a power of two, got {alignment}")
    max_value = (1 << bits) - 1
    if number > max_value - (alignment - 1):
        raise OverflowError(f"aligning {number} to {alignment} overflows {bits} bits")
    return (number + (alignment - 1)) & ~(alignment - 1)


def align_to(number: int, multiple: int, bits: int = 64) -> int:
    """Round ``number`` up to the next multiple of ``multiple`` within a ``bits``-wide integer."""
    if is_power_of_two(multiple):
        return align_to_power_of_two(number, multiple, bits)
    _require_unsigned("number", number)
    if multiple <= 0:
        raise ValueError("multiple must be positive")
    max_value = (1 << bits) - 1
    if number > max_value - (multiple - 1):
        raise OverflowError(f"aligning {number} to {multiple} overflows {bits} bits")
    return ((number + multiple - 1) // multiple) * multiple


def round_up(n: int, m: int) -> int:
    """Round ``n`` up to the next multiple of ``m``; both must be positive."""
    if m <= 0:
        raise ValueError("m must be positive")
    if n <= 0:
        raise ValueError("n must be positive")
    if m > UINT64_MAX - n:
        raise OverflowError(f"rounding {n} up to {m} overflows 64 bits")
    return ((n + m - 1) // m) * m