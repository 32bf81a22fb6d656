"""Single-bit and bit-range operations on integers."""

from __future__ import annotations


def get_bit(n: int, position: int) -> int:
    """Return the bit of n at position, as 0 or 1."""
    return (n >> position) & 1


def set_bit(n: int, position: int) -> int:
    """Return n with the bit at position set."""
    return n | (1 << position)


def clear_bit(n: int, position: int) -> int:
    """Return n with the bit at position cleared."""
    return n & ~(1 << position)


def update_bit(n: int, position: int, value: int) -> int:
    """Return n with the bit at position set to value (0 or 1)."""
    if value not in (0, 1):
        raise ValueError(f"bit value must be 0 or 1, got {value!r}")
    return clear_bit(n, position) | (value << position)


def clear_last_bits(n: int, count: int) -> int:
    """Return n with its lowest count bits cleared."""
    return n & (-1 << count)


def clear_bits_range(n: int, low: int, high: int) -> int:
    """Return n with bits low..high (inclusive) cleared."""
    if low > high:
        raise ValueError(f"range start {low} exceeds end {high}")
    mask = (-1 << (high + 1)) | ((1 << low) - 1)
    return n & mask


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"set bits are counted for non-negative numbers, got {n}")


def count_set_bits(n: int) -> int:
    """Count the 1 bits of a non-negative integer, one bit at a time."""
    _require_non_negative(n)
    count = 0
    while n:
        count += n & 1
        n >>= 1
    return count


def count_set_bits_fast(n: int) -> int:
    """Count the 1 bits by repeatedly clearing the lowest set bit."""
    _require_non_negative(n)
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count