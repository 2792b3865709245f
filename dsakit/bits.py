"""Bit tricks: popcount, Hamming distance, single-bit tests and XOR swap."""

from __future__ import annotations

_WORD_MASK = 0xFFFFFFFF


def _as_word(n: int) -> int:
    """Read a negative number as its 32-bit two's complement pattern."""
    return n & _WORD_MASK if n < 0 else n


def count_set_bits(n: int) -> int:
    """Count the 1 bits of ``n`` (Brian Kernighan's method).

    Negative numbers are counted as 32-bit two's complement words.
    """
    n = _as_word(n)
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def bit_difference(a: int, b: int) -> int:
    """Return how many bits must be flipped to turn ``a`` into ``b``."""
    return count_set_bits(a ^ b)


def is_kth_bit_set(n: int, k: int) -> bool:
    """Return True if bit ``k`` (counting from 0 at the least significant end) of ``n`` is 1."""
    if k < 0:
        raise ValueError(f"bit position must be non-negative, got {k}")
    return bool((n >> k) & 1)


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Swap two integers with three XORs and return them as ``(b, a)``."""
    a ^= b
    b ^= a
    a ^= b
    return a, b