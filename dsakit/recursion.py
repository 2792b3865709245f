"""Recursive classics: factorials, memoised Fibonacci and permutations."""

from __future__ import annotations

from collections.abc import Sequence


def factorial(n: int) -> int:
    """Return ``n!`` by plain recursion."""
    if n < 0:
        raise ValueError(f"factorial() is undefined for negative numbers, got {n}")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def tail_factorial(n: int, acc: int = 1) -> int:
    """Return ``acc * n!`` in accumulator (tail-call) style.

    The tail call is written as a loop, since Python does not eliminate it.
    """
    if n < 0:
        raise ValueError(f"factorial() is undefined for negative numbers, got {n}")
    while n:
        n, acc = n - 1, n * acc
    return acc


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number; values of ``n`` up to 1 are returned as is."""
    if n <= 1:
        return n
    memo = {0: 0, 1: 1}
    for i in range(2, n + 1):
        memo[i] = memo[i - 1] + memo[i - 2]
    return memo[n]


def permutations(nums: Sequence) -> list[list]:
    """Return every ordering of ``nums``, generated by swap backtracking."""
    items = list(nums)
    result: list[list] = []

    def backtrack(start: int) -> None:
        if start == len(items):
            result.append(items.copy())
            return
        for i in range(start, len(items)):
            items[i], items[start] = items[start], items[i]
            backtrack(start + 1)
            items[i], items[start] = items[start], items[i]

    backtrack(0)
    return result