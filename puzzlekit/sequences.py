"""Integer sequences and counting puzzles: Fibonacci-style recurrences and primes."""

from __future__ import annotations

from collections.abc import Sequence
from math import isqrt


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(0) == 0 and fib(1) == 1."""
    _require_non_negative(n)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def tribonacci(n: int) -> int:
    """Return the n-th Tribonacci number, starting 0, 1, 1."""
    _require_non_negative(n)
    first, second, third = 0, 1, 1
    for _ in range(n):
        first, second, third = second, third, first + second + third
    return first


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two steps at a time."""
    _require_non_negative(n)
    current, following = 1, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def count_primes(n: int) -> int:
    """Count the primes strictly less than ``n``."""
    if n <= 2:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for p in range(2, isqrt(n - 1) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, n, p)))
    return sum(sieve)


def min_moves(nums: Sequence[int]) -> int:
    """Moves needed to make all elements equal when each move adds 1 to all but one."""
    if not nums:
        raise ValueError("nums must not be empty")
    return sum(nums) - len(nums) * min(nums)