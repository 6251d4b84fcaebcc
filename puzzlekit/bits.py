"""Bit-manipulation puzzles over integers and strings."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from itertools import accumulate, chain
from operator import xor


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def single_number(nums: list[int]) -> int:
    """Return the one value that appears once when every other appears twice."""
    if not nums:
        raise ValueError("nums must not be empty")
    return reduce(xor, nums)


def single_number_ii(nums: Iterable[int]) -> int:
    """Return the one value that appears once when every other appears three times."""
    ones, twos = 0, 0
    for value in nums:
        ones = (ones ^ value) & ~twos
        twos = (twos ^ value) & ~ones
    return ones


def single_number_iii(nums: list[int]) -> list[int]:
    """Return the two values that appear once when every other appears twice."""
    combined = reduce(xor, nums, 0)
    mask = _to_int32((combined & (combined - 1)) ^ combined)
    first, second = 0, 0
    for value in nums:
        if value & mask == 0:
            first ^= value
        else:
            second ^= value
    return [first, second]


def reverse_bits(num: int) -> int:
    """Reverse the bit order of a 32-bit unsigned integer."""
    if not 0 <= num < 2**32:
        raise ValueError(f"{num} is not a 32-bit unsigned integer")
    return int(f"{num:032b}"[::-1], 2)


def hamming_weight(n: int) -> int:
    """Count the set bits of a non-negative integer."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return n.bit_count()


def is_power_of_two(n: int) -> bool:
    """Return True if ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def is_power_of_four(n: int) -> bool:
    """Return True if ``n`` is a positive power of four."""
    if n <= 0:
        return False
    while n % 4 == 0:
        n //= 4
    return n == 1


def missing_number(nums: list[int]) -> int:
    """Return the one value of 0..len(nums) that is missing from ``nums``."""
    return reduce(xor, chain(range(len(nums) + 1), nums), 0)


def decode_xored(encoded: Iterable[int], first: int) -> list[int]:
    """Rebuild an array from its first element and the XORs of adjacent pairs."""
    return list(accumulate(encoded, xor, initial=first))


def find_the_difference(s: str, t: str) -> str:
    """Return the character added to a shuffled copy of ``s`` to make ``t``."""
    return chr(reduce(xor, map(ord, chain(s, t)), 0))