"""Searching, set-like and in-place ordering puzzles over integer lists."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from heapq import merge as _merge_sorted
from itertools import islice


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """Return the first and last index of ``target`` in sorted ``nums``, or [-1, -1]."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Distinct values present in both lists, in order of first appearance in ``nums2``."""
    remaining = set(nums1)
    result: list[int] = []
    for value in nums2:
        if value in remaining:
            result.append(value)
            remaining.discard(value)
    return result


def intersect(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Values common to both lists, each repeated as often as in both, in ``nums1`` order."""
    available = Counter(nums2)
    result: list[int] = []
    for value in nums1:
        if available[value] > 0:
            result.append(value)
            available[value] -= 1
    return result


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Values of 1..len(nums) that do not occur in ``nums``, in ascending order."""
    n = len(nums)
    present = set(nums)
    if any(not 1 <= value <= n for value in present):
        raise ValueError(f"every value must lie between 1 and {n}")
    return [value for value in range(1, n + 1) if value not in present]


def find_content_children(g: Iterable[int], s: Iterable[int]) -> int:
    """Most children whose greed factor in ``g`` can be met by one cookie size from ``s``."""
    greeds = sorted(g)
    content = 0
    for cookie in sorted(s):
        if content == len(greeds):
            break
        if cookie >= greeds[content]:
            content += 1
    return content


def decompress_rle_list(nums: Sequence[int]) -> list[int]:
    """Expand (frequency, value) pairs; a trailing unpaired element is ignored."""
    result: list[int] = []
    pairs = iter(nums)
    for frequency, value in zip(pairs, pairs):
        if frequency < 0:
            raise ValueError(f"frequency must be non-negative, got {frequency}")
        result.extend([value] * frequency)
    return result


def wiggle_sort(nums: list[int]) -> None:
    """Reorder ``nums`` in place so that nums[0] < nums[1] > nums[2] < nums[3] ..."""
    descending: Iterator[int] = iter(sorted(nums, reverse=True))
    n = len(nums)
    arranged = [0] * n
    odd_slots = range(1, n, 2)
    even_slots = range(0, n, 2)
    for index, value in zip(odd_slots, islice(descending, len(odd_slots))):
        arranged[index] = value
    for index, value in zip(even_slots, descending):
        arranged[index] = value
    nums[:] = arranged


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place."""
    counts = Counter(nums)
    if not counts.keys() <= {0, 1, 2}:
        raise ValueError("colours must be 0, 1 or 2")
    nums[:] = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def merge(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> list[int]:
    """Merge the first ``n`` of sorted ``nums2`` into the first ``m`` of sorted ``nums1``.

    ``nums1`` must have room for ``m + n`` elements; it is overwritten in place
    and also returned.
    """
    if m < 0 or n < 0:
        raise ValueError("m and n must be non-negative")
    if n > len(nums2):
        raise ValueError(f"nums2 holds fewer than {n} elements")
    if len(nums1) < m + n:
        raise ValueError(f"nums1 must have room for {m + n} elements")
    merged = list(_merge_sorted(nums1[:m], nums2[:n]))
    nums1[: m + n] = merged
    return nums1


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Every combination of ``candidates`` (reusable) summing to ``target``.

    Combinations are listed depth-first, preferring to reuse earlier candidates.
    """
    if any(value <= 0 for value in candidates):
        raise ValueError("candidates must be positive")

    def search(index: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        if index >= len(candidates) or remaining < 0:
            return
        value = candidates[index]
        if value <= remaining:
            chosen.append(value)
            yield from search(index, remaining - value, chosen)
            chosen.pop()
        yield from search(index + 1, remaining, chosen)

    return list(search(0, target, []))