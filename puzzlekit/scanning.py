"""Single-pass scans over integer arrays: runs, subarray sums, water and flowerbeds."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, groupby


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Length of the longest run of 1s."""
    if not nums:
        raise ValueError("nums must not be empty")
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def max_sub_array(nums: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    best: int | None = None
    running = 0
    for value in nums:
        running += value
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("nums must not be empty")
    return best


def pivot_index(nums: Sequence[int]) -> int:
    """Leftmost index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if left == total - left - value:
            return index
        left += value
    return -1


def trap(height: Sequence[int]) -> int:
    """Units of rain water held between the bars of an elevation map."""
    if len(height) < 2:
        return 0
    left_max = accumulate(height, max)
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(min(left, right) - bar for left, right, bar in zip(left_max, right_max, height))


def find_shortest_sub_array(nums: Sequence[int]) -> int:
    """Length of the shortest subarray with the same degree as the whole array."""
    if not nums:
        raise ValueError("nums must not be empty")
    first: dict[int, int] = {}
    last: dict[int, int] = {}
    for index, value in enumerate(nums):
        first.setdefault(value, index)
        last[value] = index
    counts = Counter(nums)
    degree = max(counts.values())
    return min(last[value] - first[value] + 1 for value, count in counts.items() if count == degree)


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Return True if ``n`` flowers fit into the bed without any two adjacent."""
    if n == 0:
        return True
    bed = list(flowerbed)
    size = len(bed)
    for index in range(size):
        free_left = index == 0 or bed[index - 1] == 0
        free_right = index == size - 1 or bed[index + 1] == 0
        if bed[index] == 0 and free_left and free_right:
            bed[index] = 1
            n -= 1
            if n == 0:
                return True
    return False


def next_greater_element(nums1: Iterable[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, the first greater value right of it in ``nums2``, or -1."""
    greater_after = [-1] * len(nums2)
    stack: list[int] = []
    for index, value in enumerate(nums2):
        while stack and nums2[stack[-1]] < value:
            greater_after[stack.pop()] = value
        stack.append(index)
    position = {value: index for index, value in enumerate(nums2)}
    result: list[int] = []
    for value in nums1:
        if value not in position:
            raise ValueError(f"{value} does not occur in nums2")
        result.append(greater_after[position[value]])
    return result