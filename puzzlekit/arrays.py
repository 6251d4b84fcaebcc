"""Array puzzles: stock profits, duplicates, majorities, rotations and prefix sums."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import cmp_to_key
from itertools import accumulate, pairwise


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell, or 0."""
    if not prices:
        raise ValueError("prices must not be empty")
    best = 0
    lowest = prices[0]
    for price in prices[1:]:
        if price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def max_profit_multiple(prices: Sequence[int]) -> int:
    """Best profit when any number of non-overlapping trades is allowed."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers among ``nums``."""
    values = set(nums)
    best = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        best = max(best, end - value + 1)
    return best


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = None
    for ordering in (nums, reversed(nums)):
        running = 1
        for value in ordering:
            running *= value
            best = running if best is None else max(best, running)
            if running == 0:
                running = 1
    return best


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """For each kid, whether the extra candies would give them the most."""
    if not candies:
        return []
    most = max(candies)
    return [count + extra_candies >= most for count in candies]


def majority_element(nums: Sequence[int]) -> int:
    """The element occurring more than len(nums) // 2 times, or -1 if none does."""
    if not nums:
        return -1
    value, count = Counter(nums).most_common(1)[0]
    return value if count > len(nums) // 2 else -1


def _concatenation_order(a: str, b: str) -> int:
    if a + b > b + a:
        return -1
    if a + b < b + a:
        return 1
    return 0


def largest_number(nums: Iterable[int]) -> str:
    """Arrange non-negative integers to form the largest possible number."""
    parts = sorted(map(str, nums), key=cmp_to_key(_concatenation_order))
    if not parts:
        raise ValueError("nums must not be empty")
    if parts[0].startswith("0"):
        return "0"
    return "".join(parts)


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` steps, in place."""
    if not nums:
        raise ValueError("cannot rotate an empty list")
    if k < 0:
        raise ValueError("k must be non-negative")
    k %= len(nums)
    if k:
        nums[:] = nums[-k:] + nums[:-k]


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Return True if two equal values sit at most ``k`` positions apart."""
    last_index: dict[int, int] = {}
    for index, value in enumerate(nums):
        previous = last_index.get(value)
        if previous is not None and index - previous <= k:
            return True
        last_index[value] = index
    return False


def contains_nearby_almost_duplicate(
    nums: Sequence[int], index_diff: int, value_diff: int
) -> bool:
    """Return True if two values within ``index_diff`` positions differ by at most ``value_diff``."""
    if index_diff <= 0 or len(nums) < 2:
        return False
    width = max(value_diff, 1)
    buckets: dict[int, int] = {}
    for index, value in enumerate(nums):
        key = value // width
        for neighbour in (key, key - 1, key + 1):
            other = buckets.get(neighbour)
            if other is not None and abs(value - other) <= value_diff:
                return True
        buckets[key] = value
        if index >= index_diff:
            buckets.pop(nums[index - index_diff] // width, None)
    return False


def summary_ranges(nums: Sequence[int]) -> list[str]:
    """Summarise a sorted list of distinct integers as ranges like ``"a->b"``."""
    result: list[str] = []
    start = 0
    for index, value in enumerate(nums):
        is_last = index + 1 == len(nums)
        if is_last or nums[index + 1] != value + 1:
            first = nums[start]
            result.append(str(first) if start == index else f"{first}->{value}")
            start = index + 1
    return result


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Every element occurring more than len(nums) // 3 times."""
    candidate1, candidate2 = 0, 0
    count1, count2 = 0, 0
    for value in nums:
        if value == candidate1:
            count1 += 1
        elif value == candidate2:
            count2 += 1
        elif count1 == 0:
            candidate1, count1 = value, 1
        elif count2 == 0:
            candidate2, count2 = value, 1
        else:
            count1 -= 1
            count2 -= 1

    count1, count2 = 0, 0
    for value in nums:
        if value == candidate1:
            count1 += 1
        elif value == candidate2:
            count2 += 1

    threshold = len(nums) // 3
    result: list[int] = []
    if count1 > threshold:
        result.append(candidate1)
    if count2 > threshold:
        result.append(candidate2)
    return result


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other element."""
    if not nums:
        raise ValueError("nums must not be empty")
    result = list(accumulate(nums[:-1], lambda acc, value: acc * value, initial=1))
    suffix = 1
    for index in reversed(range(len(nums))):
        result[index] *= suffix
        suffix *= nums[index]
    return result


def remove_element(nums: list[int], val: int) -> int:
    """Move every element other than ``val`` to the front and return how many there are."""
    kept = [value for value in nums if value != val]
    nums[:] = kept + [val] * (len(nums) - len(kept))
    return len(kept)


def move_zeroes(nums: list[int]) -> None:
    """Move zeroes to the end in place, keeping the order of the other elements."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


class NumArray:
    """Answers range-sum queries over a fixed list of integers."""

    def __init__(self, nums: Iterable[int]) -> None:
        self._prefix = list(accumulate(nums, initial=0))

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def sum_range(self, left: int, right: int) -> int:
        """Sum of the elements at indices ``left`` to ``right`` inclusive."""
        if not 0 <= left <= right < len(self):
            raise IndexError(f"invalid range {left}..{right} for {len(self)} elements")
        return self._prefix[right + 1] - self._prefix[left]