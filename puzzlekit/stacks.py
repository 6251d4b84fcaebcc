"""Stack- and deque-based puzzles: min stack, bracket matching, monotonic stacks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minimums: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        current = min(val, self._minimums[-1]) if self._minimums else val
        self._items.append(val)
        self._minimums.append(current)

    def pop(self) -> None:
        """Remove the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        self._items.pop()
        self._minimums.pop()

    def top(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def get_min(self) -> int:
        """Return the smallest element currently on the stack."""
        if not self._minimums:
            raise IndexError("minimum of an empty stack")
        return self._minimums[-1]


def is_valid_parentheses(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed by its match in the right order."""
    if len(s) % 2:
        if not set(s) <= _OPENERS | _PAIRS.keys():
            raise ValueError(f"{s!r} holds characters other than brackets")
        return False
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack[-1] != _PAIRS[char]:
                return False
            stack.pop()
        else:
            raise ValueError(f"unexpected character {char!r}")
    return not stack


def cal_points(operations: Iterable[str]) -> int:
    """Score a baseball game: integers record scores, '+', 'D' and 'C' act on earlier ones."""
    scores: list[int] = []
    for op in operations:
        if op == "+":
            scores.append(scores[-1] + scores[-2])
        elif op == "C":
            scores.pop()
        elif op == "D":
            scores.append(scores[-1] * 2)
        else:
            scores.append(int(op))
    return sum(scores)


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, the number of days until a warmer one, or 0 if none comes."""
    result = [0] * len(temperatures)
    stack: list[int] = []
    for index in reversed(range(len(temperatures))):
        while stack and temperatures[stack[-1]] <= temperatures[index]:
            stack.pop()
        if stack:
            result[index] = stack[-1] - index
        stack.append(index)
    return result


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """For each element of a circular array, the next greater element, or -1."""
    n = len(nums)
    result = [-1] * n
    stack: list[int] = []
    for step in range(2 * n):
        value = nums[step % n]
        while stack and nums[stack[-1]] < value:
            result[stack.pop()] = value
        if step < n:
            stack.append(step)
    return result


def min_add_to_make_valid(s: str) -> int:
    """Count the parentheses that must be added to balance ``s``."""
    unmatched_close = 0
    unmatched_open = 0
    for char in s:
        if char == "(":
            unmatched_open += 1
        elif unmatched_open:
            unmatched_open -= 1
        else:
            unmatched_close += 1
    return unmatched_close + unmatched_open


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive elements."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    window: deque[int] = deque()
    result: list[int] = []
    for index, value in enumerate(nums):
        if window and window[0] == index - k:
            window.popleft()
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(index)
        if index >= k - 1:
            result.append(nums[window[0]])
    return result


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses, in lexicographic order."""
    if n < 0:
        raise ValueError("n must be non-negative")

    def build(opened: int, closed: int, prefix: str) -> Iterator[str]:
        if len(prefix) == 2 * n:
            yield prefix
            return
        if opened < n:
            yield from build(opened + 1, closed, prefix + "(")
        if closed < opened:
            yield from build(opened, closed + 1, prefix + ")")

    return list(build(0, 0, ""))