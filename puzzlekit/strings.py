"""String puzzles: palindromes, anagrams, arithmetic on digit strings and more."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable
from functools import reduce
from operator import and_

_DECIMAL_DIGITS = frozenset("0123456789")
_BINARY_DIGITS = frozenset("01")
_WORD_SEPARATORS = re.compile(r"[ !?',;.]+")


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def is_palindrome(s: str) -> bool:
    """Return True if the ASCII letters and digits of ``s`` read the same both ways, ignoring case."""
    kept = [char.lower() for char in s if _is_ascii_alnum(char)]
    return kept == kept[::-1]


def longest_common_prefix(strs: list[str]) -> str:
    """Return the longest prefix shared by every string in ``strs``."""
    if not strs:
        raise ValueError("strs must not be empty")
    first, *rest = strs
    prefix = []
    for index, char in enumerate(first):
        if all(index < len(other) and other[index] == char for other in rest):
            prefix.append(char)
        else:
            break
    return "".join(prefix)


def is_isomorphic(s: str, t: str) -> bool:
    """Return True if the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        raise ValueError("s and t must have the same length")
    forward: dict[str, str] = {}
    used: set[str] = set()
    for source, target in zip(s, t):
        mapped = forward.get(source)
        if mapped is None:
            if target in used:
                return False
            forward[source] = target
            used.add(target)
        elif mapped != target:
            return False
    return True


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` is a rearrangement of the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def first_uniq_char(s: str) -> int:
    """Return the index of the first character occurring once in ``s``, or -1."""
    counts = Counter(s)
    return next((index for index, char in enumerate(s) if counts[char] == 1), -1)


def _check_digits(value: str, allowed: frozenset[str], kind: str) -> None:
    if not set(value) <= allowed:
        raise ValueError(f"{value!r} is not a {kind} number")


def multiply(num1: str, num2: str) -> str:
    """Multiply two non-negative decimal numbers given as digit strings."""
    for value in (num1, num2):
        if not value:
            raise ValueError("numbers must not be empty")
        _check_digits(value, _DECIMAL_DIGITS, "decimal")
    digits = [0] * (len(num1) + len(num2))
    for i, a in enumerate(reversed(num1)):
        carry = 0
        for j, b in enumerate(reversed(num2)):
            carry, digits[i + j] = divmod(int(a) * int(b) + carry + digits[i + j], 10)
        digits[i + len(num2)] += carry
    return "".join(map(str, reversed(digits))).lstrip("0") or "0"


def add_binary(a: str, b: str) -> str:
    """Add two binary strings; the result is at least as wide as the wider input."""
    _check_digits(a, _BINARY_DIGITS, "binary")
    _check_digits(b, _BINARY_DIGITS, "binary")
    width = max(len(a), len(b))
    if width == 0:
        return ""
    total = int(a or "0", 2) + int(b or "0", 2)
    return format(total, "b").zfill(width)


def most_common_word(paragraph: str, banned: Iterable[str]) -> str:
    """Return the most frequent word not in ``banned``, compared case-insensitively."""
    banned_words = {word.lower() for word in banned}
    counts = Counter(
        word.lower()
        for word in _WORD_SEPARATORS.split(paragraph)
        if word and word.lower() not in banned_words
    )
    if not counts:
        return ""
    return counts.most_common(1)[0][0]


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group the strings that are anagrams of each other, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def common_chars(words: list[str]) -> list[str]:
    """Return every character common to all words, repeated as often as in all of them."""
    if not words:
        raise ValueError("words must not be empty")
    shared = reduce(and_, map(Counter, words))
    return list(shared.elements())


def num_decodings(s: str) -> int:
    """Count the ways to decode a digit string where 1..26 stand for A..Z."""
    if not s or s[0] == "0":
        return 0
    before, current = 1, 1
    for previous_char, char in zip(s, s[1:]):
        ways = current if "1" <= char <= "9" else 0
        if previous_char == "1" or (previous_char == "2" and "0" <= char <= "6"):
            ways += before
        before, current = current, ways
    return current