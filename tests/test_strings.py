import pytest

from puzzlekit.strings import (
    add_binary,
    common_chars,
    first_uniq_char,
    group_anagrams,
    is_anagram,
    is_isomorphic,
    is_palindrome,
    length_of_longest_substring,
    longest_common_prefix,
    most_common_word,
    multiply,
    num_decodings,
)


@pytest.mark.parametrize("text", ["A man, a plan, a canal: Panama", " ", "", "x", "No 'x' in Nixon"])
def test_is_palindrome_true(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["race a car", "0P", "ab"])
def test_is_palindrome_false(text):
    assert is_palindrome(text) is False


def test_longest_common_prefix_is_shared_prefix():
    strs = ["flower", "flow", "flight"]
    prefix = longest_common_prefix(strs)
    assert all(word.startswith(prefix) for word in strs)
    assert prefix == "flower"[: len(prefix)]
    assert len({word[len(prefix)] for word in strs if len(word) > len(prefix)}) > 1


def test_longest_common_prefix_none_shared():
    assert longest_common_prefix(["dog", "racecar", "car"]) == ""


def test_longest_common_prefix_single_and_prefix_word():
    assert longest_common_prefix(["alone"]) == "alone"
    assert longest_common_prefix(["ab", "abc", "abcd"]) == "ab"


def test_longest_common_prefix_empty_raises():
    with pytest.raises(ValueError):
        longest_common_prefix([])


@pytest.mark.parametrize(
    ("s", "t", "expected"),
    [("egg", "add", True), ("foo", "bar", False), ("paper", "title", True), ("badc", "baba", False), ("", "", True)],
)
def test_is_isomorphic(s, t, expected):
    assert is_isomorphic(s, t) is expected


def test_is_isomorphic_length_mismatch():
    with pytest.raises(ValueError):
        is_isomorphic("ab", "a")


@pytest.mark.parametrize(
    ("s", "t", "expected"),
    [("anagram", "nagaram", True), ("rat", "car", False), ("a", "ab", False), ("same", "same", True)],
)
def test_is_anagram(s, t, expected):
    assert is_anagram(s, t) is expected


def test_length_of_longest_substring_example():
    assert length_of_longest_substring("abcabcbb") == 3


def test_length_of_longest_substring_edges():
    assert length_of_longest_substring("") == 0
    assert length_of_longest_substring("a") == 1
    assert length_of_longest_substring("bbbbb") == 1
    assert length_of_longest_substring("abcdef") == len("abcdef")


def test_length_of_longest_substring_bounded_by_distinct_chars():
    text = "pwwkewdvdf"
    assert length_of_longest_substring(text) <= len(set(text))


def test_first_uniq_char_found():
    text = "loveleetcode"
    index = first_uniq_char(text)
    assert text.count(text[index]) == 1
    assert all(text.count(char) > 1 for char in text[:index])


def test_first_uniq_char_start_and_missing():
    assert first_uniq_char("leetcode") == 0
    assert first_uniq_char("aabb") == -1
    assert first_uniq_char("") == -1


def test_multiply_example():
    assert multiply("123", "456") == "56088"


def test_multiply_identities():
    assert multiply("98765", "1") == "98765"
    assert multiply("0", "98765") == "0"
    assert multiply("007", "1") == "7"


def test_multiply_commutative():
    assert multiply("31415", "27") == multiply("27", "31415")


def test_multiply_large_round_trip():
    a = "9" * 5000
    result = multiply(a, "1")
    assert result == a


@pytest.mark.parametrize(("a", "b"), [("12a", "3"), ("", "3"), ("-1", "2")])
def test_multiply_invalid(a, b):
    with pytest.raises(ValueError):
        multiply(a, b)


@pytest.mark.parametrize(("a", "b"), [("11", "1"), ("1010", "1011"), ("1", "111111"), ("0", "0")])
def test_add_binary_value(a, b):
    result = add_binary(a, b)
    assert int(result, 2) == int(a, 2) + int(b, 2)
    assert len(result) in (max(len(a), len(b)), max(len(a), len(b)) + 1)


def test_add_binary_keeps_width_and_zero():
    assert add_binary("0", "0") == "0"
    assert add_binary("0011", "0") == "0011"
    assert add_binary("101", "11") == add_binary("11", "101")


def test_add_binary_invalid():
    with pytest.raises(ValueError):
        add_binary("102", "1")


def test_most_common_word():
    paragraph = "Bob hit a ball, the hit BALL flew far after it was hit."
    assert most_common_word(paragraph, ["hit"]) == "ball"


def test_most_common_word_case_and_no_words():
    assert most_common_word("a.", []) == "a"
    assert most_common_word("Bob. bob! BOB?", []) == "bob"
    assert most_common_word("only only", ["ONLY"]) == ""


def test_group_anagrams():
    strs = ["eat", "tea", "tan", "ate", "nat", "bat"]
    assert group_anagrams(strs) == [["eat", "tea", "ate"], ["tan", "nat"], ["bat"]]


def test_group_anagrams_single_and_empty():
    assert group_anagrams([""]) == [[""]]
    assert group_anagrams(["a"]) == [["a"]]


def test_common_chars():
    assert common_chars(["bella", "label", "roller"]) == ["e", "l", "l"]
    assert common_chars(["cool", "lock", "cook"]) == ["c", "o"]


def test_common_chars_single_word_and_disjoint():
    assert common_chars(["abca"]) == ["a", "a", "b", "c"]
    assert common_chars(["abc", "xyz"]) == []


def test_common_chars_empty_raises():
    with pytest.raises(ValueError):
        common_chars([])


def test_num_decodings_example():
    assert num_decodings("226") == 3


@pytest.mark.parametrize("s", ["", "0", "06", "100", "30"])
def test_num_decodings_impossible(s):
    assert num_decodings(s) == 0


def test_num_decodings_single_way():
    assert num_decodings("1") == 1
    assert num_decodings("10") == 1
    assert num_decodings("999") == num_decodings("9")