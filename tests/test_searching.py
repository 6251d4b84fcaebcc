from collections import Counter

import pytest

from puzzlekit.searching import (
    combination_sum,
    decompress_rle_list,
    find_content_children,
    find_disappeared_numbers,
    intersect,
    intersection,
    merge,
    search_range,
    sort_colors,
    wiggle_sort,
)


@pytest.mark.parametrize(
    "nums, target",
    [([5, 7, 7, 8, 8, 10], 8), ([5, 7, 7, 8, 8, 10], 5), ([1], 1), ([2, 2, 2, 2], 2)],
)
def test_search_range_bounds_cover_exactly_the_target(nums, target):
    first, last = search_range(nums, target)
    assert all(value == target for value in nums[first : last + 1])
    assert first == 0 or nums[first - 1] < target
    assert last == len(nums) - 1 or nums[last + 1] > target


@pytest.mark.parametrize("nums, target", [([5, 7, 7, 8, 8, 10], 6), ([], 0), ([1, 3], 4)])
def test_search_range_missing_target(nums, target):
    assert search_range(nums, target) == [-1, -1]


def test_intersection_distinct_values():
    assert intersection([1, 2, 2, 1], [2, 2]) == [2]


def test_intersection_matches_set_intersection():
    nums1, nums2 = [4, 9, 5], [9, 4, 9, 8, 4]
    result = intersection(nums1, nums2)
    assert len(result) == len(set(result))
    assert set(result) == set(nums1) & set(nums2)
    assert result == [9, 4]


def test_intersect_keeps_multiplicity():
    assert intersect([1, 2, 2, 1], [2, 2]) == [2, 2]


def test_intersect_is_multiset_intersection():
    nums1, nums2 = [4, 9, 5], [9, 4, 9, 8, 4]
    result = intersect(nums1, nums2)
    assert Counter(result) == Counter(nums1) & Counter(nums2)


def test_find_disappeared_numbers_completes_range():
    nums = [4, 3, 2, 7, 8, 2, 3, 1]
    original = list(nums)
    missing = find_disappeared_numbers(nums)
    assert missing == [5, 6]
    assert set(missing) | set(nums) == set(range(1, len(nums) + 1))
    assert nums == original


def test_find_disappeared_numbers_rejects_out_of_range():
    with pytest.raises(ValueError):
        find_disappeared_numbers([1, 5])


def test_find_content_children_limited_by_cookies():
    assert find_content_children([1, 2, 3], [1, 1]) == 1


def test_find_content_children_extremes():
    assert find_content_children([1, 2, 3], []) == 0
    assert find_content_children([3, 1, 2], [100, 100, 100, 100]) == 3


def test_decompress_rle_list():
    assert decompress_rle_list([1, 2, 3, 4]) == [2, 4, 4, 4]


def test_decompress_rle_list_ignores_trailing_element():
    assert decompress_rle_list([1, 1, 2, 3, 9]) == [1, 3, 3]
    assert decompress_rle_list([]) == []


def test_decompress_rle_list_rejects_negative_frequency():
    with pytest.raises(ValueError):
        decompress_rle_list([-1, 5])


@pytest.mark.parametrize("nums", [[1, 5, 1, 1, 6, 4], [1, 3, 2, 2, 3, 1], [4, 5, 5, 6]])
def test_wiggle_sort_alternates(nums):
    original = sorted(nums)
    wiggle_sort(nums)
    assert sorted(nums) == original
    for index in range(len(nums) - 1):
        if index % 2 == 0:
            assert nums[index] < nums[index + 1]
        else:
            assert nums[index] > nums[index + 1]


def test_sort_colors_sorts_in_place():
    nums = [2, 0, 2, 1, 1, 0]
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected


def test_sort_colors_rejects_other_values():
    with pytest.raises(ValueError):
        sort_colors([0, 3, 1])


def test_merge_fills_nums1():
    nums1 = [1, 2, 3, 0, 0, 0]
    result = merge(nums1, 3, [2, 5, 6], 3)
    assert result is nums1
    assert nums1 == [1, 2, 2, 3, 5, 6]


def test_merge_into_empty_prefix():
    nums1 = [0]
    assert merge(nums1, 0, [1], 1) == [1]


def test_merge_with_negatives_is_sorted():
    nums1 = [-5, 0, 0, 0]
    merge(nums1, 1, [-3, -2, 4], 3)
    assert nums1 == sorted([-5, -3, -2, 4])


def test_merge_rejects_short_nums1():
    with pytest.raises(ValueError):
        merge([1, 2], 2, [3], 1)


def test_combination_sum_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


def test_combination_sum_results_reach_target():
    candidates = [2, 3, 5]
    results = combination_sum(candidates, 8)
    assert results
    assert all(sum(combo) == 8 for combo in results)
    assert all(set(combo) <= set(candidates) for combo in results)
    assert len({tuple(sorted(combo)) for combo in results}) == len(results)


def test_combination_sum_unreachable_and_zero_target():
    assert combination_sum([2], 1) == []
    assert combination_sum([2], 0) == [[]]


def test_combination_sum_rejects_non_positive_candidates():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)