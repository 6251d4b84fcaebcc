# puzzlekit

Small, self-contained solutions to classic algorithm puzzles, written as plain
Python functions and a few small classes. The package needs nothing beyond the
standard library and supports Python 3.10 and later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `puzzlekit.linked_list`: the `ListNode` class (compared and hashed by
  identity), `build_list` and `to_values` for converting to and from Python
  lists, and `reverse_list`, `reverse_between`, `reorder_list`, `has_cycle`,
  `remove_elements`, `remove_nth_from_end`, `remove_zero_sum_sublists`,
  `delete_node` and `middle_node`.
- `puzzlekit.bits`: `single_number`, `single_number_ii`, `single_number_iii`,
  `reverse_bits` (32-bit unsigned), `hamming_weight`, `is_power_of_two`,
  `is_power_of_four`, `missing_number`, `decode_xored` and
  `find_the_difference`.
- `puzzlekit.strings`: `is_palindrome`, `longest_common_prefix`,
  `is_isomorphic`, `is_anagram`, `length_of_longest_substring`,
  `first_uniq_char`, `multiply` (decimal digit strings), `add_binary`,
  `most_common_word`, `group_anagrams`, `common_chars` and `num_decodings`.
- `puzzlekit.stacks`: the `MinStack` class (`push`, `pop`, `top`, `get_min`),
  `is_valid_parentheses`, `cal_points`, `daily_temperatures`,
  `next_greater_elements`, `min_add_to_make_valid`, `max_sliding_window` and
  `generate_parenthesis`.
- `puzzlekit.arrays`: `max_profit`, `max_profit_multiple`,
  `longest_consecutive`, `max_product`, `kids_with_candies`,
  `majority_element`, `majority_elements`, `largest_number`, `rotate`,
  `contains_duplicate`, `contains_nearby_duplicate`,
  `contains_nearby_almost_duplicate`, `summary_ranges`, `product_except_self`,
  `remove_element`, `move_zeroes` and the prefix-sum class `NumArray`
  (`sum_range`).
- `puzzlekit.sequences`: `fib`, `tribonacci`, `climb_stairs`, `count_primes`
  and `min_moves`.
- `puzzlekit.tictactoe`: `valid_tic_tac_toe` checks whether a 3x3 board of
  `"X"`, `"O"` and `" "` can arise in a game where X moves first.
- `puzzlekit.scanning`: `find_max_consecutive_ones`, `max_sub_array`,
  `pivot_index`, `trap`, `find_shortest_sub_array`, `can_place_flowers` and
  `next_greater_element`.
- `puzzlekit.searching`: `search_range`, `intersection`, `intersect`,
  `find_disappeared_numbers`, `find_content_children`, `decompress_rle_list`,
  `wiggle_sort`, `sort_colors`, `merge` and `combination_sum`.

## Examples

```python
from puzzlekit.linked_list import build_list, reverse_list, to_values
from puzzlekit.strings import add_binary
from puzzlekit.stacks import MinStack
from puzzlekit.searching import combination_sum

to_values(reverse_list(build_list([1, 2, 3])))   # [3, 2, 1]
add_binary("11", "1")                            # "100"

stack = MinStack()
stack.push(5)
stack.push(2)
stack.get_min()                                  # 2

combination_sum([2, 3, 6, 7], 7)                 # [[2, 2, 3], [7]]
```

## Behaviour notes

- Functions that rearrange a list work in place on the list they are given:
  `rotate`, `move_zeroes`, `remove_element`, `sort_colors` and `wiggle_sort`.
  `merge` overwrites `nums1` in place and also returns it.
- The linked-list operations relink the nodes they are given rather than
  building new ones.
- Inputs that make no sense for a puzzle raise exceptions: `ValueError` for
  things such as an empty list where one value is needed, an out-of-range `n`
  or a malformed digit string, and `IndexError` for `MinStack` operations on
  an empty stack or an out-of-range `NumArray.sum_range` query.

## What it does not do

puzzlekit is a library only: it installs no command-line program, and it reads
no input files and stores nothing. Use it by importing its functions.