# interviewkit

Well-known coding-interview problems solved in plain Python, using only the
standard library. Each solution is a small importable function or class.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `interviewkit.nodes`

`ListNode(val, next=None)` and `TreeNode(val, left=None, right=None)` are
dataclasses that compare by identity. `build_list(values)` makes a linked
list from an iterable and returns its head (or `None`); `list_values(head)`
turns it back into a Python list.

### `interviewkit.searching`

- `find_duplicate_by_swapping(nums)`: a repeated value of `nums` (values in
  1..n), or `None`; raises `ValueError` for values out of range. The input is
  not modified.
- `find_duplicate_by_cycle(nums)`: the duplicate of n+1 values in 1..n, by
  cycle detection; raises `ValueError` on invalid input.
- `find_duplicate_without_edit(nums)`: a duplicate found by bisecting value
  ranges; `None` for fewer than two values.
- `find_in_sorted_matrix(matrix, target)`: search a matrix sorted along rows
  and columns.
- `min_in_rotated(nums)`: minimum of a rotated ascending sequence; raises
  `ValueError` when empty.
- `least_numbers(nums, k)`: the `k` smallest values, in no particular order;
  `[]` when `k` is not in 1..len(nums).
- `count_occurrences(nums, target)`: occurrences in an ascending sequence.
- `missing_number_by_sum(nums)`, `missing_number_by_xor(nums)`: the value of
  0..n missing from `nums`.
- `index_equal_value(nums)`: an index `i` with `nums[i] == i`, or `None`.

### `interviewkit.arrays`

- `reorder_odd_even_stable(nums)`, `reorder_odd_even(nums)`: move odd values
  before even ones in place (the first keeps relative order).
- `spiral_order(matrix)`: values in clockwise spiral order.
- `validate_stack_sequences(pushed, popped)`
- `more_than_half(nums)`: the majority value, or `None`.
- `max_subarray_sum(nums)`: raises `ValueError` when empty.
- `largest_number(nums)`: the largest concatenation as a string.
- `max_gift_value(values)`: best total moving right or down.
- `inverse_pairs(nums)`: count of pairs `i < j` with `nums[i] > nums[j]`.
- `numbers_appearing_once(nums)`: the two values occurring once, as a tuple.
- `number_appearing_once(nums)`: the value occurring once where others occur
  three times; raises `ValueError` when empty.
- `two_sum_sorted(nums, target)`: a pair summing to `target`, or `None`.
- `continuous_sequences(total)`: runs of two or more consecutive positive
  integers summing to `total`.
- `max_sliding_window(nums, k)`: raises `ValueError` when `k < 1`.
- `is_straight(cards)`: five cards 1..13 with 0 as a wild card.
- `max_profit(prices)`, `product_array(nums)`

### `interviewkit.linkedlist`

`RandomNode(val, next=None, random=None)`; `values_reversed(head)`;
`delete_node(head, node)` (returns the possibly new head);
`delete_all_duplicates(head)` and `delete_duplicates(head)` for sorted lists;
`kth_from_end(head, k)`; `detect_cycle(head)`; `reverse_list(head)`;
`merge_sorted(head1, head2)`; `copy_random_list(head)`;
`intersection_node(head_a, head_b)`.

### `interviewkit.trees`

`build_tree(preorder, inorder)`; `next_in_order(node)` (follows a `parent`
attribute you set on the nodes); `is_same_tree(s, t)`; `is_subtree(s, t)`;
`mirror_recursive(root)`, `mirror_iterative(root)`; `is_symmetric(root)`;
`level_order(root)`, `levels(root)`, `zigzag_levels(root)`;
`verify_postorder_bst(sequence)`; `path_sum(root, total)`;
`tree_to_linked_list(root)` (relinks a search tree into a sorted doubly
linked list via `left`/`right`); `serialize(root)`, `deserialize(data)`;
`kth_smallest(root, k)`; `tree_depth(root)`; `is_balanced(root)`;
`lowest_common_ancestor(root, p, q)`.

### `interviewkit.containers`

- `TwoStackQueue`: `append_tail`, `delete_head`, `len()`.
- `MinStack`: `push`, `pop`, `top`, `min`, `len()`.
- `MedianFinder`: `add_num`, `find_median`.
- `MaxQueue`: `push_back`, `pop_front`, `max`.

Removing from or reading an empty `TwoStackQueue`, `MinStack` or `MaxQueue`
raises `IndexError`; `MedianFinder.find_median` with no numbers raises
`ValueError`.

### `interviewkit.strings`

`replace_spaces(text)`; `word_exists(board, word)`;
`is_match_recursive(s, p)` and `is_match_dp(s, p)` for patterns with `.` and
`*`; `is_number(s)`; `permutations(s)`; `num_decodings(s)`;
`longest_unique_substring(s)`; `first_unique_char(s)` (-1 if none);
`reverse_words(s)`; `left_rotate(s, n)` (raises `ValueError` if `n` is out
of range); `str_to_int(s)` (clamped to the 32-bit range); `kmp_next(pattern)`
and `kmp_search(text, pattern)` (-1 if not found).

### `interviewkit.numbers`

`fibonacci(n)` (`fibonacci(1) == 0`); `digit_sum(number)`;
`moving_count(threshold, rows, cols)`; `max_product_dp(length)`,
`max_product_greedy(length)`; `count_one_bits(n)` (32-bit two's complement);
`power(base, exponent)` (raises `ZeroDivisionError` for zero to a negative
power); `numbers_up_to_digits(n)` (a generator of decimal strings);
`count_digit_one(n)`; `nth_digit(n)`; `nth_ugly_number(n)`;
`dice_probabilities(n)` (list of `(total, probability)`);
`last_remaining(n, m)`; `sum_to(n)`; `add(a, b)` (32-bit, wrapping).

## Example

```python
from interviewkit.nodes import build_list, list_values
from interviewkit.linkedlist import reverse_list
from interviewkit.trees import build_tree, serialize, deserialize
from interviewkit.strings import is_match_dp, kmp_search
from interviewkit.containers import MinStack

list_values(reverse_list(build_list([1, 2, 3])))   # [3, 2, 1]

root = build_tree([1, 2, 4, 7, 3, 5, 6, 8], [4, 7, 2, 1, 5, 3, 8, 6])
same = deserialize(serialize(root))

is_match_dp("aaa", "ab*ac*a")                      # True
kmp_search("hello world", "world")                 # 6

stack = MinStack()
for value in (3, 1, 2):
    stack.push(value)
stack.min()                                        # 1
```

## What it does not do

The package is a library only: it has no command-line tool, and the
functions return their results rather than printing them.