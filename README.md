# algokit

Classic algorithms and small data structures as plain Python functions and
classes. It has no third-party dependencies.

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

### `algokit.linked_list`

`ListNode(val=0, next=None)` is a singly linked list node. `build_list(values)`
builds a list and returns its head (or `None` for no values);
`list_values(head)` returns the values of an acyclic list.

Operations: `add_two_numbers`, `remove_nth_from_end`, `has_cycle`,
`sort_list`, `swap_pairs`, `get_intersection_node`, `remove_elements`,
`merge_two_lists`, `odd_even_list`, `middle_node`, `delete_node`,
`reverse_between`, `delete_duplicates` (keeps one node of each run of equal
values in a sorted list) and `delete_all_duplicates` (drops every value that
occurs more than once). Out-of-range positions raise `ValueError`, as does
`delete_node` on the last node of a list.

### `algokit.trees`

`TreeNode(val=0, left=None, right=None)` is a binary tree node.
`num_trees(n)` counts the distinct binary search trees on keys `1..n`;
`is_valid_bst(root)` checks the strict search-tree property;
`is_symmetric(root)` checks that a tree mirrors itself.

### `algokit.search`

- `exist(board, word)` — can `word` be traced through adjacent grid cells,
  each used at most once?
- `can_finish(num_courses, prerequisites)` — can all courses be taken, given
  `[course, prerequisite]` pairs? Course numbers outside the range raise
  `ValueError`.
- `nth_ugly_number(n)` — the n-th number whose only prime factors are 2, 3
  and 5.
- `k_smallest_pairs(nums1, nums2, k)` — up to `k` tuples `(a, b)` with the
  smallest sums, from two sorted sequences.

### `algokit.containers`

- `TwoStackQueue` — a FIFO queue with `push`, `pop`, `peek` and `is_empty`;
  `pop` and `peek` on an empty queue raise `IndexError`.
- `CircularDeque(k)` — a deque holding at most `k` items. `insert_front`,
  `insert_last`, `delete_front` and `delete_last` return `False` when the
  deque is full or empty; `get_front` and `get_rear` raise `IndexError` when
  it is empty. `is_empty`, `is_full` and `len()` report its state.

### `algokit.arrays`

`two_sum` (returns an index tuple or `None`), `next_permutation`, `rotate`,
`merge_intervals`, `longest_consecutive`, `single_number`,
`majority_element`, `majority_elements_third`, `remove_duplicates`,
`move_zeroes`, `find_max_consecutive_ones` and `remove_element`.
`next_permutation`, `rotate` and `move_zeroes` change the list they are given;
`remove_duplicates` and `remove_element` compact it and return the count of
items kept.

### `algokit.stacks`

`is_valid`, `max_depth`, `MinStack` (`push`, `pop`, `top`, `get_min`),
`eval_rpn` (division truncates toward zero), `simplify_path`,
`decode_string`, `calculate` (integers, `+`, `-` and parentheses),
`longest_valid_parentheses`, `final_prices`, `daily_temperatures`,
`largest_rectangle_area` and `trap`.

### `algokit.hashing`

`group_anagrams`, `word_break`, `contains_duplicate`, `intersection`,
`contains_nearby_duplicate`, `is_isomorphic`, `is_anagram`, `can_construct`,
`first_uniq_char`, `longest_palindrome`, `find_shortest_subarray` and
`next_greater_element`.

### `algokit.prefix_sums`

`RangeSumQuery(nums)` answers `sum_range(left, right)` (inclusive) in constant
time and raises `IndexError` for a range outside the sequence. Also
`sum_odd_length_subarrays`, `pivot_index`, `subarray_sum` and
`number_of_subarrays` (which requires `k >= 1`).

## Examples

```python
from algokit.linked_list import build_list, list_values, add_two_numbers
from algokit.stacks import eval_rpn, simplify_path
from algokit.containers import CircularDeque

total = add_two_numbers(build_list([9]), build_list([9, 9, 9, 9]))
print(list_values(total))                   # [8, 0, 0, 0, 1]

print(eval_rpn(["2", "1", "+", "3", "*"]))  # 9
print(simplify_path("/a/./b/../../c/"))     # /c

deque = CircularDeque(3)
deque.insert_last(1)
deque.insert_front(2)
print(deque.get_front(), deque.get_rear())  # 2 1
```

## What it does not do

algokit is a library only: it has no command-line program and reads or
writes no files. Call its functions from your own code.