# algokit

This is a collection of classic algorithm exercises. Each one is a plain Python function or a small class.
The package needs only the standard library.

## Modules

- `algokit.helpers`
  - Node types: `ListNode` (`val`, `next`) and `TreeNode` (`val`, `left`, `right`).
  - `Node` has `val`, `left`, `right`, `next` and `random`.
  - Formatting helpers:
    - `format_list_node` renders `[1 -> 2 -> 3]`.
    - `format_vector` renders `[1 , 2 , ]`.
    - `format_2d_vector` renders a grid between dashed rules.
  - `random_number(low, high)` returns an integer in the closed range.
  - `random_ints(size=-1)` returns values in 0–99. The default size of -1 picks a random size below 100.
  - `swap_items(values, i, j)` swaps two positions in place.
- `algokit.dp` holds dynamic-programming puzzles:
  - `seats`
  - `stamps`, which returns `UNREACHABLE` (1000) when the total cannot be made.
  - `fruit`
  - `boat`
  - `job_plan`
  - `missile`
  - `longest_increasing_subsequence`
  - `stack_sequences`
- `algokit.search` has `binary_search(values, key, low=0, high=None)`. It returns the index of the key, or -1.
- `algokit.lists` holds linked-list problems:
  - `copy_random_list`
  - `has_cycle` and `has_cycle_by_set`
  - `sort_list`, a merge sort, and `sort_list_by_selection`
  - `get_intersection_node` and `get_intersection_node_by_switching`
  - `reverse_list`
  - `is_palindrome_list`
  - `delete_node`
- `algokit.trees` holds binary-tree problems:
  - `level_order` and `level_order_recursive`
  - `zigzag_level_order`
  - `max_depth`
  - `build_tree` and `build_tree_indexed`
  - `sorted_array_to_bst`
  - `connect`
  - `max_path_sum`
  - `kth_smallest`
  - `lowest_common_ancestor` and `lowest_common_ancestor_iterative`
- `algokit.matching` holds:
  - `is_match` and `is_match_recursive`, which match regular expressions using only `.` and `*`.
  - `partition`, for palindrome partitioning.
  - `word_break` and `word_break_dp`.
- `algokit.strings` holds:
  - `is_palindrome`
  - `eval_rpn`
  - `fraction_to_decimal`
  - `title_to_number`
  - `is_bigger`
  - `largest_number`
  - `calculate` and `calculate_with_stacks`
- `algokit.profits` holds:
  - `pascal_triangle`
  - `max_profit_once` and `max_profit_once_brute`
  - `max_profit_many`
  - `can_complete_circuit` and `can_complete_circuit_scan`
  - `max_product` and `max_product_dp`
  - `rob`
- `algokit.arrays` holds:
  - `longest_consecutive` and `longest_consecutive_sorted`
  - `single_number`
  - `find_peak_element`
  - `majority_element` and `majority_element_counting`
  - `rotate`, which works in place.
  - `find_kth_largest`
  - `contains_duplicate`
  - `product_except_self`
- `algokit.graphs` holds:
  - `ladder_length` and `ladder_length_scan`
  - `solve_surrounded`, which works in place.
  - `num_islands`, which clears the grid.
  - `can_finish` and `can_finish_dfs`
- `algokit.bits` holds:
  - `trailing_zeroes`
  - `factorial`
  - `reverse_bits` and `hamming_weight`, both for unsigned 32-bit values.
  - `is_happy`
- `algokit.structures` holds:
  - `LRUCache`, with `get` and `put`.
  - `MinStack`, with `push`, `pop`, `top` and `get_min`.
  - `Trie`, with `insert`, `search` and `starts_with`. It takes lowercase ASCII words only.

## Examples

```python
from algokit.dp import stamps
from algokit.strings import eval_rpn, fraction_to_decimal
from algokit.structures import LRUCache

stamps(10, [1, 3, 3, 3, 4])                 # 3
eval_rpn(["2", "1", "+", "3", "*"])         # 9
fraction_to_decimal(1, 7)                   # "0.(142857)"

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                                # 1
cache.put(3, 3)
cache.get(2)                                # -1
```

## What it does not do

The package installs no command-line program and does not read input files.
Every exercise is called from Python code. You build the nodes, lists and grids yourself.

## Running the tests

```
pip install -e .[test]
pytest
```