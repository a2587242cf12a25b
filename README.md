# puzzlekit

A library of small, self-contained solutions to classic algorithmic
puzzles: dynamic programming, array and string problems, grid searches,
graph questions, and a few stateful containers. It uses only the standard
library and supports Python 3.10 and later.

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

### `puzzlekit.dynamic`

- `num_ways(words, target)`: ways to build `target` from columns of equal-length `words`, taken left to right.
- `count_good_strings(low, high, zero, one)`: strings with length in `[low, high]` made of blocks of `zero` zeros and `one` ones.
- `mincost_tickets(days, costs)` and `mincost_tickets_carry(days, costs)`: cheapest set of 1-, 7- and 30-day passes covering the travel days of a year.

Both counting functions reduce their results modulo 1 000 000 007.

### `puzzlekit.arrays`

`is_array_special`, `is_sorted_rotated`, `is_sorted_rotated_by_offset`,
`longest_monotonic_subarray`, `max_ascending_sum`, `tuple_same_product`,
`count_bad_pairs`, `maximum_digit_sum_pair`, `min_operations_to_threshold`,
`ways_to_split_array`, `box_moves`, `prefix_common_array`, `minimize_xor`,
`xor_all_nums`, `does_valid_array_exist`, `first_complete_index`,
`grid_game`, `lexicographically_smallest_array`.

### `puzzlekit.text`

`are_almost_equal`, `clear_digits`, `remove_occurrences`,
`max_split_score`, `vowel_strings`, `vowel_strings_sparse`,
`count_palindromic_subsequence`, `shifting_letters`, `string_matching`,
`count_prefix_suffix_pairs`, `prefix_count`, `word_subsets`,
`can_construct`, `can_be_valid`, `minimum_length`.

`remove_occurrences` raises `ValueError` when `part` is empty, and
`max_split_score` raises `ValueError` for strings shorter than two
characters.

### `puzzlekit.containers`

- `query_results(limit, queries)`: after each `[ball, color]` query, the number of distinct colours in use.
- `NumberContainers`: `change(index, number)` stores a number at an index; `find(number)` returns the smallest index holding it, or -1.
- `ProductOfNumbers`: `add(num)` appends to a stream; `get_product(k)` returns the product of the last `k` values.

### `puzzlekit.grids`

`min_cost_path`, `trap_rain_water`, `highest_peak`, `count_servers`,
`find_max_fish`.

### `puzzlekit.graphs`

`eventual_safe_nodes`, `maximum_invitations`, `check_if_prerequisite`,
`check_if_prerequisite_topo`, `find_redundant_connection`,
`find_redundant_connection_dfs`, `magnificent_sets` (returns -1 when no
valid grouping exists).

### `puzzlekit.islands`

- `DisjointSet(n)`: union-find over `0..n-1` with `find`, `unite` and `size_of`.
- `largest_island(grid)` and `largest_island_bfs(grid)`: largest island in a square grid after turning at most one water cell into land.

Several problems have two solutions that answer the same question by
different methods, for example `mincost_tickets` and
`mincost_tickets_carry`, or `check_if_prerequisite` and
`check_if_prerequisite_topo`.

## Examples

```python
from puzzlekit.dynamic import count_good_strings
from puzzlekit.text import clear_digits
from puzzlekit.containers import ProductOfNumbers
from puzzlekit.islands import largest_island

count_good_strings(3, 3, 1, 1)        # 8
clear_digits("cb34")                  # ""

products = ProductOfNumbers()
for n in (3, 0, 2, 5, 4):
    products.add(n)
products.get_product(2)               # 20

largest_island([[1, 0], [0, 1]])      # 3
```

## What it does not do

puzzlekit is a library of functions and classes only. It has no
command-line tool, and it does not read puzzle input from files; callers
pass Python lists, strings and integers directly.