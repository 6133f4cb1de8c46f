# algodrills

A collection of classic interview-style algorithms written as plain Python
functions. It covers array problems, recursion and backtracking, graph
traversal, shortest paths, minimum spanning trees, a disjoint-set structure
and binary tree traversals. Many problems come in several versions, from a
brute-force one to an optimal one, so you can compare the approaches side by
side.

The package depends on nothing outside the standard library and needs
Python 3.10 or later.

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

- `algodrills.array_basics`: sortedness checks (`is_sorted`,
  `is_sorted_brute`), the largest element (`largest`, `largest_by_sorting`),
  the second largest element (`second_largest`, `second_largest_two_pass`,
  `second_largest_by_sorting`), `linear_search`, `max_consecutive_ones`, the
  element that appears once (`single_number_xor` and three other versions),
  the missing number of `0..n` (`missing_number_sum` and two other versions),
  and `remove_duplicates`, which compacts a sorted list in place and returns
  the number of unique values.
- `algodrills.rearrange`: left rotation by one place (`rotate_left_one`,
  `rotate_left_one_copy`) or by `d` places (`rotate_left`,
  `rotate_left_reversal`), moving zeros to the end, and the union and
  intersection of two sorted lists. All of these return new lists.
- `algodrills.subarrays`: the length of the longest subarray with sum `k`
  (`longest_subarray_with_sum`, plus a sliding-window version for
  non-negative values and two brute-force versions), and the number of
  subarrays with sum `k` (`count_subarrays_with_sum` and two brute-force
  versions).
- `algodrills.sequences`: `leaders`, `next_permutation` (and the in-place
  `next_permutation_inplace`, which wraps the last permutation round to the
  first), sorting 0s, 1s and 2s (`sort_colors`, `sort_colors_counting`),
  two-sum in three versions returning lists of value pairs, and the longest
  run of consecutive integers (`longest_consecutive` and two other versions).
- `algodrills.recursion`: `factorial`, `count_up`, `count_down`,
  `count_from_zero`, `greeting_lines`, `natural_sum`,
  `natural_sum_accumulated`, `reverse`, the generators `subsequences` and
  `subsequences_with_sum`, `combination_sum` and `subset_sums`.
- `algodrills.challenges`: two short coding-test problems. `houses_needed`
  returns how many leading houses are needed to feed `r` rats eating `unit`
  each (one more than the number of houses if they all fall short).
  `operations_binary_string` evaluates a string such as `"1C0C1C1A0B1"`
  left to right, where `A` is and, `B` is or and any other letter is xor.
- `algodrills.graph_traversal`: `adjacency_matrix` and `adjacency_list` for
  undirected graphs on vertices `0..n`, `bfs`, `dfs` (starting at vertex 1 by
  default), topological sort by depth-first search (`topological_sort_dfs`)
  and by Kahn's algorithm (`topological_sort_kahn`), and unit-weight shortest
  paths (`shortest_path_unit`, with `-1` for unreachable vertices).
- `algodrills.grids`: `count_islands` counts groups of `"1"` cells joined in
  any of eight directions; `count_distinct_islands` counts differently shaped
  groups of `1` cells joined in four directions.
- `algodrills.disjoint_set`: `DisjointSet` over nodes `0..n`, with `find`
  (with path compression), `union_by_rank` and `union_by_size`.
- `algodrills.weighted_graphs`: `dijkstra` (unreachable vertices get
  `UNREACHABLE`, which is `10**9`), `spanning_tree_weight` (Prim's algorithm
  from vertex 0), and `shortest_path_dag` (distances from vertex 0, `-1` for
  unreachable vertices).
- `algodrills.trees`: the `TreeNode` dataclass, `build_tree` from a preorder
  list of values where `-1` marks an absent child, and `inorder`, `preorder`
  and `level_order` traversal.

Invalid input, such as an empty list where a value is needed or a vertex out
of range, raises `ValueError`.

## Examples

```python
from algodrills.sequences import longest_consecutive, next_permutation
from algodrills.recursion import combination_sum
from algodrills.disjoint_set import DisjointSet

longest_consecutive([100, 4, 200, 1, 3, 2])   # 4
next_permutation([1, 2, 3])                   # [1, 3, 2]
combination_sum([2, 3, 6, 7], 7)              # [[2, 2, 3], [7]]

ds = DisjointSet(7)
ds.union_by_size(1, 2)
ds.union_by_size(2, 3)
ds.find(1) == ds.find(3)                      # True
```

Weighted graph functions take adjacency lists of `(neighbour, weight)` pairs
indexed by node:

```python
from algodrills.weighted_graphs import dijkstra

adj = [[(1, 4), (2, 4)], [(0, 4), (2, 2)], [(0, 4), (1, 2)]]
dijkstra(adj, 0)                              # [0, 4, 4]
```

```python
from algodrills.trees import build_tree, inorder, level_order

root = build_tree([1, 2, -1, -1, 3, -1, -1])
inorder(root)                                 # [2, 1, 3]
level_order(root)                             # [[1], [2, 3]]
```

## What it does not do

The package is a library only. It has no command-line program and reads
nothing from standard input: every function takes its data as arguments and
returns its result instead of printing it.