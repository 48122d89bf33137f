# algorithmia

A small collection of classic algorithms in plain Python. It depends on
nothing beyond the standard library.

## What is inside

- `algorithmia.sorting`: `bubble_sort`, `heap_sort`, `merge_sort` and
  `quick_sort`. Each takes any iterable of comparable items and returns a new
  ascending list; the input is not changed.
- `algorithmia.graphs`: algorithms on square cost or adjacency matrices
  (lists of lists of integers). In cost matrices `NO_EDGE` (999) marks a
  missing edge.
  - `dijkstra(cost, source)`: shortest distance from `source` to every vertex;
    unreachable vertices keep a distance of at least `NO_EDGE`.
  - `floyd_warshall(cost)`: all-pairs shortest distance matrix.
  - `warshall(adjacency)`: path (transitive closure) matrix of a 0/1 matrix.
  - `kruskal(cost)` and `prim(cost)`: minimum spanning trees, returned as a
    `SpanningTree` holding a tuple of `Edge(u, v, cost)` values in the order
    chosen and their `total_cost`. Both raise `ValueError` for a graph that is
    not connected; `prim` grows the tree from vertex 0.
  - `topological_sort_dfs(adjacency)` and
    `topological_sort_source_removal(adjacency)`; the latter raises
    `ValueError` if the graph has a cycle.
- `algorithmia.combinatorial`:
  - `min_assignment_cost(cost)`: least cost of assigning each row to a
    distinct column, by backtracking.
  - `knapsack_bruteforce(capacity, weights, values)` and
    `knapsack_dynamic(capacity, weights, values)`: best 0/1 knapsack value.
  - `fractional_knapsack(capacity, weights, values)`: greedy by value per unit
    of weight, returning a `FractionalKnapsackResult` with the `KnapsackStep`
    entries taken (item index from 0, weight, value, fraction) and the
    `total_value`.
  - `n_queens(n)`: a generator of every solution, each a tuple giving the
    column (from 1) of the queen in rows 1..n.
  - `tsp_min_cost(graph, start=0)`: cost of the cheapest tour through every
    vertex, where a zero entry means no edge; raises `ValueError` if there is
    no tour.
- `algorithmia.problems`: `find_pattern` (every index where a pattern occurs,
  overlaps included), `remove_adjacent_duplicates`, `asteroid_collision`, and
  `reverse_list` over a singly linked `ListNode` (build one with
  `ListNode.from_iterable`, read it back with `to_list` or by iterating).

Invalid input such as a non-square matrix, mismatched weight and value lists
or an out-of-range vertex raises `ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from algorithmia.sorting import merge_sort
from algorithmia.combinatorial import knapsack_dynamic, min_assignment_cost, tsp_min_cost
from algorithmia.problems import ListNode, find_pattern, reverse_list

merge_sort([64, 34, 25, 12, 22, 11, 90])
# [11, 12, 22, 25, 34, 64, 90]

knapsack_dynamic(50, [10, 20, 30], [60, 100, 120])
# 220

min_assignment_cost([[9, 2, 7], [6, 4, 3], [5, 8, 1]])
# 9

tsp_min_cost(
    [
        [0, 10, 15, 20],
        [10, 0, 35, 25],
        [15, 35, 0, 30],
        [20, 25, 30, 0],
    ],
    0,
)
# 80

find_pattern("AABACADACAABAABA", "AABA")
# [0, 9, 12]

reverse_list(ListNode.from_iterable([1, 2, 3])).to_list()
# [3, 2, 1]
```

## Command line

Installing the package provides an `algorithmia` command. It reads
whitespace-separated integers from standard input, runs one algorithm and
prints the result. The subcommands and what they read are:

| Command    | Input                                   |
|------------|-----------------------------------------|
| `dijkstra` | n, an n x n cost matrix, source vertex  |
| `floyd`    | n, an n x n cost matrix                 |
| `warshall` | n, an n x n adjacency matrix            |
| `kruskal`  | n, an n x n cost matrix                 |
| `prim`     | n, an n x n cost matrix                 |
| `topo`     | n, an n x n adjacency matrix            |
| `nqueens`  | n                                       |
| `knapsack` | n, capacity, n weights, n values        |
| `heapsort` | n, n values                             |

`topo` takes `--method dfs` (the default) or `--method source-removal`;
`heapsort` takes `--time` to also print the time taken. For example:

```
echo "3  0 1 999  1 0 2  999 2 0  0" | algorithmia dijkstra
```

prints

```
Shortest distance from source 0
0 --> 0 = 0
0 --> 1 = 1
0 --> 2 = 3
```

Malformed or invalid input prints `error: ...` on standard error and exits
with status 1. For the full list of commands and options, run:

```
algorithmia --help
```

The command reads its input once and does not prompt. The assignment problem,
brute-force and fractional knapsack, travelling salesman, sorting functions
other than heap sort, and the string and list problems are available only from
Python, not from the command line.