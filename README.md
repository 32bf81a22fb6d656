# algorithmics

Classic algorithms and data structures written in plain Python, using only the
standard library. Every function takes ordinary Python values (lists, tuples,
dicts, strings) and returns its result; inputs are never modified unless a
function's name says so. Errors are raised as exceptions.

## Installation

```
pip install algorithmics
```

To run the tests:

```
pip install "algorithmics[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algorithmics.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort` (first element as pivot), `lomuto_quick_sort` (last element as pivot), `dutch_flag_sort`, `count_inversions` |
| `algorithmics.searching` | `linear_search`, `binary_search`, `lower_bound`, `upper_bound`, `count_occurrences` |
| `algorithmics.bits` | `get_bit`, `set_bit`, `clear_bit`, `update_bit`, `clear_last_bits`, `clear_bits_range`, `count_set_bits`, `count_set_bits_fast` |
| `algorithmics.textops` | `reverse_string`, `sort_strings` (longest first, ties alphabetical), `tokenize` |
| `algorithmics.arithmetic` | `gcd` (Euclid), `hanoi_moves` |
| `algorithmics.heaps` | `heapify`, `build_max_heap`, `heap_sort`, `MaxHeap` |
| `algorithmics.backtracking` | `hamiltonian_cycles`, `n_queens`, `maze_paths` |
| `algorithmics.stack` | `BoundedStack`, `StackOverflow`, `StackUnderflow` |
| `algorithmics.linked_list` | `Node`, `sorted_merge`, `from_values`, `to_values` |
| `algorithmics.disjoint_set` | `UnionFind`, `process_queries` |
| `algorithmics.traversal` | `Graph` with `add_edge`, `neighbours`, `adjacency`, `bfs`, `dfs` |
| `algorithmics.articulation` | `articulation_points` (Tarjan) |
| `algorithmics.coloring` | `greedy_coloring` |
| `algorithmics.shortest_paths` | `bellman_ford`, `dijkstra`, `floyd_warshall`, `NegativeCycleError` |
| `algorithmics.flow` | `ford_fulkerson`, `FlowResult` |
| `algorithmics.mst` | `Edge`, `kruskal`, `kruskal_weight`, `prim_weight`, `prim_tree` |
| `algorithmics.dynamic` | `knapsack_01`, `travelling_salesman` |
| `algorithmics.greedy` | `Job`, `max_activities`, `fractional_knapsack`, `job_sequencing` |
| `algorithmics.trees` | `TreeNode`, `BinarySearchTree`, `inorder`, `preorder`, `postorder`, `level_order`, `height` |

## Examples

### Sorting and searching

```python
from algorithmics.sorting import merge_sort, count_inversions
from algorithmics.searching import lower_bound, upper_bound, count_occurrences

merge_sort([5, 4, 3, 6, 1, 2, 7])         # [1, 2, 3, 4, 5, 6, 7]
count_inversions([5, 4, 3, 6, 1, 2, 7])   # 11

data = [10, 20, 40, 40, 40, 70, 100, 130, 560]
lower_bound(data, 40)                      # 2
upper_bound(data, 40)                      # 5
count_occurrences(data, 40)                # 3
```

`linear_search` returns the index of the first match or `None`.

### Bits and arithmetic

```python
from algorithmics.bits import clear_last_bits, clear_bits_range, count_set_bits
from algorithmics.arithmetic import gcd, hanoi_moves

clear_last_bits(15, 2)        # 12
clear_bits_range(31, 1, 3)    # 17
count_set_bits(15)            # 4
gcd(48, 18)                   # 6
list(hanoi_moves(2))          # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]
```

`update_bit` accepts only 0 or 1 as the new value, `clear_bits_range` requires
`low <= high`, and the set-bit counters accept only non-negative numbers; each
raises `ValueError` otherwise. `gcd` raises `ZeroDivisionError` when its second
argument is zero.

### Heaps

```python
from algorithmics.heaps import MaxHeap, heap_sort

heap_sort([3, 1, 2])          # [1, 2, 3]

heap = MaxHeap([4, 9, 1])
heap.push(7)
heap.pop_root()               # 9
heap.remove(1)
len(heap)                     # 2
```

`pop_root` on an empty heap raises `IndexError`; `remove` of a value that is
not present raises `ValueError`. Iterating a `MaxHeap` walks its array
representation.

### Backtracking

`hamiltonian_cycles(adjacency, start)` yields every Hamiltonian cycle of a 0/1
adjacency matrix as a list of vertex indices beginning and ending at `start`.
`n_queens(size)` returns the first placement found as rows of 0/1, or `None`
when there is none (`n_queens(3)` is `None`). `maze_paths(maze)` takes rows of
characters, with `'X'` marking a wall, and yields each right/down path from the
top-left to the bottom-right cell as a 0/1 grid.

### Stack

```python
from algorithmics.stack import BoundedStack, StackOverflow

stack = BoundedStack(5)
for item in (10, 20, 30, 40, 50):
    stack.push(item)
try:
    stack.push(60)
except StackOverflow:
    pass
stack.pop()                   # 50
```

Popping or peeking at an empty stack raises `StackUnderflow`.

### Linked lists

```python
from algorithmics.linked_list import from_values, sorted_merge, to_values

merged = sorted_merge(from_values([5, 10, 15]), from_values([2, 3, 20]))
to_values(merged)             # [2, 3, 5, 10, 15, 20]
```

### Graphs

```python
from algorithmics.traversal import Graph
from algorithmics.shortest_paths import dijkstra

g = Graph()
g.add_edge(0, 1, 1)
g.add_edge(1, 2, 2)
g.add_edge(0, 2, 4)
g.bfs(0)                      # [0, 1, 2]
dijkstra(g.adjacency(), 0)    # {0: 0, 1: 1, 2: 3}
```

`add_edge` takes an optional weight (default 1) and adds the reverse edge
unless `bidirectional=False`.

```python
from algorithmics.shortest_paths import floyd_warshall
from algorithmics.dynamic import travelling_salesman

INF = 10000
floyd_warshall([
    [0, 3, INF, 7],
    [8, 0, 3, INF],
    [5, INF, 0, 1],
    [2, INF, INF, 0],
])
# [[0, 3, 6, 7], [6, 0, 3, 4], [3, 6, 0, 1], [2, 5, 8, 0]]

travelling_salesman([
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
], 0)                         # 80
```

- `bellman_ford(vertex_count, edges, source)` returns a list of distances with
  `math.inf` for unreachable vertices and raises `NegativeCycleError` when a
  negative cycle is reachable.
- `ford_fulkerson(capacity, source, sink)` returns a `FlowResult` holding
  `max_flow`, the `augmenting_paths` used and their `bottlenecks`.
- `kruskal` returns the chosen `Edge` objects; `kruskal_weight` and
  `prim_weight` return total weights; `prim_tree` works on a weight matrix
  where 0 means no edge. `kruskal` and `prim_tree` raise `ValueError` for a
  disconnected graph.
- `articulation_points(adjacency, vertex_count)` returns the cut vertices in
  increasing order; `greedy_coloring(vertex_count, edges)` returns the number
  of colours used and each vertex's colour.
- `UnionFind` offers `find`, `same_set`, `set_size`, `union` and `num_sets`;
  `process_queries` runs `("union", x, y)` commands and answers the others.

### Greedy and dynamic programming

```python
from algorithmics.greedy import Job, max_activities, fractional_knapsack, job_sequencing
from algorithmics.dynamic import knapsack_01

max_activities([(1, 2), (3, 4), (0, 6), (5, 7)])   # 3
fractional_knapsack([(60, 10), (100, 20), (120, 30)], 50)   # 240.0
knapsack_01([60, 100, 120], [10, 20, 30], 50)      # 220
scheduled, profit = job_sequencing([Job(1, 2, 100), Job(2, 1, 19), Job(3, 2, 27)])
profit                                             # 127
```

### Trees

```python
from algorithmics.trees import BinarySearchTree

tree = BinarySearchTree([50, 30, 20, 40, 70, 60, 80])
tree.inorder()       # [20, 30, 40, 50, 60, 70, 80]
tree.preorder()      # [50, 30, 20, 40, 70, 60, 80]
tree.postorder()     # [20, 40, 30, 60, 80, 70, 50]
tree.level_order()   # [50, 30, 70, 20, 40, 60, 80]
tree.height()        # 3
60 in tree           # True
```

The free functions `inorder`, `preorder`, `postorder`, `level_order` and
`height` work on any `TreeNode`.

## What this package does not do

It is a library only: it installs no command-line program and reads no input
from the terminal. Functions return their results rather than printing them,
so reading input and formatting output is left to the caller.