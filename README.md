# algonotes

Classic algorithms and data structures in plain Python, together with
solutions to a set of small exercise problems built on them. The package has
no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algonotes.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `quick_sort`, `merge_sort`; each takes any iterable and returns a new sorted list |
| `algonotes.binary_search` | `binary_search` (returns a `SearchResult` with `index`, `probes` and `found`), and search-on-answer helpers `max_budget_cap`, `contains_each`, `max_cut_height` |
| `algonotes.containers` | `ArrayStack` (fixed capacity, 100 by default), `LinkedStack`, `LinkedQueue`, `Vector` (capacity doubles when full) |
| `algonotes.heap` | `MinHeap` (capacity doubles when full, halves when less than half used), `parent_index`, `left_child_index` |
| `algonotes.hashing` | `division_hash`, `shift_hash`, `DirectHashTable` (one slot per hash, integer keys), `ChainedHashTable` (string keys, chained collisions) |
| `algonotes.exercises` | `running_medians`, `remove_typo`, `countdown`, `min_decrements`, `frequency_sort`, `is_right_triangle`, `parking_walk`, `apply_ac`, `still_in_office`, `is_vps`, `outfit_combinations` |
| `algonotes.grid_bfs` | `years_until_split`, `days_to_ripen`, `days_to_ripen_3d`, `knight_moves`, `reachable_cells` |
| `algonotes.backtracking` | `count_subset_sums`, `permutations_of_range`, `combinations_of_range`, `products_of_range` |
| `algonotes.graph_search` | `adjacency_list`, `adjacency_matrix`, `bfs_order`, `bfs_distances`, `bfs_all_components`, `shortest_path_length`, `sns_friends` (returns a `FriendSearch` with `order` and `friends`), `min_stations` |
| `algonotes.grid_search` | `grid_dfs_order`, `grid_bfs_order`, `maze_has_exit_dfs`, `maze_has_exit_bfs`, `random_maze`, `FileNode`, `find_file` |

## Examples

```python
from algonotes.sorting import merge_sort
from algonotes.binary_search import binary_search
from algonotes.containers import LinkedQueue
from algonotes.heap import MinHeap
from algonotes.graph_search import adjacency_list, shortest_path_length
from algonotes.exercises import apply_ac

merge_sort([5, 2, 9, 1])            # [1, 2, 5, 9]

result = binary_search([1, 3, 5, 7], 5)
result.found, result.index          # (True, 2)

queue = LinkedQueue()
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()                     # 1

heap = MinHeap()
for value in (7, 3, 5):
    heap.insert(value)
heap.delete_min()                   # 3

graph = adjacency_list(4, [(0, 1), (1, 2), (2, 3), (3, 0)], directed=False)
shortest_path_length(graph, 0, 3)   # 1

apply_ac("RDD", [1, 2, 3, 4])       # [2, 1]
```

## Errors and missing results

- Popping or peeking an empty `ArrayStack`, `LinkedStack` or `LinkedQueue`,
  deleting from an empty `MinHeap`, and indexing a `Vector` out of range raise
  `IndexError`. Pushing onto a full `ArrayStack` raises `OverflowError`.
  `Vector.pop_back` on an empty vector does nothing.
- `DirectHashTable.get` and `ChainedHashTable.get` raise `KeyError` for a key
  that is not stored; in a `DirectHashTable` a colliding key replaces the one
  held before it.
- `apply_ac` raises `ValueError` when a `D` command meets an empty sequence;
  `knight_moves` raises `ValueError` when the goal cannot be reached.
- `shortest_path_length`, `bfs_distances` and `min_stations` use `None` for a
  vertex or station that cannot be reached. `days_to_ripen` and
  `days_to_ripen_3d` return `-1` when some tomato never ripens.

## What this package does not do

Everything here is a library function or class that takes Python values and
returns Python values. There is no command-line program, and nothing reads
problem input from standard input or prints answers; parsing input and
formatting output are left to the caller.