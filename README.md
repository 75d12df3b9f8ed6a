# algodrills

Classic algorithm exercises as plain Python functions and small classes,
using only the standard library. Errors are raised as exceptions
(mostly `ValueError` or `IndexError` for bad input).

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

| Module | Contents |
| --- | --- |
| `algodrills.bits` | `is_odd`, `get_ith_bit`, `set_ith_bit`, `clear_ith_bit`, `update_ith_bit`, `clear_last_i_bits`, `clear_range`, `replace_bits`, `count_bits`, `count_bits_kernighan`, `decimal_to_binary`, `hamming_distance`, `longest_consecutive_ones`, `is_power_of_two`, `is_power_of_four`, `sort_by_bits` |
| `algodrills.bit_problems` | `range_bitwise_and`, `count_triplets`, `matrix_score`, `total_hamming_distance`, `tsp` (bitmask DP), `unique_number`, `unique_pair`, `unique_among_triples`, `subsequences` (a generator) |
| `algodrills.dp` | `frog1`, `frog1_memo`, `frog2`, `knapsack` (items as `(weight, value)`), `vacation` |
| `algodrills.large_numbers` | `add_numbers` on digit strings, `big_factorial` (returns a digit string), `power_mod`, `multiply_mod`, `matrix_multiply`, `matrix_power`, `fibonacci`, `fibonacci_sum`, `fibonacci_range_sum`; results modulo `MOD = 10**9 + 7` unless another modulus is given |
| `algodrills.pigeonhole` | `divisible_subset` (1-based indices of a contiguous run whose sum divides by the length), `holi_max_distance` |
| `algodrills.dsu` | `DisjointSet` (`find`, `unite`, `connected`) with path compression and union by size; `connectivity_queries` |
| `algodrills.graph` | `Graph` (`add_edge`, `adjacency_lines`, `bfs`, `dfs`, `shortest_distances`, `shortest_path`) and `NamedGraph` (`add_edge`, `adjacency_lines`) |
| `algodrills.graph_problems` | `Trie` (`add_word`, `in`), `find_words` on a letter board, `tree_distances`, `is_valid_bfs`, `ladder_length` |
| `algodrills.lca` | `has_cycle`, `ParentPointerLCA` (`lca`), `BinaryLiftingLCA` (`lca`, `distance`) |
| `algodrills.shortest_paths` | `bellman_ford`, `NegativeCycleError`, `WeightedGraph` (`add_edge`, `dijkstra`, `shortest_distance`) |
| `algodrills.mst` | `kruskal_mst`, `prims_mst` |

Distances to unreachable vertices are reported as `None` by
`Graph.shortest_distances`, `bellman_ford` and `WeightedGraph.dijkstra`.
`bellman_ford` raises `NegativeCycleError` when a negative cycle is reachable
from the source.

## Examples

```python
from algodrills.bits import count_bits, sort_by_bits
from algodrills.bit_problems import tsp, unique_number
from algodrills.large_numbers import add_numbers, fibonacci
from algodrills.graph import Graph
from algodrills.mst import kruskal_mst

count_bits(13)                       # 3
sort_by_bits([3, 8, 1, 7])           # [1, 8, 3, 7]
unique_number([1, 3, 5, 4, 3, 1, 5]) # 4

tsp([[0, 20, 42, 25],
     [20, 0, 30, 34],
     [42, 30, 0, 10],
     [25, 34, 10, 0]])               # 85

add_numbers("999", "1")              # "1000"
fibonacci(10)                        # 55

g = Graph(4)
g.add_edge(0, 1)
g.add_edge(1, 2)
g.add_edge(2, 3)
g.shortest_path(0, 3)                # [0, 1, 2, 3]

kruskal_mst(3, [(0, 1, 1), (1, 2, 2), (0, 2, 5)])  # 3
```

## What it does not do

The package is a library only. It has no command-line programs and reads
nothing from standard input or files; every routine takes its data as
arguments and returns its result.