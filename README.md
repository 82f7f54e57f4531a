# algokit

Classic algorithmic data structures and routines as plain Python classes and
functions: range-query trees, tree decompositions, graph bridges, string
matching and hashing, and modular arithmetic.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

The only runtime dependency is `sortedcontainers`.

## Contents

### Data structures

- `algokit.dsu.DSU(n)`: union–find over `0..n` with path halving.
  `find`, `same`, `merge` (returns `False` if already joined) and `size`.
- `algokit.fenwick`:
  - `Fenwick(n)`: positions `0..n-1`; `add`, `prefix_sum`, `range_sum`, and
    `kth(k)`, the smallest position whose prefix sum reaches `k`
    (non-negative values; returns `n` if the total stays below `k`).
  - `RangeFenwick(n)`: positions `1..n`; `range_add`, `prefix_sum`, `range_sum`.
  - `Fenwick2D(n, m)`: cells `1..n` by `1..m`; `add`, `prefix_sum`, `range_sum`.
- `algokit.weight_segment_tree.WeightSegmentTree(lo, hi)`: a multiset of
  integers in `lo..hi`, with nodes created on demand. `add(value, count)`
  (negative count removes) and `top_sum(k)`, the sum of the `k` largest values.
- `algokit.sparse_table.SparseTable(values, op)`: static inclusive range
  queries over `0..n-1`. `query` uses two overlapping blocks and needs an
  idempotent `op` such as `min`; `fold` combines disjoint blocks left to right.
- `algokit.deletable_heap.DeletableHeap`: a max-heap with `push`,
  `discard` (of a value that is present) and `top`; deletions are applied lazily.
- `algokit.ordered_set.OrderedSet`: a sorted set with `order_of_key`
  (count of smaller values) and `find_by_order` (zero-based rank).
- `algokit.interval_map.IntervalMap(l, r, value)`: runs of equal values over
  `l..r`. `split`, `assign` and `segments` return or work on `Segment`
  tuples `(start, end, value)`; iterating yields every run.
- `algokit.segment_tree.LazySegmentTree(values, op, identity, mapping,
  composition, tag_identity)`: a generic lazy segment tree over `0..n-1` with
  `set`, `get`, `apply`, `range_apply`, `range_query`, `find_first` and
  `find_last` (these two return `None` when nothing qualifies).

### Trees and graphs

- `algokit.lca.BinaryLiftingLCA(n)`: vertices `1..n`; `add_edge(u, v, w)`,
  `build(root)`, `lca` and weighted `distance`.
- `algokit.hld`:
  - `HeavyLightDecomposition(n, edges, root=1)`: `lca`, `distance` (in edges),
    `is_ancestor`, `jump(u, k)` (ancestor `k` levels up, or `None`),
    `path_ranges` and `subtree_range`.
  - `PathSegmentTree`: a `LazySegmentTree` laid over the tree, with
    `set_point`, `update_path`, `update_subtree`, `query_path`, `query_point`
    and `query_subtree`.
  - `PathSumTree` (`add_path`, `add_subtree`, `sum_path`, `sum_subtree`) and
    `PathMaxTree` (`add_path`, `add_subtree`, `max_path`, `max_subtree`).
- `algokit.bridges.EdgeBiconnectedComponents(n, edges)`: edges numbered from 1
  in the order given; `is_bridge(index)`, `component(u)` and the list
  `components`.

### Mathematics

- `algokit.number_theory`: `mobius_sieve(n)` returning `(primes, mobius)`,
  `exgcd(a, b)` returning `(d, x, y)`, `mod_inverse`, `comb_mod` and `lucas`
  (binomials modulo a prime), and Euler's `phi`.
- `algokit.modint`: `ModInt(value, mod=1_000_000_007)` with the arithmetic
  operators, `inv` and `int()`, and `power(a, b)` by repeated squaring.
- `algokit.matrix`: square `Matrix(rows, mod)` with `+`, `*` and `**`, and
  `scalar_matrix(size, value, mod)`.

### Strings

- `algokit.strings`: `prefix_function`, `find_occurrences(text, pattern)`
  returning inclusive `(start, end)` pairs, and `z_function`.
- `algokit.trie.Trie`: `insert` and `count` of exact words.
- `algokit.string_hash`: `SingleHash(s, base, mod)` and `DoubleHash(s)` over
  1-based inclusive ranges, with `get`, `get_reversed`, `is_palindrome`,
  `same` and the concatenation hashes `merge_ff`, `merge_fr`, `merge_rf`,
  `merge_rr`. `DoubleHash` returns pairs.

## Examples

```python
from algokit.dsu import DSU
from algokit.fenwick import Fenwick
from algokit.strings import find_occurrences

dsu = DSU(5)
dsu.merge(1, 2)
assert dsu.same(1, 2) and dsu.size(2) == 2

fw = Fenwick(10)
fw.add(3, 5)
fw.add(7, 2)
assert fw.range_sum(0, 9) == 7

assert find_occurrences("abababa", "aba") == [(0, 2), (2, 4), (4, 6)]
```

A lazy segment tree with range addition and range maximum:

```python
from algokit.segment_tree import LazySegmentTree

tree = LazySegmentTree(
    [5, 1, 4, 2],
    max, float("-inf"),
    lambda tag, value: value + tag,
    lambda new, old: new + old,
    0,
)
tree.range_apply(1, 2, 10)
assert tree.range_query(0, 3) == 14
assert tree.find_first(0, 3, lambda v: v >= 10) == 1
```

Path and subtree sums on a tree:

```python
from algokit.hld import PathSumTree

tree = PathSumTree(5, [(1, 2), (1, 3), (3, 4), (3, 5)], [1, 2, 3, 4, 5])
assert tree.sum_path(2, 4) == 10
tree.add_subtree(3, 10)
assert tree.sum_subtree(3) == 42
```

Modular arithmetic:

```python
from algokit.matrix import Matrix
from algokit.modint import ModInt
from algokit.number_theory import lucas, mod_inverse, phi

assert ModInt(2) ** 10 == 1024
assert (Matrix([[1, 1], [1, 0]]) ** 10).rows[0][1] == 55
assert mod_inverse(3, 7) == 5
assert lucas(10, 3, 7) == 1
assert phi(36) == 12
```

## What it does not do

algokit is a library only: it has no command-line program and reads no input
files. Each structure keeps its data in memory and offers no way to save or
load it.