# nodify

`nodify` explores graphs that are never stored in memory. A node only has to
say which nodes it leads to, and a search walks the graph lazily from a
starting node:

- `nodify.dfs.DFS`: a depth-first search.
- `nodify.parallel_dfs.ParallelDFS`: a depth-first search that hands batches
  of pending nodes to a pool of worker threads.
- `nodify.delta.DeltaStepping`: a delta-stepping shortest-path search over
  weighted edges.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Defining a node

Subclass `nodify.node.Node` and implement `outgoing()` so that it yields the
neighbours. Nodes must be hashable and comparable for equality, because the
searches remember which nodes they have already visited.

```python
from dataclasses import dataclass

from nodify.dfs import DFS
from nodify.node import Node


@dataclass(frozen=True)
class Counter(Node):
    value: int

    def outgoing(self):
        yield Counter(self.value + 1)


found = Counter(0).to_process(DFS).contains(lambda node: node.value == 42)
print(found)  # True
```

`to_process(process_cls)` builds the chosen search rooted at the node (the
same as `process_cls.from_node(node)`). Predicates receive `node.to_value()`,
which is the node itself unless a subclass says otherwise.

## Searching

Every search offers:

- `contains(pred)`: whether some reachable node satisfies `pred`;
- `find_any(pred)`: some matching node, or `None`.

`DeltaStepping` also offers `find_first(pred)`, which returns the matching
node with the lowest distance from the start, or `None`. On `DFS` and
`ParallelDFS`, `find_first` raises `nodify.process.ProcessNotSupported`
(a `TypeError`).

Behaviour worth knowing:

- `DFS` checks the predicate on the start node as well as on every node it
  reaches.
- `ParallelDFS` checks the predicate only on nodes discovered through
  outgoing edges, never on the start node itself. Which match it returns may
  vary from run to run.
- `DeltaStepping` expects non-negative integer weights. Its `delta` starts at
  zero, so set a positive bucket width with `with_delta(delta)` before
  searching. A search uses up the process's buckets and distances; build a
  fresh process for each search.

## Nodifying plain values

`nodify.nodifyied.NodifyiedBuilder` turns a function that gives a value's
successors into a graph. `build(value)` returns a `Nodifyied` node, whose
equality and hash come from the wrapped value alone, and predicates receive
the wrapped value rather than the node:

```python
from nodify.dfs import DFS
from nodify.nodifyied import NodifyiedBuilder

builder = NodifyiedBuilder(lambda i: [i + 1])
print(builder.build(0).to_process(DFS).contains(lambda i: i == 42))  # True
```

`with_outgoing(function)` replaces the builder's function and returns the
builder.

## Weighted graphs

For `DeltaStepping`, a node also subclasses `nodify.node.Weighted` and
implements `weighted_outgoing()`, yielding `(weight, node)` pairs:

```python
from nodify.delta import DeltaStepping
from nodify.knapsack import Item, Knapsack

items = [Item(value=1, weight=1), Item(value=7, weight=2), Item(value=11, weight=3)]
root = Knapsack.new(5, items)
best = root.to_process(DeltaStepping).with_delta(2).find_first(lambda node: node.is_solution())
print(best.value, 5 - best.capacity)
```

`Knapsack.new` raises `ValueError` when given no items.

## Bundled examples

Three demonstration commands are installed:

```
nodify-fibonacci [--mode node|nodifyied|simple]
nodify-frog [--count N] [--probability P] [--cached]
nodify-knapsack [--delta D]
```

- `nodify-fibonacci` tells whether 610 is a term of the Fibonacci sequence,
  using `FiboNode` directly (`node`) or wrapped by a builder with
  `fibonacci_step` (`nodifyied`); `simple` instead searches the integers from
  0 for 42.
- `nodify-frog` draws a random river (`random_stones`: stones at both ends,
  each inner position holding one with probability `P`, 0.8 by default) and
  tells whether a frog starting at position 0 with speed 1 can reach the last
  position, with the time the search took. It uses `FrogNode` over 1,000,000
  positions by default, or with `--cached` the prebuilt `CachedFrogNode` over
  10 positions.
- `nodify-knapsack` solves a fixed three-item knapsack of capacity 5 by delta
  stepping (bucket width 2 by default) and prints the best value and its
  weight.