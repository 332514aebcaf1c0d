# quadpart

`quadpart` splits a rectangular area into smaller regions. It uses a quadtree
whose branching factor you choose. You can place points in the leaf regions,
look them up, and remove leaf regions.

It also has a small channel-graph tool that reports which rectangular
partitions touch each other side by side, and two small tree demos.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Interactive quadtree session

```
quadpart subdivide WIDTH HEIGHT MIN_WIDTH MIN_HEIGHT SCALE
```

This builds a tree over the area that starts at `(0, 0)` and is `WIDTH` wide
and `HEIGHT` tall. Each region is split into `SCALE × SCALE` children until it
is no wider than `MIN_WIDTH` and no taller than `MIN_HEIGHT`. Sizes must be
positive and `SCALE` must be at least 2. The command prints the leaves and
then reads commands from standard input, one per line:

```
insertPoint x y
searchPoint x y
deletePoint x y
pathtoroot x y
exit
```

- `insertPoint` stores the point in the leaf that contains it and lists the
  leaves again.
- `searchPoint` shows the leaf's corner, size, level and ID, and the path of
  node IDs from the root down to it.
- `pathtoroot` shows the same details, with the path from the leaf up to the
  root.
- `deletePoint` removes the leaf region holding the point from the tree and
  lists the remaining leaves.

Blank lines are ignored. Any other command, or one without exactly two integer
coordinates, prints `Invalid command.` The session ends on `exit` or at the
end of input.

For example, `quadpart subdivide 100 100 25 25 2` gives sixteen 25×25 leaves.
Node IDs are numbered from 1 in creation order, with the root as 1.

`quadpart insertPoint x y` and `quadpart searchPoint x y` are also accepted.
Run on their own they have no tree to work on, so they always report that the
point is outside the quadtree bounds.

## Library use

```python
from quadpart.tree import Quadtree, OutOfBoundsError

tree = Quadtree(100, 100, 25, 25, 2)
print(tree.format_leaves())

leaf = tree.insert_point(10, 10)
print(leaf.region.describe())
print(leaf.path_from_root())

try:
    tree.insert_point(500, 500)
except OutOfBoundsError as exc:
    print(exc)
```

- `Quadtree.find_leaf(px, py)` and `Quadtree.search_point(px, py)` return the
  leaf containing a point.
- `Quadtree.insert_point(px, py)` adds the point to that leaf's `points` list.
- `Quadtree.delete_point(px, py)` detaches that leaf from the tree and returns
  it.

All three raise `OutOfBoundsError` when no leaf holds the point.

Each `QuadtreeNode` has the following:

- `region`, `id`, `parent`, `children` and `points`.
- `is_leaf()`.
- `path_to_root()` and `path_from_root()`, which give the chain of node IDs.

`Region.contains(px, py)` checks whether a point lies inside a region.

`quadpart.cli.run_session(tree, lines, out)` runs the interactive session over
any iterable of lines and writes to any text stream.

## Channel graph

```
quadpart-channel-graph
```

This prints a tab-separated adjacency matrix for a fixed set of four
partitions. Two partitions are adjacent when one's right edge is the other's
left edge and their vertical ranges overlap by more than a single point. The
same logic is available as a library:

```python
from quadpart.channel_graph import Partition, adjacency_matrix, format_matrix

parts = [Partition("A", 0, 0, 10, 10), Partition("B", 10, 5, 20, 15)]
print(format_matrix(parts, adjacency_matrix(parts)))
```

## Other demos

```
quadpart-construct
quadpart-marking [insert|delete]
```

- `quadpart-construct` halves a 100×100 area into quadrants until every leaf
  is at most 25×25 and lists the leaves. The halving is available as
  `quadpart.construct.halve(region, max_size)`.
- `quadpart-marking` builds a root (ID 0) with four children. In `delete` mode,
  the default, it marks each child as deleted and prints the nodes that remain.
  In `insert` mode it reports each child as inserted and prints all nodes.
  `MarkedTree.delete_leaf` only marks leaves, and `MarkedTree.remaining()`
  walks the tree in pre-order and skips marked nodes.

## Limitations

Trees exist only in memory for the length of one run. Nothing is saved between
commands or sessions, and there is no way to load a tree or its points from a
file.