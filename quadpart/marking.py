"""Trees whose leaves are deleted by marking rather than unlinking."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class MarkedNode:
    """A tree node identified by an integer id."""

    id: int
    children: list[MarkedNode] = field(default_factory=list, repr=False)
    parent: MarkedNode | None = field(default=None, repr=False)

    def add_child(self, child: MarkedNode) -> MarkedNode:
        """Attach ``child`` below this node and return it."""
        child.parent = self
        self.children.append(child)
        return child


class MarkedTree:
    """A tree that records deleted leaves and hides them when walked."""

    def __init__(self, root: MarkedNode) -> None:
        self.root = root
        self.deleted: set[int] = set()

    def delete_leaf(self, node: MarkedNode) -> bool:
        """Mark a leaf as deleted; return False if the node has children."""
        if node.children:
            return False
        self.deleted.add(id(node))
        return True

    def remaining(self) -> Iterator[MarkedNode]:
        """Yield nodes in pre-order, skipping deleted nodes and their subtrees."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            if id(node) in self.deleted:
                continue
            yield node
            stack.extend(reversed(node.children))


def build_demo_tree(count: int = 4) -> MarkedNode:
    """Return a root with id 0 and children numbered 1 to ``count``."""
    root = MarkedNode(0)
    for number in range(1, count + 1):
        root.add_child(MarkedNode(number))
    return root


def main(argv: list[str] | None = None) -> int:
    """Demonstrate inserting children or deleting them by marking."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("mode", nargs="?", choices=("insert", "delete"), default="delete")
    args = parser.parse_args(argv)

    root = build_demo_tree()
    tree = MarkedTree(root)
    if args.mode == "insert":
        for child in root.children:
            print(f"the node with id :{child.id}is inserted")
    else:
        for child in root.children:
            if tree.delete_leaf(child):
                print(f"Leaf {child.id} marked as deleted.")
        print("only present nodes after deletion")
    for node in tree.remaining():
        print(f"Node {node.id}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())