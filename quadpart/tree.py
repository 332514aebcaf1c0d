"""Rectangular quadtree partitioning with per-leaf point storage."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count


class OutOfBoundsError(LookupError):
    """Raised when a point lies outside every leaf region of a tree."""

    def __init__(self, px: int, py: int) -> None:
        super().__init__(f"({px},{py}) is outside quadtree bounds")
        self.point = (px, py)


@dataclass(frozen=True)
class Region:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: int
    y: int
    width: int
    height: int
    level: int = 0

    def contains(self, px: int, py: int) -> bool:
        """Return True if the integer point lies inside the region."""
        return (
            self.x <= px <= self.x + self.width - 1
            and self.y <= py <= self.y + self.height - 1
        )

    def describe(self) -> str:
        """Return a multi-line description of corner, size and level."""
        return (
            f"Top-Left: ({self.x},{self.y})\n"
            f"Size: {self.width}x{self.height}\n"
            f"Level: {self.level}"
        )


@dataclass(eq=False)
class QuadtreeNode:
    """A node of a quadtree, holding its region and any inserted points."""

    region: Region
    id: int
    parent: QuadtreeNode | None = field(default=None, repr=False)
    children: list[QuadtreeNode] = field(default_factory=list, repr=False)
    points: list[tuple[int, int]] = field(default_factory=list)

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return not self.children

    def path_to_root(self) -> list[int]:
        """Return node ids from this node up to the root."""
        path = []
        node: QuadtreeNode | None = self
        while node is not None:
            path.append(node.id)
            node = node.parent
        return path

    def path_from_root(self) -> list[int]:
        """Return node ids from the root down to this node."""
        return self.path_to_root()[::-1]


class Quadtree:
    """A rectangle split recursively into ``scale`` x ``scale`` parts.

    Splitting stops once a region is no wider than ``min_width`` and no
    taller than ``min_height``. Node ids are assigned from 1 in creation
    order, the root first.
    """

    def __init__(
        self, width: int, height: int, min_width: int, min_height: int, scale: int
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("tree width and height must be positive")
        if min_width < 1 or min_height < 1:
            raise ValueError("minimum width and height must be positive")
        if scale < 2:
            raise ValueError("scale must be at least 2")
        self.min_width = min_width
        self.min_height = min_height
        self.scale = scale
        self._ids = count(1)
        self.root = QuadtreeNode(Region(0, 0, width, height, 0), next(self._ids))
        self.leaves: list[QuadtreeNode] = []
        self._subdivide(self.root)

    def _subdivide(self, node: QuadtreeNode) -> None:
        region = node.region
        w, h = region.width, region.height
        if w <= self.min_width and h <= self.min_height:
            self.leaves.append(node)
            return

        sub_w = -(-w // self.scale)
        sub_h = -(-h // self.scale)
        for i in range(self.scale):
            new_x = region.x + i * sub_w
            actual_w = min(sub_w, region.x + w - new_x)
            for j in range(self.scale):
                new_y = region.y + j * sub_h
                actual_h = min(sub_h, region.y + h - new_y)
                if actual_w > 0 and actual_h > 0:
                    child = QuadtreeNode(
                        Region(new_x, new_y, actual_w, actual_h, region.level + 1),
                        next(self._ids),
                        parent=node,
                    )
                    node.children.append(child)

        for child in node.children:
            self._subdivide(child)

    def find_leaf(self, px: int, py: int) -> QuadtreeNode:
        """Return the first leaf containing the point."""
        for leaf in self.leaves:
            if leaf.region.contains(px, py):
                return leaf
        raise OutOfBoundsError(px, py)

    def insert_point(self, px: int, py: int) -> QuadtreeNode:
        """Store the point in the leaf containing it and return that leaf."""
        leaf = self.find_leaf(px, py)
        leaf.points.append((px, py))
        return leaf

    def search_point(self, px: int, py: int) -> QuadtreeNode:
        """Return the leaf whose region contains the point."""
        return self.find_leaf(px, py)

    def delete_point(self, px: int, py: int) -> QuadtreeNode:
        """Detach the leaf containing the point from the tree and return it."""
        leaf = self.find_leaf(px, py)
        if leaf.parent is not None:
            leaf.parent.children.remove(leaf)
        self.leaves.remove(leaf)
        return leaf

    def format_leaves(self) -> str:
        """Return one line per leaf followed by the leaf count."""
        lines = [
            f"Leaf: ({leaf.region.x},{leaf.region.y}), "
            f"Size: {leaf.region.width}x{leaf.region.height}, "
            f"Level: {leaf.region.level}, ID: {leaf.id}"
            for leaf in self.leaves
        ]
        lines.append(f"Total leaf nodes: {len(self.leaves)}")
        return "\n".join(lines)