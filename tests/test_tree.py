import pytest

from quadpart.tree import OutOfBoundsError, Quadtree, QuadtreeNode, Region


@pytest.fixture
def tree():
    return Quadtree(100, 100, 25, 25, 2)


def test_region_contains_edges():
    region = Region(10, 20, 5, 5)
    assert region.contains(10, 20)
    assert region.contains(14, 24)
    assert not region.contains(15, 24)
    assert not region.contains(14, 25)
    assert not region.contains(9, 20)


def test_region_describe():
    assert Region(3, 4, 7, 8, 2).describe() == "Top-Left: (3,4)\nSize: 7x8\nLevel: 2"


def test_leaves_respect_minimum(tree):
    assert all(
        leaf.region.width <= 25 and leaf.region.height <= 25 for leaf in tree.leaves
    )
    assert all(leaf.is_leaf() for leaf in tree.leaves)


@pytest.mark.parametrize(
    "size,minimum,scale",
    [((100, 100), (25, 25), 2), ((10, 7), (4, 3), 3), ((17, 33), (5, 5), 2)],
)
def test_leaves_tile_the_area(size, minimum, scale):
    tree = Quadtree(*size, *minimum, scale)
    width, height = size
    assert sum(leaf.region.width * leaf.region.height for leaf in tree.leaves) == (
        width * height
    )
    for px in range(width):
        for py in range(height):
            hits = [leaf for leaf in tree.leaves if leaf.region.contains(px, py)]
            assert len(hits) == 1


def test_root_and_paths(tree):
    assert tree.root.id == 1
    assert tree.root.parent is None
    leaf = tree.leaves[-1]
    assert leaf.path_to_root()[-1] == tree.root.id
    assert leaf.path_from_root() == leaf.path_to_root()[::-1]
    assert len(leaf.path_to_root()) == leaf.region.level + 1


def test_ids_unique(tree):
    seen = []
    stack = [tree.root]
    while stack:
        node = stack.pop()
        seen.append(node.id)
        stack.extend(node.children)
    assert sorted(seen) == list(range(1, len(seen) + 1))


def test_children_levels(tree):
    for child in tree.root.children:
        assert child.parent is tree.root
        assert child.region.level == 1


def test_insert_point(tree):
    leaf = tree.insert_point(30, 60)
    assert (30, 60) in leaf.points
    assert leaf.region.contains(30, 60)
    assert tree.search_point(30, 60) is leaf


def test_insert_out_of_bounds(tree):
    with pytest.raises(OutOfBoundsError) as info:
        tree.insert_point(100, 0)
    assert info.value.point == (100, 0)


def test_search_out_of_bounds(tree):
    with pytest.raises(OutOfBoundsError):
        tree.search_point(-1, 5)


def test_delete_point(tree):
    before = len(tree.leaves)
    leaf = tree.delete_point(5, 5)
    assert len(tree.leaves) == before - 1
    assert leaf not in tree.leaves
    assert leaf not in leaf.parent.children
    with pytest.raises(OutOfBoundsError):
        tree.delete_point(5, 5)


def test_single_leaf_root():
    tree = Quadtree(10, 10, 10, 10, 2)
    assert tree.leaves == [tree.root]
    removed = tree.delete_point(0, 0)
    assert removed is tree.root
    assert tree.leaves == []


def test_scale_three_uneven():
    tree = Quadtree(10, 10, 4, 4, 3)
    widths = sorted({leaf.region.width for leaf in tree.leaves})
    assert max(widths) <= 4
    assert tree.root.children[-1].region.x + tree.root.children[-1].region.width == 10


def test_format_leaves(tree):
    text = tree.format_leaves()
    lines = text.split("\n")
    assert lines[-1] == f"Total leaf nodes: {len(tree.leaves)}"
    assert len(lines) == len(tree.leaves) + 1
    assert lines[0].startswith("Leaf: (0,0), Size: 25x25")


@pytest.mark.parametrize(
    "args",
    [(0, 10, 5, 5, 2), (10, 10, 0, 5, 2), (10, 10, 5, 5, 1)],
)
def test_invalid_arguments(args):
    with pytest.raises(ValueError):
        Quadtree(*args)


def test_node_path_manual():
    root = QuadtreeNode(Region(0, 0, 4, 4), 1)
    child = QuadtreeNode(Region(0, 0, 2, 2, 1), 2, parent=root)
    assert child.path_to_root() == [2, 1]
    assert child.path_from_root() == [1, 2]