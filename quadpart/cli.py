"""Command-line interface for building and querying a quadtree."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from quadpart.tree import OutOfBoundsError, Quadtree, QuadtreeNode

PROMPT = (
    "\nEnter command: insertPoint x y  |  searchPoint x y  | "
    "deletePoint x y | pathtoroot x y | exit"
)


def _leaf_details(px: int, py: int, leaf: QuadtreeNode) -> str:
    return (
        f"Point ({px},{py}) is inside region:\n"
        f"{leaf.region.describe()}\n"
        f"ID: {leaf.id}\n"
    )


def _insert(tree: Quadtree, px: int, py: int) -> str:
    try:
        leaf = tree.insert_point(px, py)
    except OutOfBoundsError:
        text = f"({px},{py}) is outside quadtree bounds.\n"
    else:
        region = leaf.region
        text = (
            f"Inserted point ({px},{py}) into region ({region.x},{region.y}) "
            f"of size {region.width}x{region.height}, ID: {leaf.id}\n"
        )
    return text + tree.format_leaves() + "\n"


def _search(tree: Quadtree, px: int, py: int) -> str:
    try:
        leaf = tree.search_point(px, py)
    except OutOfBoundsError:
        return f"({px},{py}) is outside quadtree bounds.\n"
    path = " ".join(map(str, leaf.path_from_root()))
    return _leaf_details(px, py, leaf) + f"Path from root to this node: {path}\n"


def _path_to_root(tree: Quadtree, px: int, py: int) -> str:
    try:
        leaf = tree.find_leaf(px, py)
    except OutOfBoundsError:
        return f"Point ({px},{py}) is not inside any leaf node.\n"
    path = " ".join(map(str, leaf.path_to_root()))
    return _leaf_details(px, py, leaf) + f"Path from node to root: {path}\n"


def _delete(tree: Quadtree, px: int, py: int) -> str:
    try:
        leaf = tree.delete_point(px, py)
    except OutOfBoundsError:
        return f"Point ({px},{py}) is outside all leaf regions. Cannot delete.\n"
    region = leaf.region
    return (
        f"Logically deleted region containing ({px},{py}) with top-left "
        f"({region.x},{region.y}) and size {region.width}x{region.height}\n"
        + tree.format_leaves()
        + "\n"
    )


_HANDLERS: dict[str, Callable[[Quadtree, int, int], str]] = {
    "insertPoint": _insert,
    "searchPoint": _search,
    "pathtoroot": _path_to_root,
    "deletePoint": _delete,
}


def _parse_point(args: list[str]) -> tuple[int, int] | None:
    if len(args) != 2:
        return None
    try:
        return int(args[0]), int(args[1])
    except ValueError:
        return None


def run_session(tree: Quadtree, lines: Iterable[str], out: TextIO) -> None:
    """Answer commands read line by line until ``exit`` or end of input."""
    source = iter(lines)
    while True:
        out.write(PROMPT + "\n")
        line = next(source, None)
        if line is None:
            break
        words = line.split()
        if not words:
            continue
        command, *args = words
        if command == "exit":
            break
        handler = _HANDLERS.get(command)
        point = _parse_point(args)
        if handler is None or point is None:
            out.write("Invalid command.\n")
            continue
        out.write(handler(tree, *point))


_ARG_COUNTS = {"subdivide": 5, "insertPoint": 2, "searchPoint": 2}


def main(argv: list[str] | None = None) -> int:
    """Run the command named by the first argument; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Enter a function (subdivide / insertPoint / searchPoint / deletePoint):")
        return 1
    command, params = args[0], args[1:]
    if command not in _ARG_COUNTS:
        print(f"Unknown command: {command}")
        return 1
    if len(params) != _ARG_COUNTS[command]:
        print(f"Incorrect number of arguments for {command}")
        return 1
    try:
        numbers = [int(param) for param in params]
    except ValueError:
        print(f"Invalid integer argument for {command}")
        return 1

    if command == "subdivide":
        width, height, min_width, min_height, scale = numbers
        try:
            tree = Quadtree(width, height, min_width, min_height, scale)
        except ValueError as exc:
            print(exc)
            return 1
        print("Tree created. Insert points and search enabled.")
        print(tree.format_leaves())
        run_session(tree, sys.stdin, sys.stdout)
    else:
        px, py = numbers
        print(f"({px},{py}) is outside quadtree bounds.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())