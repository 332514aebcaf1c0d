"""Fixed halving of a region into quadrants up to a maximum size."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from quadpart.tree import Region


def halve(region: Region, max_size: int = 25) -> list[Region]:
    """Split into four halves repeatedly; return leaves no larger than max_size."""
    if max_size < 0:
        raise ValueError("max_size must not be negative")
    if region.width <= max_size and region.height <= max_size:
        return [region]
    half_w, half_h = region.width // 2, region.height // 2
    x, y, level = region.x, region.y, region.level + 1
    quadrants = (
        Region(x, y, half_w, half_h, level),
        Region(x + half_w, y, half_w, half_h, level),
        Region(x, y + half_h, half_w, half_h, level),
        Region(x + half_w, y + half_h, half_w, half_h, level),
    )
    return [leaf for quadrant in quadrants for leaf in halve(quadrant, max_size)]


def format_leaves(leaves: Iterable[Region]) -> str:
    """Return one descriptive line per leaf region."""
    return "\n".join(
        f"Leaf: ({r.x},{r.y}), Size: {r.width}x{r.height}, Level: {r.level}"
        for r in leaves
    )


def main(argv: list[str] | None = None) -> int:
    """Print the 25x25 leaves of a 100x100 region."""
    del argv
    sys.stdout.write("All 25x25 Leaf Nodes:\n")
    sys.stdout.write(format_leaves(halve(Region(0, 0, 100, 100, 0))) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())