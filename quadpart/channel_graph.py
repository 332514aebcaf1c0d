"""Adjacency of rectangular partitions that share a vertical edge."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Partition:
    """A named rectangle spanning ``[x1, x2] x [y1, y2]``."""

    name: str
    x1: int
    y1: int
    x2: int
    y2: int


DEFAULT_PARTITIONS = (
    Partition("P1", 0, 0, 50, 100),
    Partition("P2", 50, 0, 75, 50),
    Partition("P3", 50, 50, 75, 100),
    Partition("P4", 75, 0, 100, 100),
)


def vertical_ranges_overlap(y1a: int, y2a: int, y1b: int, y2b: int) -> bool:
    """Return True if the two ranges overlap by more than a point."""
    return max(y1a, y1b) < min(y2a, y2b)


def is_horizontally_touching(a: Partition, b: Partition) -> bool:
    """Return True if the partitions share part of a vertical edge."""
    return (a.x2 == b.x1 or a.x1 == b.x2) and vertical_ranges_overlap(
        a.y1, a.y2, b.y1, b.y2
    )


def adjacency_matrix(partitions: Sequence[Partition]) -> list[list[int]]:
    """Return the symmetric 0/1 matrix of horizontally touching partitions."""
    n = len(partitions)
    matrix = [[0] * n for _ in range(n)]
    for i, a in enumerate(partitions):
        for j in range(i + 1, n):
            if is_horizontally_touching(a, partitions[j]):
                matrix[i][j] = matrix[j][i] = 1
    return matrix


def format_matrix(partitions: Sequence[Partition], matrix: Sequence[Sequence[int]]) -> str:
    """Return the matrix as a tab-separated table headed by partition names."""
    header = "".join(f"{p.name}\t" for p in partitions)
    rows = [
        p.name + "\t" + "".join(f"{value}\t" for value in row)
        for p, row in zip(partitions, matrix)
    ]
    return "\nChannel_graph:\n\t" + header + "\n" + "".join(r + "\n" for r in rows)


def main(argv: list[str] | None = None) -> int:
    """Print the channel graph of the built-in partition layout."""
    del argv
    partitions = list(DEFAULT_PARTITIONS)
    sys.stdout.write(format_matrix(partitions, adjacency_matrix(partitions)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())