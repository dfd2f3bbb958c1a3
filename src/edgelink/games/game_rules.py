"""
Grid utilities shared by the board, the path finder and the heuristic.

The grid is square with 4-directional adjacency. Edges are addressed through
an Orientation: the start edge is row 0 / col 0, the end edge is the opposite
row / col.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

import numpy as np

from edgelink.core.types import Orientation

# Up, down, left, right
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def is_int(value) -> bool:
    """True for Python and numpy integers; bools are rejected."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def in_bounds(size: int, r: int, c: int) -> bool:
    """Return True if (r, c) is inside a size x size grid."""
    return 0 <= r < size and 0 <= c < size


def neighbours(size: int, r: int, c: int) -> Iterator[Tuple[int, int]]:
    """Yield the in-bounds 4-neighbours of (r, c)."""
    for dr, dc in DIRECTIONS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < size and 0 <= nc < size:
            yield nr, nc


def start_edge(size: int, orientation: Orientation) -> List[Tuple[int, int]]:
    """Cells of the starting edge (row 0 or col 0), in index order."""
    if orientation is Orientation.TOP_BOTTOM:
        return [(0, i) for i in range(size)]
    return [(i, 0) for i in range(size)]


def on_end_edge(size: int, orientation: Orientation, r: int, c: int) -> bool:
    """Return True if (r, c) lies on the edge opposite the start edge."""
    if orientation is Orientation.TOP_BOTTOM:
        return r == size - 1
    return c == size - 1


def board_full(cells: np.ndarray) -> bool:
    """Return True if no cell is empty (0)."""
    return not np.any(cells == 0)
