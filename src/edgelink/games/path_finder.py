"""
PathFinder - does a colour join two opposite edges?

Multi-source breadth-first search over same-coloured 4-adjacent cells.
Every call restarts from scratch; nothing is cached between moves.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

import numpy as np

from edgelink.core.types import CellColor, Orientation
from edgelink.games.game_rules import neighbours, on_end_edge, start_edge

if TYPE_CHECKING:
    from edgelink.games.board import Board


def has_path(board: "Board", color: CellColor, orientation: Orientation) -> bool:
    """
    Return True if `color` has a 4-connected chain from the start edge
    (row 0 / col 0) to the opposite edge.

    On a 1x1 board both edges are the same cell, so any matching cell wins.
    """
    size = board.size
    cells = board.to_array()
    target = int(color)

    visited = np.zeros((size, size), dtype=bool)
    frontier = deque()
    for r, c in start_edge(size, orientation):
        if cells[r, c] == target:
            visited[r, c] = True
            frontier.append((r, c))

    while frontier:
        r, c = frontier.popleft()
        if on_end_edge(size, orientation, r, c):
            return True
        for nr, nc in neighbours(size, r, c):
            if not visited[nr, nc] and cells[nr, nc] == target:
                visited[nr, nc] = True
                frontier.append((nr, nc))

    return False


def top_to_bottom(board: "Board", color: CellColor) -> bool:
    return has_path(board, color, Orientation.TOP_BOTTOM)


def left_to_right(board: "Board", color: CellColor) -> bool:
    return has_path(board, color, Orientation.LEFT_RIGHT)


def has_connection(board: "Board", color: CellColor) -> bool:
    """True if `color` connects in either orientation."""
    return top_to_bottom(board, color) or left_to_right(board, color)
