"""
Position evaluation for undecided games.

MinPiecesHeuristic counts how many more pieces the side to move needs to
complete a connection, assuming the opponent stops playing. Fewer pieces
needed means a higher (less negative) score.
"""

from __future__ import annotations

import heapq
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

from edgelink.core.types import CellColor, Orientation
from edgelink.games.game_rules import neighbours, on_end_edge, start_edge

if TYPE_CHECKING:
    from edgelink.games.board import Board
    from edgelink.games.game_base import GameBase


class Heuristic(ABC):
    """Scores a position from the point of view of the side to move."""

    @abstractmethod
    def score(self, game: "GameBase") -> int:
        pass


def path_cost(board: "Board", color: CellColor, orientation: Orientation) -> int:
    """
    Minimum number of empty cells `color` must still fill to connect the
    two edges of `orientation`.

    Dijkstra over the grid: stepping onto an own piece costs 0, onto an empty
    cell 1, opponent cells are walls. Every start-edge cell that is not an
    opponent's is a source, seeded with the cost of occupying it.

    Returns size * size when the opponent has cut every route.
    """
    size = board.size
    cells = board.to_array()
    own = int(color)
    empty = int(CellColor.EMPTY)

    visited = np.zeros((size, size), dtype=bool)
    queue = []
    for r, c in start_edge(size, orientation):
        v = cells[r, c]
        if v == own:
            heapq.heappush(queue, (0, r, c))
        elif v == empty:
            heapq.heappush(queue, (1, r, c))

    while queue:
        dist, r, c = heapq.heappop(queue)
        if visited[r, c]:
            continue
        visited[r, c] = True

        if on_end_edge(size, orientation, r, c):
            return dist

        for nr, nc in neighbours(size, r, c):
            if visited[nr, nc]:
                continue
            v = cells[nr, nc]
            if v == own:
                heapq.heappush(queue, (dist, nr, nc))
            elif v == empty:
                heapq.heappush(queue, (dist + 1, nr, nc))

    return size * size


class MinPiecesHeuristic(Heuristic):
    """
    Score = -(fewest pieces the side to move needs to win), taking the
    cheaper of the two orientations.
    """

    def score(self, game: "GameBase") -> int:
        board = game.get_board()
        player = game.current_player()
        top_to_bottom = path_cost(board, player, Orientation.TOP_BOTTOM)
        left_to_right = path_cost(board, player, Orientation.LEFT_RIGHT)
        return -min(top_to_bottom, left_to_right)

    def __repr__(self) -> str:
        return "MinPiecesHeuristic()"
