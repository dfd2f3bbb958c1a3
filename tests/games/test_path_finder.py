"""
Tests for edgelink.games.path_finder

Connectivity is checked against hand-built boards and against an
independent flood fill on random boards.
"""

import numpy as np
import pytest

from edgelink.core.types import CellColor, Orientation
from edgelink.games.board import Board
from edgelink.games.path_finder import has_connection, has_path, left_to_right, top_to_bottom

W, B = CellColor.WHITE, CellColor.BLACK
TB, LR = Orientation.TOP_BOTTOM, Orientation.LEFT_RIGHT


def flood_fill_connects(cells: np.ndarray, color: int, orientation: Orientation) -> bool:
    """Reference check: depth-first flood fill from each start cell."""
    n = cells.shape[0]
    if orientation is TB:
        starts = [(0, c) for c in range(n)]
        is_end = lambda r, c: r == n - 1
    else:
        starts = [(r, 0) for r in range(n)]
        is_end = lambda r, c: c == n - 1

    seen = set()
    for start in starts:
        if cells[start] != color or start in seen:
            continue
        stack = [start]
        seen.add(start)
        while stack:
            r, c = stack.pop()
            if is_end(r, c):
                return True
            for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
                if 0 <= nr < n and 0 <= nc < n and (nr, nc) not in seen and cells[nr, nc] == color:
                    seen.add((nr, nc))
                    stack.append((nr, nc))
    return False


class TestSimplePaths:
    """Hand-built boards."""

    def test_column_builds_up(self):
        """(0,0),(1,0) is not a path on 3x3; adding (2,0) completes it."""
        board = Board(3)
        board.set(0, 0, W)
        board.set(1, 0, W)
        assert has_path(board, W, TB) is False

        board.set(2, 0, W)
        assert has_path(board, W, TB) is True

    def test_row_connects_left_to_right(self):
        board = Board.from_rows([
            [0, 0, 0],
            [2, 2, 2],
            [0, 0, 0],
        ])
        assert has_path(board, B, LR)
        assert not has_path(board, B, TB)
        assert not has_path(board, W, LR)

    def test_winding_path(self):
        """Paths may turn and double back."""
        board = Board.from_rows([
            [1, 0, 0, 0],
            [1, 1, 1, 0],
            [0, 0, 1, 0],
            [0, 1, 1, 0],
        ])
        assert top_to_bottom(board, W)
        assert not left_to_right(board, W)

    def test_upward_detour(self):
        """A path that must go back towards the start edge is still found."""
        board = Board.from_rows([
            [1, 0, 0, 0, 0],
            [1, 0, 1, 1, 1],
            [1, 0, 1, 0, 1],
            [1, 1, 1, 0, 1],
            [0, 0, 0, 0, 1],
        ])
        assert has_path(board, W, TB)

    def test_diagonal_is_not_adjacent(self):
        board = Board.from_rows([
            [1, 0, 0],
            [0, 1, 0],
            [0, 0, 1],
        ])
        assert not has_connection(board, W)

    def test_blocked_by_opponent(self):
        board = Board.from_rows([
            [1, 0, 0],
            [2, 0, 0],
            [1, 0, 0],
        ])
        assert not has_path(board, W, TB)

    def test_empty_board(self):
        board = Board(4)
        for color in (W, B):
            assert not has_connection(board, color)


class TestSingleCell:
    """On a 1x1 board the start and end edges coincide."""

    def test_piece_connects_both_ways(self):
        board = Board(1)
        board.set(0, 0, W)
        assert has_path(board, W, TB)
        assert has_path(board, W, LR)
        assert not has_connection(board, B)

    def test_empty_cell_connects_nobody(self):
        assert not has_connection(Board(1), W)


class TestAgainstReference:
    """has_path agrees with an independent flood fill."""

    @pytest.mark.parametrize("seed", range(40))
    def test_random_boards(self, seed):
        rng = np.random.default_rng(seed)
        size = int(rng.integers(1, 7))
        cells = rng.choice([0, 1, 2], size=(size, size), p=[0.2, 0.45, 0.35])
        board = Board.from_rows(cells)

        for color in (W, B):
            for orientation in (TB, LR):
                expected = flood_fill_connects(cells, int(color), orientation)
                assert has_path(board, color, orientation) is expected

    def test_does_not_modify_board(self):
        board = Board.from_rows([[1, 2], [1, 0]])
        before = board.copy()
        has_connection(board, W)
        has_connection(board, B)
        assert board == before
