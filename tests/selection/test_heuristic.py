"""
Tests for edgelink.selection.heuristic

path_cost counts the empty cells a colour still has to fill; the heuristic
score is its negated minimum over both orientations for the side to move.
"""

import pytest

from edgelink.core.types import CellColor, Orientation
from edgelink.games.board import Board
from edgelink.games.connection_game import ConnectionGame
from edgelink.selection.heuristic import Heuristic, MinPiecesHeuristic, path_cost

W, B = CellColor.WHITE, CellColor.BLACK
TB, LR = Orientation.TOP_BOTTOM, Orientation.LEFT_RIGHT


class TestPathCost:
    """Shortest-path cost tests."""

    @pytest.mark.parametrize("size", [1, 2, 3, 6])
    def test_empty_board_needs_a_full_line(self, size):
        board = Board(size)
        assert path_cost(board, W, TB) == size
        assert path_cost(board, B, LR) == size

    def test_own_pieces_are_free(self):
        board = Board(5)
        for r in range(3):
            board.set(r, 2, W)
        assert path_cost(board, W, TB) == 2

    def test_single_piece_in_centre(self):
        board = Board(3)
        board.set(1, 1, W)
        assert path_cost(board, W, TB) == 2
        assert path_cost(board, W, LR) == 2

    def test_completed_path_costs_zero(self):
        board = Board.from_rows([
            [0, 1, 0],
            [0, 1, 2],
            [2, 1, 0],
        ])
        assert path_cost(board, W, TB) == 0

    def test_goes_around_opponent(self):
        board = Board.from_rows([
            [0, 0, 0],
            [2, 2, 0],
            [0, 0, 0],
        ])
        assert path_cost(board, W, TB) == 3

    def test_fully_cut_returns_sentinel(self):
        """A full opposing row leaves no route: size * size."""
        board = Board.from_rows([
            [0, 0, 0],
            [2, 2, 2],
            [0, 0, 0],
        ])
        assert path_cost(board, W, TB) == 9
        assert path_cost(board, W, LR) == 3

    def test_opponent_on_start_edge_is_not_a_source(self):
        board = Board.from_rows([
            [2, 2, 2, 2],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
        ])
        assert path_cost(board, W, TB) == 16

    def test_opponent_on_end_edge_is_not_a_target(self):
        board = Board.from_rows([
            [0, 0, 0],
            [0, 0, 0],
            [2, 2, 0],
        ])
        assert path_cost(board, W, TB) == 3

    def test_cost_never_exceeds_sentinel(self):
        board = Board.from_rows([
            [1, 2, 0, 0],
            [2, 0, 1, 2],
            [0, 1, 2, 0],
            [2, 0, 0, 1],
        ])
        for color in (W, B):
            for orientation in (TB, LR):
                assert 0 <= path_cost(board, color, orientation) <= 16

    def test_single_cell(self):
        board = Board(1)
        assert path_cost(board, W, TB) == 1
        board.set(0, 0, W)
        assert path_cost(board, W, TB) == 0
        assert path_cost(board, B, LR) == 1


class TestMinPiecesHeuristic:
    """score(game) tests."""

    def test_is_a_heuristic(self):
        assert isinstance(MinPiecesHeuristic(), Heuristic)

    @pytest.mark.parametrize("size", [1, 3, 5])
    def test_fresh_game(self, size):
        assert MinPiecesHeuristic().score(ConnectionGame(size)) == -size

    def test_scores_side_to_move(self, position):
        """White to move needs one piece on row 1."""
        game = position([
            [2, 0, 0],
            [1, 1, 0],
            [0, 0, 2],
        ])
        assert game.current_player() is W
        assert MinPiecesHeuristic().score(game) == -1

    def test_takes_cheaper_orientation(self, position):
        """Black is cut top-to-bottom but two pieces from left-to-right."""
        game = position([
            [2, 0, 1],
            [1, 1, 0],
            [0, 0, 2],
        ])
        assert game.current_player() is B
        assert MinPiecesHeuristic().score(game) == -2

    def test_bounded_by_board_area(self, position):
        game = position([
            [2, 0, 2],
            [1, 1, 2],
            [1, 0, 1],
        ])
        assert -9 <= MinPiecesHeuristic().score(game) <= 0
