"""
Shared test fixtures for edgelink tests.

Design principles:
- Positions are built by playing real moves, so game invariants hold
- Raw boards (Board.from_rows) are used where only a grid is needed
- Every random source is seeded
"""

import random
from typing import Callable, Iterable, List, Sequence, Tuple

import pytest

from edgelink.core.types import CellColor, Move
from edgelink.games.board import Board
from edgelink.games.connection_game import ConnectionGame
from edgelink.games.game_state import GameState
from edgelink.selection.heuristic import MinPiecesHeuristic
from edgelink.selection.minimax import AlphaBetaSearch

W = CellColor.WHITE
B = CellColor.BLACK
E = CellColor.EMPTY


def checkerboard_order(size: int) -> List[Tuple[int, int]]:
    """
    Move order that fills a size x size board as a checkerboard (white on
    even r+c). No two same-coloured pieces touch, so for size >= 2 nobody
    ever connects and the game ends in a draw.
    """
    whites = [(r, c) for r in range(size) for c in range(size) if (r + c) % 2 == 0]
    blacks = [(r, c) for r in range(size) for c in range(size) if (r + c) % 2 == 1]
    order = []
    for i in range(len(whites)):
        order.append(whites[i])
        if i < len(blacks):
            order.append(blacks[i])
    return order


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def game() -> ConnectionGame:
    """Fresh 3x3 game."""
    return ConnectionGame(3)


@pytest.fixture
def play() -> Callable[[ConnectionGame, Iterable[Sequence[int]]], ConnectionGame]:
    """Apply a sequence of (row, col) moves, alternating from the side to move."""
    def _play(g: ConnectionGame, moves: Iterable[Sequence[int]]) -> ConnectionGame:
        for r, c in moves:
            g.apply_move(Move(r, c))
        return g
    return _play


@pytest.fixture
def position() -> Callable[[Sequence[Sequence[int]]], ConnectionGame]:
    """
    Build a game from rows of cell values. Moves made and the side to move
    are derived from the piece count, so the rows must hold as many white
    pieces as black, or one more.
    """
    def _position(rows: Sequence[Sequence[int]]) -> ConnectionGame:
        board = Board.from_rows(rows)
        moves_made = board.count_pieces()
        to_move = W if moves_made % 2 == 0 else B
        g = ConnectionGame(board.size)
        g.set_state(GameState(board, to_move, moves_made))
        return g
    return _position


@pytest.fixture
def draw_order() -> Callable[[int], List[Tuple[int, int]]]:
    """Move order that fills the board with no winner (see checkerboard_order)."""
    return checkerboard_order


# =============================================================================
# Search Fixtures
# =============================================================================

@pytest.fixture
def heuristic() -> MinPiecesHeuristic:
    return MinPiecesHeuristic()


@pytest.fixture
def seeded_search() -> AlphaBetaSearch:
    """Alpha-beta search with a fixed seed."""
    return AlphaBetaSearch(rng=random.Random(1234))
