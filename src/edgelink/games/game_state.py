"""
GameState - game state container.

Optimized for fast copying.
"""

from __future__ import annotations

from edgelink.core.types import CellColor
from edgelink.games.board import Board


class GameState:
    """
    Lightweight game state container.

    Holds the board, the colour to move and the number of moves made.
    """
    __slots__ = ('board', 'current_player', 'moves_made')

    def __init__(self, board: Board, current_player: CellColor = CellColor.WHITE, moves_made: int = 0):
        self.board = board
        self.current_player = current_player
        self.moves_made = moves_made

    def copy(self) -> "GameState":
        """Deep copy - board.copy() copies the contiguous int8 cells."""
        return GameState(self.board.copy(), self.current_player, self.moves_made)

    def is_consistent(self) -> bool:
        """
        Check the state invariants:
        - moves_made equals the number of pieces on the board
        - white is to move exactly when moves_made is even
        """
        if self.moves_made != self.board.count_pieces():
            return False
        expected = CellColor.WHITE if self.moves_made % 2 == 0 else CellColor.BLACK
        return self.current_player == expected
