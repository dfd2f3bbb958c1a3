"""
ConnectionGame - two players race to join opposite edges of an N x N grid.

White moves first. A colour wins by owning a 4-connected chain from the top
row to the bottom row, or from the left column to the right column. A full
board with no chain is a draw.
"""

from __future__ import annotations

from typing import List

from edgelink.core.errors import CellOccupied, OutOfBounds
from edgelink.core.types import CellColor, Move, State
from edgelink.games.board import Board
from edgelink.games.game_base import GameBase
from edgelink.games.game_rules import in_bounds, is_int
from edgelink.games.path_finder import has_connection
from edgelink.games.game_state import GameState


class ConnectionGame(GameBase):
    """Square-grid connection game."""

    __slots__ = ('state',)

    def __init__(self, size: int):
        self.state = GameState(Board(size), current_player=CellColor.WHITE, moves_made=0)

    @property
    def size(self) -> int:
        return self.state.board.size

    @property
    def moves_made(self) -> int:
        return self.state.moves_made

    def clone(self) -> "ConnectionGame":
        g = ConnectionGame.__new__(ConnectionGame)
        g.state = self.state.copy()
        return g

    def get_state(self) -> GameState:
        """Copy of the current state; mutating it does not affect the game."""
        return self.state.copy()

    def set_state(self, game_state: GameState) -> None:
        if not game_state.is_consistent():
            raise ValueError(
                f"Inconsistent state: {game_state.moves_made} moves made, "
                f"{game_state.board.count_pieces()} pieces, "
                f"{CellColor(game_state.current_player).name} to move"
            )
        state = game_state.copy()
        state.current_player = CellColor(state.current_player)
        self.state = state

    def get_board(self) -> Board:
        """Copy of the board; mutating it does not affect the game."""
        return self.state.board.copy()

    def is_full(self) -> bool:
        return self.state.board.is_full()

    def current_player(self) -> CellColor:
        return self.state.current_player

    def valid_moves(self) -> List[Move]:
        """Return empty cell positions, row-major."""
        return [Move(int(r), int(c)) for r, c in self.state.board.empty_cells()]

    def apply_move(self, move: Move) -> None:
        board = self.state.board
        r, c = move[0], move[1]
        if not (is_int(r) and is_int(c)):
            raise OutOfBounds(r, c, board.size)
        r, c = int(r), int(c)

        if not in_bounds(board.size, r, c):
            raise OutOfBounds(r, c, board.size)
        if board.get(r, c) is not CellColor.EMPTY:
            raise CellOccupied(r, c)

        player = self.state.current_player
        board.set(r, c, player)
        self.state.current_player = player.opponent()
        self.state.moves_made += 1

    def is_over(self) -> bool:
        return self.winner() is not CellColor.EMPTY or self.is_full()

    def winner(self) -> CellColor:
        # White is checked first. On a 4-connected grid both colours can
        # hold a chain at once; white is then reported.
        board = self.state.board
        if has_connection(board, CellColor.WHITE):
            return CellColor.WHITE
        if has_connection(board, CellColor.BLACK):
            return CellColor.BLACK
        return CellColor.EMPTY

    def get_result(self, color: CellColor) -> State:
        winner = self.winner()
        if winner == color:
            return State.WIN
        if winner is not CellColor.EMPTY:
            return State.LOSS
        if self.state.board.is_full():
            return State.TIE
        return State.NEUTRAL

    def state_string(self) -> str:
        return str(self.state.board)

    def __repr__(self) -> str:
        return (
            f"ConnectionGame(size={self.size}, moves_made={self.moves_made}, "
            f"current_player={self.current_player().name})"
        )
