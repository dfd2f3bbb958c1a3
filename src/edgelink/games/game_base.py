"""
GameBase - abstract base class for two-player placement games.
"""

from abc import ABC, abstractmethod
from typing import List

from edgelink.core.types import CellColor, Move, State
from edgelink.games.board import Board
from edgelink.games.game_state import GameState


class GameBase(ABC):
    """
    Abstract base class for the games the search engine can play.

    The search only relies on this interface: it enumerates moves, clones
    the game per candidate, applies the move to the clone and asks whether
    the clone is decided.
    """

    @abstractmethod
    def clone(self) -> "GameBase":
        """
        Deep copy of game + state.
        Used heavily by the search, once per explored move.
        """
        pass

    @abstractmethod
    def get_state(self) -> GameState:
        """Return a copy of the current game state."""
        pass

    @abstractmethod
    def set_state(self, game_state: GameState) -> None:
        """Replace the current game state with a copy of `game_state`."""
        pass

    @abstractmethod
    def get_board(self) -> Board:
        """Return a copy of the board."""
        pass

    @abstractmethod
    def is_full(self) -> bool:
        """Return True if no empty cell is left."""
        pass

    @abstractmethod
    def current_player(self) -> CellColor:
        """Return the colour to act."""
        pass

    @abstractmethod
    def valid_moves(self) -> List[Move]:
        """Return all legal moves from the current state, in row-major order."""
        pass

    @abstractmethod
    def apply_move(self, move: Move) -> None:
        """
        Apply a move to the game. Mutates internal state.

        Either the whole move succeeds or an error is raised and the game
        is left untouched.
        """
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """Return True if the game has ended."""
        pass

    @abstractmethod
    def winner(self) -> CellColor:
        """Return the winning colour, or CellColor.EMPTY if there is none."""
        pass

    @abstractmethod
    def get_result(self, color: CellColor) -> State:
        """
        Return payoff for the colour:
            WIN / TIE / NEUTRAL / LOSS
        """
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass
