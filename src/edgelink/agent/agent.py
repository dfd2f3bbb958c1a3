"""
A computer player: a search strategy and a heuristic composed by injection.
"""

from dataclasses import dataclass, field

from edgelink.core.errors import InvalidDepth
from edgelink.core.types import CellColor, Move
from edgelink.games.game_base import GameBase
from edgelink.games.game_rules import is_int
from edgelink.selection.heuristic import Heuristic, MinPiecesHeuristic
from edgelink.selection.minimax import AlphaBetaSearch
from edgelink.selection.search_base import SearchStrategy


@dataclass
class Agent:
    _max_depth: int = 5  # How many plies ahead the agent looks
    _heuristic: Heuristic = field(
        default_factory=MinPiecesHeuristic
    )  # Scores undecided leaf positions
    _strategy: SearchStrategy = field(
        default_factory=AlphaBetaSearch
    )  # Walks the game tree and returns a move
    _color: CellColor = (
        CellColor.WHITE  # The colour this agent plays
    )

    def __post_init__(self):
        if not is_int(self._max_depth) or self._max_depth < 1:
            raise InvalidDepth(self._max_depth)

    @property
    def max_depth(self) -> int:
        """Returns the search depth in plies."""
        return self._max_depth

    @property
    def heuristic(self) -> Heuristic:
        return self._heuristic

    @property
    def strategy(self) -> SearchStrategy:
        return self._strategy

    @property
    def color(self) -> CellColor:
        """Returns the colour the agent plays."""
        return self._color

    @color.setter
    def color(self, value: CellColor):
        """Sets the colour the agent plays."""
        if value is CellColor.EMPTY:
            raise ValueError("An agent must play WHITE or BLACK")
        self._color = value

    def select_move(self, game: GameBase) -> Move:
        """Search `game` and return the move for the side to move."""
        return self._strategy.choose_move(game, self._max_depth, self._heuristic)
