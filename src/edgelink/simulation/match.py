"""
Turn loop for a single game between two players.

A player is anything with a `select_move(game) -> Move` method: an Agent,
or the console HumanPlayer in edgelink.api.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, TYPE_CHECKING

from edgelink.core.types import CellColor, Move

if TYPE_CHECKING:
    from edgelink.games.game_base import GameBase

logger = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single move with its context."""
    move: Move
    player: CellColor


@dataclass
class MatchResult:
    """Outcome of a finished game."""
    winner: CellColor
    moves: List[MoveRecord] = field(default_factory=list)

    @property
    def is_draw(self) -> bool:
        return self.winner is CellColor.EMPTY


def play_match(
    game: "GameBase",
    players: Dict[CellColor, object],
    on_move: Optional[Callable[["GameBase", MoveRecord], None]] = None,
) -> MatchResult:
    """
    Play `game` to the end, asking players[game.current_player()] for moves.

    Args:
        game: Game to play; mutated in place.
        players: Maps WHITE and BLACK to their players.
        on_move: Called after every applied move.

    Returns:
        MatchResult with the winner (CellColor.EMPTY for a draw) and the moves.
    """
    missing = [c.name for c in (CellColor.WHITE, CellColor.BLACK) if c not in players]
    if missing:
        raise ValueError(f"No player registered for: {', '.join(missing)}")

    moves: List[MoveRecord] = []
    while not game.is_over():
        color = game.current_player()
        move = players[color].select_move(game)
        game.apply_move(move)

        record = MoveRecord(Move(*move), color)
        moves.append(record)
        logger.debug("Move %d: %s plays %s", len(moves), color.name, record.move)
        if on_move is not None:
            on_move(game, record)

    winner = game.winner()
    logger.info("Game over after %d moves, winner: %s", len(moves), winner.name)
    return MatchResult(winner=winner, moves=moves)
