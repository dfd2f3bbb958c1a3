"""
SearchStrategy - abstract interface for move search, plus search budgets.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from edgelink.core.types import Move
    from edgelink.games.game_base import GameBase
    from edgelink.selection.heuristic import Heuristic


class SearchStrategy(ABC):
    """Picks a move for the side to move."""

    @abstractmethod
    def choose_move(self, game: "GameBase", max_depth: int, heuristic: "Heuristic") -> "Move":
        """
        Return the chosen move for game.current_player().

        Raises:
            NoLegalMoves: the game is over or has no empty cell
            InvalidDepth: max_depth < 1
        """
        pass


@dataclass(frozen=True)
class SearchLimits:
    """
    Optional budget for one choose_move call.

    time_limit:  seconds of wall-clock time
    node_budget: number of positions visited
    None means unlimited.
    """
    time_limit: Optional[float] = None
    node_budget: Optional[int] = None

    def __post_init__(self):
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {self.time_limit}")
        if self.node_budget is not None and self.node_budget < 1:
            raise ValueError(f"node_budget must be at least 1, got {self.node_budget}")

    @property
    def unlimited(self) -> bool:
        return self.time_limit is None and self.node_budget is None

    def deadline(self, started: float) -> Optional[float]:
        """Absolute perf_counter deadline, or None."""
        if self.time_limit is None:
            return None
        return started + self.time_limit


@dataclass
class SearchStats:
    """Counters for the last choose_move call."""
    nodes: int = 0
    elapsed: float = 0.0
    completed: bool = True
    best_score: Optional[int] = None
    root_moves_evaluated: int = 0

    def start(self) -> float:
        self.nodes = 0
        self.elapsed = 0.0
        self.completed = True
        self.best_score = None
        self.root_moves_evaluated = 0
        return time.perf_counter()
