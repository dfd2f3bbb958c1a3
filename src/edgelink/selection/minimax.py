"""
Depth-limited minimax with alpha-beta pruning.

Every node explores a fresh clone of the game per candidate move, so sibling
branches share no mutable state. Move order is shuffled at every node with
the injected random source; seed it to make a search reproducible.

Scores are from the point of view of the player to move at the root:
    WIN_SCORE   the root player has won
    LOSS_SCORE  the opponent has won
    otherwise   heuristic.score() of the leaf
"""

from __future__ import annotations

import logging
import random
import time
from typing import List, Optional, TYPE_CHECKING

from edgelink.core.errors import InvalidDepth, NoLegalMoves
from edgelink.core.types import CellColor, LOSS_SCORE, WIN_SCORE, Move
from edgelink.games.game_rules import is_int
from edgelink.selection.search_base import SearchLimits, SearchStats, SearchStrategy

if TYPE_CHECKING:
    from edgelink.games.game_base import GameBase
    from edgelink.selection.heuristic import Heuristic

logger = logging.getLogger(__name__)


class _BudgetExhausted(Exception):
    """Raised inside the recursion when the time or node budget runs out."""


class AlphaBetaSearch(SearchStrategy):
    """
    Minimax search with alpha-beta pruning.

    Args:
        rng:    Random source for move shuffling (default: unseeded Random)
        limits: Optional time / node budget. When exceeded, the best root move
                whose subtree was fully searched is returned.
    """

    def __init__(self, rng: Optional[random.Random] = None, limits: Optional[SearchLimits] = None):
        self.rng = rng if rng is not None else random.Random()
        self.limits = limits if limits is not None else SearchLimits()
        self.last_stats = SearchStats()
        self._heuristic: Optional["Heuristic"] = None
        self._deadline: Optional[float] = None
        self._node_budget: Optional[int] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def choose_move(self, game: "GameBase", max_depth: int, heuristic: "Heuristic") -> Move:
        if not is_int(max_depth) or max_depth < 1:
            raise InvalidDepth(max_depth)
        if game.is_over():
            raise NoLegalMoves("Game is already over")
        moves = self._ordered_moves(game)
        if not moves:
            raise NoLegalMoves("No empty cells left")

        stats = self.last_stats
        started = stats.start()
        self._heuristic = heuristic
        self._deadline = self.limits.deadline(started)
        self._node_budget = self.limits.node_budget

        root_player = game.current_player()
        best_move = moves[0]
        best_score = LOSS_SCORE
        alpha, beta = LOSS_SCORE, WIN_SCORE

        try:
            for move in moves:
                child = game.clone()
                child.apply_move(move)
                score = self.minimax(child, max_depth - 1, alpha, beta, root_player)
                stats.root_moves_evaluated += 1

                if score > best_score:
                    best_score = score
                    best_move = move
                if best_score == WIN_SCORE:
                    break  # nothing can beat it
                alpha = max(alpha, score)
        except _BudgetExhausted:
            stats.completed = False
            logger.info(
                "Search budget exhausted after %d nodes; %d/%d root moves evaluated",
                stats.nodes, stats.root_moves_evaluated, len(moves),
            )
        finally:
            stats.elapsed = time.perf_counter() - started
            self._heuristic = None
            self._deadline = None
            self._node_budget = None

        stats.best_score = best_score if stats.root_moves_evaluated else None
        logger.debug(
            "%s plays %s (score %s, depth %d, %d nodes, %.3fs)",
            root_player.name, best_move, stats.best_score, max_depth, stats.nodes, stats.elapsed,
        )
        return best_move

    def evaluate(self, game: "GameBase", depth: int, heuristic: "Heuristic") -> int:
        """
        Exact minimax value of `game` for the side to move, searched with a
        full (LOSS_SCORE, WIN_SCORE) window. Ignores the search limits.
        """
        if not is_int(depth) or depth < 0:
            raise InvalidDepth(depth)
        self.last_stats.start()
        self._heuristic = heuristic
        try:
            return self.minimax(game, depth, LOSS_SCORE, WIN_SCORE, game.current_player())
        finally:
            self._heuristic = None

    def minimax(self, game: "GameBase", depth: int, alpha: int, beta: int, root_player: CellColor) -> int:
        """Score `game` for root_player, searching `depth` more plies."""
        self._tick()

        winner = game.winner()
        if winner is not CellColor.EMPTY:
            return WIN_SCORE if winner == root_player else LOSS_SCORE
        # No winner, so the game is only over if the board is full (draw)
        if depth == 0 or game.is_full():
            return self._heuristic.score(game)

        moves = self._ordered_moves(game)

        if game.current_player() == root_player:
            best_score = LOSS_SCORE
            for move in moves:
                child = game.clone()
                child.apply_move(move)
                score = self.minimax(child, depth - 1, alpha, beta, root_player)
                best_score = max(best_score, score)
                if best_score >= beta:
                    return best_score  # Beta cutoff
                alpha = max(alpha, score)
            return best_score

        best_score = WIN_SCORE
        for move in moves:
            child = game.clone()
            child.apply_move(move)
            score = self.minimax(child, depth - 1, alpha, beta, root_player)
            best_score = min(best_score, score)
            if best_score <= alpha:
                return best_score  # Alpha cutoff
            beta = min(beta, score)
        return best_score

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ordered_moves(self, game: "GameBase") -> List[Move]:
        moves = list(game.valid_moves())
        self.rng.shuffle(moves)
        return moves

    def _tick(self) -> None:
        stats = self.last_stats
        stats.nodes += 1
        if self._node_budget is not None and stats.nodes > self._node_budget:
            raise _BudgetExhausted
        if self._deadline is not None and time.perf_counter() > self._deadline:
            raise _BudgetExhausted


def choose_move(
    game: "GameBase",
    max_depth: int,
    heuristic: "Heuristic",
    rng: Optional[random.Random] = None,
    limits: Optional[SearchLimits] = None,
) -> Move:
    """One-shot alpha-beta search. See AlphaBetaSearch."""
    return AlphaBetaSearch(rng=rng, limits=limits).choose_move(game, max_depth, heuristic)
