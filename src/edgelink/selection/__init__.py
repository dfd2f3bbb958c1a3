"""
Selection module - how the AI picks a move.

Provides:
- Heuristic / MinPiecesHeuristic: leaf evaluation
- SearchStrategy / AlphaBetaSearch: tree search
- choose_move(): one-shot alpha-beta search
"""

from edgelink.selection.heuristic import Heuristic, MinPiecesHeuristic, path_cost
from edgelink.selection.search_base import SearchLimits, SearchStats, SearchStrategy
from edgelink.selection.minimax import AlphaBetaSearch, choose_move

__all__ = [
    "Heuristic",
    "MinPiecesHeuristic",
    "path_cost",
    "SearchStrategy",
    "SearchLimits",
    "SearchStats",
    "AlphaBetaSearch",
    "choose_move",
]
