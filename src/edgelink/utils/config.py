"""
Configuration and strategy registries.
"""

from typing import Optional

from edgelink.core.errors import InvalidDepth, InvalidSize
from edgelink.core.types import CellColor
from edgelink.selection.heuristic import MinPiecesHeuristic
from edgelink.selection.minimax import AlphaBetaSearch
from edgelink.selection.search_base import SearchLimits


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

HEURISTICS = {
    "min_pieces": MinPiecesHeuristic,
}

STRATEGIES = {
    "alpha_beta": AlphaBetaSearch,
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_SIZE = 5
DEFAULT_DEPTH = 5


def parse_color(value) -> CellColor:
    """Accept a CellColor or a case-insensitive 'white' / 'black'."""
    if isinstance(value, CellColor):
        color = value
    else:
        try:
            color = CellColor[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown colour: {value!r}. Expected 'white' or 'black'") from None
    if color is CellColor.EMPTY:
        raise ValueError("The AI must play WHITE or BLACK")
    return color


class Config:
    """Game and search configuration with sensible defaults."""

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        max_depth: int = DEFAULT_DEPTH,
        ai_color="white",
        seed: Optional[int] = None,
        time_limit: Optional[float] = None,
        node_budget: Optional[int] = None,
        heuristic: str = "min_pieces",
        strategy: str = "alpha_beta",
    ):
        if size <= 0:
            raise InvalidSize(size)
        if max_depth < 1:
            raise InvalidDepth(max_depth)
        if heuristic not in HEURISTICS:
            available = ", ".join(HEURISTICS.keys())
            raise ValueError(f"Unknown heuristic: {heuristic}. Available: {available}")
        if strategy not in STRATEGIES:
            available = ", ".join(STRATEGIES.keys())
            raise ValueError(f"Unknown strategy: {strategy}. Available: {available}")

        self.size = size
        self.max_depth = max_depth
        self.ai_color = parse_color(ai_color)
        self.seed = seed
        self.time_limit = time_limit
        self.node_budget = node_budget
        self.heuristic = heuristic
        self.strategy = strategy
        self.limits = SearchLimits(time_limit=time_limit, node_budget=node_budget)

    @property
    def human_color(self) -> CellColor:
        return self.ai_color.opponent()


# Default configuration
DEFAULT_CONFIG = Config()
