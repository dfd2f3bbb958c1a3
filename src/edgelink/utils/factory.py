"""
Factory functions for creating games and agents from a Config.
"""

import random

from edgelink.agent.agent import Agent
from edgelink.core.types import CellColor
from edgelink.games.connection_game import ConnectionGame
from edgelink.utils.config import HEURISTICS, STRATEGIES, Config


def create_game(config: Config) -> ConnectionGame:
    """Create an empty game of the configured size."""
    return ConnectionGame(config.size)


def create_agent(config: Config, color: CellColor, seed_offset: int = 0) -> Agent:
    """
    Create an AI agent for `color`.

    Args:
        config: Source of depth, heuristic, strategy, seed and budgets
        color: Colour the agent plays
        seed_offset: Added to config.seed so two agents built from the same
                     config do not shuffle identically

    Returns:
        Configured Agent
    """
    if config.heuristic not in HEURISTICS:
        available = ", ".join(HEURISTICS.keys())
        raise ValueError(f"Unknown heuristic: {config.heuristic}. Available: {available}")
    if config.strategy not in STRATEGIES:
        available = ", ".join(STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {config.strategy}. Available: {available}")

    rng = random.Random(config.seed + seed_offset) if config.seed is not None else random.Random()
    strategy = STRATEGIES[config.strategy](rng=rng, limits=config.limits)

    agent = Agent(config.max_depth, HEURISTICS[config.heuristic](), strategy)
    agent.color = color
    return agent
