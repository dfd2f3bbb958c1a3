"""
Simulation module - running complete games between players.
"""

from edgelink.simulation.match import MatchResult, MoveRecord, play_match

__all__ = [
    "MatchResult",
    "MoveRecord",
    "play_match",
]
