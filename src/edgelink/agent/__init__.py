"""
Agent module - computer players.
"""

from edgelink.agent.agent import Agent

__all__ = ["Agent"]
