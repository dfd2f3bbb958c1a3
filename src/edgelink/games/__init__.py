"""
Games module - board, game state and win detection for the connection game.
"""

from edgelink.games.board import Board
from edgelink.games.game_state import GameState
from edgelink.games.game_base import GameBase
from edgelink.games.game_rules import in_bounds, neighbours, start_edge, on_end_edge, board_full
from edgelink.games.path_finder import has_path, top_to_bottom, left_to_right, has_connection
from edgelink.games.connection_game import ConnectionGame

__all__ = [
    "Board",
    "GameState",
    "GameBase",
    "ConnectionGame",
    "in_bounds",
    "neighbours",
    "start_edge",
    "on_end_edge",
    "board_full",
    "has_path",
    "top_to_bottom",
    "left_to_right",
    "has_connection",
]
