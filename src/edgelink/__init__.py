"""
edgelink - a square-grid connection game with a minimax AI.

Two players take turns placing pieces on an N x N board. A player wins by
joining the top row to the bottom row, or the left column to the right
column, with a 4-connected chain of their own pieces.

Quick Start:
    from edgelink import ConnectionGame, MinPiecesHeuristic, choose_move

    game = ConnectionGame(5)
    move = choose_move(game, max_depth=3, heuristic=MinPiecesHeuristic())
    game.apply_move(move)

Modules:
    core       - Fundamental types (CellColor, Move, Orientation) and errors
    games      - Board, game state, win detection
    selection  - Heuristic evaluation and alpha-beta search
    agent      - AI player composed from a search strategy and a heuristic
    simulation - Turn loop for complete games
"""

from edgelink.games import ConnectionGame, Board, GameState, has_path

from edgelink.core import (
    CellColor,
    Orientation,
    Move,
    State,
    GameError,
    InvalidSize,
    OutOfBounds,
    CellOccupied,
    NoLegalMoves,
    InvalidDepth,
)
from edgelink.selection import (
    Heuristic,
    MinPiecesHeuristic,
    path_cost,
    SearchStrategy,
    SearchLimits,
    AlphaBetaSearch,
    choose_move,
)
from edgelink.agent import Agent
from edgelink.api import play_vs_ai
from edgelink.utils.config import Config

__version__ = "1.0.0"

__all__ = [
    # Game
    "ConnectionGame",
    "Board",
    "GameState",
    "has_path",
    # Types
    "CellColor",
    "Orientation",
    "Move",
    "State",
    # Errors
    "GameError",
    "InvalidSize",
    "OutOfBounds",
    "CellOccupied",
    "NoLegalMoves",
    "InvalidDepth",
    # AI
    "Heuristic",
    "MinPiecesHeuristic",
    "path_cost",
    "SearchStrategy",
    "SearchLimits",
    "AlphaBetaSearch",
    "choose_move",
    "Agent",
    # Play
    "play_vs_ai",
    "Config",
]
