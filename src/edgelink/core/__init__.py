"""
Core module - fundamental types, constants and errors.
"""

from edgelink.core.types import (
    CellColor,
    Orientation,
    Move,
    State,
    CELL_STRINGS,
    WIN_SCORE,
    LOSS_SCORE,
)
from edgelink.core.errors import (
    GameError,
    InvalidSize,
    OutOfBounds,
    CellOccupied,
    NoLegalMoves,
    InvalidDepth,
)

__all__ = [
    # Types
    "CellColor",
    "Orientation",
    "Move",
    "State",
    # Constants
    "CELL_STRINGS",
    "WIN_SCORE",
    "LOSS_SCORE",
    # Errors
    "GameError",
    "InvalidSize",
    "OutOfBounds",
    "CellOccupied",
    "NoLegalMoves",
    "InvalidDepth",
]
