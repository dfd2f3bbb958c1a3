"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the game:
- CellColor: tri-state cell occupancy (int8 codes on the board)
- Orientation: which pair of opposite edges a connection joins
- Move: immutable (row, col) pair
- State: game outcome from one player's point of view
- Score sentinels used by the search
"""

from __future__ import annotations

import sys
from enum import Enum, IntEnum, auto
from typing import NamedTuple


class CellColor(IntEnum):
    """
    Cell occupancy, stored on the board as int8:
        0 = empty
        1 = white (moves first)
        2 = black
    """

    EMPTY = 0
    WHITE = 1
    BLACK = 2

    def opponent(self) -> "CellColor":
        if self is CellColor.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return CellColor(3 - self.value)  # Toggle 1↔2

    @property
    def glyph(self) -> str:
        return CELL_STRINGS[self]


# Cell strings: each cell value maps to its display string
CELL_STRINGS = {
    CellColor.EMPTY: ".",
    CellColor.WHITE: "W",
    CellColor.BLACK: "B",
}


class Orientation(Enum):
    """A pair of opposite edges: start edge first, end edge second."""

    TOP_BOTTOM = auto()  # row 0 -> row N-1
    LEFT_RIGHT = auto()  # col 0 -> col N-1


class State(Enum):
    WIN = auto()
    TIE = auto()
    LOSS = auto()
    NEUTRAL = auto()


class Move(NamedTuple):
    """A board coordinate. Bounds are checked by the board, not here."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


# ╔═════════════════════════════════════════════════════════════════════════════╗
# ║                         SEARCH SCORE SENTINELS                              ║
# ║                                                                             ║
# ║  Heuristic scores live in [-size², 0]. The sentinels must dominate every    ║
# ║  real score on any board that fits in memory.                               ║
# ╚═════════════════════════════════════════════════════════════════════════════╝

WIN_SCORE = sys.maxsize
LOSS_SCORE = -sys.maxsize
