"""
Board - fixed N x N grid of CellColor.

Uses an int8 numpy array for fast copying (see CellColor for the encoding).
Cells are only reachable through get/set, which both bounds-check; numpy's
negative indexing would otherwise wrap around silently.
"""

from __future__ import annotations

import numpy as np

from edgelink.core.errors import InvalidSize, OutOfBounds
from edgelink.core.types import CELL_STRINGS, CellColor
from edgelink.games.game_rules import board_full, in_bounds, is_int


class Board:
    """Square grid of cells, size fixed at construction."""

    __slots__ = ('size', '_cells')

    def __init__(self, size: int):
        if not is_int(size) or size <= 0:
            raise InvalidSize(size)
        self.size = int(size)
        self._cells = np.zeros((self.size, self.size), dtype=np.int8)

    @classmethod
    def from_rows(cls, rows) -> "Board":
        """
        Build a board from a square nested sequence of cell values
        (CellColor or their int codes). Mostly useful for tests.
        """
        cells = np.array(rows, dtype=np.int8)
        if cells.ndim != 2 or cells.shape[0] != cells.shape[1]:
            raise InvalidSize(cells.shape)
        if np.any((cells < 0) | (cells > 2)):
            raise ValueError("Cell values must be 0 (empty), 1 (white) or 2 (black)")
        board = cls(cells.shape[0])
        board._cells[:] = cells
        return board

    def get(self, row: int, col: int) -> CellColor:
        if not in_bounds(self.size, row, col):
            raise OutOfBounds(row, col, self.size)
        return CellColor(int(self._cells[row, col]))

    def set(self, row: int, col: int, color: CellColor) -> None:
        if not in_bounds(self.size, row, col):
            raise OutOfBounds(row, col, self.size)
        if not isinstance(color, CellColor):
            raise ValueError(f"Expected a CellColor, got {color!r}")
        self._cells[row, col] = color.value

    def copy(self) -> "Board":
        """Deep copy; the new board shares no cell storage with this one."""
        b = Board.__new__(Board)
        b.size = self.size
        b._cells = self._cells.copy()
        return b

    def to_array(self) -> np.ndarray:
        """Copy of the raw int8 cells."""
        return self._cells.copy()

    def is_full(self) -> bool:
        return board_full(self._cells)

    def count_pieces(self) -> int:
        """Number of non-empty cells."""
        return int(np.count_nonzero(self._cells))

    def empty_cells(self) -> np.ndarray:
        """Empty cell positions as an array of shape (k, 2), row-major."""
        return np.argwhere(self._cells == 0)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and np.array_equal(self._cells, other._cells)

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return "".join(
            "".join(CELL_STRINGS[CellColor(int(v))] for v in row) + "\n"
            for row in self._cells
        )

    def __repr__(self) -> str:
        return f"Board(size={self.size})"
