"""
Error taxonomy.

All errors are caller contract violations. They are raised before any state
is touched, so the receiving object is unchanged when one propagates.
Every error is a ValueError, which is what the console loop catches.
"""


class GameError(ValueError):
    """Base class for every error raised by edgelink."""


class InvalidSize(GameError):
    """Board size is not a positive integer."""

    def __init__(self, size):
        super().__init__(f"Board size must be positive, got {size!r}")
        self.size = size


class OutOfBounds(GameError):
    """A coordinate lies outside the grid."""

    def __init__(self, row: int, col: int, size: int):
        super().__init__(f"({row},{col}) is outside the {size}x{size} board")
        self.row = row
        self.col = col
        self.size = size


class CellOccupied(GameError):
    """The target cell already holds a piece."""

    def __init__(self, row: int, col: int):
        super().__init__(f"Cell ({row},{col}) is occupied")
        self.row = row
        self.col = col


class NoLegalMoves(GameError):
    """Search was asked for a move in a finished or full game."""


class InvalidDepth(GameError):
    """Search depth below one ply."""

    def __init__(self, depth):
        super().__init__(f"Search depth must be at least 1, got {depth!r}")
        self.depth = depth
