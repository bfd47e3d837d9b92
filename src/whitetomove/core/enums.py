"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn step (white moves towards row 0)."""
        return -1 if self == Color.WHITE else 1

    @property
    def home_row(self) -> int:
        """Row of the back rank."""
        return 7 if self == Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameStatus(IntEnum):
    """Terminal classification of a position for the side to move."""

    IN_PROGRESS = 0
    CHECKMATE = 1
    STALEMATE = 2
