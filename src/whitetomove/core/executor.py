"""Move execution - pure board transformations.

Castling rights are not touched here; the session derives them from the
pre-move board with :meth:`CastlingRights.after_move`.
"""

from __future__ import annotations

from dataclasses import dataclass

from whitetomove.core.board import Board
from whitetomove.core.enums import PieceType
from whitetomove.core.piece import Piece
from whitetomove.core.types import Square

# King destination column → (rook origin column, rook destination column)
_CASTLE_ROOK_COLS: dict[int, tuple[int, int]] = {
    6: (7, 5),
    2: (0, 3),
}


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of :func:`apply_move`."""

    board: Board
    captured: Piece | None


def _placement(
    board: Board, from_sq: Square, to_sq: Square
) -> dict[Square, Piece | None]:
    """Square changes for moving a piece, including the castling rook."""
    piece = board[from_sq]
    if piece is None:
        return {}
    changes: dict[Square, Piece | None] = {from_sq: None, to_sq: piece}

    if (
        piece.piece_type == PieceType.KING
        and abs(to_sq[1] - from_sq[1]) == 2
        and to_sq[1] in _CASTLE_ROOK_COLS
    ):
        row = to_sq[0]
        rook_from, rook_to = _CASTLE_ROOK_COLS[to_sq[1]]
        changes[(row, rook_to)] = board[(row, rook_from)]
        changes[(row, rook_from)] = None
    return changes


def simulate_move(board: Board, from_sq: Square, to_sq: Square) -> Board:
    """Board after the move, ignoring promotion and capture bookkeeping."""
    return board.replace(_placement(board, from_sq, to_sq))


def apply_move(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    promotion: PieceType | None = None,
) -> MoveOutcome:
    """Apply a move and report the captured piece, if any.

    A pawn reaching the far rank becomes *promotion* (a queen when no
    choice is given) in the mover's color.  An empty *from_sq* leaves the
    board as it is.
    """
    piece = board[from_sq]
    if piece is None:
        return MoveOutcome(board, None)
    captured = board[to_sq]
    changes = _placement(board, from_sq, to_sq)

    if piece.piece_type == PieceType.PAWN and to_sq[0] in (0, 7):
        changes[to_sq] = Piece(piece.color, promotion or PieceType.QUEEN)

    return MoveOutcome(board.replace(changes), captured)
