"""Move-history labels (``O-O``, ``e8=Q``, ``Ng1 → f3``)."""

from __future__ import annotations

from whitetomove.core.enums import PieceType
from whitetomove.core.move import Move
from whitetomove.core.piece import Piece
from whitetomove.core.types import square_name

_LABEL_LETTER: dict[PieceType, str] = {
    PieceType.PAWN: "",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


def move_label(piece: Piece, move: Move) -> str:
    """History text for *piece* making *move*."""
    from_col, to_col = move.from_sq[1], move.to_sq[1]
    if piece.piece_type == PieceType.KING and abs(to_col - from_col) == 2:
        return "O-O" if to_col > from_col else "O-O-O"

    to_name = square_name(move.to_sq)
    if piece.piece_type == PieceType.PAWN and move.to_sq[0] in (0, 7):
        promoted = move.promotion or PieceType.QUEEN
        return f"{to_name}={_LABEL_LETTER[promoted]}"

    return f"{_LABEL_LETTER[piece.piece_type]}{square_name(move.from_sq)} → {to_name}"
