"""Castling rights - has-moved flags for each king and rook pair."""

from __future__ import annotations

from dataclasses import dataclass, replace

from whitetomove.core.board import Board
from whitetomove.core.enums import Color, PieceType
from whitetomove.core.types import Square

# Original rook corners → the flag set once that rook leaves it.
_ROOK_CORNERS: dict[Square, str] = {
    (7, 0): "white_queenside_rook_moved",
    (7, 7): "white_kingside_rook_moved",
    (0, 0): "black_queenside_rook_moved",
    (0, 7): "black_kingside_rook_moved",
}


@dataclass(frozen=True, slots=True)
class CastlingRights:
    """Six independent has-moved flags.

    A flag never goes back to ``False`` during a game; :meth:`after_move`
    only ever sets flags.  The default value means nothing has moved.
    """

    white_king_moved: bool = False
    white_queenside_rook_moved: bool = False
    white_kingside_rook_moved: bool = False
    black_king_moved: bool = False
    black_queenside_rook_moved: bool = False
    black_kingside_rook_moved: bool = False

    # ── Queries ──────────────────────────────────────────────────────────

    def king_moved(self, color: Color) -> bool:
        return self.white_king_moved if color == Color.WHITE else self.black_king_moved

    def kingside_available(self, color: Color) -> bool:
        """Neither the king nor the h-file rook of *color* has moved."""
        if color == Color.WHITE:
            return not (self.white_king_moved or self.white_kingside_rook_moved)
        return not (self.black_king_moved or self.black_kingside_rook_moved)

    def queenside_available(self, color: Color) -> bool:
        """Neither the king nor the a-file rook of *color* has moved."""
        if color == Color.WHITE:
            return not (self.white_king_moved or self.white_queenside_rook_moved)
        return not (self.black_king_moved or self.black_queenside_rook_moved)

    # ── Bookkeeping ──────────────────────────────────────────────────────

    def after_move(self, board: Board, from_sq: Square) -> CastlingRights:
        """Rights after the piece on *from_sq* of the pre-move *board* moves."""
        piece = board[from_sq]
        if piece is None:
            return self

        if piece.piece_type == PieceType.KING:
            field = "white_king_moved" if piece.color == Color.WHITE else "black_king_moved"
            return replace(self, **{field: True})

        if piece.piece_type == PieceType.ROOK and from_sq in _ROOK_CORNERS:
            field = _ROOK_CORNERS[from_sq]
            if field.startswith(str(piece.color)):
                return replace(self, **{field: True})

        return self

    # ── FEN castling field ───────────────────────────────────────────────

    def fen_token(self) -> str:
        """``KQkq`` subset in fixed order, or ``-`` when nothing is available."""
        token = ""
        if self.kingside_available(Color.WHITE):
            token += "K"
        if self.queenside_available(Color.WHITE):
            token += "Q"
        if self.kingside_available(Color.BLACK):
            token += "k"
        if self.queenside_available(Color.BLACK):
            token += "q"
        return token or "-"

    @classmethod
    def from_fen_token(cls, token: str) -> CastlingRights:
        """Inverse of :meth:`fen_token`.

        A side with no availability is recorded as a moved king; a side
        with one availability marks only the other rook as moved.
        """
        if token != "-":
            if not token or any(ch not in "KQkq" for ch in token):
                raise ValueError(f"Invalid FEN castling field: {token!r}")
            if len(set(token)) != len(token):
                raise ValueError(f"Invalid FEN castling field: {token!r}")
            available = set(token)
        else:
            available = set()

        white_k, white_q = "K" in available, "Q" in available
        black_k, black_q = "k" in available, "q" in available
        return cls(
            white_king_moved=not (white_k or white_q),
            white_queenside_rook_moved=white_k and not white_q,
            white_kingside_rook_moved=white_q and not white_k,
            black_king_moved=not (black_k or black_q),
            black_queenside_rook_moved=black_k and not black_q,
            black_kingside_rook_moved=black_q and not black_k,
        )
