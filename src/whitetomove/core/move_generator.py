"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from whitetomove.core.board import Board
from whitetomove.core.castling import CastlingRights
from whitetomove.core.enums import Color, PieceType
from whitetomove.core.executor import simulate_move
from whitetomove.core.move import Move
from whitetomove.core.piece import Piece
from whitetomove.core.types import Square, is_valid_square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

_KING_HOME_COL = 4


class MoveGenerator:
    """Generates moves on a :class:`Board` under the given castling rights.

    The board is never modified; legality is checked on simulated copies.
    """

    __slots__ = ("_board", "_castling")

    def __init__(self, board: Board, castling: CastlingRights | None = None) -> None:
        self._board = board
        self._castling = castling if castling is not None else CastlingRights()

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, sq: Square, color: Color) -> set[Move]:
        """Moves of the piece on *sq* that do not leave *color*'s king attacked."""
        legal: set[Move] = set()
        opponent = color.opposite
        for move in self.pseudo_legal_moves(sq, color):
            after = simulate_move(self._board, move.from_sq, move.to_sq)
            king_sq = after.find_king(color)
            if king_sq is None or not _is_attacked(after, king_sq, opponent):
                legal.add(move)
        return legal

    def all_legal_moves(self, color: Color) -> set[Move]:
        """Union of :meth:`legal_moves` over every piece of *color*."""
        moves: set[Move] = set()
        for sq in self._board.pieces(color):
            moves |= self.legal_moves(sq, color)
        return moves

    def has_legal_move(self, color: Color) -> bool:
        return any(self.legal_moves(sq, color) for sq in self._board.pieces(color))

    def pseudo_legal_moves(
        self, sq: Square, color: Color, *, attack_mode: bool = False
    ) -> set[Move]:
        """Geometry-only moves of the piece on *sq* (may leave own king in check).

        ``attack_mode`` drops castling so that attack queries never recurse
        into king safety.
        """
        piece = self._board[sq]
        if piece is None or piece.color != color:
            return set()
        return {
            Move(sq, to_sq) for to_sq in self._targets(sq, piece, attack_mode=attack_mode)
        }

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?  ``False`` with no king."""
        king_sq = self._board.find_king(color)
        if king_sq is None:
            return False
        return _is_attacked(self._board, king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return _is_attacked(self._board, sq, by_color)

    # -- Piece-specific generators (private) -------------------------------

    def _targets(self, sq: Square, piece: Piece, *, attack_mode: bool) -> list[Square]:
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            if attack_mode:
                return self._pawn_attacks(sq, piece.color)
            return self._gen_pawn(sq, piece.color)
        if ptype == PieceType.KNIGHT:
            return self._gen_step(sq, piece.color, KNIGHT_OFFSETS)
        if ptype == PieceType.KING:
            targets = self._gen_step(sq, piece.color, KING_OFFSETS)
            if not attack_mode:
                targets.extend(self._gen_castling(sq, piece.color))
            return targets
        return self._gen_sliding(sq, piece.color, _SLIDER_DIRS[ptype])

    def _gen_pawn(self, sq: Square, color: Color) -> list[Square]:
        board = self._board
        row, col = sq
        step = color.forward
        start_row = 6 if color == Color.WHITE else 1
        targets: list[Square] = []

        one_row = row + step
        if is_valid_square(one_row, col) and board.is_empty((one_row, col)):
            targets.append((one_row, col))
            two_row = row + 2 * step
            if row == start_row and board.is_empty((two_row, col)):
                targets.append((two_row, col))

        for dc in (-1, 1):
            cap_col = col + dc
            if not is_valid_square(one_row, cap_col):
                continue
            target = board[(one_row, cap_col)]
            if target is not None and target.color != color:
                targets.append((one_row, cap_col))
        return targets

    @staticmethod
    def _pawn_attacks(sq: Square, color: Color) -> list[Square]:
        # Both forward diagonals, occupied or not; pushes never attack.
        row, col = sq
        r = row + color.forward
        return [(r, c) for c in (col - 1, col + 1) if is_valid_square(r, c)]

    def _gen_step(
        self, sq: Square, color: Color, offsets: tuple[tuple[int, int], ...]
    ) -> list[Square]:
        board = self._board
        row, col = sq
        targets: list[Square] = []
        for dr, dc in offsets:
            r, c = row + dr, col + dc
            if not is_valid_square(r, c):
                continue
            target = board[(r, c)]
            if target is None or target.color != color:
                targets.append((r, c))
        return targets

    def _gen_sliding(
        self, sq: Square, color: Color, directions: tuple[tuple[int, int], ...]
    ) -> list[Square]:
        board = self._board
        row, col = sq
        targets: list[Square] = []
        for dr, dc in directions:
            r, c = row + dr, col + dc
            while is_valid_square(r, c):
                target = board[(r, c)]
                if target is None:
                    targets.append((r, c))
                elif target.color != color:
                    targets.append((r, c))
                    break
                else:
                    break
                r += dr
                c += dc
        return targets

    def _gen_castling(self, king_sq: Square, color: Color) -> list[Square]:
        home = color.home_row
        if king_sq != (home, _KING_HOME_COL) or self.is_in_check(color):
            return []

        board = self._board
        opponent = color.opposite
        rook = Piece(color, PieceType.ROOK)
        targets: list[Square] = []

        if (
            self._castling.kingside_available(color)
            and board[(home, 7)] == rook
            and board.is_empty((home, 5))
            and board.is_empty((home, 6))
            and not _is_attacked(board, (home, 5), opponent)
            and not _is_attacked(board, (home, 6), opponent)
        ):
            targets.append((home, 6))

        if (
            self._castling.queenside_available(color)
            and board[(home, 0)] == rook
            and board.is_empty((home, 1))
            and board.is_empty((home, 2))
            and board.is_empty((home, 3))
            and not _is_attacked(board, (home, 2), opponent)
            and not _is_attacked(board, (home, 3), opponent)
        ):
            targets.append((home, 2))
        return targets


def _is_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Scan every *by_color* piece's attack-mode destinations for *sq*."""
    gen = MoveGenerator(board)
    for origin, piece in board.occupied():
        if piece.color != by_color:
            continue
        if sq in gen._targets(origin, piece, attack_mode=True):
            return True
    return False
