"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from whitetomove.core.board import Board
from whitetomove.core.castling import CastlingRights
from whitetomove.core.enums import Color, GameStatus
from whitetomove.core.move_generator import MoveGenerator


class Rules:
    """Static rule-checker that operates on a :class:`Board` and a side.

    ``castling=None`` scans with nothing-has-moved rights; sessions pass
    their real rights.  Castling can never be the only way out of check
    (it is not offered in check), so checkmate is unaffected either way.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def has_legal_move(
        board: Board, color: Color, castling: CastlingRights | None = None
    ) -> bool:
        return MoveGenerator(board, castling).has_legal_move(color)

    @staticmethod
    def is_checkmate(
        board: Board, color: Color, castling: CastlingRights | None = None
    ) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.has_legal_move(board, color, castling)

    @staticmethod
    def is_stalemate(
        board: Board, color: Color, castling: CastlingRights | None = None
    ) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not Rules.has_legal_move(board, color, castling)

    @staticmethod
    def game_status(
        board: Board, color: Color, castling: CastlingRights | None = None
    ) -> GameStatus:
        """Classify the position for *color* to move."""
        if Rules.has_legal_move(board, color, castling):
            return GameStatus.IN_PROGRESS
        if Rules.is_in_check(board, color):
            return GameStatus.CHECKMATE
        return GameStatus.STALEMATE
