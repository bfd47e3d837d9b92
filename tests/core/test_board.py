"""Tests for Board and Piece."""

import pytest

from whitetomove.core.board import Board
from whitetomove.core.enums import Color, PieceType
from whitetomove.core.piece import Piece
from whitetomove.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E2, E4,
    parse_square,
    square_name,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawn_ranks(self) -> None:
        board = Board.initial()
        for col in range(8):
            assert board[(6, col)] == Piece(Color.WHITE, PieceType.PAWN)
            assert board[(1, col)] == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board[(row, col)] is None

    def test_sixteen_pieces_per_side(self) -> None:
        board = Board.initial()
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16


class TestBoardSnapshot:
    def test_empty_board(self) -> None:
        board = Board.empty()
        assert list(board.occupied()) == []
        assert board.find_king(Color.WHITE) is None

    def test_replace_returns_new_board(self) -> None:
        board = Board.initial()
        pawn = board[E2]
        moved = board.replace({E2: None, E4: pawn})
        assert moved[E4] == pawn
        assert moved[E2] is None
        # original untouched
        assert board[E2] == pawn
        assert board[E4] is None

    def test_value_equality_and_hash(self) -> None:
        assert Board.initial() == Board.initial()
        assert hash(Board.initial()) == hash(Board.initial())
        assert Board.initial() != Board.empty()

    def test_find_king(self) -> None:
        board = Board.initial()
        assert board.find_king(Color.WHITE) == E1
        assert board.find_king(Color.BLACK) == E8

    def test_rejects_wrong_shape(self) -> None:
        with pytest.raises(ValueError):
            Board(((None,) * 8,) * 7)

    def test_repr_shows_ranks(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert text.splitlines()[-1] == "  a b c d e f g h"


class TestPiece:
    def test_case_encodes_color(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("n") == Piece(Color.BLACK, PieceType.KNIGHT)

    def test_str_round_trip(self) -> None:
        for ch in "PNBRQKpnbrqk":
            assert str(Piece.from_char(ch)) == ch

    @pytest.mark.parametrize("bad", ["x", "", "NN", "1"])
    def test_invalid_char(self, bad: str) -> None:
        with pytest.raises(ValueError):
            Piece.from_char(bad)

    def test_symbol(self) -> None:
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"


class TestSquares:
    def test_names(self) -> None:
        assert square_name(E2) == "e2"
        assert square_name(A8) == "a8"
        assert square_name(H1) == "h1"

    def test_parse(self) -> None:
        assert parse_square("e4") == E4 == (4, 4)
        assert parse_square("a8") == (0, 0)

    def test_package_exports_quick_start_squares(self) -> None:
        from whitetomove.core import E2 as pkg_e2, E4 as pkg_e4

        assert pkg_e2 == E2 == (6, 4)
        assert pkg_e4 == E4 == (4, 4)

    @pytest.mark.parametrize("bad", ["i1", "a9", "e", "e44"])
    def test_parse_invalid(self, bad: str) -> None:
        with pytest.raises(ValueError):
            parse_square(bad)
