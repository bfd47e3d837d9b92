"""Tests for castling-rights bookkeeping and the FEN castling field."""

from dataclasses import fields

import pytest

from whitetomove.core.board import Board
from whitetomove.core.castling import CastlingRights
from whitetomove.core.enums import Color
from whitetomove.core.notation import position_from_fen
from whitetomove.core.types import A1, A8, E1, E2, E8, H1, H8


class TestAvailability:
    def test_default_everything_available(self) -> None:
        rights = CastlingRights()
        for color in Color:
            assert rights.kingside_available(color)
            assert rights.queenside_available(color)
            assert not rights.king_moved(color)

    def test_king_flag_disables_both_sides(self) -> None:
        rights = CastlingRights(black_king_moved=True)
        assert not rights.kingside_available(Color.BLACK)
        assert not rights.queenside_available(Color.BLACK)
        assert rights.kingside_available(Color.WHITE)

    def test_rook_flag_disables_one_side(self) -> None:
        rights = CastlingRights(white_queenside_rook_moved=True)
        assert rights.kingside_available(Color.WHITE)
        assert not rights.queenside_available(Color.WHITE)


class TestAfterMove:
    def test_king_move_sets_king_flag(self) -> None:
        rights = CastlingRights().after_move(Board.initial(), E1)
        assert rights.white_king_moved
        assert not rights.black_king_moved
        assert not rights.white_kingside_rook_moved

    def test_black_king(self) -> None:
        rights = CastlingRights().after_move(Board.initial(), E8)
        assert rights == CastlingRights(black_king_moved=True)

    @pytest.mark.parametrize(
        ("corner", "flag"),
        [
            (A1, "white_queenside_rook_moved"),
            (H1, "white_kingside_rook_moved"),
            (A8, "black_queenside_rook_moved"),
            (H8, "black_kingside_rook_moved"),
        ],
    )
    def test_rook_leaving_corner(self, corner, flag) -> None:
        rights = CastlingRights().after_move(Board.initial(), corner)
        assert getattr(rights, flag)
        assert sum(getattr(rights, f.name) for f in fields(rights)) == 1

    def test_other_pieces_change_nothing(self) -> None:
        assert CastlingRights().after_move(Board.initial(), E2) == CastlingRights()

    def test_empty_square_changes_nothing(self) -> None:
        assert CastlingRights().after_move(Board.empty(), E1) == CastlingRights()

    def test_enemy_rook_on_corner_changes_nothing(self) -> None:
        board = position_from_fen("4k3/8/8/8/8/8/8/4K2r b - - 0 1").board
        assert CastlingRights().after_move(board, H1) == CastlingRights()

    def test_flags_never_clear(self) -> None:
        moved = CastlingRights(**{f.name: True for f in fields(CastlingRights)})
        board = Board.initial()
        for sq in (A1, E1, H1, A8, E8, H8, E2):
            assert moved.after_move(board, sq) == moved


class TestFenToken:
    def test_all_available(self) -> None:
        assert CastlingRights().fen_token() == "KQkq"

    def test_none_available(self) -> None:
        rights = CastlingRights(white_king_moved=True, black_king_moved=True)
        assert rights.fen_token() == "-"

    def test_fixed_order(self) -> None:
        rights = CastlingRights(
            white_queenside_rook_moved=True, black_kingside_rook_moved=True
        )
        assert rights.fen_token() == "Kq"

    @pytest.mark.parametrize("token", ["KQkq", "KQ", "kq", "Kq", "Qk", "K", "q", "-"])
    def test_token_round_trip(self, token: str) -> None:
        assert CastlingRights.from_fen_token(token).fen_token() == token

    def test_missing_side_means_king_moved(self) -> None:
        rights = CastlingRights.from_fen_token("KQ")
        assert rights.black_king_moved
        assert not rights.white_king_moved

    @pytest.mark.parametrize("token", ["", "KX", "KK", "kqKQx", "A"])
    def test_invalid_token(self, token: str) -> None:
        with pytest.raises(ValueError):
            CastlingRights.from_fen_token(token)
