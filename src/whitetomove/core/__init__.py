"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from whitetomove.core import Board, CastlingRights, Color, MoveGenerator, E2

    gen = MoveGenerator(Board.initial(), CastlingRights())
    for move in gen.legal_moves(E2, Color.WHITE):
        print(move)
"""

from whitetomove.core.board import Board
from whitetomove.core.castling import CastlingRights
from whitetomove.core.enums import Color, GameStatus, PieceType
from whitetomove.core.executor import MoveOutcome, apply_move, simulate_move
from whitetomove.core.move import Move
from whitetomove.core.move_generator import MoveGenerator
from whitetomove.core.notation import (
    STARTING_FEN,
    move_label,
    parse_bestmove,
    parse_uci_move,
    position_from_fen,
    position_to_fen,
)
from whitetomove.core.piece import Piece
from whitetomove.core.rules import Rules
from whitetomove.core.types import (
    A1,
    A8,
    E1,
    E2,
    E4,
    E8,
    H1,
    H8,
    Square,
    is_valid_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "A1",
    "A8",
    "E1",
    "E2",
    "E4",
    "E8",
    "H1",
    "H8",
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "CastlingRights",
    "Move",
    "MoveGenerator",
    "MoveOutcome",
    "Piece",
    "Rules",
    "apply_move",
    "simulate_move",
    # Notation
    "STARTING_FEN",
    "move_label",
    "parse_bestmove",
    "parse_uci_move",
    "position_from_fen",
    "position_to_fen",
]
